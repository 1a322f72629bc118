# agent_graph/models/run.py
from __future__ import annotations
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional
from uuid import uuid4
from pydantic import BaseModel, Field, ConfigDict


class RunStatus(str, Enum):
    """Status of a graph run."""
    PENDING = "pending"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"
    CANCELLED = "cancelled"


class GraphRun(BaseModel):
    """A single invocation of a compiled graph."""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    id: str = Field(default_factory=lambda: str(uuid4()))
    started_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    ended_at: Optional[datetime] = None
    status: RunStatus = RunStatus.PENDING
    path: List[str] = Field(default_factory=list)
    output: Any = None
    error: Optional[str] = None
    exception: Optional[BaseException] = Field(default=None, exclude=True, repr=False)
    metadata: Dict[str, Any] = Field(default_factory=dict)

    def mark_running(self) -> None:
        """Mark the run as started/running."""
        self.status = RunStatus.RUNNING
        self.started_at = datetime.now(timezone.utc)

    def mark_completed(self, output: Any = None) -> None:
        """Mark the run as completed successfully."""
        self.status = RunStatus.COMPLETED
        self.output = output
        self.ended_at = datetime.now(timezone.utc)

    def mark_failed(self, exc: Optional[BaseException] = None) -> None:
        """Mark the run as failed, keeping the exception that ended it."""
        self.status = RunStatus.FAILED
        if exc is not None:
            self.exception = exc
            self.error = str(exc)
        self.ended_at = datetime.now(timezone.utc)

    def mark_cancelled(self) -> None:
        """Mark the run as cancelled."""
        self.status = RunStatus.CANCELLED
        self.ended_at = datetime.now(timezone.utc)

    @property
    def duration(self) -> Optional[float]:
        """Duration of the run in seconds, once it has ended."""
        if self.ended_at is None:
            return None
        return (self.ended_at - self.started_at).total_seconds()
