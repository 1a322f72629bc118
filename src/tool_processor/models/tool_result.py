# tool_processor/models/tool_result.py
from __future__ import annotations

import os
import platform
from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, Field

__all__ = ["ToolResult"]


class ToolResult(BaseModel):
    """Outcome of a single tool execution plus where and when it ran."""
    tool: str
    call_id: Optional[str] = None
    result: Any = None
    error: Optional[str] = None
    start_time: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    end_time: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    machine: str = Field(default_factory=platform.node)
    pid: int = Field(default_factory=os.getpid)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def duration(self) -> float:
        """Wall-clock seconds spent in the tool."""
        return (self.end_time - self.start_time).total_seconds()
