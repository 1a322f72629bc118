# agent_graph/models/edges/base.py
from __future__ import annotations
from enum import Enum
from typing import Any
from pydantic import BaseModel, ConfigDict, Field, ValidationError

# all
__all__ = ["EdgeKind", "GraphEdge"]


class EdgeKind(str, Enum):
    """How the successor of a node is chosen."""
    STATIC = "static"   # fixed successor
    BRANCH = "branch"   # chosen at run time from a declared set


class _FrozenMixin:
    def __setattr__(self, name: str, value: Any) -> None:  # noqa: D401
        try:
            super().__setattr__(name, value)  # type: ignore[misc]
        except ValidationError as exc:
            raise TypeError(str(exc)) from None


class GraphEdge(_FrozenMixin, BaseModel):
    """Unconditional link between two node names (START/END included)."""
    model_config = ConfigDict(frozen=True)

    kind: EdgeKind = Field(EdgeKind.STATIC, frozen=True)
    src: str
    dst: str

    def __repr__(self) -> str:  # noqa: D401
        return f"<{self.kind.value}:{self.src}→{self.dst}>"
