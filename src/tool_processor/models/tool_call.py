# tool_processor/models/tool_call.py
from __future__ import annotations

from typing import Literal
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

__all__ = ["ToolCall"]


class ToolCall(BaseModel):
    """
    A tool invocation requested by the model.

    ``arguments`` is kept as the serialized JSON string the backend sent;
    only the tool itself interprets it.
    """
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: f"call_{uuid4().hex[:12]}")
    name: str = Field(..., min_length=1)
    arguments: str = "{}"
    type: Literal["function"] = "function"

