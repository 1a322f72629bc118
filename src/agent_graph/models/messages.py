# agent_graph/models/messages.py
from __future__ import annotations

from enum import Enum
from typing import Iterable, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from tool_processor.models.tool_call import ToolCall

__all__ = [
    "Role",
    "Message",
    "ToolCall",
    "system_message",
    "user_message",
    "assistant_message",
    "tool_message",
]


class Role(str, Enum):
    """Who authored a message."""
    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"
    TOOL = "tool"


class Message(BaseModel):
    """A chat message flowing between nodes. Immutable once built."""
    model_config = ConfigDict(frozen=True)

    role: Role
    content: str = ""
    tool_calls: Tuple[ToolCall, ...] = Field(default_factory=tuple)
    tool_call_id: Optional[str] = None   # set on tool results
    name: Optional[str] = None           # tool name on tool results

    @property
    def has_tool_calls(self) -> bool:
        return bool(self.tool_calls)

    def __str__(self) -> str:
        text = f"{self.role.value}: {self.content}"
        if self.tool_calls:
            calls = ", ".join(f"{c.name}({c.arguments})" for c in self.tool_calls)
            text += f" [tool_calls: {calls}]"
        if self.tool_call_id:
            text += f" [tool_call_id: {self.tool_call_id}]"
        return text


def system_message(content: str) -> Message:
    return Message(role=Role.SYSTEM, content=content)


def user_message(content: str) -> Message:
    return Message(role=Role.USER, content=content)


def assistant_message(content: str = "", tool_calls: Iterable[ToolCall] = ()) -> Message:
    return Message(role=Role.ASSISTANT, content=content, tool_calls=tuple(tool_calls))


def tool_message(content: str, tool_call_id: str, name: Optional[str] = None) -> Message:
    return Message(role=Role.TOOL, content=content, tool_call_id=tool_call_id, name=name)
