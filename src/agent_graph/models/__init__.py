# agent_graph/models/__init__.py
from .messages import (
    Message,
    Role,
    ToolCall,
    assistant_message,
    system_message,
    tool_message,
    user_message,
)
from .edges import EdgeKind, GraphBranch, GraphEdge
from .run import GraphRun, RunStatus

__all__ = [
    "Message",
    "Role",
    "ToolCall",
    "system_message",
    "user_message",
    "assistant_message",
    "tool_message",
    "EdgeKind",
    "GraphEdge",
    "GraphBranch",
    "GraphRun",
    "RunStatus",
]
