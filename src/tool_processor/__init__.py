"""
tool_processor
==============

Tool contract, schema descriptors, registry and sequential executor used by
the tools node of ``agent_graph``.
"""

from .models import (
    BaseTool,
    FunctionTool,
    ToolCall,
    ToolInfo,
    ToolResult,
    ValidatedTool,
)
from .tool_registry import InMemoryToolRegistry, ToolRegistryInterface
from .execution import ToolExecutor

__all__ = [
    "BaseTool",
    "FunctionTool",
    "ValidatedTool",
    "ToolCall",
    "ToolInfo",
    "ToolResult",
    "InMemoryToolRegistry",
    "ToolRegistryInterface",
    "ToolExecutor",
]
