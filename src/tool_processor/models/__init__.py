# tool_processor/models/__init__.py
from .tool_call import ToolCall
from .tool_result import ToolResult
from .tool_info import (
    ArrayParam,
    ObjectParam,
    Param,
    PrimitiveParam,
    ToolInfo,
    schema_from_model,
)
from .base_tool import BaseTool
from .function_tool import FunctionTool
from .validated_tool import ValidatedTool

__all__ = [
    "ToolCall",
    "ToolResult",
    "ToolInfo",
    "Param",
    "PrimitiveParam",
    "ArrayParam",
    "ObjectParam",
    "schema_from_model",
    "BaseTool",
    "FunctionTool",
    "ValidatedTool",
]
