# tool_processor/execution/__init__.py
from .execution_strategy import ExecutionStrategy
from .inprocess_strategy import InProcessStrategy
from .tool_executor import ToolExecutor

__all__ = ["ExecutionStrategy", "InProcessStrategy", "ToolExecutor"]
