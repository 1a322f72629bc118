# tool_processor/execution/execution_strategy.py
from abc import ABC, abstractmethod
from typing import List, Optional

from tool_processor.models.tool_call import ToolCall
from tool_processor.models.tool_result import ToolResult


class ExecutionStrategy(ABC):
    """How a batch of tool calls gets executed."""

    @abstractmethod
    async def run(
        self,
        calls: List[ToolCall],
        timeout: Optional[float] = None
    ) -> List[ToolResult]:
        """Execute ``calls``; one ``ToolResult`` per call, in call order."""
