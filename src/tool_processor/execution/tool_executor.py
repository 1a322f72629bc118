# tool_processor/execution/tool_executor.py
from typing import List, Optional

# tool processor
from tool_processor.execution.execution_strategy import ExecutionStrategy
from tool_processor.execution.inprocess_strategy import InProcessStrategy
from tool_processor.models.tool_call import ToolCall
from tool_processor.models.tool_result import ToolResult
from tool_processor.tool_registry import ToolRegistryInterface


class ToolExecutor:
    """
    Wraps an ExecutionStrategy and provides a default_timeout shortcut for
    convenience. Without a timeout, calls run until they finish.
    """
    def __init__(
        self,
        registry: ToolRegistryInterface,
        default_timeout: Optional[float] = None,
        strategy: Optional[ExecutionStrategy] = None,
    ):
        # If user supplied a strategy, use it; otherwise default to in-process
        if strategy is not None:
            self.strategy = strategy
        else:
            self.strategy = InProcessStrategy(
                registry=registry,
                default_timeout=default_timeout
            )
        self.registry = registry

    async def execute(
        self,
        calls: List[ToolCall],
        timeout: Optional[float] = None
    ) -> List[ToolResult]:
        """
        Execute the list of calls with the underlying strategy.
        `timeout` here overrides the strategy's default_timeout.
        """
        return await self.strategy.run(calls, timeout=timeout)
