# tool_processor/execution/inprocess_strategy.py
import asyncio
import logging
import os
import platform
from datetime import datetime, timezone
from typing import List, Optional

# tool processor
from tool_processor.execution.execution_strategy import ExecutionStrategy
from tool_processor.models.tool_call import ToolCall
from tool_processor.models.tool_result import ToolResult
from tool_processor.tool_registry import ToolRegistryInterface

logger = logging.getLogger(__name__)


class InProcessStrategy(ExecutionStrategy):
    """
    Default in-process execution: sequential, in call order, with an optional
    per-call timeout.
    """
    def __init__(self, registry: ToolRegistryInterface, default_timeout: Optional[float] = None):
        self.registry = registry
        self.default_timeout = default_timeout

    async def run(
        self,
        calls: List[ToolCall],
        timeout: Optional[float] = None
    ) -> List[ToolResult]:
        results: List[ToolResult] = []
        pid = os.getpid()
        machine = platform.node()
        per_call_timeout = timeout if timeout is not None else self.default_timeout

        for call in calls:
            start_time = datetime.now(timezone.utc)
            impl = self.registry.get_tool(call.name)

            if not impl:
                end_time = datetime.now(timezone.utc)
                results.append(ToolResult(
                    tool=call.name,
                    call_id=call.id,
                    result=None,
                    error="Tool not found",
                    start_time=start_time,
                    end_time=end_time,
                    machine=machine,
                    pid=pid
                ))
                continue

            try:
                if per_call_timeout:
                    result_value = await asyncio.wait_for(impl.invoke(call.arguments), per_call_timeout)
                else:
                    result_value = await impl.invoke(call.arguments)

                end_time = datetime.now(timezone.utc)
                results.append(ToolResult(
                    tool=call.name,
                    call_id=call.id,
                    result=result_value,
                    error=None,
                    start_time=start_time,
                    end_time=end_time,
                    machine=machine,
                    pid=pid
                ))

            except asyncio.TimeoutError:
                end_time = datetime.now(timezone.utc)
                logger.warning("Tool %s timed out after %ss", call.name, per_call_timeout)
                results.append(ToolResult(
                    tool=call.name,
                    call_id=call.id,
                    result=None,
                    error=f"Timeout after {per_call_timeout}s",
                    start_time=start_time,
                    end_time=end_time,
                    machine=machine,
                    pid=pid
                ))
            except Exception as e:
                end_time = datetime.now(timezone.utc)
                logger.warning("Tool %s failed: %s", call.name, e)
                results.append(ToolResult(
                    tool=call.name,
                    call_id=call.id,
                    result=None,
                    error=str(e),
                    start_time=start_time,
                    end_time=end_time,
                    machine=machine,
                    pid=pid
                ))

        return results
