# agent_graph/nodes/tools.py
from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field

from agent_graph.errors import ToolExecutionError, UnknownToolError
from agent_graph.models.messages import Message, tool_message
from tool_processor.execution.tool_executor import ToolExecutor
from tool_processor.models.base_tool import BaseTool
from tool_processor.models.tool_info import ToolInfo
from tool_processor.tool_registry import InMemoryToolRegistry
from .base import Node, NodeKind, ValueKind

logger = logging.getLogger(__name__)


class ToolsNodeConfig(BaseModel):
    """
    Parameters
    ----------
    tools : Sequence[BaseTool]
        Tools the node can dispatch to; names must be unique.
    raise_on_error : bool
        Abort the node on the first failing tool instead of reporting the
        failure back as the tool's result message.
    timeout : float | None
        Per-call timeout in seconds; ``None`` waits indefinitely.
    """
    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    tools: Sequence[BaseTool] = Field(default_factory=tuple)
    raise_on_error: bool = False
    timeout: Optional[float] = Field(default=None, gt=0)


class ToolsNode(Node):
    """
    Execute the tool calls carried by an assistant message.

    Calls run one after another in the order they appear; the output holds
    one tool message per call, in the same order, each tagged with the id
    of the call it answers.
    """

    kind = NodeKind.TOOLS
    input_kind = ValueKind.MESSAGE
    output_kind = ValueKind.MESSAGES

    def __init__(self, config: ToolsNodeConfig | Sequence[BaseTool]):
        if not isinstance(config, ToolsNodeConfig):
            config = ToolsNodeConfig(tools=tuple(config))
        self.config = config
        self.registry = InMemoryToolRegistry(config.tools)
        self.executor = ToolExecutor(self.registry, default_timeout=config.timeout)

    @property
    def tool_infos(self) -> List[ToolInfo]:
        return self.registry.tool_infos()

    async def run(self, value: Message) -> List[Message]:
        calls = list(value.tool_calls)
        for call in calls:
            if call.name not in self.registry:
                raise UnknownToolError(call.name)

        results = await self.executor.execute(calls)

        out: List[Message] = []
        for call, res in zip(calls, results):
            if res.error is None:
                content = res.result
            else:
                if self.config.raise_on_error:
                    raise ToolExecutionError(call.name, call.id, res.error)
                logger.warning("tool %s (call %s) failed: %s", call.name, call.id, res.error)
                content = f"tool {call.name!r} failed: {res.error}"
            out.append(tool_message(content, tool_call_id=call.id, name=call.name))
        return out
