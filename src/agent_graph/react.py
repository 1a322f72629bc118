# agent_graph/react.py
"""
Tool-calling agent loop.

``ReactAgent`` keeps the whole conversation and alternates between the
chat model and the tools until the model answers without tool calls:

    agent = ReactAgent(model, [WeatherTool()])
    reply = await agent.generate([user_message("how's the weather in Beijing?")])

Every assistant reply and every tool result is appended to the history, so
the model sees the results of its own calls on the next turn.  The agent
takes ``messages`` and returns a ``message``, which means it can also sit
inside a graph:

    g.add_lambda_node("node_agent", agent.generate)
"""
from __future__ import annotations

import logging
from typing import AsyncIterator, List, Sequence

from agent_graph.chat_models.base import BaseChatModel
from agent_graph.errors import EmptyInputError, MaxStepsExceededError
from agent_graph.models.messages import Message
from agent_graph.nodes.tools import ToolsNode, ToolsNodeConfig
from tool_processor.models.base_tool import BaseTool

logger = logging.getLogger(__name__)

__all__ = ["ReactAgent"]


class ReactAgent:
    """
    Parameters
    ----------
    model : BaseChatModel
        Tool-calling chat model; it is re-bound to the tools' descriptors,
        the instance passed in is not modified.
    tools : ToolsNodeConfig | Sequence[BaseTool]
        Tools the model may call, with the same failure handling as a
        ``ToolsNode``.
    max_steps : int
        Upper bound on model calls per ``generate``.
    """

    def __init__(
        self,
        model: BaseChatModel,
        tools: ToolsNodeConfig | Sequence[BaseTool],
        *,
        max_steps: int = 12,
    ):
        if max_steps < 1:
            raise ValueError(f"max_steps must be at least 1, got {max_steps}")
        self.tools_node = ToolsNode(tools)
        self.model = model.with_tools(self.tools_node.tool_infos)
        self.max_steps = max_steps

    async def generate(self, messages: Sequence[Message]) -> Message:
        """Run the model/tools loop and return the model's final answer."""
        history: List[Message] = list(messages)
        if not history:
            raise EmptyInputError("agent received no messages")

        for step in range(1, self.max_steps + 1):
            reply = await self.model.generate(history)
            history.append(reply)
            if not reply.tool_calls:
                logger.debug("agent answered after %d model call(s)", step)
                return reply

            logger.debug(
                "step %d: model requested %s",
                step,
                [call.name for call in reply.tool_calls],
            )
            history.extend(await self.tools_node(reply))

        logger.warning("agent gave up after %d model calls", self.max_steps)
        raise MaxStepsExceededError(self.max_steps)

    async def stream(self, messages: Sequence[Message]) -> AsyncIterator[Message]:
        """Yield the final answer as a single element."""
        yield await self.generate(messages)

    def __repr__(self) -> str:
        names = [info.name for info in self.tools_node.tool_infos]
        return f"<ReactAgent tools={names} max_steps={self.max_steps}>"
