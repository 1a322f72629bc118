# agent_graph/nodes/model.py
from __future__ import annotations

import logging
from typing import Optional, Sequence

from agent_graph.chat_models.base import BaseChatModel
from agent_graph.models.messages import Message
from tool_processor.models.tool_info import ToolInfo
from .base import Node, NodeKind, ValueKind

logger = logging.getLogger(__name__)


class ModelNode(Node):
    """
    Send the conversation to a chat model and emit its single reply.

    When ``tools`` is given the model is re-bound to them once, here, via
    ``with_tools``; the model passed in is not modified.
    """

    kind = NodeKind.MODEL
    input_kind = ValueKind.MESSAGES
    output_kind = ValueKind.MESSAGE

    def __init__(self, model: BaseChatModel, tools: Optional[Sequence[ToolInfo]] = None):
        self.model = model.with_tools(tools) if tools is not None else model

    async def run(self, value: Sequence[Message]) -> Message:
        reply = await self.model.generate(list(value))
        logger.debug("model replied with %d tool call(s)", len(reply.tool_calls))
        return reply
