# agent_graph/nodes/template.py
from __future__ import annotations

from typing import Any, List, Mapping

from agent_graph.models.messages import Message
from agent_graph.prompts import ChatTemplate
from .base import Node, NodeKind, ValueKind


class TemplateNode(Node):
    """Render a ``ChatTemplate`` from the variables mapping it receives."""

    kind = NodeKind.TEMPLATE
    input_kind = ValueKind.VARIABLES
    output_kind = ValueKind.MESSAGES

    def __init__(self, template: ChatTemplate):
        self.template = template

    async def run(self, value: Mapping[str, Any]) -> List[Message]:
        return self.template.format(value)
