# agent_graph/nodes/base.py
from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from enum import Enum
from typing import Any

from agent_graph.models.messages import Message

__all__ = ["NodeKind", "ValueKind", "Node"]


class NodeKind(str, Enum):
    """Node variants understood by the graph."""
    TEMPLATE = "template"
    MODEL = "model"
    TOOLS = "tools"
    LAMBDA = "lambda"


class ValueKind(str, Enum):
    """The closed set of values passed from node to node."""
    VARIABLES = "variables"   # Mapping[str, Any]
    MESSAGES = "messages"     # list[Message]
    MESSAGE = "message"       # Message
    ANY = "any"               # unchecked

    def compatible_with(self, other: "ValueKind") -> bool:
        return ValueKind.ANY in (self, other) or self is other

    def matches(self, value: Any) -> bool:
        if self is ValueKind.ANY:
            return True
        if self is ValueKind.VARIABLES:
            return isinstance(value, Mapping)
        if self is ValueKind.MESSAGE:
            return isinstance(value, Message)
        return isinstance(value, (list, tuple)) and all(isinstance(m, Message) for m in value)


class Node(ABC):
    """A named step of a graph; the name is assigned when it is added."""

    kind: NodeKind
    input_kind: ValueKind = ValueKind.ANY
    output_kind: ValueKind = ValueKind.ANY

    async def __call__(self, value: Any) -> Any:
        if not self.input_kind.matches(value):
            raise TypeError(
                f"{self.kind.value} node expects {self.input_kind.value}, "
                f"got {type(value).__name__}"
            )
        return await self.run(value)

    @abstractmethod
    async def run(self, value: Any) -> Any:
        """Execute the node on the upstream value."""

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.input_kind.value}→{self.output_kind.value}>"
