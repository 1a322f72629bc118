# agent_graph/nodes/lambda_node.py
from __future__ import annotations

import inspect
from typing import Any, Callable, Sequence

from agent_graph.errors import EmptyInputError
from agent_graph.models.messages import Message
from .base import Node, NodeKind, ValueKind

__all__ = ["LambdaNode", "take_first"]


def take_first(messages: Sequence[Message]) -> Message:
    """Collapse a list of messages (e.g. tool results) to its first element."""
    if not messages:
        raise EmptyInputError("no messages to take")
    return messages[0]


class LambdaNode(Node):
    """
    Apply a user-supplied transform, sync or async.

    By default the transform maps a list of messages to a single message;
    pass ``input_kind`` / ``output_kind`` to declare something else.
    """

    kind = NodeKind.LAMBDA

    def __init__(
        self,
        fn: Callable[[Any], Any],
        *,
        input_kind: ValueKind = ValueKind.MESSAGES,
        output_kind: ValueKind = ValueKind.MESSAGE,
    ):
        self.fn = fn
        self.input_kind = input_kind
        self.output_kind = output_kind

    async def run(self, value: Any) -> Any:
        if self.input_kind is ValueKind.MESSAGES:
            # hand the transform its own copy
            value = list(value)
            if not value:
                raise EmptyInputError("lambda node received no messages")
        out = self.fn(value)
        if inspect.isawaitable(out):
            out = await out
        return out
