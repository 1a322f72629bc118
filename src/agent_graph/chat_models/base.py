"""
Abstract base class for chat model backends.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import AsyncIterator, Optional, Sequence

from agent_graph.models.messages import Message
from tool_processor.models.tool_info import ToolInfo


class BaseChatModel(ABC):
    """Abstract base class for tool-calling chat models."""

    tools: Sequence[ToolInfo] = ()

    @abstractmethod
    async def generate(
        self,
        messages: Sequence[Message],
        tools: Optional[Sequence[ToolInfo]] = None,
    ) -> Message:
        """
        Get the next message from the model.

        Args:
            messages: The conversation so far.
            tools: Tools the model may call for this request only; when
                omitted, the tools bound with ``with_tools`` are used.

        Returns:
            One assistant message, possibly carrying tool calls.
        """

    async def stream(
        self,
        messages: Sequence[Message],
        tools: Optional[Sequence[ToolInfo]] = None,
    ) -> AsyncIterator[Message]:
        """
        Stream the model's response.

        Default implementation yields the full ``generate`` result as a
        single element; there is no incremental token delivery.
        """
        yield await self.generate(messages, tools)

    @abstractmethod
    def with_tools(self, tools: Sequence[ToolInfo]) -> "BaseChatModel":
        """Return a new model bound to ``tools``; ``self`` is left untouched."""
