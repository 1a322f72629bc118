# agent_graph/chat_models/openai_model.py
"""
Chat model backed by any OpenAI-compatible chat-completion endpoint
(OpenAI itself, DeepSeek, a local server…), through the ``openai`` SDK.

    config = ChatModelConfig.from_env()
    model = OpenAIChatModel.from_config(config).with_tools([weather.info])
    reply = await model.generate([user_message("weather in Paris?")])
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence

from openai import AsyncOpenAI

from agent_graph.chat_models.base import BaseChatModel
from agent_graph.chat_models.config import DEFAULT_MODEL, ChatModelConfig
from agent_graph.errors import EmptyResponseError
from agent_graph.models.messages import Message, Role, ToolCall, assistant_message
from tool_processor.models.tool_info import ToolInfo

logger = logging.getLogger(__name__)

__all__ = ["OpenAIChatModel", "to_openai_message", "to_openai_tool"]


def to_openai_message(msg: Message) -> Dict[str, Any]:
    """Map a ``Message`` onto the backend's role vocabulary."""
    if msg.role is Role.TOOL:
        return {"role": "tool", "content": msg.content, "tool_call_id": msg.tool_call_id}
    if msg.role is Role.ASSISTANT and msg.tool_calls:
        return {
            "role": "assistant",
            "content": msg.content or None,
            "tool_calls": [
                {
                    "id": call.id,
                    "type": "function",
                    "function": {"name": call.name, "arguments": call.arguments},
                }
                for call in msg.tool_calls
            ],
        }
    return {"role": msg.role.value, "content": msg.content}


def to_openai_tool(info: ToolInfo) -> Dict[str, Any]:
    """Map a ``ToolInfo`` onto the function-calling declaration."""
    return {
        "type": "function",
        "function": {
            "name": info.name,
            "description": info.description,
            "parameters": info.to_json_schema(),
        },
    }


class OpenAIChatModel(BaseChatModel):
    """Tool-calling chat model wrapping an ``AsyncOpenAI`` client."""

    def __init__(
        self,
        client: AsyncOpenAI,
        *,
        model: str = DEFAULT_MODEL,
        tools: Sequence[ToolInfo] = (),
    ):
        self.client = client
        self.model = model
        self.tools: tuple[ToolInfo, ...] = tuple(tools)

    @classmethod
    def from_config(cls, config: ChatModelConfig, tools: Sequence[ToolInfo] = ()) -> "OpenAIChatModel":
        return cls(config.create_client(), model=config.model, tools=tools)

    def with_tools(self, tools: Sequence[ToolInfo]) -> "OpenAIChatModel":
        return OpenAIChatModel(self.client, model=self.model, tools=tools)

    async def generate(
        self,
        messages: Sequence[Message],
        tools: Optional[Sequence[ToolInfo]] = None,
    ) -> Message:
        active_tools = self.tools if tools is None else tuple(tools)
        request: Dict[str, Any] = {
            "model": self.model,
            "messages": [to_openai_message(m) for m in messages],
        }
        if active_tools:
            request["tools"] = [to_openai_tool(t) for t in active_tools]

        logger.debug(
            "chat completion: model=%s messages=%d tools=%d",
            self.model, len(messages), len(active_tools),
        )
        resp = await self.client.chat.completions.create(**request)

        if not resp.choices:
            raise EmptyResponseError(f"no choices returned from {self.model}")

        choice = resp.choices[0].message
        calls: List[ToolCall] = [
            ToolCall(id=tc.id, name=tc.function.name, arguments=tc.function.arguments or "{}")
            for tc in (choice.tool_calls or [])
            if tc.type == "function"
        ]
        return assistant_message(choice.content or "", calls)

    def __repr__(self) -> str:
        return f"<OpenAIChatModel {self.model} tools={[t.name for t in self.tools]}>"
