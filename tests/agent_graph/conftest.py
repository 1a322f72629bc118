# tests/agent_graph/conftest.py
import pytest
from pydantic import BaseModel

from agent_graph.chat_models.base import BaseChatModel
from tool_processor.models.function_tool import FunctionTool


class ScriptedChatModel(BaseChatModel):
    """Replays canned replies; a callable reply is called with the messages."""

    def __init__(self, replies, tools=()):
        self.replies = list(replies)
        self.tools = tuple(tools)
        self.requests = []

    async def generate(self, messages, tools=None):
        self.requests.append((list(messages), self.tools if tools is None else tuple(tools)))
        reply = self.replies[min(len(self.requests), len(self.replies)) - 1]
        return reply(messages) if callable(reply) else reply

    def with_tools(self, tools):
        clone = ScriptedChatModel(self.replies, tools)
        clone.requests = self.requests
        return clone


class WeatherReq(BaseModel):
    city: str


async def fake_weather(req: WeatherReq) -> dict:
    return {"weather": f"sunny in {req.city}", "temp": 20}


@pytest.fixture
def scripted_model():
    return ScriptedChatModel


@pytest.fixture
def weather_tool():
    return FunctionTool("get_weather", "current weather for a city", fake_weather)
