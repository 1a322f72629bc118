#!/usr/bin/env python3
# examples/offline_graph_demo.py
"""
Walk-through of the graph engine with no network access:

  • a scripted chat model decides to call ``get_weather``
  • the tools node runs a fake weather tool
  • ``take_first`` collapses the tool results into one message

It then shows what the engine reports for a bad route and for a runaway
cycle.
"""

from __future__ import annotations

import asyncio
import json
import logging
import sys
from typing import Optional, Sequence

from pydantic import BaseModel, Field

from agent_graph import (
    END,
    START,
    BaseChatModel,
    ChatTemplate,
    Graph,
    InvalidRouteError,
    Message,
    ToolCall,
    ValueKind,
    assistant_message,
    system_message,
    take_first,
    user_message,
)
from tool_processor import FunctionTool, ToolInfo

logging.basicConfig(level=logging.INFO, stream=sys.stdout, format="%(levelname)s | %(message)s")


# ── fakes ───────────────────────────────────────────────────────────
class WeatherReq(BaseModel):
    city: str = Field(..., description="City name")


def fake_weather(req: WeatherReq) -> dict:
    return {"weather": "sunny", "temp": 20, "city": req.city}


class ToolHappyModel(BaseChatModel):
    """Always asks for the weather of the last word in the user's message."""

    def __init__(self, tools: Sequence[ToolInfo] = ()):
        self.tools = tuple(tools)

    async def generate(self, messages: Sequence[Message], tools: Optional[Sequence[ToolInfo]] = None) -> Message:
        city = messages[-1].content.rstrip("?").split()[-1]
        call = ToolCall(name="get_weather", arguments=json.dumps({"city": city}))
        return assistant_message(tool_calls=[call])

    def with_tools(self, tools: Sequence[ToolInfo]) -> "ToolHappyModel":
        return ToolHappyModel(tools)


# ── graphs ──────────────────────────────────────────────────────────
def weather_graph():
    weather = FunctionTool("get_weather", "current weather for a city", fake_weather)

    g = Graph("offline_weather")
    g.add_template_node(
        "node_template",
        ChatTemplate.from_messages(
            system_message("you can look up the weather."),
            user_message("{question}"),
        ),
    )
    g.add_model_node("node_model", ToolHappyModel(), tools=[weather.info])
    g.add_tools_node("node_tools", [weather])
    g.add_lambda_node("node_converter", take_first)
    g.add_edge(START, "node_template")
    g.add_edge("node_template", "node_model")
    g.add_branch("node_model", lambda msg: "node_tools" if msg.tool_calls else END, {"node_tools", END})
    g.add_edge("node_tools", "node_converter")
    g.add_edge("node_converter", END)
    return g.compile()


def looping_graph():
    g = Graph("loop")
    g.add_lambda_node("node_count", lambda n: n + 1, input_kind=ValueKind.ANY, output_kind=ValueKind.ANY)
    g.add_edge(START, "node_count")
    g.add_branch("node_count", lambda n: "node_count", {"node_count", END})
    return g.compile(max_steps=5)


async def main() -> None:
    app = weather_graph()

    print("\n── weather question ─────────────────────────────")
    run = await app.run({"question": "how is the weather in Paris?"})
    print(f"path:   {' → '.join(run.path)}")
    print(f"output: {run.output}")
    print(f"temp:   {json.loads(run.output.content)['temp']}")

    print("\n── missing template variable ────────────────────")
    run = await app.run({"not_question": "?"})
    print(f"status: {run.status.value}")
    print(f"error:  {run.error}")

    print("\n── runaway cycle ────────────────────────────────")
    run = await looping_graph().run(0)
    print(f"status: {run.status.value} after {len(run.path)} steps")
    print(f"error:  {run.error}")

    print("\n── bad route ────────────────────────────────────")
    g = Graph("bad_route")
    g.add_lambda_node("node_echo", lambda v: v, input_kind=ValueKind.ANY, output_kind=ValueKind.ANY)
    g.add_edge(START, "node_echo")
    g.add_branch("node_echo", lambda v: "node_unknown", {END})
    try:
        await g.compile().invoke({})
    except InvalidRouteError as exc:
        print(f"raised: {exc}")


if __name__ == "__main__":
    asyncio.run(main())
