# tests/test_live_deepseek.py
"""
End-to-end run against the real DeepSeek endpoint.

Skipped unless DEEPSEEK_API_KEY is available (environment or .env).
"""
import os

import pytest
from dotenv import find_dotenv, load_dotenv

from agent_graph import (
    END,
    START,
    ChatModelConfig,
    ChatTemplate,
    Graph,
    Message,
    MessagesPlaceholder,
    OpenAIChatModel,
    ReactAgent,
    Role,
    ToolsNode,
    system_message,
    take_first,
    user_message,
)
from sample_tools import default_tools

load_dotenv(find_dotenv(usecwd=True), override=False)

pytestmark = pytest.mark.skipif(
    not os.getenv("DEEPSEEK_API_KEY"),
    reason="DEEPSEEK_API_KEY not set",
)


def build_app():
    tools_node = ToolsNode(default_tools())
    model = OpenAIChatModel.from_config(ChatModelConfig.from_env())

    g = Graph("multi_tool")
    g.add_template_node(
        "node_template",
        ChatTemplate.from_messages(
            system_message(
                "You are a helpful assistant with these tools:\n"
                "1. get_weather: look up the weather\n"
                "2. find_file: search for files\n"
                "3. cat_file: read a file\n"
                "Pick the right tool for the user's question."
            ),
            MessagesPlaceholder("chat_history", optional=True),
            user_message("question: {question}"),
        ),
    )
    g.add_model_node("node_model", model, tools=tools_node.tool_infos)
    g.add_node("node_tools", tools_node)
    g.add_lambda_node("node_converter", take_first)
    g.add_edge(START, "node_template")
    g.add_edge("node_template", "node_model")
    g.add_branch("node_model", lambda msg: "node_tools" if msg.tool_calls else END, {"node_tools", END})
    g.add_edge("node_tools", "node_converter")
    g.add_edge("node_converter", END)
    return g.compile()


@pytest.mark.asyncio
async def test_weather_question():
    out = await build_app().invoke({"question": "How is the weather in Beijing?"})
    assert isinstance(out, Message)


@pytest.mark.asyncio
async def test_file_search_and_read(tmp_path):
    (tmp_path / "test1.py").write_text("print('one')")
    (tmp_path / "note.txt").write_text("hello from a test file")
    app = build_app()

    found = await app.invoke({"question": f"Use find_file to search {tmp_path} for *.py"})
    read = await app.invoke({"question": f"Read the file {tmp_path / 'note.txt'}"})

    assert isinstance(found, Message)
    assert isinstance(read, Message)


@pytest.mark.asyncio
async def test_question_without_tools():
    out = await build_app().invoke({"question": "What day of the week comes after Monday?"})
    assert isinstance(out, Message)


@pytest.mark.asyncio
async def test_react_agent_weather():
    agent = ReactAgent(OpenAIChatModel.from_config(ChatModelConfig.from_env()), default_tools())
    reply = await agent.generate([user_message("how's the weather in Beijing?")])
    assert reply.role is Role.ASSISTANT
    assert not reply.tool_calls
