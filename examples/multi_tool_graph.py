#!/usr/bin/env python
"""
examples/multi_tool_graph.py – ask the multi-tool agent a question
==================================================================
$ python examples/multi_tool_graph.py "How is the weather in Beijing?"
$ python examples/multi_tool_graph.py --debug "Find the *.py files under ./src"

Reads DEEPSEEK_API_KEY (and optionally DEEPSEEK_BASE_URL / DEEPSEEK_MODEL)
from the environment or a .env file.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from agent_graph import (
    END,
    START,
    ChatModelConfig,
    ChatTemplate,
    CompiledGraph,
    ConfigurationError,
    Graph,
    GraphRunError,
    MessagesPlaceholder,
    OpenAIChatModel,
    RunStatus,
    ToolsNode,
    system_message,
    take_first,
    user_message,
)
from sample_tools import default_tools

SYSTEM_PROMPT = (
    "You are a helpful assistant with these tools:\n"
    "1. get_weather: look up the current weather of a city\n"
    "2. find_file: search a directory for files matching a pattern\n"
    "3. cat_file: read a file\n"
    "Pick the right tool for the user's question."
)


def build_graph(config: ChatModelConfig) -> CompiledGraph:
    tools = ToolsNode(default_tools())
    model = OpenAIChatModel.from_config(config)

    g = Graph("ask")
    g.add_template_node(
        "node_template",
        ChatTemplate.from_messages(
            system_message(SYSTEM_PROMPT),
            MessagesPlaceholder("chat_history", optional=True),
            user_message("question: {question}"),
        ),
    )
    g.add_model_node("node_model", model, tools=tools.tool_infos)
    g.add_node("node_tools", tools)
    g.add_lambda_node("node_converter", take_first)

    g.add_edge(START, "node_template")
    g.add_edge("node_template", "node_model")
    g.add_branch(
        "node_model",
        lambda msg: "node_tools" if msg.tool_calls else END,
        {"node_tools", END},
    )
    g.add_edge("node_tools", "node_converter")
    g.add_edge("node_converter", END)
    return g.compile()


async def run(question: str, config: ChatModelConfig) -> int:
    app = build_graph(config)
    result = await app.run({"question": question})

    print(f"path: START → {' → '.join(result.path)} → END")
    if result.status is RunStatus.COMPLETED:
        print(f"\n{result.output}\n")
        return 0

    print(f"\nfailed: {result.error}", file=sys.stderr)
    return 1


def main() -> None:
    parser = argparse.ArgumentParser(description="Ask the multi-tool agent a question")
    parser.add_argument("question", help="user question / task")
    parser.add_argument("--env-file", help="explicit .env file to load")
    parser.add_argument("--debug", action="store_true", help="log node entry and routing")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        stream=sys.stdout,
        format="%(levelname)s | %(name)s | %(message)s",
    )
    # keep the HTTP client quiet even in debug mode
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("openai").setLevel(logging.WARNING)

    try:
        config = ChatModelConfig.from_env(args.env_file)
    except ConfigurationError as exc:
        parser.error(str(exc))

    try:
        sys.exit(asyncio.run(run(args.question, config)))
    except GraphRunError as exc:
        print(f"failed: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
