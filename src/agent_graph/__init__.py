"""
agent_graph
===========

A small graph engine for LLM agents: chat-template, chat-model, tools and
lambda nodes wired with edges and run-time branches, compiled once and
invoked many times.

    from agent_graph import Graph, START, END
"""

from .constants import END, START
from .errors import (
    ConfigurationError,
    DuplicateNameError,
    EmptyInputError,
    EmptyResponseError,
    GraphCompiledError,
    GraphError,
    GraphRunError,
    GraphValidationError,
    InvalidRouteError,
    MaxStepsExceededError,
    MissingVariableError,
    NodeExecutionError,
    RoutingError,
    ToolExecutionError,
    UnknownNodeError,
    UnknownToolError,
)
from .models import (
    GraphRun,
    Message,
    Role,
    RunStatus,
    ToolCall,
    assistant_message,
    system_message,
    tool_message,
    user_message,
)
from .prompts import ChatTemplate, MessagesPlaceholder
from .chat_models import BaseChatModel, ChatModelConfig, OpenAIChatModel
from .nodes import (
    LambdaNode,
    ModelNode,
    Node,
    NodeKind,
    TemplateNode,
    ToolsNode,
    ToolsNodeConfig,
    ValueKind,
    take_first,
)
from .compiled import CompiledGraph
from .graph import Graph
from .react import ReactAgent

__all__ = [
    "START",
    "END",
    "Graph",
    "CompiledGraph",
    "ReactAgent",
    "GraphRun",
    "RunStatus",
    "Message",
    "Role",
    "ToolCall",
    "system_message",
    "user_message",
    "assistant_message",
    "tool_message",
    "ChatTemplate",
    "MessagesPlaceholder",
    "BaseChatModel",
    "ChatModelConfig",
    "OpenAIChatModel",
    "Node",
    "NodeKind",
    "ValueKind",
    "TemplateNode",
    "ModelNode",
    "ToolsNode",
    "ToolsNodeConfig",
    "LambdaNode",
    "take_first",
    "GraphError",
    "GraphValidationError",
    "DuplicateNameError",
    "UnknownNodeError",
    "GraphCompiledError",
    "GraphRunError",
    "NodeExecutionError",
    "RoutingError",
    "InvalidRouteError",
    "MaxStepsExceededError",
    "MissingVariableError",
    "UnknownToolError",
    "ToolExecutionError",
    "EmptyInputError",
    "EmptyResponseError",
    "ConfigurationError",
]
