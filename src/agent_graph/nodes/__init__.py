# agent_graph/nodes/__init__.py
from .base import Node, NodeKind, ValueKind
from .template import TemplateNode
from .model import ModelNode
from .tools import ToolsNode, ToolsNodeConfig
from .lambda_node import LambdaNode, take_first

__all__ = [
    "Node",
    "NodeKind",
    "ValueKind",
    "TemplateNode",
    "ModelNode",
    "ToolsNode",
    "ToolsNodeConfig",
    "LambdaNode",
    "take_first",
]
