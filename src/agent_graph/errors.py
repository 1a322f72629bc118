# agent_graph/errors.py
"""
Exception hierarchy.

Build-time errors (``GraphValidationError`` and subclasses) are raised by
the builder and by ``Graph.compile``.  Run-time errors are raised by
``CompiledGraph.invoke``; errors raised inside a node (``NodeError``
subclasses, or anything else) reach the caller wrapped in
``NodeExecutionError`` with the original exception as ``.cause``.
"""
from __future__ import annotations

from typing import Iterable, Optional

__all__ = [
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
    "NodeError",
    "MissingVariableError",
    "UnknownToolError",
    "ToolExecutionError",
    "EmptyInputError",
    "EmptyResponseError",
    "ConfigurationError",
]


class GraphError(Exception):
    """Base class for everything raised by agent_graph."""


# ---------------------------------------------------------------- build time
class GraphValidationError(GraphError):
    """The graph is malformed; fix it before compiling again."""


class DuplicateNameError(GraphValidationError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"node {name!r} is already registered")


class UnknownNodeError(GraphValidationError):
    def __init__(self, name: str, *, context: str = ""):
        self.name = name
        where = f" ({context})" if context else ""
        super().__init__(f"unknown node {name!r}{where}")


class GraphCompiledError(GraphValidationError):
    def __init__(self) -> None:
        super().__init__("graph has been compiled and can no longer be modified")


# ---------------------------------------------------------------- run time
class GraphRunError(GraphError):
    """A single invocation failed; the compiled graph stays usable."""


class NodeExecutionError(GraphRunError):
    def __init__(self, node_name: str, cause: BaseException):
        self.node_name = node_name
        self.cause = cause
        super().__init__(f"node {node_name!r} failed: {type(cause).__name__}: {cause}")


class RoutingError(GraphRunError):
    def __init__(self, node_name: str, cause: BaseException):
        self.node_name = node_name
        self.cause = cause
        super().__init__(f"branch after {node_name!r} failed: {type(cause).__name__}: {cause}")


class InvalidRouteError(GraphRunError):
    def __init__(self, node_name: str, route: object, targets: Iterable[str]):
        self.node_name = node_name
        self.route = route
        self.targets = frozenset(targets)
        super().__init__(
            f"branch after {node_name!r} chose {route!r}, "
            f"expected one of {sorted(self.targets)}"
        )


class MaxStepsExceededError(GraphRunError):
    def __init__(self, max_steps: int):
        self.max_steps = max_steps
        super().__init__(f"run exceeded {max_steps} steps")


# ---------------------------------------------------------------- node level
class NodeError(GraphError):
    """Raised from inside a node executor."""


class MissingVariableError(NodeError, KeyError):
    def __init__(self, variable: str):
        self.variable = variable
        super().__init__(f"template variable {variable!r} not provided")

    def __str__(self) -> str:
        return str(self.args[0])


class UnknownToolError(NodeError):
    def __init__(self, tool_name: str):
        self.tool_name = tool_name
        super().__init__(f"no tool registered under {tool_name!r}")


class ToolExecutionError(NodeError):
    def __init__(self, tool_name: str, call_id: Optional[str], message: str):
        self.tool_name = tool_name
        self.call_id = call_id
        super().__init__(f"tool {tool_name!r} (call {call_id}) failed: {message}")


class EmptyInputError(NodeError, ValueError):
    """A node that needs at least one message received none."""


class EmptyResponseError(NodeError):
    """The chat backend answered with zero choices."""


class ConfigurationError(GraphError):
    """Required configuration (e.g. an API key) is missing or invalid."""
