# agent_graph/graph.py
"""
Graph builder.

Nodes are added under unique names and wired with static edges or
run-time branches; ``compile`` validates the wiring and freezes it into a
``CompiledGraph``.

>>> g = Graph()
>>> g.add_template_node("node_template", template)
>>> g.add_model_node("node_model", model)
>>> g.add_tools_node("node_tools", [weather_tool])
>>> g.add_lambda_node("node_converter", take_first)
>>> g.add_edge(START, "node_template")
>>> g.add_edge("node_template", "node_model")
>>> g.add_branch("node_model", route, {"node_tools", END})
>>> g.add_edge("node_tools", "node_converter")
>>> g.add_edge("node_converter", END)
>>> app = g.compile()
>>> reply = await app.invoke({"question": "weather in Paris?"})
"""
from __future__ import annotations

import logging
from collections import deque
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Set, Union

from agent_graph.chat_models.base import BaseChatModel
from agent_graph.compiled import CompiledGraph, Successor
from agent_graph.constants import END, RESERVED_NAMES, START
from agent_graph.errors import (
    DuplicateNameError,
    GraphCompiledError,
    GraphValidationError,
    UnknownNodeError,
)
from agent_graph.models.edges import BranchCondition, GraphBranch, GraphEdge
from agent_graph.nodes import (
    LambdaNode,
    ModelNode,
    Node,
    TemplateNode,
    ToolsNode,
    ToolsNodeConfig,
    ValueKind,
)
from agent_graph.prompts import ChatTemplate
from tool_processor.models.base_tool import BaseTool
from tool_processor.models.tool_info import ToolInfo

logger = logging.getLogger(__name__)

__all__ = ["Graph"]


class Graph:
    """Mutable builder for a pipeline graph."""

    def __init__(self, name: str = "graph", *, input_kind: ValueKind = ValueKind.VARIABLES):
        """
        Parameters
        ----------
        name : str
            Label used in logs and run metadata.
        input_kind : ValueKind
            What ``invoke`` will be called with (a variables mapping by
            default); checked against the first node at compile time.
            ``ANY`` defers the check to run time.
        """
        self.name = name
        self.input_kind = input_kind
        self._nodes: Dict[str, Node] = {}
        self._edges: List[GraphEdge] = []
        self._branches: List[GraphBranch] = []
        self._compiled = False

    # ---------------------------------------------------------------- nodes
    def add_node(self, name: str, node: Node) -> None:
        self._ensure_mutable()
        if not isinstance(node, Node):
            raise TypeError(f"expected a Node, got {type(node).__name__}")
        if name in RESERVED_NAMES or name in self._nodes:
            raise DuplicateNameError(name)
        self._nodes[name] = node

    def add_template_node(self, name: str, template: ChatTemplate) -> None:
        self.add_node(name, TemplateNode(template))

    def add_model_node(
        self,
        name: str,
        model: BaseChatModel,
        tools: Optional[Sequence[ToolInfo]] = None,
    ) -> None:
        self.add_node(name, ModelNode(model, tools))

    def add_tools_node(self, name: str, tools: Union[ToolsNodeConfig, Sequence[BaseTool]]) -> None:
        self.add_node(name, ToolsNode(tools))

    def add_lambda_node(self, name: str, fn: Callable[[Any], Any], **kinds: ValueKind) -> None:
        self.add_node(name, LambdaNode(fn, **kinds))

    @property
    def nodes(self) -> Mapping[str, Node]:
        return MappingProxyType(self._nodes)

    # ---------------------------------------------------------------- wiring
    def add_edge(self, src: str, dst: str) -> None:
        self._ensure_mutable()
        if src == END:
            raise GraphValidationError("END cannot be the source of an edge")
        if dst == START:
            raise GraphValidationError("START cannot be the target of an edge")
        for endpoint in (src, dst):
            if not self._resolvable(endpoint):
                raise UnknownNodeError(endpoint, context=f"edge {src}→{dst}")
        self._edges.append(GraphEdge(src=src, dst=dst))

    def add_branch(self, src: str, condition: BranchCondition, targets: Iterable[str]) -> None:
        """
        Route out of ``src`` at run time.

        ``condition`` receives the output of ``src`` (or the invocation input
        when ``src`` is START) and must return one of ``targets``.
        """
        self._ensure_mutable()
        if not callable(condition):
            raise TypeError("branch condition must be callable")
        legal = frozenset(targets)
        if not legal:
            raise GraphValidationError(f"branch after {src!r} declares no targets")
        if src == END:
            raise GraphValidationError("END cannot be the source of a branch")
        if not self._resolvable(src):
            raise UnknownNodeError(src, context="branch source")
        for target in sorted(legal):
            if target == START:
                raise GraphValidationError("START cannot be a branch target")
            if not self._resolvable(target):
                raise UnknownNodeError(target, context=f"branch target after {src!r}")
        self._branches.append(GraphBranch(src=src, condition=condition, targets=legal))

    # ---------------------------------------------------------------- compile
    def compile(self, *, max_steps: Optional[int] = None) -> CompiledGraph:
        """
        Validate the graph and return its executable form.

        ``max_steps`` bounds how many node executions one invocation may
        perform (default: number of nodes + 10), which stops runaway cycles.

        Raises
        ------
        GraphValidationError
            Describing the first violation found; dangling references are
            reported as ``UnknownNodeError``.
        """
        successors = self._validate()
        if max_steps is None:
            max_steps = len(self._nodes) + 10
        if max_steps < 1:
            raise GraphValidationError("max_steps must be at least 1")

        self._compiled = True
        logger.info(
            "compiled graph %r: %d nodes, %d edges, %d branches",
            self.name, len(self._nodes), len(self._edges), len(self._branches),
        )
        return CompiledGraph(
            self._nodes,
            successors,
            max_steps=max_steps,
            name=self.name,
        )

    # ---------------------------------------------------------------- helpers
    def _ensure_mutable(self) -> None:
        if self._compiled:
            raise GraphCompiledError()

    def _resolvable(self, name: str) -> bool:
        return name in self._nodes or name in RESERVED_NAMES

    def _validate(self) -> Dict[str, Successor]:
        # endpoints
        for edge in self._edges:
            for endpoint in (edge.src, edge.dst):
                if not self._resolvable(endpoint):
                    raise UnknownNodeError(endpoint, context=f"edge {edge.src}→{edge.dst}")
        for branch in self._branches:
            for endpoint in (branch.src, *sorted(branch.targets)):
                if not self._resolvable(endpoint):
                    raise UnknownNodeError(endpoint, context=f"branch after {branch.src!r}")

        # entry and exit
        sources = {e.src for e in self._edges} | {b.src for b in self._branches}
        if START not in sources:
            raise GraphValidationError("no edge or branch starts at START")
        if not any(e.dst == END for e in self._edges) and not any(
            END in b.targets for b in self._branches
        ):
            raise GraphValidationError("no edge or branch leads to END")

        # one routing mode per source
        successors: Dict[str, Successor] = {}
        for edge in self._edges:
            if edge.src in successors:
                raise GraphValidationError(f"{edge.src!r} has more than one outgoing edge")
            successors[edge.src] = edge.dst
        for branch in self._branches:
            existing = successors.get(branch.src)
            if isinstance(existing, str):
                raise GraphValidationError(f"{branch.src!r} has both an edge and a branch")
            if existing is not None:
                raise GraphValidationError(f"{branch.src!r} has more than one branch")
            successors[branch.src] = branch

        for name in self._nodes:
            if name not in successors:
                raise GraphValidationError(f"node {name!r} has no outgoing edge or branch")

        # reachability
        reachable = self._reachable_from_start(successors)
        for name in self._nodes:
            if name not in reachable:
                raise GraphValidationError(f"node {name!r} is not reachable from START")
        if END not in reachable:
            raise GraphValidationError("END is not reachable from START")

        # value kinds along every connection
        for src, succ in successors.items():
            out_kind = self.input_kind if src == START else self._nodes[src].output_kind
            for dst in _targets(succ):
                if dst == END:
                    continue
                in_kind = self._nodes[dst].input_kind
                if not out_kind.compatible_with(in_kind):
                    raise GraphValidationError(
                        f"{src!r} produces {out_kind.value} but {dst!r} expects {in_kind.value}"
                    )
        return successors

    @staticmethod
    def _reachable_from_start(successors: Mapping[str, Successor]) -> Set[str]:
        seen: Set[str] = {START}
        queue = deque([START])
        while queue:
            current = queue.popleft()
            succ = successors.get(current)
            if succ is None:
                continue
            for nxt in _targets(succ):
                if nxt not in seen:
                    seen.add(nxt)
                    queue.append(nxt)
        return seen

    def __repr__(self) -> str:
        return f"<Graph {self.name!r} nodes={list(self._nodes)}>"


def _targets(succ: Successor) -> List[str]:
    return [succ] if isinstance(succ, str) else sorted(succ.targets)
