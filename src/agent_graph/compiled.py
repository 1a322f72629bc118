# agent_graph/compiled.py
"""
Execution engine.

A ``CompiledGraph`` owns a frozen node map and successor table.  Each
``invoke`` walks it from START to END one node at a time, keeping all
per-call state local to that call, so a single compiled graph can serve
concurrent invocations.
"""
from __future__ import annotations

import asyncio
import logging
from types import MappingProxyType
from typing import Any, FrozenSet, Mapping, Union

from agent_graph.constants import END, START
from agent_graph.errors import GraphRunError, MaxStepsExceededError, NodeExecutionError
from agent_graph.models.edges import GraphBranch
from agent_graph.models.run import GraphRun, RunStatus
from agent_graph.nodes.base import Node

logger = logging.getLogger(__name__)

__all__ = ["CompiledGraph", "Successor"]

# edge → fixed target name; branch → routing condition plus legal targets
Successor = Union[str, GraphBranch]


class CompiledGraph:
    """Immutable, validated, executable form of a ``Graph``."""

    def __init__(
        self,
        nodes: Mapping[str, Node],
        successors: Mapping[str, Successor],
        *,
        max_steps: int,
        name: str = "graph",
    ):
        self._nodes = MappingProxyType(dict(nodes))
        self._successors = MappingProxyType(dict(successors))
        self._max_steps = max_steps
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    @property
    def max_steps(self) -> int:
        return self._max_steps

    @property
    def nodes(self) -> Mapping[str, Node]:
        return self._nodes

    def successors(self, name: str) -> FrozenSet[str]:
        """Names that may follow ``name`` (START included)."""
        succ = self._successors.get(name)
        if succ is None:
            return frozenset()
        if isinstance(succ, GraphBranch):
            return succ.targets
        return frozenset({succ})

    # ------------------------------------------------------------------ run
    async def invoke(self, input: Any) -> Any:
        """
        Run ``input`` through the graph and return the last node's output.

        Raises
        ------
        NodeExecutionError
            A node failed; ``.node_name`` and ``.cause`` identify it.
        RoutingError
            A branch condition raised.
        InvalidRouteError
            A branch condition chose a name outside its declared targets.
        MaxStepsExceededError
            The run did not reach END within ``max_steps`` node executions.
        """
        run = await self.run(input)
        if run.status is RunStatus.FAILED:
            raise run.exception
        return run.output

    async def run(self, input: Any) -> GraphRun:
        """Like ``invoke`` but returns the run record instead of raising."""
        run = GraphRun(metadata={"graph": self.name})
        run.mark_running()
        try:
            output = await self._execute(input, run)
        except asyncio.CancelledError:
            run.mark_cancelled()
            raise
        except GraphRunError as exc:
            logger.info("run %s of %r failed after %s: %s", run.id, self.name, run.path, exc)
            run.mark_failed(exc)
            return run
        run.mark_completed(output)
        logger.info("run %s of %r completed via %s", run.id, self.name, run.path)
        return run

    async def _execute(self, value: Any, run: GraphRun) -> Any:
        current = await self._next(START, value)
        steps = 0
        while current != END:
            steps += 1
            if steps > self.max_steps:
                raise MaxStepsExceededError(self.max_steps)

            node = self._nodes[current]
            run.path.append(current)
            logger.debug("→ %s (%s)", current, node.kind.value)
            try:
                value = await node(value)
            except Exception as exc:
                raise NodeExecutionError(current, exc) from exc

            current = await self._next(current, value)
        return value

    async def _next(self, current: str, value: Any) -> str:
        succ = self._successors[current]
        if isinstance(succ, GraphBranch):
            route = await succ.resolve(value)
            logger.debug("branch after %s chose %s", current, route)
            return route
        return succ

    def __repr__(self) -> str:
        return f"<CompiledGraph {self.name!r} nodes={list(self._nodes)}>"
