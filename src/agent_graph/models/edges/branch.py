# agent_graph/models/edges/branch.py
from __future__ import annotations

import inspect
from typing import Any, Awaitable, Callable, FrozenSet, Union

from pydantic import BaseModel, ConfigDict, Field

from agent_graph.errors import InvalidRouteError, RoutingError
from .base import EdgeKind, _FrozenMixin

__all__ = ["BranchCondition", "GraphBranch"]

BranchCondition = Callable[[Any], Union[str, Awaitable[str]]]


class GraphBranch(_FrozenMixin, BaseModel):
    """
    Run-time routing out of ``src``.

    ``condition`` receives the output of ``src`` and returns the name of the
    next node, which must be one of ``targets``.
    """
    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    kind: EdgeKind = Field(EdgeKind.BRANCH, frozen=True)
    src: str
    condition: BranchCondition
    targets: FrozenSet[str]

    async def resolve(self, value: Any) -> str:
        try:
            route = self.condition(value)
            if inspect.isawaitable(route):
                route = await route
        except Exception as exc:
            raise RoutingError(self.src, exc) from exc
        if not isinstance(route, str) or route not in self.targets:
            raise InvalidRouteError(self.src, route, self.targets)
        return route

    def __repr__(self) -> str:  # noqa: D401
        return f"<{self.kind.value}:{self.src}→{{{', '.join(sorted(self.targets))}}}>"
