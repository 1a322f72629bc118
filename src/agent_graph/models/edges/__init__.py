# agent_graph/models/edges/__init__.py
"""
Unified import surface for edge types:

    from agent_graph.models.edges import GraphEdge, GraphBranch, EdgeKind
"""
from .base   import EdgeKind, GraphEdge
from .branch import BranchCondition, GraphBranch

__all__ = (
    "EdgeKind",
    "GraphEdge",
    "GraphBranch",
    "BranchCondition",
)
