"""Queries and conversions over an in-memory call-graph.

The call-graph itself is a plain mapping (see ``callpaths.types.CallGraph``).
These helpers answer the questions callers ask before a search, summarize a
loaded graph for logs, and export it to NetworkX.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Set

import networkx as nx

from callpaths.types import CallGraph, NodeID


@dataclass(frozen=True)
class GraphSummary:
    """Counts describing a call-graph.

    Attributes:
        functions: Number of functions with a record (graph keys).
        calls: Number of listed calls, duplicates included.
        leaves: Number of called functions that have no record of their own.
    """

    functions: int
    calls: int
    leaves: int


def has_function(graph: CallGraph, node: NodeID) -> bool:
    """Return True if ``node`` has a record (outgoing call list) in ``graph``."""
    return node in graph


def is_known_node(graph: CallGraph, node: NodeID) -> bool:
    """Return True if ``node`` is a key or is called by some function."""
    if node in graph:
        return True
    return any(node in successors for successors in graph.values())


def summarize(graph: CallGraph) -> GraphSummary:
    """Count functions, calls and leaf callees of ``graph``."""
    calls = 0
    callees: Set[NodeID] = set()
    for successors in graph.values():
        calls += len(successors)
        callees.update(successors)
    leaves = sum(1 for node in callees if node not in graph)
    return GraphSummary(functions=len(graph), calls=calls, leaves=leaves)


def to_networkx(graph: CallGraph) -> nx.DiGraph:
    """Convert a call-graph into a ``networkx.DiGraph``.

    Every key and every callee becomes a node; every listed call becomes an
    edge. Duplicate calls collapse into a single edge.
    """
    g = nx.DiGraph()
    for caller, callees in graph.items():
        g.add_node(caller)
        for callee in callees:
            g.add_edge(caller, callee)
    return g
