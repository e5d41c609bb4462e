"""callpaths: enumerate call chains between two functions of a call-graph.

callpaths reads a global call-graph exported by a reverse-engineering tool
(a flat list of functions with the functions each one calls) and lists every
simple path from a start function to a target function.

Primary API:
    load_call_graph() - Read and validate a call-graph export from disk
    iter_all_paths() - Lazily enumerate every simple path between two functions
    all_paths() - Same paths, collected into a list
    CallPath - Immutable snapshot of one found path

Example:
    from callpaths import iter_all_paths

    graph = {"main": ["parse", "run"], "parse": ["run"], "run": []}
    for path in iter_all_paths(graph, "main", "run"):
        print(path.format())
"""

from __future__ import annotations

from callpaths import cli, logging
from callpaths._version import __version__
from callpaths.algorithms.all_paths import all_paths, count_paths, iter_all_paths
from callpaths.graph import GraphSummary, is_known_node, summarize, to_networkx
from callpaths.io.loader import (
    CallGraphFormatError,
    build_call_graph,
    load_call_graph,
    parse_call_graph_text,
)
from callpaths.model.function import FunctionRecord
from callpaths.model.path import CallPath
from callpaths.types import CallGraph, NodeID

__all__ = [
    # Version
    "__version__",
    # Model
    "CallGraph",
    "CallPath",
    "FunctionRecord",
    "NodeID",
    # Search
    "iter_all_paths",
    "all_paths",
    "count_paths",
    # Loading
    "load_call_graph",
    "parse_call_graph_text",
    "build_call_graph",
    "CallGraphFormatError",
    # Graph queries
    "GraphSummary",
    "is_known_node",
    "summarize",
    "to_networkx",
    # Utilities
    "cli",
    "logging",
]
