"""All simple paths between two functions of a call-graph.

Implements an exhaustive depth-first search with backtracking. Every path
found is yielded as soon as it is reached, in pre-order of the search tree
(successor-list order, depth first).

Notes:
    - The target terminates a branch. It is never expanded, even when it has
      outgoing calls of its own, so every path ends at its first occurrence
      of the target.
    - The target does not need to be a key of the graph; a leaf that only
      appears in some successor list is matched like any other node.
    - The visited set holds exactly the functions on the current path prefix.
      A function leaves the set when the search backtracks past it, so it can
      still be used by other branches.
    - The search keeps an explicit stack of successor iterators instead of
      recursing, so path length is not bounded by the interpreter's
      recursion limit. Each stack frame corresponds to one node on the
      current path prefix.
"""

from __future__ import annotations

from typing import Iterator, List, Set

from callpaths.model.path import CallPath
from callpaths.types import CallGraph, NodeID

_EXHAUSTED = object()


def iter_all_paths(
    graph: CallGraph, start: NodeID, target: NodeID
) -> Iterator[CallPath]:
    """Yield every simple path from ``start`` to ``target``.

    Preconditions are not validated: an unknown ``start`` or an unreachable
    ``target`` yields nothing. The graph is only read.

    Args:
        graph: Mapping from function to its ordered successor list.
        start: Function to search from.
        target: Function to search to.

    Yields:
        Independent ``CallPath`` snapshots, one per simple path.
    """
    if start == target:
        yield CallPath((start,))
        return
    if start not in graph:
        return

    path: List[NodeID] = [start]
    visited: Set[NodeID] = {start}
    stack: List[Iterator[NodeID]] = [iter(graph[start])]

    while stack:
        successor = next(stack[-1], _EXHAUSTED)

        if successor is _EXHAUSTED:
            # Backtrack past the node whose successors are exhausted
            stack.pop()
            visited.discard(path.pop())
            continue

        if successor in visited:
            continue

        if successor == target:
            yield CallPath((*path, successor))
            continue

        if successor not in graph:
            continue

        path.append(successor)
        visited.add(successor)
        stack.append(iter(graph[successor]))


def all_paths(graph: CallGraph, start: NodeID, target: NodeID) -> List[CallPath]:
    """Return every simple path from ``start`` to ``target`` as a list.

    Same order as ``iter_all_paths``. Prefer the iterator on graphs with a
    large fan-out.
    """
    return list(iter_all_paths(graph, start, target))


def count_paths(graph: CallGraph, start: NodeID, target: NodeID) -> int:
    """Return the number of simple paths from ``start`` to ``target``."""
    return sum(1 for _ in iter_all_paths(graph, start, target))
