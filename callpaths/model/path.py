"""Immutable representation of a single call chain.

``CallPath`` stores the ordered tuple of functions visited from the start
function to the target function. Instances are snapshots: the enumerator
builds a fresh tuple for every emitted path, so holding on to one never
observes later search state.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Any, Iterator, Tuple

from callpaths.types import NodeID


@dataclass(frozen=True)
class CallPath:
    """A simple path through the call-graph.

    Attributes:
        nodes: Ordered functions along the path. The first element is the
            start function and the last is the target. No element repeats.
    """

    nodes: Tuple[NodeID, ...]

    def __post_init__(self) -> None:
        """Normalize ``nodes`` to a tuple and reject empty paths."""
        if not isinstance(self.nodes, tuple):
            object.__setattr__(self, "nodes", tuple(self.nodes))
        if not self.nodes:
            raise ValueError("CallPath requires at least one node.")

    def __getitem__(self, idx: int) -> NodeID:
        return self.nodes[idx]

    def __iter__(self) -> Iterator[NodeID]:
        return iter(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)

    def __contains__(self, node: Any) -> bool:
        return node in self.nodes

    @property
    def src_node(self) -> NodeID:
        """Return the first node in the path (the start function)."""
        return self.nodes[0]

    @property
    def dst_node(self) -> NodeID:
        """Return the last node in the path (the target function)."""
        return self.nodes[-1]

    @cached_property
    def edges_seq(self) -> Tuple[Tuple[NodeID, NodeID], ...]:
        """Return the ``(caller, callee)`` pairs along the path.

        Returns:
            A tuple of adjacent node pairs; empty for a single-node path.
        """
        return tuple(zip(self.nodes, self.nodes[1:]))

    def format(self, separator: str = " -> ") -> str:
        """Render the path as text, e.g. ``"main -> helper -> target"``."""
        return separator.join(str(node) for node in self.nodes)

    def __str__(self) -> str:
        return self.format()
