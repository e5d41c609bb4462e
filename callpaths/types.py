"""Shared type aliases for call-graph data."""

from __future__ import annotations

from typing import Hashable, Mapping, Sequence

#: Identifier of a function in the call-graph (typically its name).
NodeID = Hashable

#: Mapping from a function to the ordered list of functions it imports.
#: Functions that never appear as a key have no known outgoing calls.
CallGraph = Mapping[NodeID, Sequence[NodeID]]
