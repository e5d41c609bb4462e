"""Call-graph data model.

This package defines the records read from a call-graph export and the
immutable path snapshots produced by the enumerator.
"""

from callpaths.model.function import FunctionRecord
from callpaths.model.path import CallPath

__all__ = [
    "CallPath",
    "FunctionRecord",
]
