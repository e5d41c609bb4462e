"""Input record describing one function of an exported call-graph."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class FunctionRecord:
    """One entry of a global call-graph export.

    Attributes:
        name: Function name as it appears in the export (e.g. ``fcn.00114818``).
        size: Size of the function in bytes. Informational only.
        imports: Ordered names of the functions this function calls.
    """

    name: str
    size: int = 0
    imports: Tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FunctionRecord":
        """Build a record from a decoded export entry.

        ``imports`` may be missing or null, both of which mean "calls nothing".
        Unknown keys are ignored.
        """
        imports = data.get("imports") or ()
        return cls(
            name=data["name"],
            size=int(data.get("size") or 0),
            imports=tuple(imports),
        )
