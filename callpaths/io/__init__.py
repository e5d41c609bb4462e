"""Reading call-graph exports."""

from callpaths.io.loader import (
    CallGraphFormatError,
    build_call_graph,
    detect_format,
    load_call_graph,
    parse_call_graph_text,
    read_call_graph_text,
)

__all__ = [
    "CallGraphFormatError",
    "build_call_graph",
    "detect_format",
    "load_call_graph",
    "parse_call_graph_text",
    "read_call_graph_text",
]
