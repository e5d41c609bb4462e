"""Call-graph loader with schema validation.

Turns a global call-graph export (a JSON array of ``{"name", "size",
"imports"}`` records, or the same structure written as YAML) into the
mapping consumed by the path enumerator.
"""

from __future__ import annotations

import json
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Iterable, List, Tuple, Union

import jsonschema
import yaml

from callpaths.logging import get_logger
from callpaths.model.function import FunctionRecord

logger = get_logger(__name__)

_YAML_SUFFIXES = {".yaml", ".yml"}


class CallGraphFormatError(ValueError):
    """Raised when a call-graph document cannot be decoded or fails validation."""


def _load_schema() -> Dict[str, Any]:
    with (
        resources.files("callpaths")
        .joinpath("schemas/call_graph.json")
        .open("r", encoding="utf-8")
    ) as f:
        return json.load(f)


def parse_call_graph_text(text: str, fmt: str = "json") -> List[FunctionRecord]:
    """Decode and validate a call-graph document.

    Args:
        text: Document contents.
        fmt: ``"json"`` or ``"yaml"``.

    Returns:
        Records in document order.

    Raises:
        CallGraphFormatError: If the text cannot be decoded or does not match
            the call-graph schema.
        ValueError: If ``fmt`` is not a supported format.
    """
    if fmt == "json":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise CallGraphFormatError(f"Malformed JSON: {exc}") from exc
    elif fmt == "yaml":
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise CallGraphFormatError(f"Malformed YAML: {exc}") from exc
    else:
        raise ValueError(f"Unsupported call-graph format: {fmt!r}")

    try:
        jsonschema.validate(data, _load_schema())
    except jsonschema.ValidationError as exc:
        location = "/".join(str(part) for part in exc.absolute_path) or "<root>"
        raise CallGraphFormatError(
            f"Invalid call-graph at {location}: {exc.message}"
        ) from exc

    return [FunctionRecord.from_dict(entry) for entry in data]


def build_call_graph(records: Iterable[FunctionRecord]) -> Dict[str, Tuple[str, ...]]:
    """Build the function -> callees mapping from records.

    When a function name appears more than once, the last record wins.
    """
    graph: Dict[str, Tuple[str, ...]] = {}
    for record in records:
        if record.name in graph:
            logger.debug(
                f"Duplicate record for function '{record.name}'; last one wins"
            )
        graph[record.name] = record.imports
    return graph


def detect_format(path: Union[str, Path]) -> str:
    """Return ``"yaml"`` for ``.yaml``/``.yml`` files and ``"json"`` otherwise."""
    return "yaml" if Path(path).suffix.lower() in _YAML_SUFFIXES else "json"


def read_call_graph_text(path: Union[str, Path]) -> str:
    """Read an export as text. A leading UTF-8 byte order mark is dropped."""
    return Path(path).read_text(encoding="utf-8-sig")


def load_call_graph(path: Union[str, Path]) -> Dict[str, Tuple[str, ...]]:
    """Read a call-graph export from disk.

    Raises:
        FileNotFoundError: If the file does not exist.
        OSError: If the file cannot be read.
        UnicodeDecodeError: If the file is not UTF-8 text.
        CallGraphFormatError: If the contents are not a valid call-graph.
    """
    text = read_call_graph_text(path)
    return build_call_graph(parse_call_graph_text(text, fmt=detect_format(path)))
