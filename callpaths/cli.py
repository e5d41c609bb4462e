"""Command-line interface for callpaths."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from itertools import islice
from pathlib import Path
from time import perf_counter
from typing import IO, Iterator, List, Optional, Tuple

from callpaths.algorithms.all_paths import iter_all_paths
from callpaths.config import OUTPUT_CONFIG, OutputConfig
from callpaths.graph import has_function, is_known_node, summarize
from callpaths.io.loader import (
    build_call_graph,
    detect_format,
    parse_call_graph_text,
    read_call_graph_text,
)
from callpaths.logging import get_logger, set_global_log_level
from callpaths.model.path import CallPath

logger = get_logger(__name__)

_DESCRIPTION = (
    "Receive a global call-graph exported as JSON from Cutter and find all"
    " paths between two given functions in it."
)

_EPILOG = """\
Example:
  callpaths "/re/call-graph.json" fcn.00114818 fcn.00115e4d

Output, when there are three relevant paths:

  fcn.00114818 -> fcn.00124ee6 -> fcn.00115e4d

  fcn.00114818 -> FunctionWithCustomName -> fcn.00124ee6 -> fcn.00115e4d

  fcn.00114818 -> FunctionWithCustomName -> fcn.00115e4d

Note: Cutter tends to omit special characters (such as '?') from the exported
graph, but only in some contexts. Make sure to preprocess the JSON accordingly.
"""


class _ZeroExitParser(argparse.ArgumentParser):
    """Argument parser that reports bad usage without a failing exit status."""

    def error(self, message: str) -> None:  # type: ignore[override]
        self.print_help(sys.stdout)
        self.exit(0, f"\n{self.prog}: error: {message}\n")


def _format_duration(seconds: float) -> str:
    """Return a concise human-readable duration string.

    Examples:
        0.123 -> "123.0 ms"; 1.234 -> "1.23 s"; 75.2 -> "1m 15.2s".
    """
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    if seconds < 60.0:
        return f"{seconds:.2f} s"
    minutes = int(seconds // 60)
    rem = seconds - minutes * 60
    return f"{minutes}m {rem:.1f}s"


def _plural(n: int, singular: str, plural: Optional[str] = None) -> str:
    if n == 1:
        return singular
    return plural or (singular + "s")


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return number


def _use_color(mode: str, stream: IO[str]) -> bool:
    """Resolve ``--color`` against the output stream."""
    if mode == "always":
        return True
    if mode == "never":
        return False
    if os.environ.get("NO_COLOR"):
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def format_path(
    path: CallPath, color: bool = False, config: OutputConfig = OUTPUT_CONFIG
) -> str:
    """Render a path as ``start -> ... -> target``.

    With ``color`` the start and target functions use the endpoint color and
    every function in between uses the intermediate color.
    """
    last = len(path) - 1
    parts = []
    for i, node in enumerate(path):
        tint = config.endpoint_color if i in (0, last) else config.intermediate_color
        parts.append(config.paint(str(node), tint, color))
    return config.arrow.join(parts)


def _error(message: str, color: bool, config: OutputConfig = OUTPUT_CONFIG) -> None:
    print(config.paint(message, config.endpoint_color, color))


def _log_interrupted(count: int) -> None:
    logger.warning(
        f"Interrupted after {count} {_plural(count, 'path')}; search stopped"
    )


def _has_more(search: Iterator[CallPath]) -> bool:
    """Pull one more path from ``search``; Ctrl-C counts as "unknown"."""
    try:
        return next(search, None) is not None
    except KeyboardInterrupt:
        return False


def _emit_text(paths: Iterator[CallPath], color: bool) -> Tuple[int, bool]:
    """Print paths separated by blank lines.

    Returns:
        Number of printed paths and whether Ctrl-C stopped the search.
    """
    count = 0
    try:
        for path in paths:
            if count:
                print()
            print(format_path(path, color))
            count += 1
    except KeyboardInterrupt:
        if color:
            sys.stdout.write(OUTPUT_CONFIG.reset)
            sys.stdout.flush()
        _log_interrupted(count)
        return count, True
    return count, False


def _emit_json(paths: Iterator[CallPath]) -> Tuple[int, bool]:
    """Print paths as one JSON array; on Ctrl-C print the paths found so far."""
    found: List[List[object]] = []
    interrupted = False
    try:
        for path in paths:
            found.append(list(path))
    except KeyboardInterrupt:
        interrupted = True
    print(json.dumps(found, indent=OUTPUT_CONFIG.json_indent))
    if interrupted:
        _log_interrupted(len(found))
    return len(found), interrupted


def _find_paths(
    path_arg: str,
    start: str,
    target: str,
    color: bool,
    limit: Optional[int] = None,
    as_json: bool = False,
) -> None:
    """Load a call-graph and print every path from ``start`` to ``target``.

    Problems with the input are reported on the console; nothing is raised
    for them and the process exit status stays zero.
    """
    _start_time = perf_counter()

    current_error = "Invalid path. For help use -h."
    try:
        file_path = Path(path_arg).resolve()
        current_error = "Error reading file."
        text = read_call_graph_text(file_path)
        current_error = "Invalid JSON file."
        graph = build_call_graph(
            parse_call_graph_text(text, fmt=detect_format(file_path))
        )
    except (OSError, ValueError, RuntimeError) as exc:
        logger.error(f"{current_error} {type(exc).__name__}: {exc}")
        _error(current_error, color)
        print("Exception details:")
        print(exc)
        return

    summary = summarize(graph)
    logger.info(
        f"Loaded call graph from {file_path}: {summary.functions} "
        f"{_plural(summary.functions, 'function')}, {summary.calls} "
        f"{_plural(summary.calls, 'call')}, {summary.leaves} leaf "
        f"{_plural(summary.leaves, 'callee')}"
    )

    if not has_function(graph, start):
        _error(f'JSON file does not contain function: "{start}"', color)
        return

    if not is_known_node(graph, target):
        _error(f'JSON file does not contain target function: "{target}"', color)
        return

    logger.debug(f"Searching paths from '{start}' to '{target}'")
    search = iter_all_paths(graph, start, target)
    paths: Iterator[CallPath] = search if limit is None else islice(search, limit)

    if as_json:
        count, interrupted = _emit_json(paths)
    else:
        count, interrupted = _emit_text(paths, color)
    if interrupted:
        return

    _elapsed = perf_counter() - _start_time
    logger.info(
        f"Found {count} {_plural(count, 'path')} in {_format_duration(_elapsed)}"
    )

    if count == 0:
        message = f'Could not find path between "{start}" and "{target}"'
        if as_json:
            logger.warning(message)
        else:
            _error(message, color)
    elif limit is not None and count == limit and _has_more(search):
        logger.info(f"Stopped after --limit {limit}; more paths exist")


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``callpaths`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``,
            ``sys.argv`` is used.
    """
    parser = _ZeroExitParser(
        prog="callpaths",
        description=_DESCRIPTION,
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        usage="%(prog)s [options] path start_function target_function",
    )
    parser.add_argument(
        "arguments",
        nargs="*",
        metavar="path start_function target_function",
        help="Call-graph export, function to start from, function to reach",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )
    parser.add_argument(
        "--color",
        choices=("auto", "always", "never"),
        default="auto",
        help="Color start/target and intermediate functions (default: auto)",
    )
    parser.add_argument(
        "--limit",
        "-n",
        type=_positive_int,
        default=None,
        help="Stop after printing this many paths",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print paths as a JSON array of function-name arrays",
    )

    effective_args = sys.argv[1:] if argv is None else argv
    args = parser.parse_intermixed_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    if len(args.arguments) != 3:
        parser.print_help(sys.stdout)
        return

    path_arg, start, target = args.arguments
    _find_paths(
        path_arg,
        start,
        target,
        color=_use_color(args.color, sys.stdout),
        limit=args.limit,
        as_json=args.json,
    )


if __name__ == "__main__":
    main()
