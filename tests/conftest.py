"""Global pytest configuration and shared call-graph fixtures.

Graphs are plain dicts mapping a function to its ordered callee list, the
same shape ``callpaths.io.load_call_graph`` returns.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest


@pytest.fixture
def fan_out():
    #     ┌──►B──┐
    #   A─┤      ├──►D
    #     └──►C──┘
    return {"A": ["B", "C"], "B": ["D"], "C": ["D"]}


@pytest.fixture
def two_cycle():
    #   A◄───►B───►C      (C has no record)
    return {"A": ["B"], "B": ["A", "C"]}


@pytest.fixture
def diamond_with_back_edges():
    # A calls B and C, C also calls B, D calls back into A.
    return {
        "A": ["B", "C"],
        "B": ["D"],
        "C": ["B", "D"],
        "D": ["A", "E"],
        "E": [],
    }


@pytest.fixture
def call_graph_records():
    """Records in the shape of a Cutter global call-graph export."""
    return [
        {"name": "main", "size": 120, "imports": ["parse_args", "run"]},
        {"name": "parse_args", "size": 48, "imports": ["usage", "run"]},
        {"name": "run", "size": 300, "imports": ["fcn.00115e4d", "run"]},
        {"name": "usage", "size": 16, "imports": []},
        {"name": "isolated", "size": 8, "imports": ["main"]},
    ]


@pytest.fixture
def call_graph_file(tmp_path: Path, call_graph_records) -> Path:
    path = tmp_path / "call-graph.json"
    path.write_text(json.dumps(call_graph_records), encoding="utf-8")
    return path
