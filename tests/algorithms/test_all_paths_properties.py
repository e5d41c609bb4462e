"""Property checks for path enumeration on seeded random call-graphs.

NetworkX ``all_simple_paths`` is used as the reference for completeness.
"""

from __future__ import annotations

import random

import networkx as nx
import pytest

from callpaths.algorithms.all_paths import iter_all_paths
from callpaths.graph import to_networkx


def _random_call_graph(
    seed: int, functions: int = 8, leaves: int = 3, duplicates: bool = False
):
    rng = random.Random(seed)
    names = [f"fcn.{i:04x}" for i in range(functions)]
    leaf_names = [f"sym.imp.{i}" for i in range(leaves)]
    candidates = names + leaf_names
    graph = {}
    for name in names:
        # Some functions have no record at all
        if rng.random() < 0.15:
            continue
        out_degree = rng.randint(0, 3)
        if duplicates:
            graph[name] = rng.choices(candidates, k=out_degree)
        else:
            graph[name] = rng.sample(candidates, out_degree)
    return graph, names + leaf_names


@pytest.mark.parametrize("seed", range(25))
def test_paths_are_valid_and_complete(seed: int) -> None:
    graph, nodes = _random_call_graph(seed)
    rng = random.Random(seed + 1000)
    g = to_networkx(graph)

    for _ in range(5):
        start = rng.choice(sorted(graph)) if graph else nodes[0]
        target = rng.choice([n for n in nodes if n != start])

        found = [p.nodes for p in iter_all_paths(graph, start, target)]

        for path in found:
            assert path[0] == start
            assert path[-1] == target
            assert len(set(path)) == len(path)
            for caller, callee in zip(path, path[1:]):
                assert callee in graph[caller]

        assert len(set(found)) == len(found)

        if start in g and target in g:
            expected = {tuple(p) for p in nx.all_simple_paths(g, start, target)}
        else:
            expected = set()
        assert set(found) == expected


def _recursive_paths(graph, start, target):
    """Textbook recursive DFS with a shared buffer and visited set."""
    found = []
    visited = set()

    def step(current, path):
        if current == target:
            found.append(tuple(path))
            return
        if current not in graph:
            return
        visited.add(current)
        for successor in graph[current]:
            if successor not in visited:
                path.append(successor)
                step(successor, path)
                path.pop()
        visited.discard(current)

    step(start, [start])
    return found


@pytest.mark.parametrize("duplicates", [False, True])
@pytest.mark.parametrize("seed", range(15))
def test_order_matches_recursive_search(seed: int, duplicates: bool) -> None:
    graph, nodes = _random_call_graph(seed, functions=10, duplicates=duplicates)
    starts = sorted(graph)[:3] or nodes[:1]
    for start in starts:
        for target in nodes:
            found = [p.nodes for p in iter_all_paths(graph, start, target)]
            assert found == _recursive_paths(graph, start, target)
