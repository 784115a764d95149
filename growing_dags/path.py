"""Shortest paths from one source, stopping once every target has been settled."""

from __future__ import annotations

import heapq
from collections.abc import Hashable, Iterable
from itertools import count
from typing import Optional

import networkx as nx

Paths = dict[tuple[Hashable, Hashable], tuple[float, Optional[Hashable]]]


def calculate_paths(
    paths: Paths,
    graph: nx.DiGraph,
    source: Hashable,
    targets: Iterable[Hashable],
    ignore: Iterable[Hashable],
) -> Paths:
    """Run Dijkstra from ``source`` over ``graph``, recording results in ``paths``.

    ``paths`` maps ``(source, node)`` to ``(score, parent)``. The search stops
    as soon as every node of a non-empty ``targets`` has been settled, and it
    never expands beyond a node in ``ignore``. Returns ``paths``.
    """
    remaining = list(targets)
    ignored = set(ignore)
    visited: set = set()
    tie_breaker = count()

    paths[(source, source)] = (0.0, None)
    heap = [(0.0, next(tie_breaker), source)]

    while heap:
        score, _, node = heapq.heappop(heap)
        if node in visited:
            continue

        if node in remaining:
            remaining.remove(node)
            if not remaining:
                return paths

        if node in ignored:
            continue

        successors = graph.succ[node] if node in graph else {}
        for successor, data in successors.items():
            if successor in visited:
                continue
            next_score = score + data["weight"]
            known = paths.get((source, successor))
            if known is None or next_score < known[0]:
                paths[(source, successor)] = (next_score, node)
                heapq.heappush(heap, (next_score, next(tie_breaker), successor))
        visited.add(node)

    return paths