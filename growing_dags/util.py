"""Graph traversal helpers and plain-text line reading."""

from __future__ import annotations

from collections.abc import Hashable, Iterator
from enum import Enum
from os import PathLike
from typing import Union

import networkx as nx

StrPath = Union[str, "PathLike[str]"]


class Direction(Enum):
    """Which side of a node's edges to look at."""

    INCOMING = "incoming"
    OUTGOING = "outgoing"


def get_related(graph: nx.DiGraph, node: Hashable, direction: Direction) -> list:
    """Depth-first collect the nodes related to ``node``, excluding ``node`` itself.

    The walk always follows incoming edges, whichever ``direction`` is given;
    ``direction`` only selects where the walk is anchored, which for a
    single start node is the same place.
    """
    if not isinstance(direction, Direction):
        raise TypeError(f"expected a Direction, got {direction!r}")

    related = []
    discovered: set = set()
    stack = [node]
    while stack:
        current = stack.pop()
        if current in discovered:
            continue
        discovered.add(current)
        if current in graph:
            stack.extend(
                neighbour
                for neighbour in graph.predecessors(current)
                if neighbour not in discovered
            )
        if current != node:
            related.append(current)
    return related


def get_ancestors(graph: nx.DiGraph, node: Hashable) -> list:
    """Return the ancestors of ``node`` in traversal order, without ``node``."""
    return get_related(graph, node, Direction.INCOMING)


def get_descendents(graph: nx.DiGraph, node: Hashable) -> list:
    """Return the nodes related to ``node`` when anchored on its outgoing side."""
    return get_related(graph, node, Direction.OUTGOING)


def _file_lines(path: StrPath) -> Iterator[str]:
    with open(path, encoding="utf-8", newline="\n") as handle:
        for line in handle:
            yield line.removesuffix("\n").removesuffix("\r")


def read_lines(path: StrPath) -> list[str]:
    """Read the non-empty lines of a text file."""
    return [line for line in _file_lines(path) if line]