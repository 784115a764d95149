"""A directed graph of integer node ids together with the names they stand for."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, Optional

import networkx as nx

from growing_dags.util import Direction, StrPath
from growing_dags.weight import DataFactory

IdFactory = Callable[[str, int], Optional[int]]


class NetworkParsingError(ValueError):
    """A network description could not be read."""


class NetworkIndexError(LookupError):
    """A named node does not exist in a network."""

    def __init__(self, node: str) -> None:
        super().__init__(f"Node {node} is not present in this network.")
        self.node = node


def _file_lines(path: StrPath) -> Iterator[str]:
    with open(path, encoding="utf-8", newline="\n") as handle:
        for line in handle:
            yield line.removesuffix("\n").removesuffix("\r")


@dataclass
class Network:
    """A directed graph over integer ids, with a two-way map to node names.

    Edge data lives under the ``weight`` edge attribute; ``default_data`` is
    the data given to edges that are added rather than read.
    """

    graph: nx.DiGraph = field(default_factory=nx.DiGraph)
    id_map: dict[str, int] = field(default_factory=dict)
    max_id: int = 0
    default_data: Any = None
    _names: dict[int, str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self._names = {idx: name for name, idx in self.id_map.items()}

    @classmethod
    def from_lines_over_id_map(
        cls,
        lines: Iterable[str],
        id_map: dict[str, int],
        id_factory: IdFactory,
        factory: DataFactory,
    ) -> Network:
        """Read tab-separated edges, naming unseen nodes through ``id_factory``."""
        id_map = dict(id_map)
        graph = nx.DiGraph()
        max_id = 0
        expected = 2 + factory.length

        def resolve(name: str) -> int:
            nonlocal max_id
            known = id_map.get(name)
            if known is not None:
                return known
            idx = id_factory(name, len(id_map))
            if idx is None:
                raise NetworkParsingError(
                    f"id factory couldn't produce {name} at line {len(id_map)}."
                )
            graph.add_node(idx)
            id_map[name] = idx
            max_id = max(idx, max_id)
            return idx

        for line_index, line in enumerate(lines):
            if not line or line.startswith("#"):
                continue

            components = line.split("\t")
            if len(components) != expected:
                raise NetworkParsingError(
                    f"line '{line_index + 1}' has component size {len(components)}, "
                    f"but requires {expected} components "
                    f"(first and second interactome, then {factory.description})"
                )

            source_name, target_name, *rest = components
            try:
                data = factory.from_strs(line_index, rest)
            except ValueError as err:
                raise NetworkParsingError(str(err)) from err

            source = resolve(source_name)
            target = resolve(target_name)
            graph.add_edge(source, target, weight=data)

        return cls(
            graph=graph,
            id_map=id_map,
            max_id=max_id,
            default_data=factory.default,
        )

    @classmethod
    def from_lines_using_id_map(
        cls, lines: Iterable[str], id_map: dict[str, int], factory: DataFactory
    ) -> Network:
        """Read edges whose nodes must all be named in an existing ``id_map``."""
        return cls.from_lines_over_id_map(
            lines, {}, lambda name, _size: id_map.get(name), factory
        )

    @classmethod
    def from_lines(cls, lines: Iterable[str], factory: DataFactory) -> Network:
        """Read edges, numbering nodes in order of first appearance."""
        return cls.from_lines_over_id_map(lines, {}, lambda _name, size: size, factory)

    @classmethod
    def from_file_over_id_map(
        cls,
        path: StrPath,
        id_map: dict[str, int],
        id_factory: IdFactory,
        factory: DataFactory,
    ) -> Network:
        """Read a network file, naming unseen nodes through ``id_factory``."""
        return cls.from_lines_over_id_map(_file_lines(path), id_map, id_factory, factory)

    @classmethod
    def from_file_using_id_map(
        cls, path: StrPath, id_map: dict[str, int], factory: DataFactory
    ) -> Network:
        """Read a network file whose nodes must all be named in ``id_map``."""
        return cls.from_file_over_id_map(
            path, {}, lambda name, _size: id_map.get(name), factory
        )

    @classmethod
    def from_file(cls, path: StrPath, factory: DataFactory) -> Network:
        """Read a network file, numbering nodes in order of first appearance."""
        return cls.from_file_over_id_map(path, {}, lambda _name, size: size, factory)

    def get_node(self, node: str) -> int:
        """Return the id of the node called ``node``."""
        try:
            return self.id_map[node]
        except KeyError:
            raise NetworkIndexError(node) from None

    def add_node(self) -> int:
        """Allocate a fresh id, add it to the graph and return it."""
        self.max_id += 1
        self.graph.add_node(self.max_id)
        return self.max_id

    def as_nodes(self, nodes: Iterable[str]) -> list[int]:
        """Return the ids of the named nodes, in order."""
        return [self.get_node(node) for node in nodes]

    def id_from_idx(self, idx: int) -> Optional[str]:
        """Return the name of node ``idx``, or None if it has none."""
        return self._names.get(idx)

    def prune(
        self, nodes: Iterable[str], direction: Direction, require_nodes: bool
    ) -> None:
        """Remove the edges on the ``direction`` side of the named nodes.

        Unknown names raise NetworkIndexError when ``require_nodes`` is set
        and are skipped otherwise.
        """
        pooled = []
        for name in nodes:
            idx = self.id_map.get(name)
            if idx is None:
                if require_nodes:
                    raise NetworkIndexError(name)
                continue
            if idx not in self.graph:
                continue
            if direction is Direction.INCOMING:
                pooled.extend(self.graph.in_edges(idx))
            else:
                pooled.extend(self.graph.out_edges(idx))

        for source, target in pooled:
            if self.graph.has_edge(source, target):
                self.graph.remove_edge(source, target)

    def is_node_empty(self, node: Hashable) -> bool:
        """Whether ``node`` has no edges at all (absent nodes count as empty)."""
        if node not in self.graph:
            return True
        return self.graph.in_degree(node) == 0 and self.graph.out_degree(node) == 0

    def copy(self) -> Network:
        """Return an independent copy of this network."""
        return Network(
            graph=self.graph.copy(),
            id_map=dict(self.id_map),
            max_id=self.max_id,
            default_data=self.default_data,
        )