"""Networks bracketed by a super source and a super target, and partial DAGs over them."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

import networkx as nx

from growing_dags.network import Network, NetworkIndexError
from growing_dags.util import Direction


class SuperNode(Enum):
    """The two synthetic nodes that bracket every source and every target."""

    SOURCE = "source"
    TARGET = "target"

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SuperNode):
            return NotImplemented
        return self is SuperNode.SOURCE and other is SuperNode.TARGET


Node = Union[int, SuperNode]

_SUPER_NAMES = {
    SuperNode.SOURCE: "[[Super Source]]",
    SuperNode.TARGET: "[[Super Target]]",
}


class InteractomeAttachError(LookupError):
    """A named source or target does not exist in the network."""

    def __init__(self, role: str, node: str) -> None:
        super().__init__(f"{role} '{node}' does not exist in the interactome.")
        self.role = role
        self.node = node


class DAGCreationError(ValueError):
    """The network given as a DAG contains a cycle."""

    def __init__(self) -> None:
        super().__init__("The passed in DAG has cycles!")


def _prune(network: Network, names: Iterable[str], direction: Direction,
           require: bool, role: str) -> None:
    try:
        network.prune(names, direction, require)
    except NetworkIndexError as err:
        raise InteractomeAttachError(role, err.node) from None


def _resolve(network: Network, names: Iterable[str], require: bool, role: str) -> list[int]:
    ids = []
    for name in names:
        idx = network.id_map.get(name)
        if idx is None:
            if require:
                raise InteractomeAttachError(role, name)
            continue
        ids.append(idx)
    return ids


@dataclass
class Interactome:
    """A network with a super source feeding every source and a super target fed by every target."""

    inner_network: Network
    sources: list[int] = field(default_factory=list)
    targets: list[int] = field(default_factory=list)

    @classmethod
    def attach_sources_and_targets(
        cls,
        network: Network,
        sources: Iterable[str],
        targets: Iterable[str],
        require_sources_and_targets: bool,
    ) -> Interactome:
        """Cut edges into sources and out of targets, then wire in the super nodes.

        Unknown names raise InteractomeAttachError when
        ``require_sources_and_targets`` is set and are skipped otherwise.
        """
        sources = list(sources)
        targets = list(targets)
        network = network.copy()
        graph = network.graph
        graph.add_node(SuperNode.SOURCE)
        graph.add_node(SuperNode.TARGET)

        require = require_sources_and_targets
        _prune(network, sources, Direction.INCOMING, require, "Source")
        _prune(network, targets, Direction.OUTGOING, require, "Target")

        source_ids = _resolve(network, sources, require, "Source")
        target_ids = _resolve(network, targets, require, "Target")

        for source_id in source_ids:
            graph.add_edge(SuperNode.SOURCE, source_id, weight=network.default_data)
        for target_id in target_ids:
            graph.add_edge(target_id, SuperNode.TARGET, weight=network.default_data)

        return cls(inner_network=network, sources=source_ids, targets=target_ids)

    def name_from_idx(self, node: Node) -> Optional[str]:
        """Return a printable name for a node, or None for an unnamed id."""
        if isinstance(node, SuperNode):
            return _SUPER_NAMES[node]
        return self.inner_network.id_from_idx(node)

    def copy(self) -> Interactome:
        """Return an independent copy."""
        return type(self)(
            inner_network=self.inner_network.copy(),
            sources=list(self.sources),
            targets=list(self.targets),
        )


class PartialDag(Interactome):
    """An interactome whose graph is guaranteed to be acyclic."""

    @classmethod
    def from_network(
        cls, network: Network, sources: Iterable[str], targets: Iterable[str]
    ) -> PartialDag:
        """Attach whichever sources and targets the network names and check for cycles."""
        dag = cls.attach_sources_and_targets(network, sources, targets, False)
        if not nx.is_directed_acyclic_graph(dag.inner_network.graph):
            raise DAGCreationError()
        return dag

    def copy(self) -> PartialDag:
        """Return an independent copy."""
        return super().copy()