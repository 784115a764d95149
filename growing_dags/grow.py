"""Growing a partial DAG by the cheapest path through the rest of the interactome."""

from __future__ import annotations

import logging
import math
from collections.abc import Hashable, Iterable, Iterator, Sequence
from itertools import pairwise
from typing import Optional

import networkx as nx

from growing_dags.cost import Cost
from growing_dags.interactome import Interactome, Node, PartialDag, SuperNode
from growing_dags.network import Network
from growing_dags.path import Paths, calculate_paths
from growing_dags.util import get_ancestors

logger = logging.getLogger(__name__)

GrowthResult = Optional[tuple[float, list[Node]]]


class GrowthCache:
    """The candidate graph that paths are searched in; it shrinks as it is used."""

    def __init__(self, interactome: Interactome) -> None:
        self.candidate: Network = interactome.inner_network.copy()


def _discard_node(graph: nx.DiGraph, node: Hashable) -> None:
    if node in graph:
        graph.remove_node(node)


def _trace(parents: Paths, source: Node, targets: Iterable[Node]) -> Iterator[list[Node]]:
    """Yield the recorded path from ``source`` to each reached target."""
    for target in targets:
        path = []
        current: Optional[Node] = target
        while current is not None:
            path.append(current)
            entry = parents.get((source, current))
            current = entry[1] if entry is not None else None
        if len(path) < 2:
            continue
        path.reverse()
        yield path


def _cost_key(value: float) -> tuple[bool, float]:
    # NaN sorts after every number, as a total order on floats would have it.
    return (math.isnan(value), value)


def produce_dag(
    interactome: Interactome,
    dag: PartialDag,
    cache: GrowthCache,
    cost: Cost,
) -> GrowthResult:
    """Find the cheapest path that could be added to ``dag``.

    The interactome and the DAG must share one id map. The candidate graph in
    ``cache`` is pruned in place. Returns ``(cost, path)`` or None when no
    path can be built.
    """
    candidate = cache.candidate
    dag_graph = dag.inner_network.graph

    for source, target in list(dag_graph.edges()):
        if candidate.graph.has_edge(source, target):
            candidate.graph.remove_edge(source, target)
        for end in (source, target):
            if candidate.is_node_empty(end):
                _discard_node(candidate.graph, end)

    parents: Paths = {}
    all_targets: dict[Node, list[Node]] = {}

    order = list(nx.topological_sort(dag_graph))
    for position, node in enumerate(order):
        name = dag.name_from_idx(node)
        logger.debug("On the DAG node %s.", name)

        if dag_graph.has_edge(node, SuperNode.TARGET):
            parents[(node, SuperNode.TARGET)] = (math.inf, None)
            logger.debug("Node %r is connected to the super target. Adjusting.", node)
            continue

        if node not in candidate.graph:
            logger.debug("Skipping %r named %s as it is not in the candidate graph.", node, name)
            continue

        ancestors = get_ancestors(dag_graph, node)
        for ancestor in ancestors:
            _discard_node(candidate.graph, ancestor)
            logger.debug("Removing ancestor %r", ancestor)

        excluded = set(ancestors)
        excluded.add(node)
        targets = [other for other in dag_graph.nodes if other not in excluded]

        logger.info(
            "Running dijkstra on %s (%d/%d) over %d edges",
            name,
            position,
            dag_graph.number_of_nodes(),
            candidate.graph.number_of_edges(),
        )
        calculate_paths(parents, candidate.graph, node, targets, targets)
        all_targets[node] = targets

    paths = [
        path
        for source, targets in all_targets.items()
        for path in _trace(parents, source, targets)
    ]
    if not paths:
        return None

    scored = [(cost.relative_cost_of(interactome, dag, path), path) for path in paths]
    best_cost, best_path = min(scored, key=lambda item: _cost_key(item[0]))
    return best_cost, best_path


def _add_path(dag: PartialDag, path: Sequence[Node]) -> None:
    graph = dag.inner_network.graph
    for source, target in pairwise(path):
        graph.add_edge(source, target, weight=dag.inner_network.default_data)


def grow(
    interactome: Interactome,
    dag: PartialDag,
    cache: GrowthCache,
    cost: Cost,
) -> GrowthResult:
    """Add the cheapest available path to ``dag`` and return ``(cost, path)``, or None."""
    result = produce_dag(interactome, dag, cache, cost)
    if result is None:
        return None

    weight, path = result
    logger.info("Writing a path of length %d", len(path))
    _add_path(dag, path)
    return weight, path