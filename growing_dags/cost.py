"""Cost functions that score a candidate path against a partial DAG."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from itertools import pairwise

import networkx as nx

from growing_dags.interactome import Interactome, Node, PartialDag, SuperNode


def _main_weight(main: Interactome, source: Node, target: Node) -> float:
    graph = main.inner_network.graph
    if not graph.has_edge(source, target):
        raise ValueError(
            "DAG should be a subgraph of the main interactome. "
            f"Instead, found {source!r}, {target!r}"
        )
    return graph[source][target]["weight"]


class Cost(ABC):
    """Scores the addition of a path to an existing DAG."""

    @abstractmethod
    def relative_cost_of(
        self, main: Interactome, dag: PartialDag, nodes: Sequence[Node]
    ) -> float:
        """The cost of adding the path ``nodes`` to ``dag``, weighted by ``main``."""


class EdgeCost(Cost):
    """Sum of the main weights of the path's edges that the DAG lacks."""

    def relative_cost_of(
        self, main: Interactome, dag: PartialDag, nodes: Sequence[Node]
    ) -> float:
        dag_graph = dag.inner_network.graph
        added_cost = 0.0
        for source, target in pairwise(nodes):
            if not dag_graph.has_edge(source, target):
                added_cost += _main_weight(main, source, target)
        return added_cost


class PathCost(Cost):
    """Sum of the main weights over every super-source to super-target path of the grown DAG."""

    def relative_cost_of(
        self, main: Interactome, dag: PartialDag, nodes: Sequence[Node]
    ) -> float:
        new_graph = dag.inner_network.graph.copy()
        for source, target in pairwise(nodes):
            new_graph.add_edge(source, target, weight=dag.inner_network.default_data)

        relative_cost = 0.0
        for path in nx.all_simple_paths(new_graph, SuperNode.SOURCE, SuperNode.TARGET):
            for source, target in pairwise(path):
                relative_cost += _main_weight(main, source, target)
        return relative_cost