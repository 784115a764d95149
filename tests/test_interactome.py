import pytest

from growing_dags.interactome import (
    DAGCreationError,
    Interactome,
    InteractomeAttachError,
    PartialDag,
    SuperNode,
)
from growing_dags.network import Network
from growing_dags.weight import EmptyTupleDataFactory, WeightDataFactory

ATTACH_LINES = [
    "A\t1\t0.123",
    "B\t1\t0.123",
    "C\t2\t0.123",
    "K\tC\t0.123",  # this edge will be ignored
    "1\t3\t0.123",
    "2\t3\t0.123",
    "3\tX\t0.123",
    "3\tY\t0.123",
]


def _network():
    return Network.from_lines(ATTACH_LINES, WeightDataFactory())


def test_attach_works():
    interactome = Interactome.attach_sources_and_targets(
        _network(), ["A", "B", "C"], ["X", "Y"], True
    )
    assert interactome.inner_network.graph.number_of_edges() == 7 + 3 + 2


def test_attach_records_source_and_target_ids():
    network = _network()
    interactome = Interactome.attach_sources_and_targets(
        network, ["A", "B", "C"], ["X", "Y"], True
    )
    assert interactome.sources == network.as_nodes(["A", "B", "C"])
    assert interactome.targets == network.as_nodes(["X", "Y"])
    graph = interactome.inner_network.graph
    assert set(graph.successors(SuperNode.SOURCE)) == set(interactome.sources)
    assert set(graph.predecessors(SuperNode.TARGET)) == set(interactome.targets)


def test_attach_prunes_edge_into_source():
    network = _network()
    interactome = Interactome.attach_sources_and_targets(
        network, ["A", "B", "C"], ["X", "Y"], True
    )
    k, c = network.as_nodes(["K", "C"])
    assert not interactome.inner_network.graph.has_edge(k, c)
    # the input network is left untouched
    assert network.graph.has_edge(k, c)


def test_super_edges_use_default_weight():
    interactome = Interactome.attach_sources_and_targets(_network(), ["A"], ["X"], True)
    graph = interactome.inner_network.graph
    a = interactome.sources[0]
    assert graph[SuperNode.SOURCE][a]["weight"] == 0.0


def test_missing_source_raises():
    with pytest.raises(InteractomeAttachError, match="Source 'Z' does not exist"):
        Interactome.attach_sources_and_targets(_network(), ["A", "Z"], ["X"], True)


def test_missing_target_raises():
    with pytest.raises(InteractomeAttachError, match="Target 'Z' does not exist"):
        Interactome.attach_sources_and_targets(_network(), ["A"], ["Z"], True)


def test_missing_names_skipped_when_not_required():
    network = _network()
    interactome = Interactome.attach_sources_and_targets(network, ["A", "Z"], ["Q", "X"], False)
    assert interactome.sources == [network.get_node("A")]
    assert interactome.targets == [network.get_node("X")]


def test_name_from_idx():
    network = _network()
    interactome = Interactome.attach_sources_and_targets(network, ["A"], ["X"], True)
    assert interactome.name_from_idx(SuperNode.SOURCE) == "[[Super Source]]"
    assert interactome.name_from_idx(SuperNode.TARGET) == "[[Super Target]]"
    assert interactome.name_from_idx(network.get_node("K")) == "K"
    assert interactome.name_from_idx(10_000) is None


def test_super_node_order():
    interactome = Interactome.attach_sources_and_targets(_network(), ["A"], ["X"], True)
    supers = [
        node for node in interactome.inner_network.graph.nodes if isinstance(node, SuperNode)
    ]
    ordered = sorted(supers)
    assert ordered == [SuperNode.SOURCE, SuperNode.TARGET]
    assert [interactome.name_from_idx(node) for node in ordered] == [
        "[[Super Source]]",
        "[[Super Target]]",
    ]
    assert not ordered[1] < ordered[0]


def test_copy_is_independent():
    interactome = Interactome.attach_sources_and_targets(_network(), ["A"], ["X"], True)
    clone = interactome.copy()
    clone.inner_network.graph.remove_node(SuperNode.SOURCE)
    clone.sources.clear()
    assert SuperNode.SOURCE in interactome.inner_network.graph
    assert len(interactome.sources) == 1


def _main_interactome():
    network = Network.from_lines(
        ["A\tB\t0.5", "B\tC\t0.5", "C\tD\t0.5", "D\tB\t0.5", "D\tE\t0.5"],
        WeightDataFactory(),
    )
    return Interactome.attach_sources_and_targets(network, ["A"], ["E"], True)


def test_partial_dag_attaches_present_names():
    main = _main_interactome()
    dag_network = Network.from_lines_using_id_map(
        ["A\tB", "B\tC"], main.inner_network.id_map, EmptyTupleDataFactory()
    )
    dag = PartialDag.from_network(dag_network, ["A"], ["C"])
    assert dag.inner_network.graph.number_of_edges() == 4
    assert dag.sources == [main.inner_network.get_node("A")]
    assert dag.targets == [main.inner_network.get_node("C")]
    assert dag.inner_network.graph[SuperNode.SOURCE][dag.sources[0]]["weight"] is None


def test_partial_dag_rejects_cycle():
    main = _main_interactome()
    dag_network = Network.from_lines_using_id_map(
        ["B\tC", "C\tD", "D\tB"], main.inner_network.id_map, EmptyTupleDataFactory()
    )
    with pytest.raises(DAGCreationError, match="The passed in DAG has cycles!"):
        PartialDag.from_network(dag_network, ["A"], ["E"])


def test_partial_dag_copy_keeps_type():
    main = _main_interactome()
    dag_network = Network.from_lines_using_id_map(
        ["A\tB"], main.inner_network.id_map, EmptyTupleDataFactory()
    )
    dag = PartialDag.from_network(dag_network, ["A"], ["E"])
    clone = dag.copy()
    assert isinstance(clone, PartialDag)
    clone.inner_network.graph.add_edge(1, 2)
    assert not dag.inner_network.graph.has_edge(1, 2)