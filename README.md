# growing-dags

`growing-dags` starts from a known pathway, given as a partial DAG, inside a
directed, weighted interactome, and extends it one path at a time. In each
round it looks, from every node of the current DAG, for the cheapest path
through the rest of the interactome to a DAG node that is neither that node nor
one of its ancestors. The cheapest of these paths, scored by a cost function,
is added to the DAG, so the DAG stays acyclic.

A super source is linked to every source node and a super target is fed by
every target node, so that new paths can also begin at a source or end at a
target.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install .[test]
```

The only runtime dependency is `networkx`.

## Input files

All files are plain UTF-8 text. Blank lines are skipped everywhere; in the two
network files, lines beginning with `#` are skipped as well.

- **interactome**: tab-separated lines `A<TAB>B<TAB>weight`, each a directed
  edge `A -> B`. A line with the wrong number of columns, or a weight that is
  not a number, is an error.
- **dag**: tab-separated lines `A<TAB>B`, the starting pathway. Every node must
  also appear in the interactome, and the pathway must be acyclic.
- **sources**: one node name per line. Each must appear in the interactome.
- **targets**: one node name per line. Each must appear in the interactome.

Incoming edges of sources and outgoing edges of targets are removed from the
interactome before the super source and super target are attached.

By default weights are read as "higher is better" (confidence scores, for
instance) and turned into costs as `-ln(max(1e-9, w) / ln 10)`. If the weights
are already costs, where lower is better, pass `--no-log-transform`.

## Command line

Give the four files separately:

```
growing-dags -k 10 files interactome.txt dag.txt sources.txt targets.txt
```

Or give a folder holding `interactome.txt`, `dag.txt`, `sources.txt` and
`targets.txt`:

```
growing-dags -k 10 folder path/to/folder
```

Options, which come before the subcommand:

- `-k`, `--k N` (required): the number of rounds to run.
- `-n`, `--no-log-transform`: use the weights as they are.

Each round prints one tab-separated line to standard output:

```
<iteration>	<added cost>	<node names of the new path, joined by |>
```

The super source and super target are left out of the printed path. The run
stops early, with a warning on standard error, when no new path can be found.
Unreadable files, malformed lines, unknown sources or targets, DAG nodes
missing from the interactome and cyclic DAGs are reported on standard error
as `Error: ...` with exit status 1.

## Library use

```python
from growing_dags.cost import EdgeCost
from growing_dags.grow import GrowthCache, grow
from growing_dags.interactome import Interactome, PartialDag
from growing_dags.network import Network
from growing_dags.weight import EmptyTupleDataFactory, WeightDataFactory

network = Network.from_file("interactome.txt", WeightDataFactory())
interactome = Interactome.attach_sources_and_targets(network, ["A"], ["C"], True)
dag = PartialDag.from_network(
    Network.from_file_using_id_map(
        "dag.txt", interactome.inner_network.id_map, EmptyTupleDataFactory()
    ),
    ["A"],
    ["C"],
)

result = grow(interactome, dag, GrowthCache(interactome), EdgeCost())
if result is not None:
    cost, path = result
```

The modules:

- `growing_dags.network`: `Network`, a `networkx.DiGraph` over integer ids with
  a name-to-id map. Edge data is stored under the `weight` edge attribute. It
  is read with `from_file`, `from_lines`, `from_file_using_id_map`,
  `from_lines_using_id_map` and the `*_over_id_map` variants, and offers
  `get_node`, `as_nodes`, `id_from_idx`, `add_node`, `prune`, `is_node_empty`
  and `copy`. Errors are `NetworkParsingError` and `NetworkIndexError`.
- `growing_dags.weight`: the data factories `WeightDataFactory`,
  `LogWeightDataFactory` and `EmptyTupleDataFactory`, all subclasses of
  `DataFactory`.
- `growing_dags.interactome`: `SuperNode`, `Interactome` (built with
  `attach_sources_and_targets`) and `PartialDag` (built with `from_network`,
  which raises `DAGCreationError` on a cycle). Unknown sources or targets raise
  `InteractomeAttachError`.
- `growing_dags.path`: `calculate_paths`, a Dijkstra search that stops once
  every target has been settled and does not expand past ignored nodes.
- `growing_dags.cost`: the `Cost` base class. `EdgeCost` adds up the main
  interactome weights of the path's edges that the DAG does not already have.
  `PathCost` adds up those weights along every simple path from the super
  source to the super target in the grown DAG.
- `growing_dags.grow`: `GrowthCache`, which holds its own copy of the candidate
  graph and prunes it as it is used; `produce_dag`, which finds the cheapest
  path without changing the DAG; and `grow`, which also adds that path to the
  DAG.
- `growing_dags.util`: `read_lines`, `get_ancestors`, `get_descendents`,
  `get_related` and `Direction`.
- `growing_dags.cli`: `main` and `handle_files`, behind the `growing-dags`
  command.

## Limitations

The command always scores paths with `EdgeCost`. `PathCost` is only available
through the library. Results are printed as text and are not saved anywhere.