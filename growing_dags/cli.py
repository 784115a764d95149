"""Command line entry point: grow a DAG over an interactome a given number of times."""

from __future__ import annotations

import argparse
import logging
import sys
from decimal import Decimal
from pathlib import Path
from typing import Optional, Sequence

from growing_dags.cost import EdgeCost
from growing_dags.grow import GrowthCache, grow
from growing_dags.interactome import (
    DAGCreationError,
    Interactome,
    InteractomeAttachError,
    PartialDag,
)
from growing_dags.network import Network, NetworkIndexError, NetworkParsingError
from growing_dags.util import StrPath, read_lines
from growing_dags.weight import (
    EmptyTupleDataFactory,
    LogWeightDataFactory,
    WeightDataFactory,
)

logger = logging.getLogger(__name__)


def _format_float(value: float) -> str:
    """Render a float as its shortest round-tripping decimal, without exponent or trailing '.0'."""
    if value != value:
        return "NaN"
    if value in (float("inf"), float("-inf")):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def handle_files(
    interactome: StrPath,
    dag: StrPath,
    sources: StrPath,
    targets: StrPath,
    no_log_transform: bool,
    k: int,
) -> None:
    """Read the inputs and print one ``iteration\\tweight\\tpath`` line per grown path.

    Weights are log-transformed unless ``no_log_transform`` is set.
    """
    logger.info("Reading sources & targets...")
    source_names = read_lines(sources)
    target_names = read_lines(targets)

    logger.info("Caching interactome...")
    factory = WeightDataFactory() if no_log_transform else LogWeightDataFactory()
    network = Network.from_file(interactome, factory)

    logger.info("Preprocessing interactome...")
    main_interactome = Interactome.attach_sources_and_targets(
        network, source_names, target_names, True
    )

    partial_dag = PartialDag.from_network(
        Network.from_file_using_id_map(
            dag, main_interactome.inner_network.id_map, EmptyTupleDataFactory()
        ),
        source_names,
        target_names,
    )

    logger.info("Preparing cache...")
    inner = main_interactome.copy()
    cost = EdgeCost()

    for iteration in range(1, k + 1):
        logger.info("Growing DAGs: iteration %d.", iteration)
        cache = GrowthCache(inner)
        result = grow(main_interactome, partial_dag, cache, cost)
        if result is None:
            logger.warning(
                "No more paths could be constructed. Stopping at iteration %d.", iteration
            )
            break
        weight, path = result
        names = "|".join(
            main_interactome.inner_network.id_from_idx(node)
            for node in path
            if isinstance(node, int)
        )
        print(f"{iteration}\t{_format_float(weight)}\t{names}", flush=True)


def _non_negative(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {text}")
    return value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="growing-dags")
    parser.add_argument(
        "-n",
        "--no-log-transform",
        action="store_true",
        help=(
            "Do not log-transform the weights. Use this when the interactome's "
            "weights already mean 'lower = better'."
        ),
    )
    parser.add_argument(
        "-k",
        "--k",
        type=_non_negative,
        required=True,
        help="The number of times to grow a new DAG.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    files = commands.add_parser("files", help="Specify input through the paths of four files.")
    files.add_argument(
        "interactome",
        type=Path,
        help="Tab-separated interactome without a header: source, target, weight.",
    )
    files.add_argument("dag", type=Path, help="Tab-separated initial DAG.")
    files.add_argument("sources", type=Path, help="The sources to start at.")
    files.add_argument("targets", type=Path, help="The targets to end at.")

    folder = commands.add_parser(
        "folder", help="Specify input through a single, containing folder."
    )
    folder.add_argument(
        "path",
        type=Path,
        help="Folder holding interactome.txt, dag.txt, sources.txt and targets.txt.",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command line interface and return the exit status."""
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s > %(message)s",
    )
    args = _build_parser().parse_args(argv)

    if args.command == "folder":
        interactome = args.path / "interactome.txt"
        dag = args.path / "dag.txt"
        sources = args.path / "sources.txt"
        targets = args.path / "targets.txt"
    else:
        interactome, dag, sources, targets = (
            args.interactome,
            args.dag,
            args.sources,
            args.targets,
        )

    try:
        handle_files(interactome, dag, sources, targets, args.no_log_transform, args.k)
    except (
        OSError,
        NetworkParsingError,
        NetworkIndexError,
        InteractomeAttachError,
        DAGCreationError,
    ) as err:
        print(f"Error: {err}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())