#!/usr/bin/env python3
"""
Enumerate every topology on a finite ground set of n elements.

Each topology is printed on its own line as a family of subsets, for example
{{}, {a}, {a,b,c}} for n=3.
"""

import argparse
import logging
import sys
from collections import Counter
from pathlib import Path
from typing import Any, List, NoReturn, Optional, Sequence, TextIO

from tabulate import tabulate

from finitetop.config import EnumerationConfig
from finitetop.elements.subset import GroundSet, parse_subset
from finitetop.exceptions import MAX_GROUND_SET_SIZE, MIN_GROUND_SET_SIZE
from finitetop.logger import topo_logger
from finitetop.topology.axioms import generated_topology
from finitetop.topology.engine import Strategy, TopologyEngine
from finitetop.topology.render import format_topology

SIZE_HINT = (
    f"Where n is the number of elements ({MIN_GROUND_SET_SIZE}-{MAX_GROUND_SET_SIZE})"
)


class TopologyArgumentParser(argparse.ArgumentParser):
    """Argument parser that exits with status 1 on any usage error."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, f"{SIZE_HINT}\nError: {message}\n")


class GroundSetSizeAction(argparse.Action):
    """Argparse action that validates the ground set size is within range."""

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: str | Sequence[Any] | None,
        option_string: str | None = None,
    ) -> None:
        # type=int has already converted the value
        if not isinstance(values, int):
            parser.error("n must be an integer")
            return

        if not MIN_GROUND_SET_SIZE <= values <= MAX_GROUND_SET_SIZE:
            parser.error(
                f"n must be between {MIN_GROUND_SET_SIZE} and "
                f"{MAX_GROUND_SET_SIZE} inclusive"
            )
        setattr(namespace, self.dest, values)


class PositiveIntegerAction(argparse.Action):
    """Argparse action that validates the value is >= 1."""

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: str | Sequence[Any] | None,
        option_string: str | None = None,
    ) -> None:
        if not isinstance(values, int):
            parser.error(f"{option_string} must be an integer")
            return

        if values < 1:
            parser.error(f"Minimum value for {option_string} is 1")
        setattr(namespace, self.dest, values)


def setup_argument_parser() -> TopologyArgumentParser:
    """
    Configure and return the argument parser.

    Returns:
        Configured TopologyArgumentParser instance.
    """
    parser = TopologyArgumentParser(
        prog="finitetop",
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "n",
        help=f"Number of elements in the ground set ({MIN_GROUND_SET_SIZE}-{MAX_GROUND_SET_SIZE})",
        type=int,
        action=GroundSetSizeAction,
    )

    search_group = parser.add_argument_group("search options")
    search_group.add_argument(
        "-s",
        "--strategy",
        help="Enumeration strategy (default: backtracking)",
        choices=[s.value for s in Strategy],
        default=Strategy.BACKTRACKING.value,
    )
    search_group.add_argument(
        "-l",
        "--limit",
        help="Stop after this many topologies",
        type=int,
        action=PositiveIntegerAction,
    )
    search_group.add_argument(
        "-g",
        "--generate",
        help=(
            "Print the smallest topology containing the given subsets instead of "
            "enumerating, e.g. --generate a bc"
        ),
        nargs="+",
        metavar="SUBSET",
    )

    output_group = parser.add_argument_group("output options")
    output_group.add_argument(
        "-c",
        "--count",
        help="Print only the number of topologies",
        action="store_true",
    )
    output_group.add_argument(
        "-p",
        "--progress",
        help="Report progress percentages on stderr",
        action="store_true",
    )
    output_group.add_argument(
        "--progress-every",
        help="Topologies between progress reports (default: 1000)",
        default=1000,
        type=int,
        action=PositiveIntegerAction,
    )
    output_group.add_argument(
        "--summary",
        help="Print a table of topology counts by number of open sets",
        action="store_true",
    )

    debug_group = parser.add_argument_group("debug options")
    debug_group.add_argument(
        "--debug",
        help="Trace the search on stderr",
        action="store_true",
    )
    debug_group.add_argument(
        "--debug-html",
        help="Write the search trace as an HTML page",
        type=Path,
    )

    return parser


def summary_table(open_set_counts: Counter) -> str:
    rows: List[List[Any]] = [
        [open_sets, open_set_counts[open_sets]] for open_sets in sorted(open_set_counts)
    ]
    rows.append(["total", sum(open_set_counts.values())])
    return tabulate(rows, headers=["open sets", "topologies"], tablefmt="simple")


def run(
    config: EnumerationConfig,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> int:
    """Drain the engine for one configuration, rendering to ``out``."""
    out = out or sys.stdout
    err = err or sys.stderr
    log = logging.getLogger(config.logger_name)
    if config.debug:
        topo_logger.setup_console_logging(logging.DEBUG)
    elif config.debug_html is not None:
        topo_logger.setup_html_logging()

    if config.generate is not None:
        ground = GroundSet.validated(config.size)
        seeds = [parse_subset(text, config.size) for text in config.generate]
        topology = generated_topology(seeds, ground)
        log.info("generated %d open sets from %d subsets", len(topology), len(seeds))
        out.write(format_topology(topology, config.size) + "\n")
        return 0

    engine = TopologyEngine(config.size, config.strategy)
    open_set_counts: Counter = Counter()

    for topology in engine:
        if not config.count_only:
            out.write(format_topology(topology, config.size) + "\n")
        open_set_counts[len(topology)] += 1

        if config.show_progress and engine.emitted % config.progress_every == 0:
            err.write(f"{engine.emitted} topologies, {engine.progress:.2%} explored\n")

        if config.limit is not None and engine.emitted >= config.limit:
            log.info("stopping after %d topologies", engine.emitted)
            break

    log.info("enumerated %d topologies on %d points", engine.emitted, config.size)
    if config.show_progress:
        err.write(f"{engine.emitted} topologies, {engine.progress:.2%} explored\n")
    if config.count_only:
        out.write(f"{engine.emitted}\n")
    if config.summary:
        out.write(summary_table(open_set_counts) + "\n")

    if config.tracing:
        topo_logger.table(
            [[k, v] for k, v in sorted(open_set_counts.items())],
            headers=["open sets", "topologies"],
            title="Topologies by number of open sets",
        )
    if config.debug_html is not None:
        written = topo_logger.write_debug_output(
            config.debug_html, title=f"Topologies on {config.size} points"
        )
        err.write(f"Debug trace written to {written}\n")

    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = setup_argument_parser()
    args = parser.parse_args(argv)
    for text in args.generate or []:
        try:
            parse_subset(text, args.n)
        except ValueError as e:
            parser.error(str(e))

    config = EnumerationConfig.from_namespace(args)
    logging.basicConfig(
        level=logging.DEBUG if config.debug else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    return run(config)


if __name__ == "__main__":
    sys.exit(main())
