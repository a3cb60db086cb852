"""Command-line front end for the scheduling engine.

Mirrors the two actions of the classic simulator window:

- run one policy::

    disk-sim --requests "98,183,37,122,14,124,65,67" --head 53 --policy sstf

- compare all four (``--policy all``), printed in FCFS, SSTF, SCAN,
  C-SCAN order.

Defaults for ``--disk-size``, ``--direction`` and ``--policy`` come from
``DISK_SIM_*`` environment variables (see ``disk_sim.config``).  Input
mistakes print ``Error: ...`` and exit with status 2 instead of a
traceback.
"""

import argparse
import sys
from collections.abc import Sequence

from disk_sim.config import SimulatorConfig, load_config
from disk_sim.disk import Direction
from disk_sim.engine import Policy, compare_all, simulate
from disk_sim.errors import DiskSchedulingError
from disk_sim.formatting import format_comparison, format_result, parse_int, parse_requests
from disk_sim.logging import Logger, LogLevel

EXIT_OK = 0
EXIT_BAD_INPUT = 2
ALL_POLICIES = "all"


def build_parser(config: SimulatorConfig) -> argparse.ArgumentParser:
    """Return the argument parser, with defaults taken from *config*."""
    parser = argparse.ArgumentParser(
        prog="disk-sim",
        description="Simulate disk-head scheduling and report seek statistics.",
    )
    parser.add_argument(
        "--requests",
        required=True,
        help="Comma-separated track numbers, in arrival order.",
    )
    parser.add_argument("--head", required=True, help="Initial head position.")
    parser.add_argument(
        "--disk-size",
        default=str(config.disk_size),
        help=f"Number of tracks (default {config.disk_size}).",
    )
    parser.add_argument(
        "--policy",
        default=config.policy.value,
        help=f"One of {', '.join(Policy)} or '{ALL_POLICIES}' (default {config.policy}).",
    )
    parser.add_argument(
        "--direction",
        default=config.direction.value,
        choices=[d.value for d in Direction],
        help="Initial sweep direction for SCAN and C-SCAN.",
    )
    parser.add_argument(
        "--show-path",
        action="store_true",
        help="Also print every position the head visits.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print the simulation log after the results.",
    )
    return parser


def run(argv: Sequence[str] | None = None) -> tuple[int, str]:
    """Parse *argv*, run the simulation, and return (exit code, output).

    Kept free of printing so it can be tested directly.
    """
    try:
        config = load_config()
    except DiskSchedulingError as exc:
        return EXIT_BAD_INPUT, f"Error: {exc}"

    args = build_parser(config).parse_args(argv)
    logger = Logger()
    try:
        requests = parse_requests(args.requests)
        head = parse_int(args.head, field="head")
        disk_size = parse_int(args.disk_size, field="disk size")
        direction = Direction.parse(args.direction)
        if args.policy.strip().lower() == ALL_POLICIES:
            results = compare_all(requests, head, disk_size, direction=direction, logger=logger)
            output = format_comparison(results, show_order=args.show_path)
        else:
            result = simulate(
                requests, head, disk_size, args.policy, direction=direction, logger=logger
            )
            output = format_result(result, show_order=args.show_path)
    except DiskSchedulingError as exc:
        return EXIT_BAD_INPUT, f"Error: {exc}"

    if args.verbose and len(logger):
        output = f"{output}\n\n{logger.render(min_level=LogLevel.DEBUG)}"
    return EXIT_OK, output


def main(argv: Sequence[str] | None = None) -> None:
    """Run the command line and exit with its status.

    This is the ``disk-sim`` console entry point.
    """
    code, output = run(argv)
    stream = sys.stdout if code == EXIT_OK else sys.stderr
    print(output, file=stream)  # noqa: T201
    sys.exit(code)
