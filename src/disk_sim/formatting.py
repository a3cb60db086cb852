"""Text in, text out — parsing user input and rendering results.

The engine only deals in integers and ``SimulationResult`` objects.
The front ends (command line and web) deal in strings.  This module
sits between them:

- ``parse_requests`` turns ``"98, 183, 37"`` into ``[98, 183, 37]``.
- ``parse_int`` does the same for a single field such as the head.
- ``format_result`` renders one result as a four-line block.
- ``format_comparison`` renders a list of results and names the winner.

Everything here is pure and returns strings, so it is testable without
a terminal or a browser.
"""

import math
from collections.abc import Sequence

from disk_sim.errors import EmptyRequestSetError, InvalidInputError
from disk_sim.stats import SimulationResult

UNDEFINED = "undefined"


def parse_int(text: str, *, field: str) -> int:
    """Parse a single integer field.

    Args:
        text: The raw text, surrounding whitespace allowed.
        field: Human-readable field name for the error message.

    Raises:
        InvalidInputError: If *text* is not an integer.

    """
    stripped = text.strip()
    try:
        return int(stripped)
    except ValueError:
        msg = f"{field} must be an integer, got '{stripped}'"
        raise InvalidInputError(msg) from None


def parse_requests(text: str) -> list[int]:
    """Parse a comma-separated list of track numbers.

    Raises:
        EmptyRequestSetError: If *text* holds no tokens at all.
        InvalidInputError: If any token is not an integer.

    """
    if not text.strip():
        msg = "No disk requests given"
        raise EmptyRequestSetError(msg)
    return [parse_int(token, field="request") for token in text.split(",")]


def _format_throughput(value: float) -> str:
    """Return throughput with four decimals, or ``undefined``."""
    if math.isinf(value):
        return UNDEFINED
    return f"{value:.4f}"


def format_result(result: SimulationResult, *, show_order: bool = False) -> str:
    """Render one result as a block of ``Label: value`` lines."""
    lines = [
        f"Algorithm: {result.algorithm}",
        f"Total Seek Time: {result.total_seek_time}",
        f"Average Seek Time: {result.average_seek_time:.2f}",
        f"Throughput: {_format_throughput(result.throughput)}",
    ]
    if show_order:
        route = " -> ".join(str(p) for p in (result.head, *result.path))
        lines.append(f"Head Path: {route}")
    return "\n".join(lines)


def best_result(results: Sequence[SimulationResult]) -> SimulationResult | None:
    """Return the result with the lowest total seek time (first wins ties)."""
    if not results:
        return None
    return min(results, key=lambda r: r.total_seek_time)


def format_comparison(results: Sequence[SimulationResult], *, show_order: bool = False) -> str:
    """Render several results separated by blank lines, then the winner."""
    blocks = [format_result(r, show_order=show_order) for r in results]
    best = best_result(results)
    if best is not None and best.request_count > 0:
        blocks.append(f"Lowest Total Seek Time: {best.algorithm} ({best.total_seek_time})")
    return "\n\n".join(blocks)
