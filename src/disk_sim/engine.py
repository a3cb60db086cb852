"""Scheduling engine — one entry point for every policy.

``simulate`` takes a request list, a head position, a disk size, and a
``Policy`` and returns a ``SimulationResult``.  ``compare_all`` runs
every policy over the same input and returns the results in display
order (FCFS, SSTF, SCAN, C-SCAN).

The engine is a family of pure functions: each call builds a fresh
policy object, works on its own copy of the input, and keeps nothing
afterwards.  Calls can therefore run side by side from any number of
threads without coordination.
"""

from collections.abc import Callable, Sequence
from enum import StrEnum

from disk_sim.disk import CSCANPolicy, Direction, DiskPolicy, FCFSPolicy, SCANPolicy, SSTFPolicy
from disk_sim.errors import DiskSchedulingError, InvalidInputError
from disk_sim.logging import Logger, LogLevel
from disk_sim.stats import SimulationResult, result_from_trace


class Policy(StrEnum):
    """The closed set of scheduling policies, in display order."""

    FCFS = "FCFS"
    SSTF = "SSTF"
    SCAN = "SCAN"
    CSCAN = "C-SCAN"

    @classmethod
    def parse(cls, name: "Policy | str") -> "Policy":
        """Return the policy for *name*, ignoring case and hyphens.

        ``"c-scan"``, ``"CSCAN"`` and ``Policy.CSCAN`` all resolve to the
        same member.

        Raises:
            InvalidInputError: If *name* is not a known policy.

        """
        if isinstance(name, cls):
            return name
        key = str(name).strip().upper().replace("-", "").replace("_", "")
        for policy in cls:
            if policy.name == key:
                return policy
        msg = f"Unknown policy '{name}' (expected one of {', '.join(cls)})"
        raise InvalidInputError(msg)


_FACTORIES: dict[Policy, Callable[[Direction], DiskPolicy]] = {
    Policy.FCFS: lambda _direction: FCFSPolicy(),
    Policy.SSTF: lambda _direction: SSTFPolicy(),
    Policy.SCAN: lambda direction: SCANPolicy(direction=direction),
    Policy.CSCAN: lambda direction: CSCANPolicy(direction=direction),
}


def make_policy(policy: Policy | str, *, direction: Direction = Direction.UP) -> DiskPolicy:
    """Return a fresh strategy object for *policy*."""
    return _FACTORIES[Policy.parse(policy)](Direction.parse(direction))


def _check_int(value: object, *, what: str) -> int:
    """Return *value* if it is a plain integer, else raise."""
    # bool is an int subclass but never a track number
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"{what} must be an integer, got {value!r}"
        raise InvalidInputError(msg)
    return value


def simulate(
    requests: Sequence[int],
    head: int,
    disk_size: int,
    policy: Policy | str,
    *,
    direction: Direction = Direction.UP,
    logger: Logger | None = None,
) -> SimulationResult:
    """Run one policy over a request set.

    Args:
        requests: Track numbers in arrival order.  May be empty.
        head: Starting position of the disk head.
        disk_size: Number of tracks.  Only SCAN and C-SCAN consult it.
        policy: Which policy to run (member or name).
        direction: Initial sweep direction for SCAN and C-SCAN.
        logger: Optional log that receives one entry per run.

    Returns:
        The result of the run.

    Raises:
        InvalidInputError: If the policy is unknown, a value is not an
            integer, or (for SCAN and C-SCAN) the disk size or a
            position is out of range.

    """
    try:
        chosen = Policy.parse(policy)
        tracks = [_check_int(r, what="request") for r in requests]
        start = _check_int(head, what="head")
        size = _check_int(disk_size, what="disk size")
        trace = make_policy(chosen, direction=direction).trace(
            tracks, head=start, disk_size=size
        )
    except DiskSchedulingError as exc:
        if logger is not None:
            logger.log(LogLevel.ERROR, str(exc), source="engine")
        raise

    result = result_from_trace(chosen.value, trace)
    if logger is not None:
        _log_result(logger, result, source=chosen.value)
    return result


def compare_all(
    requests: Sequence[int],
    head: int,
    disk_size: int,
    *,
    direction: Direction = Direction.UP,
    logger: Logger | None = None,
) -> list[SimulationResult]:
    """Run every policy over the same input, in display order."""
    return [
        simulate(requests, head, disk_size, policy, direction=direction, logger=logger)
        for policy in Policy
    ]


def _log_result(logger: Logger, result: SimulationResult, *, source: str) -> None:
    """Record a finished run, flagging the degenerate cases."""
    if result.request_count == 0:
        logger.log(LogLevel.DEBUG, "no requests to service", source=source)
        return
    logger.log(
        LogLevel.INFO,
        f"serviced {result.request_count} requests from track {result.head}, "
        f"total seek {result.total_seek_time}",
        source=source,
    )
    if result.zero_seek:
        logger.log(
            LogLevel.WARNING,
            "all requests at the head; throughput is undefined",
            source=source,
        )
