"""Seek-time scheduling for a batch of track requests.

A policy takes the request list, the starting head position and the
number of tracks on the disk, and returns a ``ServiceTrace``.  The
trace records the order requests were serviced in and the full route
of the arm.  The route also holds stops that serve no request: the
edge SCAN bounces off, and the edge and wrap target of C-SCAN.  Seek
time is the sum of hops along that route, so edge travel is charged
without any policy counting distance itself.

Policies:
    - ``FCFSPolicy`` services in arrival order.
    - ``SSTFPolicy`` always moves to the closest pending request; ties
      go to the earlier arrival.
    - ``SCANPolicy`` sweeps one way, runs on to the edge only if
      requests remain behind the head, then sweeps back.
    - ``CSCANPolicy`` sweeps one way, runs to the edge and wraps to
      the opposite edge, then sweeps the same way again.

``disk_size`` makes the valid tracks ``0..disk_size-1``.  FCFS and
SSTF ignore it.  The sweep policies need it to place the edges, and
reject a non-positive size or a head or request off the disk with
``InvalidInputError``.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import Protocol

from disk_sim.errors import InvalidInputError


class Direction(StrEnum):
    """Initial sweep direction for SCAN and C-SCAN.

    ``UP`` heads for the far edge (``disk_size - 1``) first; ``DOWN``
    heads for track 0 first.
    """

    UP = "up"
    DOWN = "down"

    @classmethod
    def parse(cls, value: "Direction | str") -> "Direction":
        """Return the direction for *value*, ignoring case.

        Raises:
            InvalidInputError: If *value* is neither up nor down.

        """
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            msg = f"Unknown direction '{value}' (expected up or down)"
            raise InvalidInputError(msg) from None


@dataclass(frozen=True)
class ServiceTrace:
    """The route the disk arm takes through one batch of requests.

    Attributes:
        head: Where the arm started.
        order: Serviced requests, in service order.
        path: Every position visited after ``head``, in order.  Edge
            stops (the SCAN bounce, the C-SCAN edge and wrap target)
            appear here but not in ``order``.

    """

    head: int
    order: tuple[int, ...]
    path: tuple[int, ...]

    @property
    def total_seek_time(self) -> int:
        """Return the sum of distances between consecutive positions."""
        total = 0
        current = self.head
        for position in self.path:
            total += abs(position - current)
            current = position
        return total

    @property
    def final_head(self) -> int:
        """Return where the arm rests once the batch is done."""
        return self.path[-1] if self.path else self.head


class DiskPolicy(Protocol):
    """Protocol for disk scheduling policies (Strategy pattern)."""

    name: str

    def trace(self, requests: Sequence[int], *, head: int, disk_size: int) -> ServiceTrace:
        """Return the route the arm takes to service every request.

        Args:
            requests: Track numbers, in arrival order.
            head: Current position of the disk head.
            disk_size: Number of tracks; valid tracks are ``0..disk_size-1``.

        Returns:
            The service trace for this batch.

        """
        ...


class FCFSPolicy:
    """First Come, First Served: the route is the arrival order.

    Every stop in the path is a request, so the trace never holds an
    edge point.  ``disk_size`` plays no part and tracks are taken as
    given, even when they lie off the disk.
    """

    name = "FCFS"

    def trace(
        self,
        requests: Sequence[int],
        *,
        head: int,
        disk_size: int,  # noqa: ARG002
    ) -> ServiceTrace:
        """Return requests in their original order."""
        order = tuple(requests)
        return ServiceTrace(head=head, order=order, path=order)


class SSTFPolicy:
    """Shortest Seek Time First — always go to the nearest request.

    A greedy algorithm that minimises immediate seek time.  Produces
    better total movement than FCFS, but can **starve** distant
    requests if new requests keep arriving near the head.

    When two pending requests are equally close, the one that arrived
    first (lowest index in the input) wins.  ``min`` over the pending
    indices in arrival order gives exactly that, because it keeps the
    first minimum it sees.
    """

    name = "SSTF"

    def trace(
        self,
        requests: Sequence[int],
        *,
        head: int,
        disk_size: int,  # noqa: ARG002
    ) -> ServiceTrace:
        """Return requests ordered by nearest-first from current head."""
        pending = list(range(len(requests)))
        order: list[int] = []
        current = head
        while pending:
            nearest = min(pending, key=lambda i: abs(requests[i] - current))
            pending.remove(nearest)
            current = requests[nearest]
            order.append(current)
        return ServiceTrace(head=head, order=tuple(order), path=tuple(order))


class _SweepPolicy:
    """Shared partitioning and bounds checking for SCAN and C-SCAN."""

    name = ""

    def __init__(self, *, direction: Direction = Direction.UP) -> None:
        """Create a sweep policy with an initial direction."""
        self._direction = Direction.parse(direction)

    @property
    def direction(self) -> Direction:
        """Return the initial sweep direction."""
        return self._direction

    def _check_bounds(self, requests: Sequence[int], *, head: int, disk_size: int) -> None:
        """Reject a disk size or positions the sweep cannot make sense of.

        Raises:
            InvalidInputError: If ``disk_size`` is not positive, or the
                head or any request lies outside ``0..disk_size-1``.

        """
        if disk_size <= 0:
            msg = f"{self.name}: disk size must be positive, got {disk_size}"
            raise InvalidInputError(msg)
        if not 0 <= head < disk_size:
            msg = f"{self.name}: head {head} is outside tracks 0..{disk_size - 1}"
            raise InvalidInputError(msg)
        for track in requests:
            if not 0 <= track < disk_size:
                msg = f"{self.name}: request {track} is outside tracks 0..{disk_size - 1}"
                raise InvalidInputError(msg)

    def _split(self, requests: Sequence[int], *, head: int) -> tuple[list[int], list[int]]:
        """Return (first sweep, return leg), both sorted ascending.

        Requests sitting exactly at the head belong to the first sweep.
        """
        if self._direction is Direction.UP:
            first = sorted(r for r in requests if r >= head)
            rest = sorted(r for r in requests if r < head)
            return first, rest
        first = sorted(r for r in requests if r <= head)
        rest = sorted(r for r in requests if r > head)
        return first, rest


class SCANPolicy(_SweepPolicy):
    """SCAN: serve everything in the sweep direction, then reverse.

    When requests remain behind the head, the path gains one stop at
    the edge being approached (``disk_size - 1`` going up, ``0`` going
    down) before the arm turns back.  With nothing behind the head the
    arm halts at the last request and no edge appears.  A request at
    the head is served on the first sweep.

    Args:
        direction: Initial sweep direction.

    Raises:
        InvalidInputError: From ``trace``, when the disk size is not
            positive or a position lies off the disk.

    """

    name = "SCAN"

    def trace(self, requests: Sequence[int], *, head: int, disk_size: int) -> ServiceTrace:
        """Return requests in SCAN (elevator) order."""
        self._check_bounds(requests, head=head, disk_size=disk_size)
        first, rest = self._split(requests, head=head)

        if self._direction is Direction.UP:
            sweep, edge, back = first, disk_size - 1, rest[::-1]
        else:
            sweep, edge, back = first[::-1], 0, rest

        path = list(sweep)
        if back:
            path.append(edge)
            path.extend(back)
        return ServiceTrace(head=head, order=tuple(sweep + back), path=tuple(path))


class CSCANPolicy(_SweepPolicy):
    """C-SCAN: serve in one direction only, wrapping around the disk.

    Requests behind the head are picked up after the arm runs to the
    edge and jumps to the opposite edge.  Both points enter the path,
    so the jump costs its full ``disk_size - 1`` tracks.  If nothing
    lies behind the head, the arm halts at the last request.

    Args:
        direction: Sweep direction.

    Raises:
        InvalidInputError: From ``trace``, when the disk size is not
            positive or a position lies off the disk.

    """

    name = "C-SCAN"

    def trace(self, requests: Sequence[int], *, head: int, disk_size: int) -> ServiceTrace:
        """Return requests in C-SCAN order."""
        self._check_bounds(requests, head=head, disk_size=disk_size)
        first, rest = self._split(requests, head=head)

        if self._direction is Direction.UP:
            sweep, edge, wrap, wrapped = first, disk_size - 1, 0, rest
        else:
            sweep, edge, wrap, wrapped = first[::-1], 0, disk_size - 1, rest[::-1]

        path = list(sweep)
        if wrapped:
            path.extend((edge, wrap))
            path.extend(wrapped)
        return ServiceTrace(head=head, order=tuple(sweep + wrapped), path=tuple(path))
