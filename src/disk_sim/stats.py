"""Simulation results and the statistics derived from seek time.

Two numbers summarise a run besides the raw distance:

- **Average seek time** — distance per request (``total / count``).
- **Throughput** — requests per unit of distance (``count / total``).
  This is an inverse-cost measure for comparing policies, not a
  real-world I/O rate.

Both divisions can hit zero, so the degenerate cases get fixed values:

- No requests at all → average 0.0 and throughput 0.0.
- Requests but no movement (every request sits under the head) →
  average 0.0 and throughput ``math.inf``.
"""

import math
from dataclasses import dataclass, replace

from disk_sim.disk import ServiceTrace


@dataclass(frozen=True)
class SimulationResult:
    """Outcome of one policy run over one request set.

    Immutable: a result describes a run that has already happened.
    """

    algorithm: str
    request_count: int
    total_seek_time: int
    average_seek_time: float
    throughput: float
    head: int
    order: tuple[int, ...] = ()
    path: tuple[int, ...] = ()

    @property
    def zero_seek(self) -> bool:
        """Return True if requests were serviced without moving the arm."""
        return self.request_count > 0 and self.total_seek_time == 0

    @property
    def final_head(self) -> int:
        """Return where the arm rests after the run."""
        return self.path[-1] if self.path else self.head

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly view; infinite throughput becomes ``None``."""
        return {
            "algorithm": self.algorithm,
            "request_count": self.request_count,
            "total_seek_time": self.total_seek_time,
            "average_seek_time": self.average_seek_time,
            "throughput": None if math.isinf(self.throughput) else self.throughput,
            "head": self.head,
            "order": list(self.order),
            "path": list(self.path),
        }


def derive_stats(
    algorithm: str,
    request_count: int,
    total_seek_time: int,
    *,
    head: int,
) -> SimulationResult:
    """Build a result from a policy name, request count, and total distance.

    The result carries no route, so its ``final_head`` is *head*.

    Args:
        algorithm: Display name of the policy.
        request_count: How many requests were serviced.
        total_seek_time: Total head movement in tracks.
        head: Where the arm started.

    Returns:
        A result with average seek time and throughput filled in.

    """
    if request_count == 0:
        average = 0.0
        throughput = 0.0
    elif total_seek_time == 0:
        average = 0.0
        throughput = math.inf
    else:
        average = total_seek_time / request_count
        throughput = request_count / total_seek_time
    return SimulationResult(
        algorithm=algorithm,
        request_count=request_count,
        total_seek_time=total_seek_time,
        average_seek_time=average,
        throughput=throughput,
        head=head,
    )


def result_from_trace(algorithm: str, trace: ServiceTrace) -> SimulationResult:
    """Build a full result, including the route, from a service trace."""
    stats = derive_stats(algorithm, len(trace.order), trace.total_seek_time, head=trace.head)
    return replace(stats, order=trace.order, path=trace.path)
