"""DiskSim — a disk-head scheduling simulator.

Given a queue of track requests, a starting head position, and a disk
size, the engine works out how far the disk arm travels under four
classic policies and derives simple statistics from that distance.

Re-exports public symbols so callers can write::

    from disk_sim import Policy, simulate, compare_all
"""

from disk_sim.disk import (
    CSCANPolicy,
    Direction,
    DiskPolicy,
    FCFSPolicy,
    SCANPolicy,
    ServiceTrace,
    SSTFPolicy,
)
from disk_sim.engine import Policy, compare_all, simulate
from disk_sim.errors import DiskSchedulingError, EmptyRequestSetError, InvalidInputError
from disk_sim.stats import SimulationResult, derive_stats

__all__ = [
    "CSCANPolicy",
    "Direction",
    "DiskPolicy",
    "DiskSchedulingError",
    "EmptyRequestSetError",
    "FCFSPolicy",
    "InvalidInputError",
    "Policy",
    "SCANPolicy",
    "SSTFPolicy",
    "ServiceTrace",
    "SimulationResult",
    "compare_all",
    "derive_stats",
    "simulate",
]
