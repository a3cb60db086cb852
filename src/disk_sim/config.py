"""Simulator configuration — defaults read from environment variables.

The command line and web front ends take their defaults from
``DISK_SIM_*`` variables:

- ``DISK_SIM_DISK_SIZE`` — number of tracks (default 200).
- ``DISK_SIM_DIRECTION`` — initial sweep direction, ``up`` or ``down``.
- ``DISK_SIM_POLICY`` — policy to run when none is given (default FCFS).

``SimulatorConfig.from_environment`` reads any string mapping, so tests
pass a plain dict while ``load_config`` passes ``os.environ``.
Unset variables fall back to the defaults; malformed ones are an
input error rather than a silent fallback.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass

from disk_sim.disk import Direction
from disk_sim.engine import Policy
from disk_sim.errors import InvalidInputError

ENV_PREFIX = "DISK_SIM_"
DEFAULT_DISK_SIZE = 200


def _disk_size(raw: str | None) -> int:
    """Return the configured track count, or the default when unset."""
    if raw is None:
        return DEFAULT_DISK_SIZE
    try:
        size = int(raw.strip())
    except ValueError:
        msg = f"{ENV_PREFIX}DISK_SIZE must be an integer, got '{raw}'"
        raise InvalidInputError(msg) from None
    if size <= 0:
        msg = f"{ENV_PREFIX}DISK_SIZE must be positive, got {size}"
        raise InvalidInputError(msg)
    return size


@dataclass(frozen=True)
class SimulatorConfig:
    """Typed defaults for a simulation run."""

    disk_size: int = DEFAULT_DISK_SIZE
    direction: Direction = Direction.UP
    policy: Policy = Policy.FCFS

    @classmethod
    def from_environment(cls, env: Mapping[str, str]) -> "SimulatorConfig":
        """Build a config from the ``DISK_SIM_*`` keys of *env*.

        Raises:
            InvalidInputError: If a variable is set to a value that
                cannot be parsed.

        """
        return cls(
            disk_size=_disk_size(env.get(f"{ENV_PREFIX}DISK_SIZE")),
            direction=Direction.parse(env.get(f"{ENV_PREFIX}DIRECTION", Direction.UP)),
            policy=Policy.parse(env.get(f"{ENV_PREFIX}POLICY", Policy.FCFS)),
        )


def load_config() -> SimulatorConfig:
    """Return the config described by the current process environment."""
    return SimulatorConfig.from_environment(os.environ)
