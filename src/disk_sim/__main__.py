"""Allow ``python -m disk_sim``."""

from disk_sim.cli import main

main()
