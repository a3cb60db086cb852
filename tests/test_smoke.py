"""Smoke test to verify the project is set up correctly."""

from disk_sim import __doc__, simulate


def test_package_is_importable() -> None:
    """Verify that disk_sim can be imported."""
    assert __doc__ is not None


def test_top_level_simulate() -> None:
    """The package re-exports the engine entry point."""
    assert simulate([1], 0, 10, "FCFS").total_seek_time == 1
