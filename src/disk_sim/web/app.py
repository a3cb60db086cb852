"""Flask application factory for the DiskSim web UI.

The ``create_app`` function loads the simulator config, creates a
simulation log, and returns a Flask app with four endpoints:

- ``GET /`` — render the form page.
- ``GET /api/policies`` — return the policy names and defaults.
- ``POST /api/simulate`` — run a simulation and return JSON.
- ``GET /api/log`` — return the most recent log entries.
"""

from __future__ import annotations

from typing import Any

from flask import Flask, Response, jsonify, render_template, request

from disk_sim.config import SimulatorConfig, load_config
from disk_sim.disk import Direction
from disk_sim.engine import Policy, compare_all, simulate
from disk_sim.errors import DiskSchedulingError, InvalidInputError
from disk_sim.formatting import parse_int, parse_requests
from disk_sim.logging import Logger

_HTTP_BAD_REQUEST = 400
_ALL_POLICIES = "all"
LOG_CAPACITY = 200


def _field_int(data: dict[str, Any], key: str, default: int | None = None) -> int:
    """Return an integer field from a JSON body, accepting numeric strings."""
    value = data.get(key, default)
    if value is None:
        msg = f"Missing '{key}' field"
        raise InvalidInputError(msg)
    if isinstance(value, str):
        return parse_int(value, field=key)
    return value


def _field_requests(data: dict[str, Any]) -> list[int]:
    """Return the request list from a JSON body (list or comma-separated text)."""
    value = data.get("requests")
    if value is None:
        msg = "Missing 'requests' field"
        raise InvalidInputError(msg)
    if isinstance(value, str):
        return parse_requests(value)
    if not isinstance(value, list):
        msg = "'requests' must be a list or comma-separated string"
        raise InvalidInputError(msg)
    return value


def create_app(config: SimulatorConfig | None = None) -> Flask:
    """Create and configure the Flask application.

    Args:
        config: Defaults for omitted fields; read from the environment
            when not given.

    Returns:
        A configured Flask application ready to serve.

    """
    settings = config if config is not None else load_config()
    logger = Logger(capacity=LOG_CAPACITY)

    app = Flask(__name__)

    @app.route("/")
    def index() -> str:  # pyright: ignore[reportUnusedFunction]
        """Render the form page."""
        return render_template(
            "index.html",
            policies=[p.value for p in Policy],
            directions=[d.value for d in Direction],
            config=settings,
        )

    @app.route("/api/policies")
    def policies() -> Response:  # pyright: ignore[reportUnusedFunction]
        """Return policy names in display order, plus the defaults."""
        return jsonify(
            {
                "policies": [p.value for p in Policy],
                "default_policy": settings.policy.value,
                "default_direction": settings.direction.value,
                "default_disk_size": settings.disk_size,
            }
        )

    @app.route("/api/simulate", methods=["POST"])
    def run_simulation() -> tuple[Response, int] | Response:  # pyright: ignore[reportUnusedFunction]
        """Run one policy, or all of them, and return JSON results.

        Expects JSON body::

            {"requests": [...], "head": 53, "disk_size": 200,
             "policy": "SCAN", "direction": "up"}

        ``disk_size``, ``policy`` and ``direction`` fall back to the
        config defaults.  ``policy: "all"`` returns ``results`` (a list);
        otherwise ``result``.

        """
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify({"error": "Expected a JSON object"}), _HTTP_BAD_REQUEST

        try:
            requests = _field_requests(data)
            head = _field_int(data, "head")
            disk_size = _field_int(data, "disk_size", settings.disk_size)
            direction = Direction.parse(data.get("direction", settings.direction))
            policy = str(data.get("policy", settings.policy))
            if policy.strip().lower() == _ALL_POLICIES:
                results = compare_all(requests, head, disk_size, direction=direction, logger=logger)
                return jsonify({"results": [r.to_dict() for r in results]})
            result = simulate(requests, head, disk_size, policy, direction=direction, logger=logger)
        except DiskSchedulingError as exc:
            return jsonify({"error": str(exc)}), _HTTP_BAD_REQUEST

        return jsonify({"result": result.to_dict()})

    @app.route("/api/log")
    def log() -> Response:  # pyright: ignore[reportUnusedFunction]
        """Return the newest log entries, at most ``LOG_CAPACITY`` of them."""
        return jsonify({"entries": [e.to_dict() for e in logger.entries]})

    return app


def main() -> None:
    """Run the web UI development server.

    This is the ``disk-sim-web`` console entry point.
    """
    app = create_app()
    app.run(debug=True, port=8080)
