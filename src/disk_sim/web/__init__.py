"""Browser-based web UI for DiskSim.

This package provides a Flask application that exposes the scheduling
engine over HTTP.  It is an **optional** extra — install with::

    pip install disk-sim[web]

The ``create_app`` factory in ``app.py`` serves four endpoints:

- ``GET /`` — HTML page with the request form.
- ``GET /api/policies`` — policy names in display order.
- ``POST /api/simulate`` — run one policy (or ``"all"``) and return JSON.
- ``GET /api/log`` — the newest entries of the app's simulation log.
"""
