"""Browser-based web UI for file-console.

This package provides a Flask application that exposes the console
through a web browser.  It is an **optional** extra — install with::

    pip install file-console[web]

The ``create_app`` factory in ``app.py`` creates a persistent-handle
console and serves four endpoints:

- ``GET /`` — HTML page with the menu.
- ``POST /api/execute`` — execute a menu choice and return JSON.
- ``GET /api/status`` — target file and handle state.
- ``GET /api/log`` — the console's audit log.
"""
