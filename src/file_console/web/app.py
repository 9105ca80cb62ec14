"""Flask application factory for the file-console web UI.

The ``create_app`` function creates a persistent-handle console and
returns a Flask app with four endpoints:

- ``GET /`` — render the HTML page with the menu.
- ``POST /api/execute`` — execute a menu choice and return JSON.
- ``GET /api/status`` — return target file and handle state.
- ``GET /api/log`` — return the console's audit log, optionally filtered.
"""

from __future__ import annotations

from pathlib import Path

from flask import Flask, Response, jsonify, render_template, request

from file_console import DEFAULT_PATH
from file_console.commands import Command, parse_command
from file_console.console import Console
from file_console.logging import LogLevel
from file_console.policies import HandlePolicy

_HTTP_BAD_REQUEST = 400
_HALTED = "Console has quit."


def create_app(path: Path | str = DEFAULT_PATH) -> Flask:
    """Create and configure the Flask application.

    Args:
        path: The target file the console operates on.

    Returns:
        A configured Flask application ready to serve.

    """
    console = Console(HandlePolicy(path))

    app = Flask(__name__)

    @app.route("/")
    def index() -> str:  # pyright: ignore[reportUnusedFunction]
        """Render the console HTML page."""
        return render_template("index.html", menu=console.menu, path=str(console.policy.path))

    @app.route("/api/execute", methods=["POST"])
    def execute() -> tuple[Response, int] | Response:  # pyright: ignore[reportUnusedFunction]
        """Execute a menu choice and return JSON output.

        Expects JSON body: ``{"command": "...", "line": "..."}``.
        ``line`` is required for Append and is written verbatim.

        Returns:
            JSON with ``output`` and ``halted`` fields.

        """
        data = request.get_json(silent=True)
        if not isinstance(data, dict) or not isinstance(data.get("command"), str):
            msg = "Expected a JSON object with a string 'command' field"
            return jsonify({"error": msg}), _HTTP_BAD_REQUEST

        if not console.running:
            return jsonify({"output": _HALTED, "halted": True})

        command: str = data["command"]
        line = data.get("line")
        if parse_command(command) is Command.APPEND and not isinstance(line, str):
            return jsonify({"error": "Missing 'line' field for append"}), _HTTP_BAD_REQUEST

        result = console.execute(command, read_line=lambda _prompt: line)
        if result == Console.EXIT_SENTINEL:
            return jsonify({"output": _HALTED, "halted": True})

        return jsonify({"output": result, "halted": False})

    @app.route("/api/status")
    def status() -> Response:  # pyright: ignore[reportUnusedFunction]
        """Return the target file and handle state.

        Returns:
            JSON with ``path``, ``exists``, ``open`` and ``halted`` fields.

        """
        target = console.policy.path
        return jsonify(
            {
                "path": str(target),
                "exists": target.exists(),
                "open": console.policy.has_handle,
                "halted": not console.running,
            }
        )

    @app.route("/api/log")
    def log() -> tuple[Response, int] | Response:  # pyright: ignore[reportUnusedFunction]
        """Return the console's audit log, oldest first.

        Optional query parameters narrow the result: ``min_level``
        (``INFO``, ``WARNING`` or ``ERROR``) and ``source``.
        """
        level_name = request.args.get("min_level")
        min_level = None
        if level_name is not None:
            try:
                min_level = LogLevel[level_name.upper()]
            except KeyError:
                return jsonify({"error": f"Unknown level '{level_name}'"}), _HTTP_BAD_REQUEST
        entries = console.logger.filter(min_level=min_level, source=request.args.get("source"))
        return jsonify({"entries": [str(entry) for entry in entries]})

    return app


def main() -> None:
    """Run the web UI development server.

    This is the ``file-console-web`` console entry point.
    """
    app = create_app()
    app.run(debug=True, port=8080)
