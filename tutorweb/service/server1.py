"""A minimal service that only answers health checks."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from flask import Flask, jsonify

HEALTH_MESSAGE = "Web Service is running!"


def health_check_handler() -> str:
    """The fixed health check reply."""
    return HEALTH_MESSAGE


def create_app() -> Flask:
    """Build the application with its single health route."""
    app = Flask(__name__)

    @app.get("/health")
    def _health():
        return jsonify(health_check_handler())

    return app


def main(argv: Sequence[str] | None = None) -> None:
    """Serve the health check."""
    parser = argparse.ArgumentParser(description="Serve a health check.")
    parser.add_argument("--host", default="localhost")
    parser.add_argument("--port", type=int, default=3000)
    args = parser.parse_args(argv)
    create_app().run(host=args.host, port=args.port)