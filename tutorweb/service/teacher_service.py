"""The teacher service: a JSON API over the teacher and course tables."""

from __future__ import annotations

import argparse
import os
from collections.abc import Sequence

from dotenv import find_dotenv, load_dotenv
from flask import Flask

from tutorweb.service.routers import STATE_KEY, course_routes, general_routes, teacher_routes
from tutorweb.service.state import AppState, create_pool

HEALTH_CHECK_RESPONSE = "I'm OK."


def create_app(state: AppState) -> Flask:
    """Build the service application around the given state."""
    app = Flask(__name__)
    app.extensions[STATE_KEY] = state
    general_routes(app)
    course_routes(app)
    teacher_routes(app)
    return app


def main(argv: Sequence[str] | None = None) -> None:
    """Read the database URL from the environment or a .env file and serve."""
    parser = argparse.ArgumentParser(description="Serve the teacher and course API.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=3000)
    args = parser.parse_args(argv)

    load_dotenv(find_dotenv(usecwd=True))
    db_url = os.environ.get("DATABASE_URL")
    if not db_url:
        raise RuntimeError("DATABASE_URL is not set in .env file")

    state = AppState(health_check_response=HEALTH_CHECK_RESPONSE, db=create_pool(db_url))
    create_app(state).run(host=args.host, port=args.port)