"""The web front end: pages listing and registering teachers."""

from __future__ import annotations

import argparse
import os
from collections.abc import Sequence
from pathlib import Path

import jinja2
from dotenv import find_dotenv, load_dotenv
from flask import Flask

from tutorweb.webapp.handlers import SERVICE_URL
from tutorweb.webapp.routers import SERVICE_URL_KEY, STATIC_DIR_KEY, TEMPLATES_KEY, app_config


def create_app(
    template_dir: str | os.PathLike[str],
    static_dir: str | os.PathLike[str],
    service_url: str = SERVICE_URL,
) -> Flask:
    """Build the front end with templates, static files and the service address."""
    app = Flask(__name__, static_folder=None)
    app.config[TEMPLATES_KEY] = jinja2.Environment(
        loader=jinja2.FileSystemLoader(os.fspath(template_dir)),
        autoescape=jinja2.select_autoescape(["html", "htm", "xml"]),
    )
    app.config[STATIC_DIR_KEY] = Path(static_dir)
    app.config[SERVICE_URL_KEY] = service_url
    app_config(app)
    return app


def _parse_host_port(value: str) -> tuple[str, int]:
    host, sep, port = value.rpartition(":")
    if not sep or not host or not port.isdigit():
        raise ValueError(f"HOST_PORT must look like host:port, got {value!r}")
    number = int(port)
    if number > 65535:
        raise ValueError(f"port {number} is out of range")
    return host.strip("[]"), number


def main(argv: Sequence[str] | None = None) -> None:
    """Read HOST_PORT from the environment or a .env file and serve the pages."""
    parser = argparse.ArgumentParser(description="Serve the teacher web pages.")
    parser.add_argument("--static-dir", default="static")
    parser.add_argument("--template-dir", default=None)
    parser.add_argument("--service-url", default=SERVICE_URL)
    args = parser.parse_args(argv)

    load_dotenv(find_dotenv(usecwd=True))
    host_port = os.environ.get("HOST_PORT")
    if not host_port:
        raise RuntimeError("HOST_PORT is not set in .env file")
    host, port = _parse_host_port(host_port)
    print(f"Listening on {host_port}")

    template_dir = args.template_dir if args.template_dir is not None else args.static_dir
    create_app(template_dir, args.static_dir, args.service_url).run(host=host, port=port)