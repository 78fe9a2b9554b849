"""URL routes of the web front end."""

from __future__ import annotations

import html
import os
from pathlib import Path
from urllib.parse import quote

from flask import Flask, Response, abort, current_app, jsonify, request, send_from_directory

from tutorweb.webapp import handlers
from tutorweb.webapp.errors import WebAppError
from tutorweb.webapp.models import TeacherRegisterForm

TEMPLATES_KEY = "TUTORWEB_TEMPLATES"
STATIC_DIR_KEY = "TUTORWEB_STATIC_DIR"
SERVICE_URL_KEY = "TUTORWEB_SERVICE_URL"


def _html(body: str) -> Response:
    return Response(body, content_type="text/html")


def _service_url() -> str:
    return current_app.config.get(SERVICE_URL_KEY, handlers.SERVICE_URL)


def _teachers() -> Response:
    return _html(handlers.get_all_teachers(current_app.config[TEMPLATES_KEY], _service_url()))


def _register_form() -> Response:
    return _html(handlers.show_register_form(current_app.config[TEMPLATES_KEY]))


def _register_post() -> Response:
    try:
        form = TeacherRegisterForm.from_dict(request.form.to_dict())
    except ValueError as err:
        return Response(str(err), status=400, content_type="text/plain")
    return _html(handlers.handle_register(current_app.config[TEMPLATES_KEY], form, _service_url()))


def _listing(base: str, directory: Path) -> str:
    if not base.endswith("/"):
        base += "/"
    items = []
    for entry in sorted(directory.iterdir(), key=lambda p: p.name):
        name = entry.name + ("/" if entry.is_dir() else "")
        items.append(f'<li><a href="{html.escape(base + quote(name))}">{html.escape(name)}</a></li>')
    title = html.escape(base)
    return (
        f'<html><head><meta charset="utf-8"><title>Index of {title}</title></head>'
        f"<body><h1>Index of {title}</h1><ul>{''.join(items)}</ul></body>\n</html>"
    )


def _static(filename: str) -> Response:
    root = Path(os.fspath(current_app.config[STATIC_DIR_KEY])).resolve()
    target = (root / filename).resolve()
    if target != root and root not in target.parents:
        abort(404)
    if target.is_dir():
        return _html(_listing(request.path, target))
    if target.is_file():
        return send_from_directory(root, filename)
    abort(404)


def _webapp_error(err: WebAppError):
    body, status = err.to_response()
    return jsonify(body), status


def app_config(app: Flask) -> None:
    """Add the page routes, the static file routes and the error handler."""
    app.add_url_rule("/static/", "static_index", _static, defaults={"filename": ""}, methods=["GET"])
    app.add_url_rule("/static/<path:filename>", "static_files", _static, methods=["GET"])
    app.add_url_rule("/", "teachers", _teachers, methods=["GET"])
    app.add_url_rule("/register", "register", _register_form, methods=["GET"])
    app.add_url_rule("/register-post", "register_post", _register_post, methods=["POST"])
    app.register_error_handler(WebAppError, _webapp_error)