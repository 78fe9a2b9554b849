"""Page handlers of the web front end."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any

import jinja2
import requests

from tutorweb.webapp.errors import ServerError, TemplateError
from tutorweb.webapp.models import TeacherRegisterForm, TeacherResponse

SERVICE_URL = "http://localhost:3000"
TAKEN_NAME = "Dave"

_TIMEOUT = 30


def _teachers_url(service_url: str) -> str:
    return service_url.rstrip("/") + "/teachers/"


def _render(
    templates: jinja2.Environment,
    name: str,
    context: Mapping[str, Any],
    message: str | None = None,
) -> str:
    try:
        return templates.get_template(name).render(context)
    except jinja2.TemplateError as err:
        raise TemplateError(message if message is not None else str(err)) from err


def get_all_teachers(templates: jinja2.Environment, service_url: str = SERVICE_URL) -> str:
    """Fetch every teacher from the service and render the teacher list page."""
    try:
        response = requests.get(_teachers_url(service_url), timeout=_TIMEOUT)
        data = response.json()
    except (requests.RequestException, ValueError) as err:
        raise ServerError(str(err)) from err
    if not isinstance(data, list):
        raise ServerError("expected a list of teachers from the service")
    try:
        teachers = [TeacherResponse.from_dict(item) for item in data]
    except ValueError as err:
        raise ServerError(str(err)) from err

    context = {"error": "", "teachers": [teacher.to_dict() for teacher in teachers]}
    return _render(templates, "teachers.html", context, "Template error")


def show_register_form(templates: jinja2.Environment) -> str:
    """Render an empty registration form."""
    context = {
        "error": "",
        "current_name": "",
        "current_picture_url": "",
        "current_profile": "",
    }
    return _render(templates, "register.html", context, "Template error")


def handle_register(
    templates: jinja2.Environment,
    form: TeacherRegisterForm,
    service_url: str = SERVICE_URL,
) -> str:
    """Register a teacher with the service, or show the form again if the name is taken."""
    if form.name == TAKEN_NAME:
        context = {
            "error": f"{TAKEN_NAME} already exists!",
            "current_name": form.name,
            "current_picture_url": form.picture_url,
            "current_profile": form.profile,
        }
        return _render(templates, "register.html", context)

    try:
        response = requests.post(
            _teachers_url(service_url), json=dataclasses.asdict(form), timeout=_TIMEOUT
        )
        message = response.json()
    except (requests.RequestException, ValueError) as err:
        raise ServerError(str(err)) from err
    if not isinstance(message, str):
        raise ServerError("expected a message string from the service")
    return f"Message from Web Server: {message}"