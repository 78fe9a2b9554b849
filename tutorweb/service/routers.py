"""URL routes of the teacher service."""

from __future__ import annotations

from typing import Any

from flask import Blueprint, Flask, current_app, jsonify, request

from tutorweb.service.errors import ServiceError
from tutorweb.service.handlers import course, general, teacher
from tutorweb.service.state import AppState

STATE_KEY = "tutorweb.state"


def _state() -> AppState:
    return current_app.extensions[STATE_KEY]


def _payload() -> Any:
    return request.get_json(silent=True)


def _service_error(err: ServiceError):
    body, status = err.to_response()
    return jsonify(body), status


_general = Blueprint("general", __name__)
_courses = Blueprint("courses", __name__, url_prefix="/courses")
_teachers = Blueprint("teachers", __name__, url_prefix="/teachers")

for _blueprint in (_general, _courses, _teachers):
    _blueprint.register_error_handler(ServiceError, _service_error)


@_general.get("/health")
def _health():
    return jsonify(general.health_check_handler(_state()))


@_courses.post("/")
def _post_course():
    return jsonify(course.post_new_course(_state(), _payload()))


@_courses.get("/<int(signed=True):teacher_id>")
def _list_courses(teacher_id: int):
    return jsonify(course.get_courses_for_teacher(_state(), teacher_id))


@_courses.get("/<int(signed=True):teacher_id>/<int(signed=True):course_id>")
def _get_course(teacher_id: int, course_id: int):
    return jsonify(course.get_course_detail(_state(), teacher_id, course_id))


@_courses.delete("/<int(signed=True):teacher_id>/<int(signed=True):course_id>")
def _delete_course(teacher_id: int, course_id: int):
    return jsonify(course.delete_course(_state(), teacher_id, course_id))


@_courses.put("/<int(signed=True):teacher_id>/<int(signed=True):course_id>")
def _update_course(teacher_id: int, course_id: int):
    return jsonify(course.update_course_detail(_state(), _payload(), teacher_id, course_id))


@_teachers.post("/")
def _post_teacher():
    return jsonify(teacher.post_new_teacher(_state(), _payload()))


@_teachers.get("/")
def _list_teachers():
    return jsonify(teacher.get_all_teachers(_state()))


@_teachers.get("/<int(signed=True):teacher_id>")
def _get_teacher(teacher_id: int):
    return jsonify(teacher.get_teacher_detail(_state(), teacher_id))


@_teachers.put("/<int(signed=True):teacher_id>")
def _update_teacher(teacher_id: int):
    return jsonify(teacher.update_teacher_detail(_state(), _payload(), teacher_id))


@_teachers.delete("/<int(signed=True):teacher_id>")
def _delete_teacher(teacher_id: int):
    return jsonify(teacher.delete_teacher(_state(), teacher_id))


def general_routes(app: Flask) -> None:
    """Add the health check route."""
    app.register_blueprint(_general)


def course_routes(app: Flask) -> None:
    """Add the routes under ``/courses``."""
    app.register_blueprint(_courses)


def teacher_routes(app: Flask) -> None:
    """Add the routes under ``/teachers``."""
    app.register_blueprint(_teachers)