"""Database access for courses."""

from __future__ import annotations

import dataclasses
from datetime import datetime
from typing import TypeVar

import sqlalchemy as sa
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from tutorweb.service.errors import DBError, NotFoundError
from tutorweb.service.models import COURSE_TEXT_FIELDS, Course, CreateCourse, UpdateCourse
from tutorweb.service.state import course_table

_DEFAULT_TIME = datetime(1970, 1, 1)

T = TypeVar("T")


def _first_set(new: T | None, old: T | None, default: T) -> T:
    if new is not None:
        return new
    if old is not None:
        return old
    return default


def _match(teacher_id: int, course_id: int) -> sa.ColumnElement[bool]:
    return sa.and_(course_table.c.teacher_id == teacher_id, course_table.c.id == course_id)


def insert_course(engine: Engine, new_course: CreateCourse) -> None:
    """Store a new course."""
    statement = sa.insert(course_table).values(**dataclasses.asdict(new_course))
    try:
        with engine.begin() as conn:
            conn.execute(statement)
    except SQLAlchemyError as err:
        raise DBError(str(err)) from err


def delete_course(engine: Engine, teacher_id: int, course_id: int) -> str:
    """Delete a teacher's course and report how many records went."""
    statement = sa.delete(course_table).where(_match(teacher_id, course_id))
    try:
        with engine.begin() as conn:
            deleted = conn.execute(statement).rowcount
    except SQLAlchemyError as err:
        raise DBError(str(err)) from err
    return f"Deleted {deleted} record"


def update_course(engine: Engine, teacher_id: int, course_id: int, update: UpdateCourse) -> str:
    """Change a course; fields not given keep their value, and empty ones take a default."""
    query = sa.select(course_table).where(_match(teacher_id, course_id))
    try:
        with engine.connect() as conn:
            row = conn.execute(query).mappings().first()
    except SQLAlchemyError as err:
        raise NotFoundError("Course Id not found") from err
    if row is None:
        raise NotFoundError("Course Id not found")
    current = Course.from_dict(row)

    values = {
        "name": update.name if update.name is not None else current.name,
        "time": _first_set(update.time, current.time, _DEFAULT_TIME),
        "price": _first_set(update.price, current.price, 0),
        **{
            key: _first_set(getattr(update, key), getattr(current, key), "")
            for key in COURSE_TEXT_FIELDS
        },
    }
    statement = sa.update(course_table).where(_match(teacher_id, course_id)).values(**values)
    try:
        with engine.begin() as conn:
            updated = conn.execute(statement).rowcount
    except SQLAlchemyError as err:
        raise DBError(str(err)) from err
    return f"Update {updated} record"


def list_courses_for_teacher(engine: Engine, teacher_id: int) -> list[Course]:
    """All courses of one teacher, possibly none."""
    query = (
        sa.select(course_table)
        .where(course_table.c.teacher_id == teacher_id)
        .order_by(course_table.c.id)
    )
    try:
        with engine.connect() as conn:
            rows = conn.execute(query).mappings().all()
    except SQLAlchemyError as err:
        raise DBError(str(err)) from err
    return [Course.from_dict(row) for row in rows]


def get_course(engine: Engine, teacher_id: int, course_id: int) -> Course:
    """One course of a teacher by id."""
    query = sa.select(course_table).where(_match(teacher_id, course_id))
    try:
        with engine.connect() as conn:
            row = conn.execute(query).mappings().first()
    except SQLAlchemyError as err:
        raise DBError(str(err)) from err
    if row is None:
        raise NotFoundError("Course didn't founded")
    return Course.from_dict(row)