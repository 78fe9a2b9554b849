"""Database access for teachers."""

from __future__ import annotations

import sqlalchemy as sa
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from tutorweb.service.errors import DBError, NotFoundError
from tutorweb.service.models import CreateTeacher, Teacher, UpdateTeacher
from tutorweb.service.state import teacher_table

_TEACHER_ID_NOT_FOUND = "Teacher Id not found"


def _fetch_teacher(engine: Engine, teacher_id: int) -> Teacher:
    query = sa.select(teacher_table).where(teacher_table.c.id == teacher_id)
    try:
        with engine.connect() as conn:
            row = conn.execute(query).mappings().first()
    except SQLAlchemyError as err:
        raise NotFoundError(_TEACHER_ID_NOT_FOUND) from err
    if row is None:
        raise NotFoundError(_TEACHER_ID_NOT_FOUND)
    return Teacher.from_dict(row)


def insert_teacher(engine: Engine, new_teacher: CreateTeacher) -> None:
    """Store a new teacher."""
    statement = sa.insert(teacher_table).values(
        name=new_teacher.name,
        picture_url=new_teacher.picture_url,
        profile=new_teacher.profile,
    )
    try:
        with engine.begin() as conn:
            conn.execute(statement)
    except SQLAlchemyError as err:
        raise DBError(str(err)) from err


def delete_teacher(engine: Engine, teacher_id: int) -> str:
    """Delete a teacher and report how many records went."""
    statement = sa.delete(teacher_table).where(teacher_table.c.id == teacher_id)
    try:
        with engine.begin() as conn:
            deleted = conn.execute(statement).rowcount
    except SQLAlchemyError as err:
        raise DBError("Unable to delete teacher") from err
    return f"Deleted {deleted} record"


def update_teacher(engine: Engine, teacher_id: int, update: UpdateTeacher) -> str:
    """Change the given fields of a teacher, keeping the rest."""
    current = _fetch_teacher(engine, teacher_id)
    values = {
        "name": update.name if update.name is not None else current.name,
        "picture_url": update.picture_url if update.picture_url is not None else current.picture_url,
        "profile": update.profile if update.profile is not None else current.profile,
    }
    statement = sa.update(teacher_table).where(teacher_table.c.id == teacher_id).values(**values)
    try:
        with engine.begin() as conn:
            updated = conn.execute(statement).rowcount
    except SQLAlchemyError as err:
        raise DBError(str(err)) from err
    return f"Update {updated} record"


def list_teachers(engine: Engine) -> list[Teacher]:
    """All teachers; having none is reported as not found."""
    query = sa.select(teacher_table).order_by(teacher_table.c.id)
    try:
        with engine.connect() as conn:
            rows = conn.execute(query).mappings().all()
    except SQLAlchemyError as err:
        raise DBError(str(err)) from err
    if not rows:
        raise NotFoundError("Teacher not found")
    return [Teacher.from_dict(row) for row in rows]


def get_teacher(engine: Engine, teacher_id: int) -> Teacher:
    """One teacher by id."""
    return _fetch_teacher(engine, teacher_id)