"""Teacher and course records and the request bodies that create or change them."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any, TypeVar

from tutorweb.service.errors import INVALID_JSON_MESSAGE, InvalidInputError

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1

COURSE_TEXT_FIELDS = ("description", "format", "structure", "duration", "language", "level")

T = TypeVar("T")


def parse_datetime(value: Any) -> datetime | None:
    """Read a date and time without a time zone, as ``YYYY-MM-DDTHH:MM:SS``."""
    if value is None:
        return None
    if isinstance(value, datetime):
        result = value
    elif isinstance(value, str):
        if "T" not in value and " " not in value:
            raise ValueError(f"expected a date and a time, got {value!r}")
        result = datetime.fromisoformat(value)
    else:
        raise TypeError(f"expected a date-time string, got {type(value).__name__}")
    if result.tzinfo is not None:
        raise ValueError("expected a date-time without a time zone")
    return result


def format_datetime(value: datetime | None) -> str | None:
    """Write a date and time in ISO 8601 form, or None for no value."""
    if value is None:
        return None
    return value.isoformat()


def _to_i32(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an integer, got {type(value).__name__}")
    if not _I32_MIN <= value <= _I32_MAX:
        raise ValueError(f"integer {value} is out of range")
    return value


def _to_str(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"expected a string, got {type(value).__name__}")
    return value


def _mapping(data: Any) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise InvalidInputError(INVALID_JSON_MESSAGE)
    return data


def _read(data: Mapping[str, Any], key: str, convert: Callable[[Any], T], *, required: bool) -> T | None:
    value = data.get(key)
    if value is None:
        if required:
            raise InvalidInputError(INVALID_JSON_MESSAGE)
        return None
    try:
        return convert(value)
    except (TypeError, ValueError) as err:
        raise InvalidInputError(INVALID_JSON_MESSAGE) from err


@dataclass(frozen=True)
class Teacher:
    """A stored teacher."""

    id: int
    name: str
    picture_url: str
    profile: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Teacher:
        data = _mapping(data)
        return cls(
            id=_read(data, "id", _to_i32, required=True),
            name=_read(data, "name", _to_str, required=True),
            picture_url=_read(data, "picture_url", _to_str, required=True),
            profile=_read(data, "profile", _to_str, required=True),
        )

    def to_dict(self) -> dict[str, Any]:
        return dataclasses.asdict(self)


@dataclass(frozen=True)
class CreateTeacher:
    """The body of a request that adds a teacher."""

    name: str
    picture_url: str
    profile: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CreateTeacher:
        data = _mapping(data)
        return cls(
            name=_read(data, "name", _to_str, required=True),
            picture_url=_read(data, "picture_url", _to_str, required=True),
            profile=_read(data, "profile", _to_str, required=True),
        )


@dataclass(frozen=True)
class UpdateTeacher:
    """The body of a request that changes a teacher; None leaves a field as it is."""

    name: str | None = None
    picture_url: str | None = None
    profile: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> UpdateTeacher:
        data = _mapping(data)
        return cls(
            name=_read(data, "name", _to_str, required=False),
            picture_url=_read(data, "picture_url", _to_str, required=False),
            profile=_read(data, "profile", _to_str, required=False),
        )


@dataclass(frozen=True)
class Course:
    """A stored course."""

    teacher_id: int
    id: int
    name: str
    time: datetime | None = None
    description: str | None = None
    format: str | None = None
    structure: str | None = None
    duration: str | None = None
    price: int | None = None
    language: str | None = None
    level: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Course:
        data = _mapping(data)
        return cls(
            teacher_id=_read(data, "teacher_id", _to_i32, required=True),
            id=_read(data, "id", _to_i32, required=True),
            name=_read(data, "name", _to_str, required=True),
            time=_read(data, "time", parse_datetime, required=False),
            price=_read(data, "price", _to_i32, required=False),
            **{key: _read(data, key, _to_str, required=False) for key in COURSE_TEXT_FIELDS},
        )

    def to_dict(self) -> dict[str, Any]:
        result = dataclasses.asdict(self)
        result["time"] = format_datetime(self.time)
        return result


@dataclass(frozen=True)
class CreateCourse:
    """The body of a request that adds a course."""

    teacher_id: int
    name: str
    time: datetime | None = None
    description: str | None = None
    format: str | None = None
    structure: str | None = None
    duration: str | None = None
    price: int | None = None
    language: str | None = None
    level: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CreateCourse:
        data = _mapping(data)
        return cls(
            teacher_id=_read(data, "teacher_id", _to_i32, required=True),
            name=_read(data, "name", _to_str, required=True),
            time=_read(data, "time", parse_datetime, required=False),
            price=_read(data, "price", _to_i32, required=False),
            **{key: _read(data, key, _to_str, required=False) for key in COURSE_TEXT_FIELDS},
        )


@dataclass(frozen=True)
class UpdateCourse:
    """The body of a request that changes a course; None leaves a field to its stored value."""

    name: str | None = None
    time: datetime | None = None
    description: str | None = None
    format: str | None = None
    structure: str | None = None
    duration: str | None = None
    price: int | None = None
    language: str | None = None
    level: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> UpdateCourse:
        data = _mapping(data)
        return cls(
            name=_read(data, "name", _to_str, required=False),
            time=_read(data, "time", parse_datetime, required=False),
            price=_read(data, "price", _to_i32, required=False),
            **{key: _read(data, key, _to_str, required=False) for key in COURSE_TEXT_FIELDS},
        )