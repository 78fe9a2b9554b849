"""Data exchanged between the front end, the browser and the teacher service."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


def _mapping(data: Any) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError(f"expected a mapping, got {type(data).__name__}")
    return data


def _text(data: Mapping[str, Any], key: str) -> str:
    if key not in data:
        raise ValueError(f"missing field `{key}`")
    value = data[key]
    if not isinstance(value, str):
        raise ValueError(f"field `{key}` must be a string")
    return value


def _i32(data: Mapping[str, Any], key: str) -> int:
    if key not in data:
        raise ValueError(f"missing field `{key}`")
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"field `{key}` must be an integer")
    if not _I32_MIN <= value <= _I32_MAX:
        raise ValueError(f"field `{key}` is out of range")
    return value


@dataclass(frozen=True)
class TeacherRegisterForm:
    """A teacher as entered in the registration form."""

    name: str
    picture_url: str
    profile: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TeacherRegisterForm:
        data = _mapping(data)
        return cls(
            name=_text(data, "name"),
            picture_url=_text(data, "picture_url"),
            profile=_text(data, "profile"),
        )


@dataclass(frozen=True)
class TeacherResponse:
    """A teacher as returned by the teacher service."""

    id: int
    name: str
    picture_url: str
    profile: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TeacherResponse:
        data = _mapping(data)
        return cls(
            id=_i32(data, "id"),
            name=_text(data, "name"),
            picture_url=_text(data, "picture_url"),
            profile=_text(data, "profile"),
        )

    def to_dict(self) -> dict[str, Any]:
        return dataclasses.asdict(self)