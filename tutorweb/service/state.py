"""Shared application state, the database engine and the table layout."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field

from sqlalchemy import Column, DateTime, Integer, MetaData, String, Table, create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import StaticPool

metadata = MetaData()

teacher_table = Table(
    "teacher",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(100), nullable=False),
    Column("picture_url", String(200), nullable=False),
    Column("profile", String(2000), nullable=False),
)

course_table = Table(
    "course",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("teacher_id", Integer, nullable=False),
    Column("name", String(140), nullable=False),
    Column("time", DateTime, nullable=True),
    Column("description", String(2000), nullable=True),
    Column("format", String(30), nullable=True),
    Column("structure", String(200), nullable=True),
    Column("duration", String(30), nullable=True),
    Column("price", Integer, nullable=True),
    Column("language", String(30), nullable=True),
    Column("level", String(30), nullable=True),
)


@dataclass
class AppState:
    """State shared by all request handlers."""

    health_check_response: str
    db: Engine
    visit_count: int = 0
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False, compare=False)

    def record_visit(self) -> int:
        """Count one visit and return the count as it stood before it."""
        with self._lock:
            count = self.visit_count
            self.visit_count += 1
        return count


def create_pool(url: str) -> Engine:
    """Create a database engine; plain ``mysql://`` URLs use the PyMySQL driver."""
    parsed = make_url(url)
    if parsed.drivername == "mysql":
        parsed = parsed.set(drivername="mysql+pymysql")
    options = {}
    if parsed.get_backend_name() == "sqlite" and parsed.database in (None, "", ":memory:"):
        options = {"poolclass": StaticPool, "connect_args": {"check_same_thread": False}}
    return create_engine(parsed, **options)


def create_tables(engine: Engine) -> None:
    """Create the teacher and course tables where they do not exist yet."""
    metadata.create_all(engine)