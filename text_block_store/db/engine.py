"""Database engine helpers."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Mapping

from sqlalchemy import create_engine as sa_create_engine
from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

DEFAULT_SQLITE_URL = "sqlite+pysqlite:///:memory:"


def create_engine(
    connection_string: str | None = None,
    *,
    sqlite_path: str | Path | None = None,
    echo: bool = False,
    connect_args: Mapping[str, Any] | None = None,
) -> Engine:
    """Create a SQLAlchemy engine with optional persistent SQLite or custom URLs.

    Parameters
    ----------
    connection_string:
        Full SQLAlchemy URL. Takes precedence over ``sqlite_path``.
    sqlite_path:
        Filesystem path to a SQLite database file. Expanded to an absolute path.
    echo:
        Enable SQLAlchemy engine echo logging.
    connect_args:
        Optional mapping passed through to ``sqlalchemy.create_engine``.

    Notes
    -----
    - When neither ``connection_string`` nor ``sqlite_path`` are provided, an
      in-memory SQLite URL is used.
    - In-memory SQLite shares a single connection across sessions so that every
      session sees the same database.
    - SQLite connections get ``PRAGMA foreign_keys=ON`` so cascading deletes
      apply.
    """
    if connection_string and sqlite_path is not None:
        raise ValueError("Provide either 'connection_string' or 'sqlite_path', not both.")

    if connection_string:
        url = connection_string
    elif sqlite_path is not None:
        db_path = Path(sqlite_path).expanduser().resolve()
        url = f"sqlite+pysqlite:///{db_path.as_posix()}"
    else:
        url = DEFAULT_SQLITE_URL

    kwargs: dict[str, Any] = {}
    if url == DEFAULT_SQLITE_URL:
        from sqlalchemy.pool import StaticPool

        kwargs["poolclass"] = StaticPool
        connect_args = {"check_same_thread": False, **(connect_args or {})}

    engine = sa_create_engine(url, echo=echo, connect_args=connect_args or {}, **kwargs)
    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    # SQLite ignores ON DELETE CASCADE unless this is set per connection.
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Return a configured session factory bound to the given engine."""
    return sessionmaker(bind=engine, class_=Session, expire_on_commit=False)


@contextmanager
def unit_of_work(session_factory: sessionmaker[Session]) -> Iterator[Session]:
    """Yield a session whose writes commit together or not at all.

    Any exception raised inside the block rolls the transaction back and is
    re-raised unchanged.
    """
    with session_factory() as session:
        with session.begin():
            yield session


__all__ = ["DEFAULT_SQLITE_URL", "create_engine", "create_session_factory", "unit_of_work"]
