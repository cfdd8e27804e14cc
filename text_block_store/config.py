"""Environment-driven store settings."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(slots=True, frozen=True)
class StoreSettings:
    database_url: str | None = None
    sqlite_path: Path | None = None
    echo: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> StoreSettings:
        """Read settings from ``TEXT_BLOCK_*`` variables.

        ``TEXT_BLOCK_DATABASE_URL`` falls back to ``DATABASE_URL``. With neither a
        URL nor ``TEXT_BLOCK_SQLITE_PATH`` the store runs on in-memory SQLite.
        """
        env = os.environ if environ is None else environ
        database_url = env.get("TEXT_BLOCK_DATABASE_URL") or env.get("DATABASE_URL") or None
        sqlite_path = env.get("TEXT_BLOCK_SQLITE_PATH") or None
        echo = env.get("TEXT_BLOCK_SQL_ECHO", "").strip().lower() in _TRUE_VALUES
        return cls(
            database_url=database_url,
            sqlite_path=Path(sqlite_path) if sqlite_path else None,
            echo=echo,
        )


def load_dotenv(path: Path) -> None:
    """Copy ``KEY=VALUE`` lines from ``path`` into ``os.environ``.

    Variables already set in the environment win.
    """
    if not path.exists():
        return
    for raw_line in path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        if not key or key in os.environ:
            continue
        os.environ[key] = value.strip()


__all__ = ["StoreSettings", "load_dotenv"]
