"""Permission levels granted to users on blocks."""

from __future__ import annotations

from enum import IntEnum

from pydantic import BaseModel, ConfigDict


class PermLevel(IntEnum):
    NONE = 0
    VIEW = 10
    COMMENT = 20
    EDIT = 30
    FULL = 40
    OWNER = 50


class BlockPermission(BaseModel):
    """A stored grant of ``level`` to ``user_id`` on ``block_id``."""

    block_id: int
    user_id: int
    level: PermLevel

    model_config = ConfigDict(frozen=True, from_attributes=True)


__all__ = ["BlockPermission", "PermLevel"]
