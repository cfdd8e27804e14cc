"""SQLAlchemy-backed repository for per-user block permission grants."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session, sessionmaker

from text_block_store.db.schema import DbPermission
from text_block_store.models.permission import BlockPermission, PermLevel
from text_block_store.repositories.block_repository import session_scope


class PermissionRepository:
    """Stores the sharing state consulted by permission checks."""

    def __init__(self, session_factory: sessionmaker[Session]):
        self._session_factory = session_factory

    def grant(
        self,
        block_id: int,
        user_id: int,
        level: PermLevel,
        *,
        session: Session | None = None,
    ) -> BlockPermission:
        """Give ``user_id`` ``level`` on ``block_id``, replacing any earlier grant."""
        with session_scope(self._session_factory, session) as active:
            row = active.scalars(
                select(DbPermission).where(
                    DbPermission.block_id == block_id,
                    DbPermission.user_id == user_id,
                )
            ).one_or_none()
            if row is None:
                row = DbPermission(block_id=block_id, user_id=user_id, level=int(level))
                active.add(row)
            else:
                row.level = int(level)
            active.flush()
            return BlockPermission.model_validate(row)

    def level_for(self, user_id: int, block_id: int) -> PermLevel:
        """Return the stored grant, ``PermLevel.NONE`` when there is none."""
        with self._session_factory() as session:
            level = session.scalar(
                select(DbPermission.level).where(
                    DbPermission.block_id == block_id,
                    DbPermission.user_id == user_id,
                )
            )
        return PermLevel(level) if level is not None else PermLevel.NONE


__all__ = ["PermissionRepository"]
