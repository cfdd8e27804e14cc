"""SQLAlchemy-backed repository for Block models."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.orm import Session, sessionmaker

from text_block_store.db.schema import DbBlock
from text_block_store.models.block import Block, NewBlock


class RepositoryError(RuntimeError):
    """Base class for repository-level errors."""


class BlockNotFoundError(RepositoryError):
    """Raised when a block cannot be found for a requested operation."""


@contextmanager
def session_scope(
    session_factory: sessionmaker[Session],
    session: Session | None = None,
) -> Iterator[Session]:
    """Yield ``session`` untouched, or a fresh session that commits on exit.

    A caller-supplied session belongs to an outer unit of work, so writes made
    through it are only flushed here.
    """
    if session is not None:
        yield session
        session.flush()
        return

    with session_factory() as own_session:
        yield own_session
        own_session.commit()


class BlockRepository:
    """Repository that persists and hydrates Block models from the database."""

    def __init__(self, session_factory: sessionmaker[Session]):
        self._session_factory = session_factory

    def get_block(self, block_id: int) -> Block | None:
        """Fetch a block by identifier, ``None`` when it does not exist."""
        with self._session_factory() as session:
            row = session.get(DbBlock, block_id)
            if row is None:
                return None
            return self._to_model(row)

    def insert_block(self, new_block: NewBlock, *, session: Session | None = None) -> Block:
        """Insert ``new_block`` and return the stored block with its identifier."""
        with session_scope(self._session_factory, session) as active:
            row = DbBlock(**self._to_record(new_block))
            active.add(row)
            active.flush()
            return self._to_model(row)

    def delete_block(self, block_id: int, *, session: Session | None = None) -> None:
        """Delete a block; its outgoing property edges and permission grants cascade."""
        with session_scope(self._session_factory, session) as active:
            row = active.get(DbBlock, block_id)
            if row is None:
                raise BlockNotFoundError(f"Block {block_id} does not exist.")
            active.delete(row)

    def set_public(self, block_id: int, public: bool) -> Block:
        with session_scope(self._session_factory) as session:
            row = session.get(DbBlock, block_id)
            if row is None:
                raise BlockNotFoundError(f"Block {block_id} does not exist.")
            row.public = public
            session.flush()
            return self._to_model(row)

    def count_blocks(self, block_type: str | None = None) -> int:
        with self._session_factory() as session:
            query = select(func.count()).select_from(DbBlock)
            if block_type is not None:
                query = query.where(DbBlock.type == block_type)
            return session.scalar(query) or 0

    @staticmethod
    def _to_model(record: DbBlock) -> Block:
        return Block.model_validate(record)

    @staticmethod
    def _to_record(new_block: NewBlock) -> dict[str, Any]:
        return {
            "type": new_block.block_type,
            "owner_id": new_block.owner_id,
            "block_data": new_block.block_data,
            "color": new_block.color,
            "public": new_block.public,
        }


__all__ = ["BlockNotFoundError", "BlockRepository", "RepositoryError", "session_scope"]
