"""SQLAlchemy-backed repository for property edges."""

from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.orm import Session, sessionmaker

from text_block_store.db.schema import DbProperty
from text_block_store.models.property import NewProperty, Property
from text_block_store.repositories.block_repository import session_scope


class PropertyRepository:
    """Repository that persists and hydrates Property edges."""

    def __init__(self, session_factory: sessionmaker[Session]):
        self._session_factory = session_factory

    def list_properties(self, parent_id: int) -> list[Property]:
        """Return every edge leaving ``parent_id`` in insertion order."""
        with self._session_factory() as session:
            rows = session.scalars(
                select(DbProperty)
                .where(DbProperty.parent_id == parent_id)
                .order_by(DbProperty.id)
            ).all()
            return [Property.model_validate(row) for row in rows]

    def insert_property(
        self,
        new_property: NewProperty,
        *,
        session: Session | None = None,
    ) -> Property:
        with session_scope(self._session_factory, session) as active:
            row = DbProperty(
                parent_id=new_property.parent_id,
                property_name=new_property.property_name,
                value_id=new_property.value_id,
            )
            active.add(row)
            active.flush()
            return Property.model_validate(row)

    def count_properties(self, parent_id: int | None = None) -> int:
        with self._session_factory() as session:
            query = select(func.count()).select_from(DbProperty)
            if parent_id is not None:
                query = query.where(DbProperty.parent_id == parent_id)
            return session.scalar(query) or 0


__all__ = ["PropertyRepository"]
