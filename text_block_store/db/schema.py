"""SQLAlchemy declarative schema for blocks, property edges and sharing grants."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, ForeignKey, Index, Integer, String, Text, func
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for SQLAlchemy declarative mappings."""


class DbBlock(Base):
    """ORM mapping for the canonical block record."""

    __tablename__ = "blocks"
    __table_args__ = (
        Index("ix_blocks_type", "type"),
        Index("ix_blocks_owner", "owner_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    type: Mapped[str] = mapped_column(String(64), nullable=False)
    owner_id: Mapped[int] = mapped_column(Integer, nullable=False)
    block_data: Mapped[str | None] = mapped_column(Text, nullable=True)
    color: Mapped[str | None] = mapped_column(String(32), nullable=True)
    public: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    created_time: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        server_default=func.now(),
        nullable=False,
    )


class DbProperty(Base):
    """ORM mapping for a named edge from a parent block to a value block."""

    __tablename__ = "properties"
    __table_args__ = (Index("ix_properties_parent", "parent_id"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    parent_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("blocks.id", ondelete="CASCADE"), nullable=False
    )
    property_name: Mapped[str] = mapped_column(String(64), nullable=False)
    # No foreign key: an edge may outlive the block it points at.
    value_id: Mapped[int] = mapped_column(Integer, nullable=False)


class DbPermission(Base):
    """ORM mapping for a per-user permission grant on a block."""

    __tablename__ = "block_permissions"
    __table_args__ = (
        Index("ix_block_permissions_unique", "block_id", "user_id", unique=True),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    block_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("blocks.id", ondelete="CASCADE"), nullable=False
    )
    user_id: Mapped[int] = mapped_column(Integer, nullable=False)
    level: Mapped[int] = mapped_column(Integer, nullable=False)


def create_all(engine: Engine) -> None:
    """Create database tables for the schema."""
    Base.metadata.create_all(engine, checkfirst=True)


__all__ = ["Base", "DbBlock", "DbPermission", "DbProperty", "create_all"]
