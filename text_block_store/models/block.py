"""Pydantic models for stored blocks."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .property import NewProperty


class Block(BaseModel):
    """Immutable representation of a stored block.

    ``block_data`` is a raw payload whose encoding belongs to the block type
    named by ``type``.
    """

    id: int
    type: str
    owner_id: int
    block_data: str | None = None
    color: str | None = None
    public: bool = False
    created_time: datetime | None = None

    model_config = ConfigDict(frozen=True, from_attributes=True)

    def make_property(self, property_name: str, value_id: int) -> NewProperty:
        """Return an edge named ``property_name`` from this block to ``value_id``."""
        return NewProperty(parent_id=self.id, property_name=property_name, value_id=value_id)


class NewBlock(BaseModel):
    """Insertable block payload; the store assigns the identifier."""

    block_type: str
    owner_id: int
    block_data: str | None = None
    color: str | None = None
    public: bool = False

    model_config = ConfigDict(frozen=True)

    def data(self, value: str) -> NewBlock:
        return self.model_copy(update={"block_data": value})


__all__ = ["Block", "NewBlock"]
