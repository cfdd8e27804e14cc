"""Pydantic models for named property edges."""

from pydantic import BaseModel, ConfigDict


class Property(BaseModel):
    """Represents a named, directed edge from a parent block to a value block.

    At most one edge per ``(parent_id, property_name)`` is meaningful; readers
    keep the first one they load and ignore the rest.
    """

    id: int
    parent_id: int
    property_name: str
    value_id: int

    model_config = ConfigDict(frozen=True, from_attributes=True)


class NewProperty(BaseModel):
    parent_id: int
    property_name: str
    value_id: int

    model_config = ConfigDict(frozen=True)


__all__ = ["NewProperty", "Property"]
