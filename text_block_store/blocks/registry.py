"""Lookup of block type implementations by type tag."""

from __future__ import annotations

from text_block_store.blocks.base import BlockType
from text_block_store.blocks.errors import BlockError


class UnknownBlockTypeError(BlockError, KeyError):
    """Raised when no block type is registered under a tag."""


class BlockTypeRegistry:
    def __init__(self) -> None:
        self._types: dict[str, type[BlockType]] = {}

    def register(self, block_type: type[BlockType]) -> type[BlockType]:
        name = block_type.name()
        if name in self._types:
            raise ValueError(f"Block type '{name}' is already registered.")
        self._types[name] = block_type
        return block_type

    def get(self, name: str) -> type[BlockType]:
        try:
            return self._types[name]
        except KeyError:
            raise UnknownBlockTypeError(name) from None

    def names(self) -> list[str]:
        return sorted(self._types)

    def __contains__(self, name: object) -> bool:
        return name in self._types


def default_registry() -> BlockTypeRegistry:
    """Return a registry holding every block type shipped with the package."""
    from text_block_store.blocks.text import TextBlock

    registry = BlockTypeRegistry()
    registry.register(TextBlock)
    return registry


__all__ = ["BlockTypeRegistry", "UnknownBlockTypeError", "default_registry"]
