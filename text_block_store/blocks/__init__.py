"""Block type implementations and the registry that dispatches to them."""

from .base import BlockType, Context, TypeInfo
from .errors import BlockError, InputParseError, MethodNotFoundError
from .registry import BlockTypeRegistry, UnknownBlockTypeError, default_registry

__all__ = [
    "BlockError",
    "BlockType",
    "BlockTypeRegistry",
    "Context",
    "InputParseError",
    "MethodNotFoundError",
    "TypeInfo",
    "UnknownBlockTypeError",
    "default_registry",
]
