"""Domain model exports."""

from .block import Block, NewBlock
from .permission import BlockPermission, PermLevel
from .property import NewProperty, Property

__all__ = ["Block", "BlockPermission", "NewBlock", "NewProperty", "PermLevel", "Property"]
