"""Permission level computation for a user on a block."""

from __future__ import annotations

from text_block_store.models.block import Block
from text_block_store.models.permission import PermLevel
from text_block_store.repositories.permission_repository import PermissionRepository


def perm_level(user_id: int, block: Block, permissions: PermissionRepository) -> PermLevel:
    """Owners hold every right; everyone else gets their stored grant."""
    if block.owner_id == user_id:
        return PermLevel.OWNER
    return permissions.level_for(user_id, block.id)


def has_perm_level(
    user_id: int,
    block: Block,
    level: PermLevel,
    permissions: PermissionRepository,
) -> bool:
    return perm_level(user_id, block, permissions) >= level


__all__ = ["has_perm_level", "perm_level"]
