"""View and edit decisions for one viewer."""

from __future__ import annotations

from text_block_store.models.block import Block
from text_block_store.models.permission import PermLevel
from text_block_store.permissions import has_perm_level
from text_block_store.repositories.permission_repository import PermissionRepository


class PermissionGate:
    """Answers whether ``viewer_id`` may view or edit a given block.

    Each block is judged on its own, so a text block's name and content can
    end up with different answers.
    """

    def __init__(self, viewer_id: int | None, permissions: PermissionRepository):
        self.viewer_id = viewer_id
        self._permissions = permissions

    @property
    def authenticated(self) -> bool:
        return self.viewer_id is not None

    def can_view(self, block: Block) -> bool:
        if block.public:
            return True
        if self.viewer_id is None:
            return False
        return has_perm_level(self.viewer_id, block, PermLevel.VIEW, self._permissions)

    def can_edit(self, block: Block) -> bool:
        if self.viewer_id is None:
            return False
        if not self.can_view(block):
            return False
        return has_perm_level(self.viewer_id, block, PermLevel.EDIT, self._permissions)


__all__ = ["PermissionGate"]
