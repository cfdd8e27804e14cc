from __future__ import annotations

from text_block_store.blocks.text.gate import PermissionGate
from text_block_store.models.permission import PermLevel
from text_block_store.permissions import has_perm_level, perm_level

from conftest import OWNER_ID, VIEWER_ID


def test_owner_holds_every_level(permission_repository, data_block_factory):
    block = data_block_factory("mine")

    assert perm_level(OWNER_ID, block, permission_repository) is PermLevel.OWNER
    assert has_perm_level(OWNER_ID, block, PermLevel.FULL, permission_repository)


def test_owner_can_view_and_edit(permission_repository, data_block_factory):
    block = data_block_factory("mine")
    gate = PermissionGate(OWNER_ID, permission_repository)

    assert gate.can_view(block)
    assert gate.can_edit(block)


def test_stranger_sees_nothing_on_private_block(permission_repository, data_block_factory):
    block = data_block_factory("private")
    gate = PermissionGate(VIEWER_ID, permission_repository)

    assert not gate.can_view(block)
    assert not gate.can_edit(block)


def test_view_grant_does_not_allow_edit(permission_repository, data_block_factory):
    block = data_block_factory("shared")
    permission_repository.grant(block.id, VIEWER_ID, PermLevel.VIEW)
    gate = PermissionGate(VIEWER_ID, permission_repository)

    assert gate.can_view(block)
    assert not gate.can_edit(block)


def test_edit_grant_allows_edit(permission_repository, data_block_factory):
    block = data_block_factory("shared")
    permission_repository.grant(block.id, VIEWER_ID, PermLevel.EDIT)
    gate = PermissionGate(VIEWER_ID, permission_repository)

    assert gate.can_view(block)
    assert gate.can_edit(block)


def test_anonymous_viewer_only_sees_public_blocks(permission_repository, data_block_factory):
    private = data_block_factory("private")
    public = data_block_factory("public", public=True)
    gate = PermissionGate(None, permission_repository)

    assert not gate.authenticated
    assert not gate.can_view(private)
    assert gate.can_view(public)
    assert not gate.can_edit(public)


def test_edit_requires_view(permission_repository, data_block_factory, monkeypatch):
    block = data_block_factory("shared")
    permission_repository.grant(block.id, VIEWER_ID, PermLevel.EDIT)
    gate = PermissionGate(VIEWER_ID, permission_repository)
    monkeypatch.setattr(gate, "can_view", lambda _block: False)

    assert not gate.can_edit(block)


def test_name_and_content_are_gated_independently(
    permission_repository, data_block_factory
):
    name = data_block_factory("name")
    content = data_block_factory("content")
    permission_repository.grant(content.id, VIEWER_ID, PermLevel.EDIT)
    gate = PermissionGate(VIEWER_ID, permission_repository)

    assert not gate.can_view(name)
    assert gate.can_edit(content)
