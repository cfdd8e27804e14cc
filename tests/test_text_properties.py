"""Tests for resolving a text block's name and content children."""

from __future__ import annotations

import pytest
from sqlalchemy.exc import OperationalError

from text_block_store.blocks.text.properties import resolve_text_properties


def _resolve(block, block_repository, property_repository):
    return resolve_text_properties(
        block.id, properties=property_repository, blocks=block_repository
    )


def test_resolves_both_children(block_repository, property_repository, text_block_factory):
    block = text_block_factory(name="Title", content="Body")

    resolved = _resolve(block, block_repository, property_repository)

    assert resolved.name.block_data == "Title"
    assert resolved.content.block_data == "Body"


def test_missing_edges_resolve_to_none(block_repository, property_repository, text_block_factory):
    block = text_block_factory()

    resolved = _resolve(block, block_repository, property_repository)

    assert resolved.name is None
    assert resolved.content is None


def test_edge_to_deleted_block_resolves_to_none(
    block_repository, property_repository, text_block_factory
):
    block = text_block_factory(name="Title", content="Body")
    content_id = _resolve(block, block_repository, property_repository).content.id
    block_repository.delete_block(content_id)

    resolved = _resolve(block, block_repository, property_repository)

    assert resolved.name.block_data == "Title"
    assert resolved.content is None


def test_first_duplicate_edge_wins(
    block_repository, property_repository, text_block_factory, data_block_factory
):
    block = text_block_factory(name="First")
    later = data_block_factory("Second")
    property_repository.insert_property(block.make_property("name", later.id))

    resolved = _resolve(block, block_repository, property_repository)

    assert resolved.name.block_data == "First"


def test_first_duplicate_edge_wins_even_when_its_target_is_gone(
    block_repository, property_repository, text_block_factory, data_block_factory
):
    block = text_block_factory(content="Gone")
    gone_id = _resolve(block, block_repository, property_repository).content.id
    property_repository.insert_property(
        block.make_property("content", data_block_factory("Later").id)
    )
    block_repository.delete_block(gone_id)

    resolved = _resolve(block, block_repository, property_repository)

    assert resolved.content is None


def test_unrecognised_edges_are_ignored(
    block_repository, property_repository, text_block_factory, data_block_factory
):
    block = text_block_factory()
    property_repository.insert_property(
        block.make_property("subtitle", data_block_factory("ignored").id)
    )

    resolved = _resolve(block, block_repository, property_repository)

    assert resolved.name is None
    assert resolved.content is None


def test_storage_errors_propagate(block_repository, property_repository, monkeypatch):
    def _unavailable(parent_id):
        raise OperationalError("SELECT", {}, Exception("database is unavailable"))

    monkeypatch.setattr(property_repository, "list_properties", _unavailable)

    with pytest.raises(OperationalError):
        resolve_text_properties(1, properties=property_repository, blocks=block_repository)
