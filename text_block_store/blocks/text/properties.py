"""Resolution of a text block's named child blocks."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from text_block_store.models.block import Block
from text_block_store.repositories.block_repository import BlockRepository
from text_block_store.repositories.property_repository import PropertyRepository

logger = logging.getLogger(__name__)

NAME_PROPERTY = "name"
CONTENT_PROPERTY = "content"


@dataclass(slots=True, frozen=True)
class TextProperties:
    name: Block | None = None
    content: Block | None = None


def resolve_text_properties(
    parent_id: int,
    *,
    properties: PropertyRepository,
    blocks: BlockRepository,
) -> TextProperties:
    """Load the blocks linked from ``parent_id`` as ``name`` and ``content``.

    A slot is ``None`` when no edge carries its name or when the edge points at
    a block that no longer exists. Edges are read in insertion order and the
    first edge per name wins; later duplicates are ignored. Storage errors
    propagate.
    """
    resolved: dict[str, Block | None] = {}
    for edge in properties.list_properties(parent_id):
        if edge.property_name not in (NAME_PROPERTY, CONTENT_PROPERTY):
            continue
        if edge.property_name in resolved:
            logger.debug(
                "Ignoring duplicate %r edge %s on block %s", edge.property_name, edge.id, parent_id
            )
            continue
        resolved[edge.property_name] = blocks.get_block(edge.value_id)

    return TextProperties(
        name=resolved.get(NAME_PROPERTY),
        content=resolved.get(CONTENT_PROPERTY),
    )


__all__ = ["CONTENT_PROPERTY", "NAME_PROPERTY", "TextProperties", "resolve_text_properties"]
