"""Creation of a text block and its two child data blocks."""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict, ValidationError
from sqlalchemy.orm import Session, sessionmaker

from text_block_store.blocks.errors import InputParseError
from text_block_store.blocks.text.properties import CONTENT_PROPERTY, NAME_PROPERTY
from text_block_store.db.engine import unit_of_work
from text_block_store.models.block import Block, NewBlock
from text_block_store.repositories.block_repository import BlockRepository
from text_block_store.repositories.property_repository import PropertyRepository

logger = logging.getLogger(__name__)

BLOCK_NAME = "text"
DATA_BLOCK_TYPE = "data"


class CreationArgs(BaseModel):
    """Decoded creation payload: ``{"name": str, "content": str}``."""

    name: str
    content: str

    model_config = ConfigDict(extra="forbid", strict=True, frozen=True)


def parse_creation_args(raw_input: str) -> CreationArgs:
    try:
        return CreationArgs.model_validate_json(raw_input)
    except ValidationError as exc:
        raise InputParseError(
            "Text block input must be a JSON object with string 'name' and 'content'."
        ) from exc


def create_text_block(
    raw_input: str,
    owner_id: int,
    *,
    session_factory: sessionmaker[Session],
    blocks: BlockRepository,
    properties: PropertyRepository,
) -> Block:
    """Create a text block owned by ``owner_id`` from a JSON payload.

    The parent, both data children and both edges are written in one
    transaction; on any failure nothing is kept and the error propagates.
    """
    args = parse_creation_args(raw_input)

    with unit_of_work(session_factory) as session:
        text_block = blocks.insert_block(
            NewBlock(block_type=BLOCK_NAME, owner_id=owner_id), session=session
        )
        data_block = NewBlock(block_type=DATA_BLOCK_TYPE, owner_id=owner_id)
        name_block = blocks.insert_block(data_block.data(args.name), session=session)
        content_block = blocks.insert_block(data_block.data(args.content), session=session)

        properties.insert_property(
            text_block.make_property(NAME_PROPERTY, name_block.id), session=session
        )
        properties.insert_property(
            text_block.make_property(CONTENT_PROPERTY, content_block.id), session=session
        )

    logger.info("Created text block %s for user %s", text_block.id, owner_id)
    return text_block


__all__ = [
    "BLOCK_NAME",
    "CreationArgs",
    "DATA_BLOCK_TYPE",
    "create_text_block",
    "parse_creation_args",
]
