"""Text block: a named piece of text stored as two child data blocks.

A text block holds no payload of its own. Its ``name`` and ``content`` live in
separate ``data`` blocks linked by property edges, each gated independently.
"""

from __future__ import annotations

import logging

from text_block_store.blocks.base import BlockType, Context, TypeInfo
from text_block_store.blocks.errors import MethodNotFoundError
from text_block_store.display import CreationObject, DisplayComponent, DisplayObject, Icon
from text_block_store.models.block import Block

from .create import BLOCK_NAME, create_text_block
from .display import compose_create_form, compose_embed, compose_page, error_card
from .gate import PermissionGate
from .properties import TextProperties, resolve_text_properties

logger = logging.getLogger(__name__)


class TextBlock(BlockType):
    @classmethod
    def name(cls) -> str:
        return BLOCK_NAME

    @classmethod
    def info(cls) -> TypeInfo:
        return TypeInfo(
            name=cls.name(),
            icon=Icon.TYPE,
            desc="Text blocks can have special formatting",
        )

    @classmethod
    def page_display(cls, block: Block, context: Context) -> DisplayObject:
        gate = PermissionGate(context.viewer_id(), context.permissions)
        return compose_page(block, cls._resolve(block, context), gate)

    @classmethod
    def embed_display(cls, block: Block, context: Context) -> DisplayComponent:
        try:
            gate = PermissionGate(context.viewer_id(), context.permissions)
            return compose_embed(block, cls._resolve(block, context), gate)
        except Exception:
            logger.exception("Failed to render embedded text block %s", block.id)
            return error_card(block, "This block could not be displayed.")

    @classmethod
    def create_display(cls, context: Context, user_id: int) -> CreationObject:
        return compose_create_form()

    @classmethod
    def create(cls, raw_input: str, context: Context, user_id: int) -> Block:
        return create_text_block(
            raw_input,
            user_id,
            session_factory=context.session_factory,
            blocks=context.blocks,
            properties=context.properties,
        )

    @classmethod
    def method_delegate(cls, context: Context, name: str, block_id: int, args: str) -> Block:
        raise MethodNotFoundError(name, cls.name())

    @staticmethod
    def _resolve(block: Block, context: Context) -> TextProperties:
        return resolve_text_properties(
            block.id, properties=context.properties, blocks=context.blocks
        )


__all__ = ["BLOCK_NAME", "TextBlock"]
