"""Shared contract for block type implementations."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from functools import cached_property

from sqlalchemy.orm import Session, sessionmaker

from text_block_store.auth import TokenValidator, optional_validate_token
from text_block_store.display import CreationObject, DisplayComponent, DisplayObject, Icon
from text_block_store.models.block import Block
from text_block_store.repositories.block_repository import BlockRepository
from text_block_store.repositories.permission_repository import PermissionRepository
from text_block_store.repositories.property_repository import PropertyRepository


@dataclass
class Context:
    """Per-request state handed to every block type call."""

    session_factory: sessionmaker[Session]
    token: str | None = None
    token_validator: TokenValidator | None = field(default=None, repr=False)

    @cached_property
    def blocks(self) -> BlockRepository:
        return BlockRepository(self.session_factory)

    @cached_property
    def properties(self) -> PropertyRepository:
        return PropertyRepository(self.session_factory)

    @cached_property
    def permissions(self) -> PermissionRepository:
        return PermissionRepository(self.session_factory)

    def viewer_id(self) -> int | None:
        """Return the caller's user id, ``None`` when anonymous."""
        return optional_validate_token(self.token_validator, self.token)


@dataclass(slots=True, frozen=True)
class TypeInfo:
    name: str
    icon: Icon
    desc: str


class BlockType(ABC):
    """Capabilities every block type exposes to the host dispatcher."""

    @classmethod
    @abstractmethod
    def name(cls) -> str:
        ...

    @classmethod
    @abstractmethod
    def info(cls) -> TypeInfo:
        ...

    @classmethod
    @abstractmethod
    def page_display(cls, block: Block, context: Context) -> DisplayObject:
        ...

    @classmethod
    @abstractmethod
    def embed_display(cls, block: Block, context: Context) -> DisplayComponent:
        """Render ``block`` for embedding in another page; must not raise."""

    @classmethod
    @abstractmethod
    def create_display(cls, context: Context, user_id: int) -> CreationObject:
        ...

    @classmethod
    @abstractmethod
    def create(cls, raw_input: str, context: Context, user_id: int) -> Block:
        ...

    @classmethod
    @abstractmethod
    def method_delegate(cls, context: Context, name: str, block_id: int, args: str) -> Block:
        ...

    @classmethod
    def block_name(cls, block: Block, context: Context) -> str:
        return f"{cls.name().title()} Block"


__all__ = ["BlockType", "Context", "TypeInfo"]
