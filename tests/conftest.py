from __future__ import annotations

import os
from collections.abc import Iterator
from typing import Callable

import pytest
from sqlalchemy.engine import Engine

from text_block_store.auth import StaticTokenValidator
from text_block_store.blocks.base import Context
from text_block_store.blocks.text.create import BLOCK_NAME, DATA_BLOCK_TYPE
from text_block_store.db.engine import create_engine
from text_block_store.db.schema import Base, DbBlock, create_all
from text_block_store.models.block import Block, NewBlock
from text_block_store.repositories.block_repository import BlockRepository
from text_block_store.repositories.permission_repository import PermissionRepository
from text_block_store.repositories.property_repository import PropertyRepository

OWNER_ID = 1
VIEWER_ID = 2
EDITOR_ID = 3

TOKENS = {
    "owner-token": OWNER_ID,
    "viewer-token": VIEWER_ID,
    "editor-token": EDITOR_ID,
}


@pytest.fixture(scope="session")
def postgres_url() -> str | None:
    """Return the Postgres test URL if provided via env."""
    return os.getenv("POSTGRES_TEST_URL") or os.getenv("DATABASE_URL")


@pytest.fixture
def engine(postgres_url: str | None) -> Iterator[Engine]:
    """Yield an engine targeting Postgres when configured; otherwise SQLite in-memory."""
    engine = create_engine(postgres_url) if postgres_url else create_engine()
    create_all(engine)
    try:
        yield engine
    finally:
        with engine.begin() as connection:
            if engine.dialect.name == "sqlite":
                Base.metadata.drop_all(bind=connection)
            else:
                connection.execute(DbBlock.__table__.delete())


@pytest.fixture
def session_factory(engine: Engine):
    from text_block_store.db.engine import create_session_factory

    return create_session_factory(engine)


@pytest.fixture
def block_repository(session_factory) -> BlockRepository:
    return BlockRepository(session_factory)


@pytest.fixture
def property_repository(session_factory) -> PropertyRepository:
    return PropertyRepository(session_factory)


@pytest.fixture
def permission_repository(session_factory) -> PermissionRepository:
    return PermissionRepository(session_factory)


@pytest.fixture
def context_factory(session_factory) -> Callable[..., Context]:
    validator = StaticTokenValidator(TOKENS)

    def _factory(token: str | None = None) -> Context:
        return Context(session_factory=session_factory, token=token, token_validator=validator)

    return _factory


@pytest.fixture
def data_block_factory(block_repository: BlockRepository) -> Callable[..., Block]:
    def _factory(data: str | None, *, owner_id: int = OWNER_ID, public: bool = False) -> Block:
        return block_repository.insert_block(
            NewBlock(block_type=DATA_BLOCK_TYPE, owner_id=owner_id, block_data=data, public=public)
        )

    return _factory


@pytest.fixture
def text_block_factory(
    block_repository: BlockRepository,
    property_repository: PropertyRepository,
    data_block_factory: Callable[..., Block],
) -> Callable[..., Block]:
    """Insert a text block and, for each given value, a linked data child."""

    def _factory(
        *,
        name: str | None = None,
        content: str | None = None,
        owner_id: int = OWNER_ID,
        public: bool = False,
        color: str | None = None,
    ) -> Block:
        parent = block_repository.insert_block(
            NewBlock(block_type=BLOCK_NAME, owner_id=owner_id, public=public, color=color)
        )
        for property_name, value in (("name", name), ("content", content)):
            if value is None:
                continue
            child = data_block_factory(value, owner_id=owner_id, public=public)
            property_repository.insert_property(parent.make_property(property_name, child.id))
        return parent

    return _factory
