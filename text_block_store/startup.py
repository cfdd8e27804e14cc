"""Startup helpers for bootstrapping a store and its block types."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session, sessionmaker

from text_block_store.config import StoreSettings
from text_block_store.db.engine import create_engine, create_session_factory
from text_block_store.db.schema import create_all

logger = logging.getLogger(__name__)


def bootstrap(settings: StoreSettings | None = None) -> sessionmaker[Session]:
    """Return a session factory for a store whose schema is ready to use.

    - Without ``settings`` they are read from the environment.
    - Tables are created if missing; existing data is left alone.
    """
    settings = settings or StoreSettings.from_env()
    if settings.database_url:
        engine = create_engine(settings.database_url, echo=settings.echo)
    else:
        engine = create_engine(sqlite_path=settings.sqlite_path, echo=settings.echo)

    create_all(engine)
    logger.info("Block store ready on %s", engine.url.render_as_string(hide_password=True))
    return create_session_factory(engine)


__all__ = ["bootstrap"]
