"""Alembic entry point for the catalog schema.

The target URL is ``-x database_url=...`` when given, otherwise the
application's configured ``database_url``. Online runs open their own
pool-less async engine so a migration never shares connections with a
running app.
"""

from __future__ import annotations

import asyncio
from logging.config import fileConfig

from alembic import context
from sqlalchemy.engine import Connection, make_url
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import NullPool

from catalog.core.config import get_settings
from catalog.db import models  # noqa: F401  registers tables on Base.metadata
from catalog.infrastructure.database.base import Base

alembic_config = context.config
if alembic_config.config_file_name is not None:
    fileConfig(alembic_config.config_file_name)


def migration_url() -> str:
    return context.get_x_argument(as_dictionary=True).get("database_url") or get_settings().database_url


def is_sqlite(url: str) -> bool:
    return make_url(url).get_backend_name() == "sqlite"


def configure_context(url: str, **options) -> None:
    # SQLite cannot ALTER most columns in place; batch mode rebuilds the table
    context.configure(
        target_metadata=Base.metadata,
        compare_type=True,
        render_as_batch=is_sqlite(url),
        **options,
    )


def emit_sql(url: str) -> None:
    sync_url = make_url(url).set(drivername=make_url(url).get_backend_name())
    configure_context(url, url=sync_url, literal_binds=True, dialect_opts={"paramstyle": "named"})
    with context.begin_transaction():
        context.run_migrations()


def apply_on(connection: Connection, url: str) -> None:
    configure_context(url, connection=connection)
    with context.begin_transaction():
        context.run_migrations()


async def apply(url: str) -> None:
    engine = create_async_engine(url, poolclass=NullPool)
    try:
        async with engine.connect() as connection:
            await connection.run_sync(apply_on, url)
    finally:
        await engine.dispose()


url = migration_url()
if context.is_offline_mode():
    emit_sql(url)
else:
    asyncio.run(apply(url))
