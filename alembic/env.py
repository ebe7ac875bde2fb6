"""Alembic environment configuration for async SQLAlchemy.

Runs migrations over the async engine built from settings.database_url, then
seeds demo data (skip with `-x seed=false`).
"""

import asyncio
import sys
from logging.config import fileConfig
from pathlib import Path
from typing import TYPE_CHECKING

from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import async_engine_from_config

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncEngine

from alembic import context
from folio.core.config import settings
from folio.infrastructure.persistence.models import BaseModel

# Alembic Config object
config = context.config

# Interpret the config file for Python logging
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

# Database URL comes from Settings (not from alembic.ini)
config.set_main_option("sqlalchemy.url", settings.database_url)

# models/__init__ imports every model, so the metadata is complete
target_metadata = BaseModel.metadata


def run_migrations_offline() -> None:
    """Run migrations in 'offline' mode (emit SQL, no Engine)."""
    url = config.get_main_option("sqlalchemy.url")
    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection: Connection) -> None:
    """Run migrations with the given connection.

    SQLite needs batch mode for ALTER TABLE support.
    """
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        render_as_batch=connection.dialect.name == "sqlite",
    )

    with context.begin_transaction():
        context.run_migrations()


def _seeding_enabled() -> bool:
    """Seed after `alembic upgrade`, unless run with `-x seed=false`."""
    cmd = getattr(config.cmd_opts, "cmd", None)
    if not cmd or getattr(cmd[0], "__name__", "") != "upgrade":
        return False
    flag = context.get_x_argument(as_dictionary=True).get("seed", "true")
    return flag.strip().lower() not in {"0", "false", "no", "n"}


async def run_async_migrations() -> None:
    """Apply migrations over an async engine, then seed demo data."""
    engine = async_engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    async with engine.connect() as connection:
        await connection.run_sync(do_run_migrations)

    if _seeding_enabled():
        await _seed(engine)

    await engine.dispose()


async def _seed(engine: "AsyncEngine") -> None:
    """Insert demo instruments and accounts (idempotent)."""
    from sqlalchemy.ext.asyncio import async_sessionmaker

    # seeds/ is a sibling of this file, not part of the folio package
    here = str(Path(__file__).resolve().parent)
    if here not in sys.path:
        sys.path.insert(0, here)

    from seeds import run_all_seeders  # noqa: E402

    session_factory = async_sessionmaker(engine, expire_on_commit=False)
    async with session_factory() as session:
        await run_all_seeders(session)
        await session.commit()


def run_migrations_online() -> None:
    """Run migrations in 'online' mode using async engine."""
    asyncio.run(run_async_migrations())


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
