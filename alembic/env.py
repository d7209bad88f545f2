"""Alembic environment for the store catalog schema."""

from logging.config import fileConfig

from alembic import context
from sqlalchemy import engine_from_config, pool

from store_locator.adapters.persistence.database import Base
from store_locator.adapters.persistence.models import StoreModel  # noqa: F401
from store_locator.config import settings

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

# Migrations run on psycopg2; the app itself uses asyncpg
config.set_main_option(
    "sqlalchemy.url", settings.database_url.replace("+asyncpg", "+psycopg2")
)

target_metadata = Base.metadata


def run_migrations_offline() -> None:
    """Emit the migration SQL without a database connection."""
    context.configure(
        url=config.get_main_option("sqlalchemy.url"),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    connectable = engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )
    try:
        with connectable.connect() as connection:
            context.configure(connection=connection, target_metadata=target_metadata)
            with context.begin_transaction():
                context.run_migrations()
    finally:
        connectable.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
