"""Alembic environment for the aione schema.

The database URL always comes from aione settings (DATABASE_URL), never from
alembic.ini. Callers that already hold a connection (tests, admin scripts) can
pass it as ``config.attributes["connection"]`` to migrate inside it.
"""

from logging.config import fileConfig

from alembic import context
from sqlalchemy import create_engine
from sqlalchemy.engine import Connection
from sqlalchemy.pool import NullPool

from aione.core.config import settings
from aione.models import Base

# Registers every table on Base.metadata for autogenerate.
from aione.models import Aircraft, Presentation, User  # noqa: F401

config = context.config
# alembic.ini may omit logging sections; fileConfig would raise KeyError then.
if config.config_file_name is not None:
    try:
        fileConfig(config.config_file_name)
    except KeyError:
        pass

target_metadata = Base.metadata


def _configure_kwargs() -> dict:
    # sqlite cannot ALTER most constraints in place; batch mode recreates tables instead.
    return {
        "target_metadata": target_metadata,
        "render_as_batch": settings.is_sqlite,
        "compare_type": True,
    }


def run_migrations_offline() -> None:
    """Emit SQL for the configured database without connecting."""
    context.configure(
        url=settings.DATABASE_URL,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **_configure_kwargs(),
    )
    with context.begin_transaction():
        context.run_migrations()


def _run_with_connection(connection: Connection) -> None:
    context.configure(connection=connection, **_configure_kwargs())
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Migrate through a supplied connection, or a short-lived engine on DATABASE_URL."""
    connection = config.attributes.get("connection")
    if connection is not None:
        _run_with_connection(connection)
        return
    engine = create_engine(settings.DATABASE_URL, poolclass=NullPool)
    try:
        with engine.connect() as conn:
            _run_with_connection(conn)
    finally:
        engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
