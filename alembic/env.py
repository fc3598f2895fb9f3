"""Alembic environment for the users/sessions schema; the URL comes from roster settings."""

from logging.config import fileConfig

from alembic import context
from sqlalchemy import create_engine
from sqlalchemy.pool import NullPool

from roster.core.config import settings
from roster.models import Base

config = context.config
# alembic.ini ships without logging sections; fileConfig raises KeyError then.
if config.config_file_name is not None:
    try:
        fileConfig(config.config_file_name)
    except KeyError:
        pass

url = settings.DATABASE_URL
# SQLite cannot ALTER constraints in place; batch mode rebuilds the table instead.
configure_opts = {
    "target_metadata": Base.metadata,
    "render_as_batch": url.startswith("sqlite"),
    "compare_type": True,
}

if context.is_offline_mode():
    context.configure(
        url=url,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **configure_opts,
    )
    with context.begin_transaction():
        context.run_migrations()
else:
    with create_engine(url, poolclass=NullPool).connect() as connection:
        context.configure(connection=connection, **configure_opts)
        with context.begin_transaction():
            context.run_migrations()
