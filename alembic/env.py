import os
import sys
from logging.config import fileConfig

from alembic import context
from sqlalchemy import create_engine, pool

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))
from employee_management.db import Base, resolve_database_url
from employee_management import models  # noqa: F401

config = context.config

if config.config_file_name is not None and config.get_section("loggers"):
    fileConfig(config.config_file_name)

# Same resolution as the application; alembic.ini only holds a placeholder
url = resolve_database_url()
config.set_main_option("sqlalchemy.url", url)
target_metadata = Base.metadata

# SQLite cannot ALTER constraints in place; batch mode recreates the table
render_as_batch = url.startswith("sqlite")

if context.is_offline_mode():
    context.configure(url=url, target_metadata=target_metadata, literal_binds=True, render_as_batch=render_as_batch)
    with context.begin_transaction():
        context.run_migrations()
else:
    connectable = create_engine(url, poolclass=pool.NullPool)
    with connectable.connect() as connection:
        context.configure(connection=connection, target_metadata=target_metadata, render_as_batch=render_as_batch)
        with context.begin_transaction():
            context.run_migrations()
