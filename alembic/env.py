import os
import sys
from logging.config import fileConfig

from alembic import context
from flask import current_app, has_app_context

config = context.config
# `flask db` points config_file_name at alembic/alembic.ini, which this repo keeps at the root
if config.config_file_name and os.path.exists(config.config_file_name):
    fileConfig(config.config_file_name, disable_existing_loggers=False)


def _flask_app():
    if has_app_context():
        return current_app._get_current_object()
    # plain `alembic upgrade head` from the repository root
    sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
    from wsgi import app
    return app


app = _flask_app()

with app.app_context():
    import stackgallery.models  # noqa: F401
    from stackgallery.extensions import db

    target_metadata = db.metadata


def run_migrations_offline():
    with app.app_context():
        url = db.engine.url.render_as_string(hide_password=False)
    context.configure(url=url, target_metadata=target_metadata,
                      literal_binds=True, compare_type=True, render_as_batch=True)
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online():
    # the app's own engine, so in-memory and instance-relative sqlite URLs work
    with app.app_context(), db.engine.connect() as connection:
        context.configure(connection=connection, target_metadata=target_metadata,
                          compare_type=True, render_as_batch=True)
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
