import os

from flask_migrate import downgrade, upgrade
from sqlalchemy import inspect

from stackgallery import create_app
from stackgallery.extensions import db

MIGRATIONS = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'alembic'))


def test_initial_revision_matches_models():
    app = create_app('config.TestConfig')
    with app.app_context():
        upgrade(directory=MIGRATIONS)
        insp = inspect(db.engine)
        assert 'alembic_version' in insp.get_table_names()
        for table in db.metadata.sorted_tables:
            migrated = {c['name'] for c in insp.get_columns(table.name)}
            assert migrated == set(table.columns.keys()), table.name

        downgrade(directory=MIGRATIONS, revision='base')
        assert set(inspect(db.engine).get_table_names()) <= {'alembic_version'}
