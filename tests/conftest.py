import os
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from stackgallery import create_app
from stackgallery.extensions import db as _db

PASSWORD = "secret123"


@pytest.fixture
def app(tmp_path):
    app = create_app('config.TestConfig')
    app.config['LOCAL_STORAGE_DIR'] = str(tmp_path / 'userData')
    with app.app_context():
        _db.create_all()
    # requests push their own app context, so g (and the logged-in user) is per request
    yield app
    with app.app_context():
        _db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def signup(client):
    def _signup(username, password=PASSWORD, company=None):
        if company is None:
            res = client.post('/api/user/signup', json={'username': username, 'password': password})
        else:
            res = client.post('/api/recruiter/signup',
                              json={'username': username, 'password': password, 'company': company})
        assert res.status_code == 200, res.get_json()
        return res.get_json()
    return _signup


@pytest.fixture
def login(client):
    def _login(username, password=PASSWORD):
        res = client.post('/api/user/login', json={'username': username, 'password': password})
        assert res.status_code == 200, res.get_json()
        return res.get_json()
    return _login


@pytest.fixture
def alice(signup, login):
    signup('alice')
    signup('bob')
    return login('alice')


@pytest.fixture
def question(client, alice):
    res = client.post('/api/question/addQuestion', json={
        'title': 'Exporting rigs from Blender',
        'text': 'How do I keep bone weights when exporting to .glb?',
        'askedBy': 'alice',
        'tags': [{'name': 'blender', 'description': 'Blender questions'}],
    })
    assert res.status_code == 200, res.get_json()
    return res.get_json()
