from pathlib import Path

import bcrypt
import pytest
import yaml

from cms import create_app

ADMIN_USERNAME = 'admin'
ADMIN_PASSWORD = 'secret'


@pytest.fixture(scope='session')
def credentials_file(tmp_path_factory) -> Path:
    # Low work factor keeps the suite fast; checkpw reads the cost from the hash.
    password_hash = bcrypt.hashpw(ADMIN_PASSWORD.encode('utf-8'), bcrypt.gensalt(rounds=4))
    path = tmp_path_factory.mktemp('credentials') / 'users.yml'
    path.write_text(yaml.safe_dump({ADMIN_USERNAME: password_hash.decode('utf-8')}))
    return path


@pytest.fixture
def data_path(tmp_path: Path) -> Path:
    path = tmp_path / 'data'
    path.mkdir()
    return path


@pytest.fixture
def app(data_path, credentials_file):
    return create_app('testing', overrides={
        'DATA_PATH': data_path,
        'CREDENTIALS_PATH': credentials_file,
    })


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def create_document(data_path):
    def _create(name: str, content: str = '') -> Path:
        path = data_path / name
        path.write_text(content)
        return path
    return _create


@pytest.fixture
def admin_session(client):
    """Sign the test client in without going through the form."""
    with client.session_transaction() as sess:
        sess['username'] = ADMIN_USERNAME
    return client


def flashed_messages(client):
    """Flash messages queued in the client's session and not yet displayed."""
    with client.session_transaction() as sess:
        return [message for _, message in sess.get('_flashes', [])]


def session_value(client, key):
    with client.session_transaction() as sess:
        return sess.get(key)
