import pytest
import yaml

from cms.services.auth_service import CredentialStore, hash_password, verify_password

from conftest import ADMIN_PASSWORD, ADMIN_USERNAME


@pytest.fixture
def credentials(credentials_file):
    return CredentialStore(credentials_file)


def test_valid_credentials(credentials):
    assert credentials.authenticate(ADMIN_USERNAME, ADMIN_PASSWORD)


def test_wrong_password(credentials):
    assert not credentials.authenticate(ADMIN_USERNAME, 'shhh')


@pytest.mark.parametrize('password', [ADMIN_PASSWORD, 'shhh', ''])
def test_unknown_user_always_fails(credentials, password):
    assert not credentials.authenticate('guest', password)


@pytest.mark.parametrize('username, password', [('', ADMIN_PASSWORD), (None, ADMIN_PASSWORD), (ADMIN_USERNAME, None)])
def test_missing_fields_fail(credentials, username, password):
    assert not credentials.authenticate(username, password)


def test_missing_file_means_no_users(tmp_path):
    credentials = CredentialStore(tmp_path / 'absent.yml')

    assert credentials.load() == {}
    assert not credentials.authenticate(ADMIN_USERNAME, ADMIN_PASSWORD)


def test_malformed_file_raises(tmp_path):
    path = tmp_path / 'users.yml'
    path.write_text('- admin\n- guest\n')

    with pytest.raises(ValueError):
        CredentialStore(path).authenticate(ADMIN_USERNAME, ADMIN_PASSWORD)


def test_save_user_adds_and_replaces(tmp_path):
    path = tmp_path / 'users.yml'
    credentials = CredentialStore(path)

    assert credentials.save_user('editor', 'first-password') is True
    assert credentials.authenticate('editor', 'first-password')

    assert credentials.save_user('editor', 'second-password') is False
    assert not credentials.authenticate('editor', 'first-password')
    assert credentials.authenticate('editor', 'second-password')

    stored = yaml.safe_load(path.read_text())
    assert list(stored) == ['editor']
    assert stored['editor'].startswith('$2')


def test_hash_password_round_trip():
    password_hash = hash_password('secret')

    assert password_hash != 'secret'
    assert verify_password('secret', password_hash)
    assert not verify_password('Secret', password_hash)


def test_overlong_password_does_not_match(credentials):
    assert not credentials.authenticate(ADMIN_USERNAME, 'x' * 100)
    assert not verify_password('é' * 40, hash_password('secret'))


def test_malformed_hash_raises(tmp_path):
    path = tmp_path / 'users.yml'
    path.write_text(yaml.safe_dump({ADMIN_USERNAME: 'not-a-bcrypt-hash'}))

    with pytest.raises(ValueError):
        CredentialStore(path).authenticate(ADMIN_USERNAME, ADMIN_PASSWORD)
