"""
Credential lookup and password verification for sign-in.
"""
import logging
from pathlib import Path
from typing import Dict, Optional, Union

import bcrypt
import yaml
from flask import current_app

logger = logging.getLogger(__name__)


def hash_password(password: str) -> str:
    """Hash a password using bcrypt"""
    salt = bcrypt.gensalt(rounds=12)
    return bcrypt.hashpw(password.encode('utf-8'), salt).decode('utf-8')


BCRYPT_MAX_PASSWORD_BYTES = 72


def verify_password(password: str, password_hash: str) -> bool:
    """
    Verify a password against a bcrypt hash.

    Passwords bcrypt cannot hash simply fail to match. A malformed stored
    hash still raises ValueError.
    """
    password_bytes = password.encode('utf-8')
    if len(password_bytes) > BCRYPT_MAX_PASSWORD_BYTES:
        return False
    return bcrypt.checkpw(password_bytes, password_hash.encode('utf-8'))


class CredentialStore:
    """
    Username to bcrypt-hash mapping kept in a YAML file.

    The file is read on every lookup so edits made by scripts/create_user.py
    take effect without a restart. A missing file means no users; a malformed
    file raises.
    """

    def __init__(self, credentials_path: Union[str, Path]):
        self.credentials_path = Path(credentials_path)

    def load(self) -> Dict[str, str]:
        """Load the credential mapping."""
        if not self.credentials_path.exists():
            logger.warning(f"Credential file not found: {self.credentials_path}")
            return {}

        with open(self.credentials_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"Credential file {self.credentials_path} must contain a mapping")
        return {str(username): str(password_hash) for username, password_hash in data.items()}

    def authenticate(self, username: Optional[str], password: Optional[str]) -> bool:
        """
        Check a username/password pair.

        Unknown users fail without distinguishing them from a wrong password.
        """
        if not username or password is None:
            return False

        password_hash = self.load().get(username)
        if password_hash is None:
            logger.warning(f"Failed sign-in for unknown user {username!r}")
            return False

        if verify_password(password, password_hash):
            logger.info(f"User {username!r} signed in")
            return True

        logger.warning(f"Failed sign-in for user {username!r}")
        return False

    def save_user(self, username: str, password: str) -> bool:
        """
        Add or replace a user.

        Returns:
            True if the user was new, False if an existing entry was replaced
        """
        credentials = self.load()
        is_new = username not in credentials
        credentials[username] = hash_password(password)

        self.credentials_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.credentials_path, 'w', encoding='utf-8') as f:
            yaml.safe_dump(credentials, f, default_flow_style=False)
        return is_new


def init_credential_store(app) -> CredentialStore:
    """Initialize the credential store with Flask app."""
    store = CredentialStore(app.config['CREDENTIALS_PATH'])
    app.extensions['credential_store'] = store
    return store


def get_credential_store() -> CredentialStore:
    """Get the credential store of the current app."""
    store = current_app.extensions.get('credential_store')
    if store is None:
        raise RuntimeError("Credential store not initialized. Call init_credential_store() first.")
    return store
