#!/usr/bin/env python
"""Script to add or replace a user in the CMS credential file."""
import argparse
import sys
import os
from getpass import getpass

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from cms.config import get_config
from cms.services.auth_service import CredentialStore


def read_password(prompt: str = 'Password: ') -> str:
    try:
        if sys.stdin.isatty():
            return getpass(prompt)
        return sys.stdin.readline().rstrip('\n')
    except (EOFError, KeyboardInterrupt):
        print("\nAborted")
        sys.exit(1)


def main():
    parser = argparse.ArgumentParser(description='Add or replace a CMS user')
    parser.add_argument('username', help='Username to create or update')
    parser.add_argument('--password',
                        help='Password (prompted for when omitted)')
    parser.add_argument('--credentials',
                        help='Credential YAML file (default: CREDENTIALS_PATH of the active config)')
    parser.add_argument('--config', default=None,
                        help="Configuration name ('development', 'production', 'testing')")
    args = parser.parse_args()

    username = args.username.strip()
    if not username:
        print("Username must not be empty.")
        sys.exit(1)

    password = args.password if args.password is not None else read_password()
    if not password:
        print("Password must not be empty.")
        sys.exit(1)

    credentials_path = args.credentials or get_config(args.config).CREDENTIALS_PATH
    store = CredentialStore(credentials_path)
    created = store.save_user(username, password)

    action = 'Added' if created else 'Updated'
    print(f"{action} user {username!r} in {credentials_path}")


if __name__ == '__main__':
    main()
