"""Token storage in the system keyring."""

from typing import Optional

import keyring
from keyring.errors import PasswordDeleteError

KEYRING_SYSTEM = "noteof://api-token"


def get_token_from_keyring(username: str) -> Optional[str]:
    """Get the stored API token for a username."""
    return keyring.get_password(KEYRING_SYSTEM, username)


def token_exists_in_keyring(username: str) -> bool:
    """Return True if an API token is stored for the username."""
    return get_token_from_keyring(username) is not None


def store_token_in_keyring(username: str, token: str) -> None:
    """Store the API token of a username."""
    return keyring.set_password(KEYRING_SYSTEM, username, token)


def delete_token_in_keyring(username: str) -> bool:
    """Remove the stored API token of a username. Returns False if none was stored."""
    try:
        keyring.delete_password(KEYRING_SYSTEM, username)
    except PasswordDeleteError:
        return False
    return True
