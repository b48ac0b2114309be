"""Identifier and token generation."""

import secrets
import string
from datetime import datetime

TOKEN_ALPHABET = string.ascii_lowercase + string.digits


def generate_token(length: int = 24) -> str:
    """Generate a shareable random token over ``[a-z0-9]``."""
    return "".join(secrets.choice(TOKEN_ALPHABET) for _ in range(length))


def generate_id(prefix: str, now: datetime) -> str:
    """Generate a prefixed entity id, e.g. ``inv_1736942400000_k3j9x0a2b``.

    The millisecond timestamp keeps ids roughly sortable; the random suffix
    keeps ids minted in the same millisecond apart.
    """
    millis = int(now.timestamp() * 1000)
    return f"{prefix}_{millis}_{generate_token(9)}"
