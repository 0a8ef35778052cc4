from __future__ import annotations

import secrets

DEFAULT_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"
DEFAULT_SIZE = 7


def generate_id(size: int = DEFAULT_SIZE, alphabet: str = DEFAULT_ALPHABET) -> str:
    """Return a random identifier of ``size`` characters drawn from ``alphabet``."""
    return "".join(secrets.choice(alphabet) for _ in range(size))
