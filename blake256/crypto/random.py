"""Secure randomness utilities."""

from __future__ import annotations

import os

from .constants import SALT_SIZE


def random_bytes(length: int) -> bytes:
    """Return ``length`` cryptographically secure random bytes."""

    if length < 0:
        raise ValueError("length must be non-negative")
    return os.urandom(length)


def random_salt() -> bytes:
    """Return a fresh 16-byte salt."""

    return random_bytes(SALT_SIZE)
