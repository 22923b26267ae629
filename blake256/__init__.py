"""blake256: BLAKE-256 and BLAKE-224 hashing in pure Python.

The hashing primitives live under :mod:`blake256.crypto`; the most common
entry points are re-exported here.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .config import DigestSize, HashConfig
from .crypto import (
    Blake224,
    Blake256,
    CryptoError,
    InvalidSaltError,
    blake224_digest,
    blake256_digest,
    new,
    new224,
)

__all__ = [
    "Blake224",
    "Blake256",
    "CryptoError",
    "DigestSize",
    "HashConfig",
    "InvalidSaltError",
    "blake224_digest",
    "blake256_digest",
    "new",
    "new224",
]
