"""BLAKE-256 and BLAKE-224 hashing.

The main entry point is :class:`~blake256.crypto.digest.Blake256`, an
incremental hash object with the familiar :mod:`hashlib` interface. The
compression function is exposed separately in :mod:`.compress`.
"""

from __future__ import annotations

from .constants import BLOCK_SIZE, DIGEST_SIZE_224, DIGEST_SIZE_256, SALT_SIZE
from .digest import Blake224, Blake256
from .errors import (
    CryptoError,
    InvalidSaltError,
    StateFormatError,
    UnsupportedDigestSizeError,
)
from .hashes import (
    blake224_digest,
    blake256_digest,
    blake_digest,
    digest_chunks,
    digest_file,
    new,
    new224,
)
from .random import random_bytes, random_salt
from .serialization import (
    deserialize_digest_state,
    serialize_digest_state,
)

__all__ = [
    "BLOCK_SIZE",
    "Blake224",
    "Blake256",
    "CryptoError",
    "DIGEST_SIZE_224",
    "DIGEST_SIZE_256",
    "InvalidSaltError",
    "SALT_SIZE",
    "StateFormatError",
    "UnsupportedDigestSizeError",
    "blake224_digest",
    "blake256_digest",
    "blake_digest",
    "deserialize_digest_state",
    "digest_chunks",
    "digest_file",
    "new",
    "new224",
    "random_bytes",
    "random_salt",
    "serialize_digest_state",
]
