"""Digest entry points.

Constructors and one-shot helpers on top of :class:`~blake256.crypto.digest.Blake256`.
"""

from __future__ import annotations

import os
from typing import Iterable

from blake256.logs import get_logger

from .digest import Blake224, Blake256

log = get_logger(__name__)

_CHUNK = 64 * 1024


def new(data: bytes = b"", salt: bytes | None = None) -> Blake256:
    """Return a new BLAKE-256 hash object, optionally salted."""

    return Blake256(data, salt=salt)


def new224(data: bytes = b"", salt: bytes | None = None) -> Blake224:
    """Return a new BLAKE-224 hash object, optionally salted."""

    return Blake224(data, salt=salt)


def blake_digest(data: bytes, *, digest_bits: int = 256, salt: bytes | None = None) -> bytes:
    """Compute a BLAKE digest in one call.

    Args:
        data: Data to hash.
        digest_bits: Output width, 256 or 224.
        salt: Optional 16-byte salt.

    Returns:
        Digest bytes (32 or 28).
    """

    return Blake256(data, digest_bits=digest_bits, salt=salt).digest()


def blake256_digest(data: bytes, *, salt: bytes | None = None) -> bytes:
    return blake_digest(data, digest_bits=256, salt=salt)


def blake224_digest(data: bytes, *, salt: bytes | None = None) -> bytes:
    return blake_digest(data, digest_bits=224, salt=salt)


def digest_chunks(
    chunks: Iterable[bytes],
    *,
    digest_bits: int = 256,
    salt: bytes | None = None,
) -> bytes:
    """Hash a sequence of byte chunks as one message."""

    h = Blake256(digest_bits=digest_bits, salt=salt)
    for chunk in chunks:
        h.update(chunk)
    return h.digest()


def digest_file(
    path: str | os.PathLike[str],
    *,
    chunk_size: int = _CHUNK,
    digest_bits: int = 256,
    salt: bytes | None = None,
) -> bytes:
    """Hash a file, reading it in ``chunk_size`` pieces.

    Raises:
        ValueError: If ``chunk_size`` is not positive.
        OSError: If the file cannot be read.
    """

    if chunk_size <= 0:
        raise ValueError("chunk_size must be positive")

    h = Blake256(digest_bits=digest_bits, salt=salt)
    with open(path, "rb") as f:
        while True:
            chunk = f.read(chunk_size)
            if not chunk:
                break
            h.update(chunk)

    log.debug("hashed %s with %s", path, h.name)
    return h.digest()
