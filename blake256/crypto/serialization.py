"""Serialization helpers for in-progress hash state.

A snapshot lets a long computation be checkpointed and resumed later (or in
another process). Snapshots are taken between updates, so they never carry the
finalization-only skip-counter flag.
"""

from __future__ import annotations

import base64
import binascii
from typing import Any, Mapping

from .constants import BLOCK_SIZE, MASK32, MASK64, SALT_SIZE
from .digest import Blake256, restore_state
from .errors import StateFormatError


def _b64e(b: bytes) -> str:
    return base64.b64encode(b).decode("ascii")


def _b64d(s: str) -> bytes:
    return base64.b64decode(s.encode("ascii"), validate=True)


def serialize_digest_state(state: Blake256) -> dict[str, Any]:
    """Serialize a :class:`~blake256.crypto.digest.Blake256` to a JSON-safe dict."""

    return {
        "digest_bits": state.digest_bits,
        "chain": list(state.chain_value),
        "salt": _b64e(state.salt),
        "counter": state.counter,
        "buffer": _b64e(state.buffered),
    }


def deserialize_digest_state(blob: Mapping[str, Any]) -> Blake256:
    """Rebuild a hash object from :func:`serialize_digest_state` output.

    Raises:
        StateFormatError: If the blob is incomplete or inconsistent.
    """

    try:
        digest_bits = int(blob["digest_bits"])
        chain = [int(w) for w in blob["chain"]]
        counter = int(blob["counter"])
        salt = _b64d(str(blob.get("salt", "")))
        buffer = _b64d(str(blob.get("buffer", "")))
    except (KeyError, TypeError, ValueError, binascii.Error) as e:
        raise StateFormatError("malformed digest state") from e

    if digest_bits not in (224, 256):
        raise StateFormatError(f"unsupported digest_bits {digest_bits}")
    if len(chain) != 8 or any(w < 0 or w > MASK32 for w in chain):
        raise StateFormatError("chain must be eight 32-bit words")
    if len(salt) not in (0, SALT_SIZE):
        raise StateFormatError("salt must be empty or 16 bytes")
    if counter < 0 or counter > MASK64 or counter % 512:
        raise StateFormatError("counter must be a multiple of 512 within 64 bits")
    if len(buffer) >= BLOCK_SIZE:
        raise StateFormatError("buffer must hold fewer than 64 bytes")

    return restore_state(digest_bits, chain, salt or None, counter, buffer)
