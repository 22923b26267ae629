"""Shared exceptions for :mod:`blake256.crypto`.

Only construction-time contract violations raise. Hashing itself (``update`` and
``digest``) is total over all byte inputs.
"""

from __future__ import annotations


class CryptoError(Exception):
    """Base error for hashing operations."""


class InvalidSaltError(CryptoError, ValueError):
    """Raised when a salt is supplied with a length other than 16 bytes."""


class UnsupportedDigestSizeError(CryptoError, ValueError):
    """Raised when a digest width other than 224 or 256 bits is requested."""


class StateFormatError(CryptoError, ValueError):
    """Raised when a serialized digest state is malformed."""
