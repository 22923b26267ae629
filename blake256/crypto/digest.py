"""Incremental BLAKE-256 / BLAKE-224 hashing.

:class:`Blake256` holds the digest state (chain value, salt, bit counter and a
partial-block buffer) and follows the :mod:`hashlib` object protocol::

    h = Blake256(salt=salt)
    h.update(b"first chunk")
    h.update(b"second chunk")
    h.hexdigest()

``digest()`` pads and compresses a copy of the state, so a hash object can be
read at any point and still accept more data afterwards.
"""

from __future__ import annotations

import logging
import struct

from blake256.logs import get_logger

from .compress import compress
from .constants import (
    BLOCK_SIZE,
    IV224,
    IV256,
    MASK64,
    PADDING,
    SALT_SIZE,
)
from .errors import InvalidSaltError, UnsupportedDigestSizeError

log = get_logger(__name__)

_SALT_WORDS = struct.Struct(">4L")

# Bytes left in a block once the terminator and the 64-bit length are placed.
_LAST_BLOCK_DATA = BLOCK_SIZE - 9


def _salt_words(salt: bytes | None) -> tuple[int, int, int, int]:
    if salt is None:
        return (0, 0, 0, 0)
    salt = bytes(salt)
    if len(salt) != SALT_SIZE:
        raise InvalidSaltError(f"salt must be {SALT_SIZE} bytes, got {len(salt)}")
    return _SALT_WORDS.unpack(salt)


class Blake256:
    """BLAKE-256 hash object (or BLAKE-224 with ``digest_bits=224``).

    Args:
        data: Optional initial data, hashed as if passed to :meth:`update`.
        digest_bits: Output width, 256 or 224.
        salt: Optional 16-byte salt. Omitting it is the same as an all-zero salt.

    Raises:
        UnsupportedDigestSizeError: If ``digest_bits`` is not 224 or 256.
        InvalidSaltError: If ``salt`` is not exactly 16 bytes.
    """

    block_size = BLOCK_SIZE

    def __init__(self, data: bytes = b"", *, digest_bits: int = 256, salt: bytes | None = None) -> None:
        if not isinstance(digest_bits, int) or digest_bits not in (224, 256):
            raise UnsupportedDigestSizeError(f"digest_bits must be 224 or 256, got {digest_bits!r}")

        self.digest_bits = digest_bits
        self._salt = _salt_words(salt)
        self.reset()
        log.debug("new %s hasher (salted=%s)", self.name, salt is not None)

        if data:
            self.update(data)

    @property
    def name(self) -> str:
        return f"blake{self.digest_bits}"

    @property
    def digest_size(self) -> int:
        return self.digest_bits >> 3

    @property
    def salt(self) -> bytes:
        """The 16-byte salt in use (all zeros when none was given)."""

        return _SALT_WORDS.pack(*self._salt)

    @property
    def chain_value(self) -> tuple[int, ...]:
        return tuple(self._h)

    @property
    def counter(self) -> int:
        """Number of message bits compressed so far."""

        return self._t

    @property
    def buffered(self) -> bytes:
        """Bytes waiting for a full block."""

        return bytes(self._buf)

    def reset(self) -> None:
        """Return to the initial state, keeping the width and the salt."""

        self._h = list(IV224 if self.digest_bits == 224 else IV256)
        self._t = 0
        self._nullt = False
        self._buf = bytearray()

    def copy(self) -> "Blake256":
        """Return an independent copy of the current state."""

        other = object.__new__(type(self))
        other.digest_bits = self.digest_bits
        other._salt = self._salt
        other._h = list(self._h)
        other._t = self._t
        other._nullt = self._nullt
        other._buf = bytearray(self._buf)
        return other

    def update(self, data: bytes) -> None:
        """Feed ``data`` (any bytes-like object) into the hash."""

        view = memoryview(data).cast("B")
        n = len(view)
        if not n:
            return

        pos = 0
        if self._buf:
            fill = BLOCK_SIZE - len(self._buf)
            if n < fill:
                self._buf += view
                return
            self._buf += view[:fill]
            self._compress_block(self._buf)
            self._buf.clear()
            pos = fill

        # Full blocks are compressed straight from the input.
        while n - pos >= BLOCK_SIZE:
            self._compress_block(view, pos)
            pos += BLOCK_SIZE

        if pos < n:
            self._buf += view[pos:]

    def digest(self) -> bytes:
        """Return the digest of everything fed so far (28 or 32 bytes)."""

        return self.copy()._finalize()

    def hexdigest(self) -> str:
        return self.digest().hex()

    def _compress_block(self, block: bytes | bytearray | memoryview, offset: int = 0) -> None:
        self._t = (self._t + 512) & MASK64
        self._h = compress(self._h, self._salt, self._t, block, offset=offset, null_counter=self._nullt)

    def _rewind(self, bits: int) -> None:
        # Padding is fed through update(), which counts it; take it back out so
        # the counter equals the message length when the length block is hashed.
        self._t = (self._t - bits) & MASK64

    def _finalize(self) -> bytes:
        nx = len(self._buf)
        length = (self._t + (nx << 3)) & MASK64

        if self.digest_bits == 224:
            domain, terminator = b"\x80", b"\x00"
        else:
            domain, terminator = b"\x81", b"\x01"

        if log.isEnabledFor(logging.DEBUG):
            log.debug("finalizing %s: %d message bits, %d buffered bytes", self.name, length, nx)

        if nx == _LAST_BLOCK_DATA:
            self._rewind(8)
            self.update(domain)
        else:
            if nx < _LAST_BLOCK_DATA:
                if nx == 0:
                    self._nullt = True
                self._rewind((_LAST_BLOCK_DATA - nx) << 3)
                self.update(PADDING[: _LAST_BLOCK_DATA - nx])
            else:
                self._rewind((BLOCK_SIZE - nx) << 3)
                self.update(PADDING[: BLOCK_SIZE - nx])
                self._rewind(_LAST_BLOCK_DATA << 3)
                self.update(PADDING[1 : _LAST_BLOCK_DATA + 1])
                self._nullt = True
            self.update(terminator)
            self._rewind(8)

        self._rewind(64)
        self.update(length.to_bytes(8, "big"))

        words = self._h[: self.digest_bits >> 5]
        return struct.pack(f">{len(words)}L", *words)

    def __repr__(self) -> str:
        return f"<{self.name} hash object, {(self._t >> 3) + len(self._buf)} bytes>"


class Blake224(Blake256):
    """BLAKE-224 hash object."""

    def __init__(self, data: bytes = b"", *, salt: bytes | None = None) -> None:
        super().__init__(data, digest_bits=224, salt=salt)


def restore_state(
    digest_bits: int,
    chain: list[int],
    salt: bytes | None,
    counter: int,
    buffer: bytes,
) -> Blake256:
    """Rebuild a hash object mid-stream from its raw fields.

    Values are trusted; :func:`~blake256.crypto.serialization.deserialize_digest_state`
    validates them first.
    """

    state = Blake224(salt=salt) if digest_bits == 224 else Blake256(salt=salt)
    state._h = list(chain)
    state._t = counter
    state._buf = bytearray(buffer)
    return state
