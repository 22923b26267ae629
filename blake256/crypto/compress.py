"""BLAKE-256 compression function.

One call consumes a single 64-byte block and returns the next chain value. The
14 rounds are driven by the permutation table in :mod:`.constants` instead of
being unrolled.
"""

from __future__ import annotations

import struct
from typing import Sequence

from .constants import BLOCK_SIZE, C256, G_SCHEDULE, MASK32, ROUNDS, SIGMA

_BLOCK_WORDS = struct.Struct(">16L")


def rotr32(x: int, n: int) -> int:
    """Rotate the 32-bit word ``x`` right by ``n`` bits."""

    return ((x >> n) | (x << (32 - n))) & MASK32


def g(v: list[int], a: int, b: int, c: int, d: int, mi: int, mj: int, ci: int, cj: int) -> None:
    """Apply one G mixing step to ``v`` in place.

    Args:
        v: 16-word working state.
        a, b, c, d: Indices into ``v``.
        mi, mj: The two message words selected by the round permutation.
        ci, cj: The round constants paired with ``mi`` and ``mj``.
    """

    va, vb, vc, vd = v[a], v[b], v[c], v[d]

    va = (va + vb + (mi ^ cj)) & MASK32
    vd = rotr32(vd ^ va, 16)
    vc = (vc + vd) & MASK32
    vb = rotr32(vb ^ vc, 12)

    va = (va + vb + (mj ^ ci)) & MASK32
    vd = rotr32(vd ^ va, 8)
    vc = (vc + vd) & MASK32
    vb = rotr32(vb ^ vc, 7)

    v[a], v[b], v[c], v[d] = va, vb, vc, vd


def compress(
    h: Sequence[int],
    salt: Sequence[int],
    counter: int,
    block: bytes | bytearray | memoryview,
    *,
    offset: int = 0,
    null_counter: bool = False,
) -> list[int]:
    """Compress one block and return the new chain value.

    Args:
        h: Current chain value (8 words).
        salt: Salt (4 words).
        counter: Message bit counter for this block (already including it).
        block: Buffer holding at least ``offset + 64`` bytes.
        offset: Start of the block inside ``block``.
        null_counter: Leave the counter out of the state initialization. Used
            for a final block that carries no message bits.

    Returns:
        The next chain value as a new list of 8 words.
    """

    if len(block) - offset < BLOCK_SIZE:
        raise ValueError("block must be 64 bytes")

    m = _BLOCK_WORDS.unpack_from(block, offset)

    v = list(h)
    v.extend(C256[i] ^ salt[i] for i in range(4))
    v.extend(C256[4:8])
    if not null_counter:
        t_lo = counter & MASK32
        t_hi = (counter >> 32) & MASK32
        v[12] ^= t_lo
        v[13] ^= t_lo
        v[14] ^= t_hi
        v[15] ^= t_hi

    for r in range(ROUNDS):
        s = SIGMA[r % 10]
        for i, (a, b, c, d) in enumerate(G_SCHEDULE):
            x = s[2 * i]
            y = s[2 * i + 1]
            g(v, a, b, c, d, m[x], m[y], C256[x], C256[y])

    return [h[k] ^ v[k] ^ v[k + 8] ^ salt[k & 3] for k in range(8)]
