"""Test configuration for the blake256 package.

Besides shared fixtures this module carries a small, deliberately plain
BLAKE-224/256 implementation used as an oracle for differential tests. It pads
the whole message up front and derives each block's counter from the message
length, instead of streaming and rewinding a running counter.
"""

import struct

import pytest


_REF_IV = {
    256: [0x6A09E667, 0xBB67AE85, 0x3C6EF372, 0xA54FF53A,
          0x510E527F, 0x9B05688C, 0x1F83D9AB, 0x5BE0CD19],
    224: [0xC1059ED8, 0x367CD507, 0x3070DD17, 0xF70E5939,
          0xFFC00B31, 0x68581511, 0x64F98FA7, 0xBEFA4FA4],
}

_REF_C = [
    0x243F6A88, 0x85A308D3, 0x13198A2E, 0x03707344,
    0xA4093822, 0x299F31D0, 0x082EFA98, 0xEC4E6C89,
    0x452821E6, 0x38D01377, 0xBE5466CF, 0x34E90C6C,
    0xC0AC29B7, 0xC97C50DD, 0x3F84D5B5, 0xB5470917,
]

_REF_SIGMA = [
    [0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15],
    [14, 10, 4, 8, 9, 15, 13, 6, 1, 12, 0, 2, 11, 7, 5, 3],
    [11, 8, 12, 0, 5, 2, 15, 13, 10, 14, 3, 6, 7, 1, 9, 4],
    [7, 9, 3, 1, 13, 12, 11, 14, 2, 6, 5, 10, 4, 0, 15, 8],
    [9, 0, 5, 7, 2, 4, 10, 15, 14, 1, 11, 12, 6, 8, 3, 13],
    [2, 12, 6, 10, 0, 11, 8, 3, 4, 13, 7, 5, 15, 14, 1, 9],
    [12, 5, 1, 15, 14, 13, 4, 10, 0, 7, 6, 3, 9, 2, 8, 11],
    [13, 11, 7, 14, 12, 1, 3, 9, 5, 0, 15, 4, 8, 6, 2, 10],
    [6, 15, 14, 9, 11, 3, 0, 8, 12, 2, 13, 7, 1, 4, 10, 5],
    [10, 2, 8, 4, 7, 6, 1, 5, 15, 11, 9, 14, 3, 12, 13, 0],
]

_M = 0xFFFFFFFF


def _ror(x, n):
    return ((x >> n) | (x << (32 - n))) & _M


def _ref_block(h, s, t, block):
    m = struct.unpack(">16L", block)
    v = h[:] + [_REF_C[i] ^ s[i] for i in range(4)] + _REF_C[4:8]
    v[12] ^= t & _M
    v[13] ^= t & _M
    v[14] ^= t >> 32
    v[15] ^= t >> 32

    def G(a, b, c, d, r, i):
        p, q = _REF_SIGMA[r % 10][2 * i], _REF_SIGMA[r % 10][2 * i + 1]
        v[a] = (v[a] + v[b] + (m[p] ^ _REF_C[q])) & _M
        v[d] = _ror(v[d] ^ v[a], 16)
        v[c] = (v[c] + v[d]) & _M
        v[b] = _ror(v[b] ^ v[c], 12)
        v[a] = (v[a] + v[b] + (m[q] ^ _REF_C[p])) & _M
        v[d] = _ror(v[d] ^ v[a], 8)
        v[c] = (v[c] + v[d]) & _M
        v[b] = _ror(v[b] ^ v[c], 7)

    for r in range(14):
        G(0, 4, 8, 12, r, 0)
        G(1, 5, 9, 13, r, 1)
        G(2, 6, 10, 14, r, 2)
        G(3, 7, 11, 15, r, 3)
        G(0, 5, 10, 15, r, 4)
        G(1, 6, 11, 12, r, 5)
        G(2, 7, 8, 13, r, 6)
        G(3, 4, 9, 14, r, 7)

    return [h[i] ^ v[i] ^ v[i + 8] ^ s[i % 4] for i in range(8)]


def reference_blake(message, bits=256, salt=None):
    """Hash ``message`` with the oracle implementation."""
    s = list(struct.unpack(">4L", salt)) if salt else [0, 0, 0, 0]
    total = len(message) * 8

    padded = bytearray(message) + b"\x80"
    while len(padded) % 64 != 56:
        padded.append(0)
    if bits == 256:
        padded[-1] |= 0x01
    padded += struct.pack(">Q", total)

    h = list(_REF_IV[bits])
    for i in range(len(padded) // 64):
        # A block holding only padding is hashed with a zero counter.
        t = 0 if i * 512 >= total else min((i + 1) * 512, total)
        h = _ref_block(h, s, t, bytes(padded[i * 64:(i + 1) * 64]))

    out = struct.pack(">8L", *h)
    return out[:bits // 8]


@pytest.fixture
def reference_digest():
    """Provide the oracle hash function."""
    return reference_blake


@pytest.fixture
def sample_salt():
    """Provide a fixed 16-byte salt."""
    return bytes(range(1, 17))


@pytest.fixture
def sample_message():
    """Provide a multi-block message with no repeating 64-byte pattern."""
    return bytes((i * 131 + 7) & 0xFF for i in range(1000))
