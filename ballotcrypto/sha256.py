"""The SHA-256 message digest, computed incrementally."""

from __future__ import annotations

import struct

BLOCK_SIZE = 64
DIGEST_SIZE = 32

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF

_K256 = (
    0x428A2F98, 0x71374491, 0xB5C0FBCF, 0xE9B5DBA5,
    0x3956C25B, 0x59F111F1, 0x923F82A4, 0xAB1C5ED5,
    0xD807AA98, 0x12835B01, 0x243185BE, 0x550C7DC3,
    0x72BE5D74, 0x80DEB1FE, 0x9BDC06A7, 0xC19BF174,
    0xE49B69C1, 0xEFBE4786, 0x0FC19DC6, 0x240CA1CC,
    0x2DE92C6F, 0x4A7484AA, 0x5CB0A9DC, 0x76F988DA,
    0x983E5152, 0xA831C66D, 0xB00327C8, 0xBF597FC7,
    0xC6E00BF3, 0xD5A79147, 0x06CA6351, 0x14292967,
    0x27B70A85, 0x2E1B2138, 0x4D2C6DFC, 0x53380D13,
    0x650A7354, 0x766A0ABB, 0x81C2C92E, 0x92722C85,
    0xA2BFE8A1, 0xA81A664B, 0xC24B8B70, 0xC76C51A3,
    0xD192E819, 0xD6990624, 0xF40E3585, 0x106AA070,
    0x19A4C116, 0x1E376C08, 0x2748774C, 0x34B0BCB5,
    0x391C0CB3, 0x4ED8AA4A, 0x5B9CCA4F, 0x682E6FF3,
    0x748F82EE, 0x78A5636F, 0x84C87814, 0x8CC70208,
    0x90BEFFFA, 0xA4506CEB, 0xBEF9A3F7, 0xC67178F2,
)

_INITIAL_STATE = (
    0x6A09E667,
    0xBB67AE85,
    0x3C6EF372,
    0xA54FF53A,
    0x510E527F,
    0x9B05688C,
    0x1F83D9AB,
    0x5BE0CD19,
)


def _rotr(value: int, bits: int) -> int:
    return ((value >> bits) | (value << (32 - bits))) & _MASK32


def _compress(state: tuple[int, ...], block: bytes) -> tuple[int, ...]:
    schedule = list(struct.unpack(">16I", block))
    for j in range(16, 64):
        w15 = schedule[j - 15]
        w2 = schedule[j - 2]
        s0 = _rotr(w15, 7) ^ _rotr(w15, 18) ^ (w15 >> 3)
        s1 = _rotr(w2, 17) ^ _rotr(w2, 19) ^ (w2 >> 10)
        schedule.append((schedule[j - 16] + s0 + schedule[j - 7] + s1) & _MASK32)

    a, b, c, d, e, f, g, h = state
    for k, w in zip(_K256, schedule):
        sigma1 = _rotr(e, 6) ^ _rotr(e, 11) ^ _rotr(e, 25)
        choose = (e & f) ^ (~e & g)
        t1 = (h + sigma1 + choose + k + w) & _MASK32
        sigma0 = _rotr(a, 2) ^ _rotr(a, 13) ^ _rotr(a, 22)
        majority = (a & b) ^ (a & c) ^ (b & c)
        t2 = (sigma0 + majority) & _MASK32
        h, g, f, e = g, f, e, (d + t1) & _MASK32
        d, c, b, a = c, b, a, (t1 + t2) & _MASK32

    return tuple(
        (old + new) & _MASK32
        for old, new in zip(state, (a, b, c, d, e, f, g, h))
    )


class Sha256:
    """An incremental SHA-256 computation."""

    block_size = BLOCK_SIZE
    digest_size = DIGEST_SIZE

    def __init__(self, data: bytes | bytearray | memoryview = b"") -> None:
        self._state: tuple[int, ...] = _INITIAL_STATE
        self._buffer = b""
        self._length = 0
        if data:
            self.update(data)

    def update(self, data: bytes | bytearray | memoryview) -> None:
        """Feed more message bytes into the computation."""
        chunk = bytes(memoryview(data))
        if not chunk:
            return
        self._length = (self._length + len(chunk)) & (_MASK64 >> 3)
        pending = self._buffer + chunk
        full = len(pending) - len(pending) % BLOCK_SIZE
        state = self._state
        for offset in range(0, full, BLOCK_SIZE):
            state = _compress(state, pending[offset : offset + BLOCK_SIZE])
        self._state = state
        self._buffer = pending[full:]

    def digest(self) -> bytes:
        """Return the digest of everything fed so far, leaving the state usable."""
        bit_count = (self._length << 3) & _MASK64
        padding = b"\x80" + b"\x00" * ((55 - len(self._buffer)) % BLOCK_SIZE)
        tail = self._buffer + padding + bit_count.to_bytes(8, "big")
        state = self._state
        for offset in range(0, len(tail), BLOCK_SIZE):
            state = _compress(state, tail[offset : offset + BLOCK_SIZE])
        return struct.pack(">8I", *state)


def sha256(data: bytes | bytearray | memoryview) -> bytes:
    """Return the SHA-256 digest of ``data``."""
    return Sha256(data).digest()