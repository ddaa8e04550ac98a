"""The combined round tables used by the table-driven AES rounds."""

from __future__ import annotations

from functools import lru_cache

from ballotcrypto.gf import build_inverse_sbox, build_sbox, gf_mul

_ENCRYPT_COLUMN = (0x02, 0x01, 0x01, 0x03)
_DECRYPT_COLUMN = (0x0E, 0x09, 0x0D, 0x0B)


def _pack(value: int, column: tuple[int, ...]) -> int:
    word = 0
    for coefficient in column:
        word = (word << 8) | gf_mul(value, coefficient)
    return word


def _rotr32(word: int, bits: int) -> int:
    if bits == 0:
        return word
    return ((word >> bits) | (word << (32 - bits))) & 0xFFFFFFFF


def _check_rotation(rotation: int) -> None:
    if rotation not in (0, 1, 2, 3):
        raise ValueError(f"rotation must be 0 to 3, not {rotation!r}")


@lru_cache(maxsize=None)
def encryption_table(rotation: int) -> tuple[int, ...]:
    """Return Te<rotation>: S[x] times [02, 01, 01, 03], rotated right by bytes."""
    _check_rotation(rotation)
    return tuple(
        _rotr32(_pack(s, _ENCRYPT_COLUMN), 8 * rotation) for s in build_sbox()
    )


@lru_cache(maxsize=None)
def decryption_table(rotation: int) -> tuple[int, ...]:
    """Return Td<rotation>: Si[x] times [0e, 09, 0d, 0b], rotated right by bytes."""
    _check_rotation(rotation)
    inverse = build_inverse_sbox(build_sbox())
    return tuple(_rotr32(_pack(s, _DECRYPT_COLUMN), 8 * rotation) for s in inverse)