"""Arithmetic in GF(2^8) and construction of the AES substitution boxes."""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache

_REDUCTION = 0x1B
_AFFINE_CONSTANT = 0x63


def _check_byte(value: int) -> None:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"value {value!r} is not a byte")


def xtime(value: int) -> int:
    """Multiply a field element by x (that is, by 0x02)."""
    _check_byte(value)
    doubled = value << 1
    if doubled & 0x100:
        doubled ^= 0x100 | _REDUCTION
    return doubled


def gf_mul(a: int, b: int) -> int:
    """Multiply two elements of GF(2^8) modulo the AES polynomial."""
    _check_byte(a)
    _check_byte(b)
    product = 0
    while b:
        if b & 1:
            product ^= a
        a = xtime(a)
        b >>= 1
    return product


def _inverse(value: int) -> int:
    """Return the multiplicative inverse, with 0 mapping to 0."""
    if value == 0:
        return 0
    # a^254 == a^-1 in GF(2^8)
    result = 1
    base = value
    exponent = 254
    while exponent:
        if exponent & 1:
            result = gf_mul(result, base)
        base = gf_mul(base, base)
        exponent >>= 1
    return result


def _rotl8(value: int, shift: int) -> int:
    return ((value << shift) | (value >> (8 - shift))) & 0xFF


def _affine(value: int) -> int:
    return (
        value
        ^ _rotl8(value, 1)
        ^ _rotl8(value, 2)
        ^ _rotl8(value, 3)
        ^ _rotl8(value, 4)
        ^ _AFFINE_CONSTANT
    )


@lru_cache(maxsize=None)
def build_sbox() -> tuple[int, ...]:
    """Return the 256-entry AES forward substitution box."""
    return tuple(_affine(_inverse(value)) for value in range(256))


def build_inverse_sbox(sbox: Sequence[int]) -> tuple[int, ...]:
    """Return the inverse of a substitution box that permutes all 256 bytes."""
    if len(sbox) != 256:
        raise ValueError("a substitution box must have 256 entries")
    inverse = [-1] * 256
    for index, value in enumerate(sbox):
        _check_byte(value)
        if inverse[value] != -1:
            raise ValueError(f"substitution box maps twice to {value:#04x}")
        inverse[value] = index
    return tuple(inverse)