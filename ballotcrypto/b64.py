"""Base64 coding with the RFC 4648 filename-safe alphabet ('-' and '_')."""

from __future__ import annotations

import base64

_ALPHABET = b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_"
_PAD = 0x3D
_SPACE = 0x20
_CR = 0x0D
_LF = 0x0A
_PAD_VALUE = 64

_DECODE: dict[int, int] = {char: value for value, char in enumerate(_ALPHABET)}
_DECODE[_PAD] = _PAD_VALUE


class InvalidCharacterError(ValueError):
    """Raised when base64 input holds a character that may not appear there."""


def encoded_size(length: int) -> int:
    """Return the buffer size needed to encode ``length`` bytes.

    This counts the encoded characters plus one byte for a terminating
    null, and is 0 for empty input.
    """
    if length < 0:
        raise ValueError(f"length must not be negative, got {length!r}")
    if length == 0:
        return 0
    return 4 * -(-length // 3) + 1


def encode(data: bytes | bytearray | memoryview, add_null: bool = False) -> bytes:
    """Encode ``data``; with ``add_null`` a final zero byte is appended.

    Empty input gives empty output, without a terminator.
    """
    source = bytes(data)
    if not source:
        return b""
    encoded = base64.urlsafe_b64encode(source)
    return encoded + b"\x00" if add_null else encoded


def _scan(source: bytes) -> tuple[int, int]:
    """Validate the input; return the number of symbols and of padding marks."""
    symbols = 0
    padding = 0
    index = 0
    length = len(source)
    while index < length:
        spaces = 0
        while index < length and source[index] == _SPACE:
            index += 1
            spaces += 1
        if index == length:
            break
        if source[index : index + 2] == b"\r\n" or source[index] == _LF:
            index += 1
            continue
        if spaces:
            raise InvalidCharacterError(f"space inside a line at offset {index - 1}")
        char = source[index]
        if char == _PAD:
            padding += 1
            if padding > 2:
                raise InvalidCharacterError(f"too much padding at offset {index}")
        value = _DECODE.get(char)
        if value is None:
            raise InvalidCharacterError(
                f"invalid character {char:#04x} at offset {index}"
            )
        if value < _PAD_VALUE and padding:
            raise InvalidCharacterError(f"data after padding at offset {index}")
        symbols += 1
        index += 1
    return symbols, padding


def decoded_size(data: bytes | bytearray | memoryview) -> int:
    """Validate ``data`` and return the number of bytes it decodes to."""
    symbols, padding = _scan(bytes(data))
    if symbols == 0:
        return 0
    return ((6 * symbols + 7) >> 3) - padding


def decode(data: bytes | bytearray | memoryview) -> bytes:
    """Decode base64 ``data``; line breaks and trailing spaces are skipped.

    Non-empty input must be a whole multiple of 4 bytes long.
    """
    source = bytes(data)
    if decoded_size(source) == 0:
        return b""
    if len(source) % 4:
        raise ValueError(
            f"encoded length {len(source)} is not a multiple of 4"
        )

    output = bytearray()
    keep = 3
    group = 0
    accumulator = 0
    for char in source:
        if char in (_CR, _LF, _SPACE):
            continue
        value = _DECODE[char]
        if value == _PAD_VALUE:
            keep -= 1
        accumulator = ((accumulator << 6) | (value & 0x3F)) & 0xFFFFFF
        group += 1
        if group == 4:
            group = 0
            output.extend(accumulator.to_bytes(3, "big")[:keep])
    return bytes(output)