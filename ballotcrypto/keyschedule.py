"""Expansion of an AES cipher key into its encryption round keys."""

from __future__ import annotations

from dataclasses import dataclass

from ballotcrypto.gf import build_sbox

_ROUNDS_FOR_BITS = {128: 10, 192: 12, 256: 14}

# For 128-bit blocks no more than ten round constants are ever needed.
_RCON = (
    0x01000000,
    0x02000000,
    0x04000000,
    0x08000000,
    0x10000000,
    0x20000000,
    0x40000000,
    0x80000000,
    0x1B000000,
    0x36000000,
)


class AESKeyError(ValueError):
    """Raised when a key or key size cannot be used to build a schedule."""


@dataclass(frozen=True)
class KeySchedule:
    """Round keys as 32-bit big-endian words, four per round plus four initial."""

    round_keys: tuple[int, ...]
    rounds: int

    def __post_init__(self) -> None:
        if self.rounds not in _ROUNDS_FOR_BITS.values():
            raise AESKeyError(f"unsupported number of rounds: {self.rounds!r}")
        if len(self.round_keys) != 4 * (self.rounds + 1):
            raise AESKeyError(
                f"{self.rounds} rounds need {4 * (self.rounds + 1)} words, "
                f"got {len(self.round_keys)}"
            )
        if any(not 0 <= word <= 0xFFFFFFFF for word in self.round_keys):
            raise AESKeyError("round key words must be 32-bit unsigned values")


def _sub_word(word: int) -> int:
    sbox = build_sbox()
    return (
        (sbox[(word >> 24) & 0xFF] << 24)
        | (sbox[(word >> 16) & 0xFF] << 16)
        | (sbox[(word >> 8) & 0xFF] << 8)
        | sbox[word & 0xFF]
    )


def _rot_word(word: int) -> int:
    return ((word << 8) | (word >> 24)) & 0xFFFFFFFF


def _key_bytes(key: bytes | bytearray | memoryview | None, bits: int) -> bytes:
    if key is None:
        raise AESKeyError("no key given")
    if bits not in _ROUNDS_FOR_BITS:
        raise AESKeyError(f"key size must be 128, 192 or 256 bits, not {bits!r}")
    material = bytes(key)
    needed = bits // 8
    if len(material) < needed:
        raise AESKeyError(
            f"a {bits}-bit key needs {needed} bytes, got {len(material)}"
        )
    return material[:needed]


def set_encrypt_key(key: bytes | bytearray | memoryview, bits: int) -> KeySchedule:
    """Build the encryption schedule for the first ``bits // 8`` bytes of ``key``."""
    material = _key_bytes(key, bits)
    rounds = _ROUNDS_FOR_BITS[bits]
    key_words = bits // 32
    total = 4 * (rounds + 1)

    words = [
        int.from_bytes(material[offset : offset + 4], "big")
        for offset in range(0, len(material), 4)
    ]
    for index in range(key_words, total):
        temp = words[index - 1]
        if index % key_words == 0:
            temp = _sub_word(_rot_word(temp)) ^ _RCON[index // key_words - 1]
        elif key_words > 6 and index % key_words == 4:
            temp = _sub_word(temp)
        words.append(words[index - key_words] ^ temp)

    return KeySchedule(round_keys=tuple(words), rounds=rounds)