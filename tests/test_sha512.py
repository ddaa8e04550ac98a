import hashlib

import pytest

from ballotcrypto.sha512 import Sha384, Sha512, sha384, sha512

LENGTHS = [0, 1, 3, 55, 64, 110, 111, 112, 113, 127, 128, 129, 255, 256, 1000]


def _message(length):
    return bytes((i * 7 + 3) % 256 for i in range(length))


@pytest.mark.parametrize("length", LENGTHS)
def test_sha512_matches_reference(length):
    data = _message(length)
    assert sha512(data) == hashlib.sha512(data).digest()


@pytest.mark.parametrize("length", LENGTHS)
def test_sha384_matches_reference(length):
    data = _message(length)
    assert sha384(data) == hashlib.sha384(data).digest()


@pytest.mark.parametrize("letter", [b"A", b"B", b"C"])
def test_32_repeated_letters(letter):
    data = letter * 32
    assert sha512(data) == hashlib.sha512(data).digest()
    assert sha384(data) == hashlib.sha384(data).digest()


def test_digest_sizes():
    assert len(sha512(b"abc")) == 64
    assert len(sha384(b"abc")) == 48
    assert Sha512.digest_size == 64
    assert Sha384.digest_size == 48


@pytest.mark.parametrize("chunk", [1, 5, 63, 127, 128, 200])
def test_incremental_equals_one_shot(chunk):
    data = _message(777)
    hasher = Sha512()
    for offset in range(0, len(data), chunk):
        hasher.update(data[offset : offset + chunk])
    assert hasher.digest() == sha512(data)


def test_incremental_sha384():
    data = _message(300)
    hasher = Sha384()
    hasher.update(data[:100])
    hasher.update(data[100:])
    assert hasher.digest() == sha384(data)


def test_digest_leaves_state_usable():
    hasher = Sha512(b"hello ")
    first = hasher.digest()
    assert hasher.digest() == first
    hasher.update(b"world")
    assert hasher.digest() == sha512(b"hello world")


def test_empty_update_changes_nothing():
    hasher = Sha384(b"data")
    hasher.update(b"")
    assert hasher.digest() == sha384(b"data")


def test_accepts_bytearray_and_memoryview():
    data = b"ballot box"
    assert sha512(bytearray(data)) == sha512(data)
    assert sha384(memoryview(data)) == sha384(data)


def test_rejects_text():
    with pytest.raises(TypeError):
        Sha512().update("text")


def test_sha384_differs_from_truncated_sha512():
    data = b"abc"
    assert sha384(data) != sha512(data)[:48]