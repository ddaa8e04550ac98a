import pytest

from ballotcrypto.keyschedule import AESKeyError, KeySchedule, set_encrypt_key

FIPS_KEY_128 = bytes.fromhex("2b7e151628aed2a6abf7158809cf4f3c")
FIPS_KEY_256 = bytes.fromhex(
    "603deb1015ca71be2b73aef0857d77811f352c073b6108d72d9810a30914dff4"
)


def test_fips_128_expansion_values():
    schedule = set_encrypt_key(FIPS_KEY_128, 128)
    assert schedule.round_keys[4] == 0xA0FAFE17
    assert schedule.round_keys[43] == 0xB6630CA6


def test_fips_256_expansion_value():
    schedule = set_encrypt_key(FIPS_KEY_256, 256)
    assert schedule.round_keys[8] == 0x9BA35411


@pytest.mark.parametrize("bits, rounds", [(128, 10), (192, 12), (256, 14)])
def test_rounds_and_length(bits, rounds):
    schedule = set_encrypt_key(bytes(range(32)), bits)
    assert schedule.rounds == rounds
    assert len(schedule.round_keys) == 4 * (rounds + 1)


@pytest.mark.parametrize("bits", [128, 192, 256])
def test_first_words_are_the_key(bits):
    key = bytes(range(100, 132))
    schedule = set_encrypt_key(key, bits)
    nk = bits // 32
    expected = [int.from_bytes(key[4 * i : 4 * i + 4], "big") for i in range(nk)]
    assert list(schedule.round_keys[:nk]) == expected


@pytest.mark.parametrize("bits", [128, 192, 256])
def test_chaining_invariant(bits):
    schedule = set_encrypt_key(bytes(range(7, 39)), bits)
    nk = bits // 32
    words = schedule.round_keys
    for i in range(nk, len(words)):
        if i % nk == 0 or (nk > 6 and i % nk == 4):
            continue
        assert words[i] == words[i - nk] ^ words[i - 1]


def test_extra_key_bytes_are_ignored():
    key = bytes(range(16))
    assert set_encrypt_key(key, 128) == set_encrypt_key(key + b"\xaa" * 16, 128)


def test_accepts_bytearray_and_memoryview():
    key = bytes(range(32))
    expected = set_encrypt_key(key, 256)
    assert set_encrypt_key(bytearray(key), 256) == expected
    assert set_encrypt_key(memoryview(key), 256) == expected


def test_different_keys_give_different_schedules():
    a = set_encrypt_key(bytes(32), 256)
    b = set_encrypt_key(b"\x01" + bytes(31), 256)
    assert a.round_keys != b.round_keys


@pytest.mark.parametrize("bits", [0, 64, 127, 512])
def test_bad_bit_size(bits):
    with pytest.raises(AESKeyError):
        set_encrypt_key(bytes(64), bits)


def test_short_key():
    with pytest.raises(AESKeyError):
        set_encrypt_key(bytes(31), 256)


def test_missing_key():
    with pytest.raises(AESKeyError):
        set_encrypt_key(None, 128)


def test_error_is_value_error():
    with pytest.raises(ValueError):
        set_encrypt_key(bytes(16), 100)


def test_schedule_validates_length():
    with pytest.raises(AESKeyError):
        KeySchedule(round_keys=(0,) * 10, rounds=10)


def test_schedule_validates_rounds():
    with pytest.raises(AESKeyError):
        KeySchedule(round_keys=(0,) * 44, rounds=11)