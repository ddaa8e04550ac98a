# ballotcrypto

Pure-Python cryptographic building blocks with no third-party
dependencies: GF(2^8) arithmetic and the AES substitution boxes, the
combined AES round tables, the AES encryption key schedule, SHA-256,
SHA-384 and SHA-512, and Base64 with the RFC 4648 "filename safe"
alphabet.

## Install

```
pip install .
```

Run the tests with `pip install .[test]` and then `pytest`.

## GF(2^8) and substitution boxes — `ballotcrypto.gf`

```python
from ballotcrypto.gf import xtime, gf_mul, build_sbox, build_inverse_sbox

xtime(0x80)            # 0x1b
gf_mul(0x57, 0x83)     # 0xc1
sbox = build_sbox()    # 256-entry AES forward S-box
inv = build_inverse_sbox(sbox)
```

Arguments outside 0..255 raise `ValueError`. `build_inverse_sbox` raises
`ValueError` if the box does not have 256 entries or is not a permutation.

## Round tables — `ballotcrypto.tables`

`encryption_table(rotation)` returns the table Te0..Te3 (S[x] times the
column [02, 01, 01, 03], rotated right by `rotation` bytes), and
`decryption_table(rotation)` returns Td0..Td3 (inverse S[x] times
[0e, 09, 0d, 0b]). Each is a tuple of 256 32-bit words; `rotation` must be
0 to 3, otherwise `ValueError` is raised.

## Key schedule — `ballotcrypto.keyschedule`

```python
from ballotcrypto.keyschedule import set_encrypt_key, AESKeyError, KeySchedule

schedule = set_encrypt_key(bytes(32), 256)
schedule.rounds          # 14
len(schedule.round_keys) # 60 big-endian 32-bit words
```

Key sizes of 128, 192 and 256 bits give 10, 12 and 14 rounds. Only the
first `bits // 8` bytes of the key are used. An unsupported size, a
missing key or a key that is too short raises `AESKeyError` (a subclass of
`ValueError`). `KeySchedule` is a frozen dataclass that checks its own
round count and word count on construction.

## Hashing — `ballotcrypto.sha256`, `ballotcrypto.sha512`

```python
from ballotcrypto.sha256 import Sha256, sha256
from ballotcrypto.sha512 import Sha512, Sha384, sha512, sha384

digest = sha256(b"A" * 32)
h = Sha256()
h.update(b"A" * 16)
h.update(b"A" * 16)
assert h.digest() == digest
```

`digest()` does not consume the object: more data can be fed afterwards.
Each class also accepts initial data in its constructor and exposes
`block_size` and `digest_size`.

## Base64 — `ballotcrypto.b64`

```python
from ballotcrypto.b64 import encode, decode, encoded_size, decoded_size, InvalidCharacterError

encode(b"\xfb\xff\xbf", False)   # b"-_-_"
encode(b"\xfb\xff\xbf", True)    # b"-_-_\x00"
decode(b"-_-_")                  # b"\xfb\xff\xbf"
encoded_size(3)                  # 5, room for the characters and a null
decoded_size(b"-_-_")            # 3
```

The alphabet uses `-` and `_` for values 62 and 63; `+` and `/` are
rejected. Decoding skips line breaks (`\n`, `\r\n`) and trailing spaces,
but a space inside a line, more than two `=`, data after padding or any
other foreign character raises `InvalidCharacterError` (a subclass of
`ValueError`). Non-empty input to `decode` must be a multiple of 4 bytes
long, otherwise `ValueError` is raised. Empty input encodes and decodes to
`b""`.

## What this package does not do

It builds the AES encryption key schedule and round tables but does not
encrypt or decrypt blocks, build a decryption key schedule, run a block
cipher mode such as CBC, or compute an AES-CBC-MAC. It holds no named keys
and no command-line program.