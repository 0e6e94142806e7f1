# gostcrypto

Pure Python implementations of Russian GOST cryptographic algorithms:

- **GOST 28147-89** block cipher (RFC 5830) with ECB, CFB, CTR and MAC modes,
  and the standard substitution boxes.
- **GOST R 34.10-2001 / 34.10-2012** elliptic-curve signatures over the
  standard 256-bit and 512-bit curve parameter sets.
- **VKO** key agreement: computing the shared point from a private key, a peer's
  public key and user keying material (UKM).
- Conversion between Weierstrass and twisted Edwards coordinates for the curves
  that have an Edwards form.

There are no runtime dependencies.

## Installation

```
pip install gostcrypto
```

## Block cipher

```python
from gostcrypto.gost28147.cipher import Cipher
from gostcrypto.gost28147.sbox import SBOX_DEFAULT
from gostcrypto.gost28147.modes import CTR, MAC

key = bytes(32)                      # the key is exactly 32 bytes
cipher = Cipher(key, SBOX_DEFAULT)   # SBOX_DEFAULT is also the default argument

block = cipher.encrypt(b"8 bytes!")  # one block of exactly 8 bytes
assert cipher.decrypt(block) == b"8 bytes!"

iv = bytes(8)
ciphertext = CTR(cipher, iv).xor_key_stream(b"any length message")
plaintext = CTR(cipher, iv).xor_key_stream(ciphertext)

mac = MAC(cipher, 4, iv)             # tag size from 1 to 8 bytes
mac.update(b"authenticated data")
tag = mac.digest()                   # also mac.hexdigest(); mac.reset() starts over
```

The module `gostcrypto.gost28147.modes` also provides `CFBEncrypter`,
`CFBDecrypter`, `ECBEncrypter` and `ECBDecrypter`. The CFB and CTR objects keep
their state between `xor_key_stream` calls. `ECBEncrypter.crypt_blocks` and
`ECBDecrypter.crypt_blocks` take a whole number of 8-byte blocks and raise
`ValueError` otherwise; wrong key, block and IV lengths raise `ValueError` too.

The substitution boxes live in `gostcrypto.gost28147.sbox` as `Sbox` instances:
`SBOX_ID_GOST_28147_89_TEST_PARAM_SET`,
`SBOX_ID_GOST_28147_89_CRYPTOPRO_A_PARAM_SET` (the default) through `_D_`,
`SBOX_ID_TC26_GOST_28147_PARAM_Z`, `SBOX_ID_GOSTR_3411_94_TEST_PARAM_SET`
(alias `SBOX_APPLIED_CRYPTOGRAPHY_PARAM_SET`),
`SBOX_ID_GOSTR_3411_94_CRYPTOPRO_PARAM_SET` and `SBOX_EAC_PARAM_SET`.

## Signatures

```python
import os

from gostcrypto.gost3410.params_256 import curve_id_tc26_gost341012_256_paramset_a
from gostcrypto.gost3410.keys import PublicKey, gen_private_key

curve = curve_id_tc26_gost341012_256_paramset_a()
private = gen_private_key(curve, os.urandom)
public = private.public_key()

digest = bytes(32)  # the message digest, computed elsewhere
signature = private.sign_digest(digest, os.urandom)
assert public.verify_digest(digest, signature)

restored = PublicKey.from_raw(curve, public.raw())
assert restored == public
```

The `rand` argument is a callable that takes a byte count and returns that many
bytes; it defaults to `os.urandom`. Private keys load with
`PrivateKey.from_raw(curve, raw)` from little-endian bytes; public keys are
little-endian X followed by little-endian Y. A signature is `s || r`,
big-endian, each half one coordinate size long. `verify_digest` returns
`False` for a bad signature and raises `ValueError` for one of the wrong length.

`PrivateKeyReverseDigest` and `PrivateKeyReverseDigestAndSignature` wrap a
`PrivateKey` and reverse the digest (and the signature) byte order when signing.

Curve parameter sets are functions returning a fresh `Curve`:
`gostcrypto.gost3410.params_256` holds the 256-bit sets (`curve_default()` is
id-tc26-gost-3410-12-256-paramSetB), and `gostcrypto.gost3410.params_512` the
512-bit ones. `Curve.exp(degree, x, y)` multiplies a point by a scalar, and
`xy_to_uv` / `uv_to_xy` in `gostcrypto.gost3410.curve` convert coordinates for
curves where `Curve.is_edwards()` is true.

## Key agreement

```python
from gostcrypto.gost3410.keys import new_ukm

alice = gen_private_key(curve)
bob = gen_private_key(curve)
ukm = new_ukm(bytes.fromhex("1d80603c8544c727"))

shared = alice.kek(bob.public_key(), ukm)
assert shared == bob.kek(alice.public_key(), ukm)
```

## What the package does not do

The package has no hash functions. `PrivateKey.kek` returns the raw encoding of
the agreed point, not a finished key: hash it yourself with the digest your
protocol prescribes. Likewise `sign_digest` and `verify_digest` work on a digest
you have already computed. There is no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```