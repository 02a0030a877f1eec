import os

import pytest

from aescodec.aead_mode import AESGCMCipher, seal, open_sealed, normalize_key
from aescodec.errors import AuthenticationFailure, InvalidKeyLength, MalformedField

ZERO_KEY = bytes(32)
ZERO_NONCE = bytes(12)


def test_known_answer_vector():
    # GCM test case 14: 256-bit zero key, zero nonce, one zero block
    ciphertext, tag, nonce = seal(bytes(16), ZERO_KEY, ZERO_NONCE)
    assert ciphertext.hex() == "cea7403d4d606b6e074ec5d3baf39d18"
    assert tag.hex() == "d0d1c8a799996bf0265b98b5d48ab919"
    assert nonce == ZERO_NONCE


def test_seal_open_round_trip():
    key = os.urandom(32)
    plaintext = b"Hello AEAD encryption!"

    ciphertext, tag, nonce = seal(plaintext, key)

    assert len(nonce) == 12
    assert len(tag) == 16
    assert len(ciphertext) == len(plaintext)
    assert open_sealed(ciphertext, tag, key, nonce) == plaintext


def test_open_with_tampered_tag_fails():
    key = os.urandom(32)
    ciphertext, tag, nonce = seal(b"payload", key)
    tampered = bytearray(tag)
    tampered[-1] ^= 0x80

    with pytest.raises(AuthenticationFailure):
        open_sealed(ciphertext, bytes(tampered), key, nonce)


@pytest.mark.parametrize("key", [b"", bytes(16), bytes(31), bytes(33), bytes(64)])
def test_wrong_key_length_is_rejected(key):
    with pytest.raises(InvalidKeyLength):
        AESGCMCipher(key)


@pytest.mark.parametrize("key", [12345, None, ["k"] * 32])
def test_non_bytes_key_is_rejected(key):
    with pytest.raises(InvalidKeyLength):
        normalize_key(key)


def test_key_types_are_normalized():
    assert normalize_key("k" * 32) == b"k" * 32
    assert normalize_key(bytearray(32)) == ZERO_KEY
    assert normalize_key(memoryview(ZERO_KEY)) == ZERO_KEY


def test_multibyte_str_key_counts_encoded_bytes():
    # 16 two-byte characters encode to 32 bytes
    assert len(normalize_key("é" * 16)) == 32
    with pytest.raises(InvalidKeyLength):
        normalize_key("é" * 32)


def test_wrong_nonce_and_tag_lengths():
    cipher = AESGCMCipher(ZERO_KEY)
    with pytest.raises(MalformedField):
        cipher.encrypt(b"x", bytes(16))
    ciphertext, tag, nonce = cipher.encrypt(b"x")
    with pytest.raises(MalformedField):
        cipher.decrypt(ciphertext, tag[:12], nonce)
    with pytest.raises(MalformedField):
        cipher.decrypt(ciphertext, tag, nonce + b"\x00")
