"""
AES-256-GCM Authenticated Encryption

This module wraps the AES-GCM primitive from pycryptodomex. It provides
both confidentiality and authenticity for byte strings and is the only
place in the package that touches the cipher directly.
"""

import secrets
from typing import Optional, Tuple, Union

from Cryptodome.Cipher import AES

from ..errors import AuthenticationFailure, InvalidKeyLength, MalformedField

# Fixed parameters of the envelope format
GCM_DEFAULT_PARAMS = {
    'key_len': 32,    # AES-256
    'nonce_len': 12,  # 96-bit nonce
    'tag_len': 16     # 128-bit tag
}

KEY_LENGTH = GCM_DEFAULT_PARAMS['key_len']
VECTOR_LENGTH = GCM_DEFAULT_PARAMS['nonce_len']
TAG_LENGTH = GCM_DEFAULT_PARAMS['tag_len']

KeyLike = Union[bytes, bytearray, memoryview, str]


def generate_nonce(length: int = VECTOR_LENGTH) -> bytes:
    """Generate a fresh random nonce from the OS CSPRNG."""
    return secrets.token_bytes(length)


def normalize_key(key: KeyLike) -> bytes:
    """
    Convert key material to bytes and check its length.

    String keys are encoded as UTF-8 before the length check.

    Args:
        key: The secret key (32 bytes once encoded)

    Returns:
        The key as bytes

    Raises:
        InvalidKeyLength: If the key is not bytes-like or not 32 bytes
    """
    if isinstance(key, str):
        key = key.encode('utf-8')
    elif isinstance(key, (bytearray, memoryview)):
        key = bytes(key)
    elif not isinstance(key, bytes):
        raise InvalidKeyLength(f"Key must be bytes or str, got {type(key).__name__}")

    if len(key) != KEY_LENGTH:
        raise InvalidKeyLength(f"Key must be exactly {KEY_LENGTH} bytes, got {len(key)}")
    return key


class AESGCMCipher:
    """
    AES-256 in Galois/Counter Mode with a 12-byte nonce and a 16-byte tag.

    The instance only holds the validated key; every encryption builds a
    fresh cipher object, so one instance is safe to share between threads.
    """

    def __init__(self, key: KeyLike):
        """
        Initialize the cipher with a key.

        Args:
            key: The secret key (32 bytes)

        Raises:
            InvalidKeyLength: If the key is not 32 bytes
        """
        self.key = normalize_key(key)

    def encrypt(self, plaintext: bytes, nonce: Optional[bytes] = None) -> Tuple[bytes, bytes, bytes]:
        """
        Encrypt a message.

        Args:
            plaintext: The plaintext to encrypt
            nonce: 12-byte nonce. If None, a random one is generated.

        Returns:
            A tuple of (ciphertext, tag, nonce)
        """
        if nonce is None:
            nonce = generate_nonce()

        if len(nonce) != VECTOR_LENGTH:
            raise MalformedField(f"Nonce must be {VECTOR_LENGTH} bytes, got {len(nonce)}")

        cipher = AES.new(self.key, AES.MODE_GCM, nonce=nonce, mac_len=TAG_LENGTH)
        ciphertext, tag = cipher.encrypt_and_digest(plaintext)
        return ciphertext, tag, nonce

    def decrypt(self, ciphertext: bytes, tag: bytes, nonce: bytes) -> bytes:
        """
        Decrypt a message and verify its integrity.

        Args:
            ciphertext: The ciphertext to decrypt
            tag: The 16-byte authentication tag
            nonce: The nonce used for encryption

        Returns:
            The decrypted plaintext if verification succeeds

        Raises:
            MalformedField: If the nonce or tag has the wrong length
            AuthenticationFailure: If the tag does not match
        """
        if len(nonce) != VECTOR_LENGTH:
            raise MalformedField(f"Nonce must be {VECTOR_LENGTH} bytes, got {len(nonce)}")
        if len(tag) != TAG_LENGTH:
            raise MalformedField(f"Tag must be {TAG_LENGTH} bytes, got {len(tag)}")

        cipher = AES.new(self.key, AES.MODE_GCM, nonce=nonce, mac_len=TAG_LENGTH)
        try:
            return cipher.decrypt_and_verify(ciphertext, tag)
        except ValueError as e:
            raise AuthenticationFailure(f"Authentication failed: {e}") from e


def seal(plaintext: bytes,
         key: KeyLike,
         nonce: Optional[bytes] = None) -> Tuple[bytes, bytes, bytes]:
    """
    Encrypt data with AES-256-GCM.

    Args:
        plaintext: The plaintext to encrypt
        key: The encryption key
        nonce: Optional nonce (will be generated if None)

    Returns:
        A tuple of (ciphertext, tag, nonce)
    """
    return AESGCMCipher(key).encrypt(plaintext, nonce)


def open_sealed(ciphertext: bytes,
                tag: bytes,
                key: KeyLike,
                nonce: bytes) -> bytes:
    """
    Decrypt data with AES-256-GCM.

    Raises:
        AuthenticationFailure: If authentication fails
    """
    return AESGCMCipher(key).decrypt(ciphertext, tag, nonce)


if __name__ == "__main__":
    key = secrets.token_bytes(KEY_LENGTH)
    plaintext = b"This is a test message for authenticated encryption."

    ciphertext, tag, nonce = seal(plaintext, key)

    print(f"Ciphertext: {ciphertext.hex()}")
    print(f"Tag: {tag.hex()}")
    print(f"Nonce: {nonce.hex()}")

    decrypted = open_sealed(ciphertext, tag, key, nonce)
    print(f"Decrypted: {decrypted}")
    assert decrypted == plaintext

    try:
        tampered = bytearray(ciphertext)
        tampered[0] ^= 0x01
        open_sealed(bytes(tampered), tag, key, nonce)
        print("ERROR: Tampered ciphertext not detected!")
    except AuthenticationFailure as e:
        print(f"Correctly detected tampered ciphertext: {e}")

    try:
        tampered = bytearray(tag)
        tampered[0] ^= 0x01
        open_sealed(ciphertext, bytes(tampered), key, nonce)
        print("ERROR: Tampered tag not detected!")
    except AuthenticationFailure as e:
        print(f"Correctly detected tampered tag: {e}")

    print("GCM mode tests completed successfully!")
