"""
Value Codec

This module implements the encrypt/decrypt pair that turns string and
boolean values (or ordered sequences of them) into hex envelopes and back.

Both operations are idempotent on mixed batches: values that are already
envelopes are left alone by encrypt, and plain values are left alone by
decrypt. Absent data or an absent key makes either call a no-op, so
optional fields can be routed through the codec unconditionally.
"""

import logging
from typing import Any, List, Optional, Union

from ..aead_mode.gcm_mode import AESGCMCipher, KeyLike
from ..envelope.envelope import Envelope, is_envelope
from ..errors import MalformedField, UnsupportedInputType

logger = logging.getLogger(__name__)

TRUE_TEXT = 'true'
FALSE_TEXT = 'false'


def to_text(value: Union[str, bool]) -> str:
    """
    Serialize a plain value to the text that gets encrypted.

    Booleans become the literals "true"/"false"; strings pass through.

    Raises:
        UnsupportedInputType: For any other type
    """
    if isinstance(value, bool):
        return TRUE_TEXT if value else FALSE_TEXT
    if isinstance(value, str):
        return value
    raise UnsupportedInputType(f"Cannot encrypt value of type {type(value).__name__}")


def from_text(text: str) -> Union[str, bool]:
    """Reverse to_text: exactly "true"/"false" become booleans."""
    if text == TRUE_TEXT:
        return True
    if text == FALSE_TEXT:
        return False
    return text


def _as_batch(data: Any):
    """Return (items, is_sequence) for a single value or a list/tuple."""
    if isinstance(data, (list, tuple)):
        return list(data), True
    return [data], False


def _restore_shape(data: Any, result: List[Any], is_sequence: bool) -> Any:
    if not is_sequence:
        return result[0]
    if isinstance(data, tuple):
        return tuple(result)
    return result


class Codec:
    """
    Stateless AES-256-GCM codec for string-shaped values.

    The codec holds no key and no state; every call validates the key it is
    given and builds its own cipher, so a single instance can be shared
    freely between threads.
    """

    def encrypt(self, data: Any, key: Optional[KeyLike]) -> Any:
        """
        Encrypt a value or an ordered sequence of values.

        Args:
            data: A string, a boolean, or a list/tuple of them. Elements that
                are already envelopes are returned unchanged.
            key: 32-byte key

        Returns:
            An Envelope, a sequence of Envelopes (same type, length and order),
            or ``data`` itself when data or key is None

        Raises:
            InvalidKeyLength: If the key is not 32 bytes
            UnsupportedInputType: If an element is not a string or boolean
        """
        if data is None or key is None:
            return data

        cipher = AESGCMCipher(key)
        items, is_sequence = _as_batch(data)

        result = []
        skipped = 0
        for item in items:
            if item is None or is_envelope(item):
                skipped += 1
                result.append(item)
                continue

            text = to_text(item)
            if not text:
                # Empty ciphertext would produce an envelope with no content
                skipped += 1
                result.append(item)
                continue

            ciphertext, tag, nonce = cipher.encrypt(text.encode('utf-8'))
            result.append(Envelope.from_bytes(ciphertext, nonce, tag))

        logger.debug("Encrypted %d of %d value(s)", len(items) - skipped, len(items))
        return _restore_shape(data, result, is_sequence)

    def decrypt(self, data: Any, key: Optional[KeyLike]) -> Any:
        """
        Decrypt an envelope or an ordered sequence of envelopes.

        Args:
            data: An Envelope, a mapping with content/vector/tag, or a
                list/tuple of them. Elements that are not envelopes are
                returned unchanged.
            key: 32-byte key used for encryption

        Returns:
            The plain value(s); "true"/"false" come back as booleans

        Raises:
            InvalidKeyLength: If the key is not 32 bytes
            MalformedField: If an envelope field is not valid hex or has the
                wrong length
            AuthenticationFailure: If the key is wrong or the envelope was
                tampered with
        """
        if data is None or key is None:
            return data

        cipher = AESGCMCipher(key)
        items, is_sequence = _as_batch(data)

        result = []
        skipped = 0
        for item in items:
            if not is_envelope(item):
                skipped += 1
                result.append(item)
                continue

            envelope = item if isinstance(item, Envelope) else Envelope.from_mapping(item)
            ciphertext, nonce, tag = envelope.to_bytes()
            plaintext = cipher.decrypt(ciphertext, tag, nonce)
            try:
                text = plaintext.decode('utf-8')
            except UnicodeDecodeError as e:
                raise MalformedField(f"Decrypted content is not valid UTF-8: {e}") from e
            result.append(from_text(text))

        logger.debug("Decrypted %d of %d value(s)", len(items) - skipped, len(items))
        return _restore_shape(data, result, is_sequence)


_default_codec = Codec()


def encrypt(data: Any, key: Optional[KeyLike]) -> Any:
    """
    Encrypt a value or list of values with AES-256-GCM.

    See Codec.encrypt.
    """
    return _default_codec.encrypt(data, key)


def decrypt(data: Any, key: Optional[KeyLike]) -> Any:
    """
    Decrypt an envelope or list of envelopes.

    See Codec.decrypt.
    """
    return _default_codec.decrypt(data, key)
