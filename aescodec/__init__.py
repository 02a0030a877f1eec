"""
aescodec - Authenticated Encryption for String Values

This library encrypts string and boolean values, or ordered lists of them,
with AES-256-GCM and returns self-describing hex envelopes of
(content, vector, tag).

Key Features:
- AES-256-GCM with a fresh random 12-byte nonce per value
- 16-byte authentication tag; tampering is always detected
- Booleans survive the round trip as booleans
- Idempotent on mixed batches of plain and encrypted values
- Stateless and safe to call from multiple threads
"""

from .codec import Codec, encrypt, decrypt
from .envelope import Envelope, is_envelope
from .errors import (
    CodecError, InvalidKeyLength, AuthenticationFailure, MalformedField, UnsupportedInputType,
)

__version__ = '0.1.0'
__author__ = 'aescodec Team'

__all__ = [
    'Codec', 'encrypt', 'decrypt', 'Envelope', 'is_envelope',
    'CodecError', 'InvalidKeyLength', 'AuthenticationFailure', 'MalformedField',
    'UnsupportedInputType',
]
