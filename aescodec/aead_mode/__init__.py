"""
Authenticated Encryption with Associated Data (AEAD) Package

This package wraps AES-256-GCM, providing both confidentiality and
authenticity for the values the codec protects.
"""

from .gcm_mode import (
    AESGCMCipher, seal, open_sealed, normalize_key, generate_nonce,
    GCM_DEFAULT_PARAMS, KEY_LENGTH, VECTOR_LENGTH, TAG_LENGTH,
)

__all__ = [
    'AESGCMCipher', 'seal', 'open_sealed', 'normalize_key', 'generate_nonce',
    'GCM_DEFAULT_PARAMS', 'KEY_LENGTH', 'VECTOR_LENGTH', 'TAG_LENGTH',
]
