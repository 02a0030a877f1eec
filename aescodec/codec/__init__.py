"""
Codec Package

This package implements the value-level encrypt/decrypt pair, including
boolean normalization and the envelope idempotence guards.
"""

from .codec import Codec, encrypt, decrypt, to_text, from_text

__all__ = ['Codec', 'encrypt', 'decrypt', 'to_text', 'from_text']
