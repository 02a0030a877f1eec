"""
Envelope Package

This package implements the hex-encoded (content, vector, tag) record
produced by encryption and consumed by decryption.
"""

from .envelope import Envelope, is_envelope, encode_field, decode_field, ENVELOPE_FIELDS

__all__ = ['Envelope', 'is_envelope', 'encode_field', 'decode_field', 'ENVELOPE_FIELDS']
