"""
Codec Errors

Exceptions raised by the codec. All of them derive from ValueError so that
callers already guarding cipher calls with ``except ValueError`` keep working.
"""


class CodecError(ValueError):
    """Base class for every error raised by aescodec."""


class InvalidKeyLength(CodecError):
    """The key is not exactly 32 bytes (or is not bytes-like at all)."""


class AuthenticationFailure(CodecError):
    """The GCM tag did not authenticate the ciphertext, key and nonce."""


class MalformedField(CodecError):
    """An envelope field is not hex, has the wrong length, or decodes badly."""


class UnsupportedInputType(CodecError, TypeError):
    """A value cannot be coerced to text for encryption."""
