"""
Ciphertext Envelope

This module defines the three-field record that carries one encrypted
value: hex ciphertext, hex nonce and hex authentication tag.
"""

import binascii
from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping, Tuple

from ..errors import MalformedField

ENVELOPE_FIELDS = ('content', 'vector', 'tag')


def encode_field(data: bytes) -> str:
    """Encode bytes as a lowercase hex string."""
    return data.hex()


def decode_field(name: str, value: Any) -> bytes:
    """
    Decode a hex envelope field to bytes.

    Args:
        name: Field name, used in the error message
        value: The hex string

    Returns:
        The decoded bytes

    Raises:
        MalformedField: If the value is not a string of valid hex
    """
    if not isinstance(value, str):
        raise MalformedField(f"Envelope field '{name}' must be a hex string, got {type(value).__name__}")
    try:
        return binascii.unhexlify(value)
    except (binascii.Error, ValueError) as e:
        raise MalformedField(f"Envelope field '{name}' is not valid hex: {e}") from e


def _get_field(value: Any, name: str) -> Any:
    if isinstance(value, Envelope):
        return getattr(value, name)
    if isinstance(value, Mapping):
        return value.get(name)
    return None


def is_envelope(value: Any) -> bool:
    """
    Check whether a value looks like an encrypted envelope.

    A value qualifies when it is an Envelope or a mapping whose
    ``content``, ``vector`` and ``tag`` are all present and non-empty.
    Anything else is plain, not-yet-encrypted data.
    """
    return all(_get_field(value, name) for name in ENVELOPE_FIELDS)


@dataclass(frozen=True)
class Envelope:
    """Encrypted representation of one value. All fields are lowercase hex."""
    content: str
    vector: str
    tag: str

    @classmethod
    def from_bytes(cls, ciphertext: bytes, nonce: bytes, tag: bytes) -> 'Envelope':
        return cls(
            content=encode_field(ciphertext),
            vector=encode_field(nonce),
            tag=encode_field(tag)
        )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> 'Envelope':
        """
        Build an Envelope from a stored dict.

        Raises:
            MalformedField: If any of the three fields is missing or empty
        """
        missing = [name for name in ENVELOPE_FIELDS if not data.get(name)]
        if missing:
            raise MalformedField(f"Envelope is missing fields: {', '.join(missing)}")
        return cls(content=data['content'], vector=data['vector'], tag=data['tag'])

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)

    def to_bytes(self) -> Tuple[bytes, bytes, bytes]:
        """
        Decode the envelope fields.

        Returns:
            A tuple of (ciphertext, nonce, tag)

        Raises:
            MalformedField: If a field is not valid hex
        """
        return (
            decode_field('content', self.content),
            decode_field('vector', self.vector),
            decode_field('tag', self.tag),
        )
