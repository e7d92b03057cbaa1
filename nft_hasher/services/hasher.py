from __future__ import annotations

import hashlib
import json
from dataclasses import dataclass

from ..errors import ProcessingError
from ..models.chip0007 import CanonicalObject

"""Deterministic serializer + SHA-256 hasher.

Byte form: compact JSON, keys in declaration order, UTF-8, with '<', '>', '&',
U+2028 and U+2029 escaped as \\uXXXX. This matches the encoder that produced
the first published hashes, so the same row always yields the same digest.
"""

__all__ = [
    "SerializationError",
    "HashedObject",
    "serialize",
    "hash_payload",
    "serialize_and_hash",
]

_HTML_SAFE = str.maketrans({
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
})


class SerializationError(ProcessingError):
    """Raised when a CanonicalObject cannot be encoded."""


@dataclass(frozen=True)
class HashedObject:
    payload: bytes
    digest: str


def serialize(obj: CanonicalObject) -> bytes:
    try:
        text = json.dumps(obj.to_json_dict(), ensure_ascii=False, separators=(",", ":"))
        return text.translate(_HTML_SAFE).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise SerializationError(f"cannot serialize object '{obj.name}': {e}") from e


def hash_payload(payload: bytes) -> str:
    """Uppercase hex SHA-256 of `payload`, using a fresh hash state."""
    return hashlib.sha256(payload).hexdigest().upper()


def serialize_and_hash(obj: CanonicalObject) -> HashedObject:
    payload = serialize(obj)
    return HashedObject(payload=payload, digest=hash_payload(payload))
