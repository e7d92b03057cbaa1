from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

"""CHIP-0007 object model.

Field declaration order is the serialization order: the hasher relies on
`to_json_dict()` returning keys in exactly this order.
"""

__all__ = [
    "Attribute",
    "CollectionAttribute",
    "Collection",
    "CanonicalObject",
]


@dataclass(frozen=True)
class Attribute:
    """One trait/value pair of an NFT."""
    trait_type: str
    value: str

    def to_json_dict(self) -> dict[str, Any]:
        return {"trait_type": self.trait_type, "value": self.value}


@dataclass(frozen=True)
class CollectionAttribute:
    type: str
    value: str

    def to_json_dict(self) -> dict[str, Any]:
        return {"type": self.type, "value": self.value}


@dataclass(frozen=True)
class Collection:
    """Static collection descriptor shared by every object of a run."""
    name: str
    id: str
    attributes: CollectionAttribute

    def to_json_dict(self) -> dict[str, Any]:
        # "Attributes" is capitalized in the published hashes; keep it that way.
        return {
            "name": self.name,
            "id": self.id,
            "Attributes": self.attributes.to_json_dict(),
        }


@dataclass(frozen=True)
class CanonicalObject:
    """Metadata record for a single NFT row.

    Created fresh for every qualifying row and discarded once its hash has
    been written out.
    """
    format: str
    name: str
    description: str
    minting_tool: str
    sensitive_content: bool
    series_number: int
    series_total: int
    attributes: tuple[Attribute, ...]
    collection: Collection = field(repr=False)

    def to_json_dict(self) -> dict[str, Any]:
        """Return a plain dict in serialization order."""
        return {
            "format": self.format,
            "name": self.name,
            "description": self.description,
            "minting_tool": self.minting_tool,
            "sensitive_content": self.sensitive_content,
            "series_number": self.series_number,
            "series_total": self.series_total,
            "attributes": [a.to_json_dict() for a in self.attributes],
            "collection": self.collection.to_json_dict(),
        }
