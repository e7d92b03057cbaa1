from __future__ import annotations

from collections.abc import Sequence

from ..config.loader import Settings
from ..models.chip0007 import Attribute, CanonicalObject
from ..models.column_index import ATTRIBUTES, DESCRIPTION, GENDER, NAME, ColumnIndex
from .attributes import parse_attributes

"""Canonical object builder: one CSV row -> CanonicalObject."""

__all__ = [
    "is_qualifying",
    "build_attributes",
    "build_canonical_object",
]


def is_qualifying(row: Sequence[str], columns: ColumnIndex) -> bool:
    """A row qualifies for hashing when its raw name cell is non-empty."""
    return columns.cell(row, NAME) != ""


def build_attributes(row: Sequence[str], columns: ColumnIndex) -> tuple[Attribute, ...]:
    # Gender is present on every NFT and always comes first
    attributes = [Attribute(trait_type="gender", value=columns.cell(row, GENDER).strip())]
    # Some historical file variants have no attributes column at all
    if columns.has(ATTRIBUTES):
        attributes.extend(parse_attributes(columns.cell(row, ATTRIBUTES)))
    return tuple(attributes)


def build_canonical_object(
    row: Sequence[str],
    columns: ColumnIndex,
    *,
    minting_tool: str,
    series_number: int,
    series_total: int,
    settings: Settings,
) -> CanonicalObject:
    """Assemble the CHIP-0007 object for a qualifying row.

    Args:
        row: Raw CSV cells
        columns: Resolved column positions for the file
        minting_tool: Current sticky team name
        series_number: Ordinal claimed for this row
        series_total: Pre-counted total for the file
        settings: Supplies the format tag and the static collection

    Returns:
        A new frozen CanonicalObject
    """
    return CanonicalObject(
        format=settings.format,
        name=columns.cell(row, NAME).strip(),
        description=columns.cell(row, DESCRIPTION).strip(),
        minting_tool=minting_tool,
        sensitive_content=False,
        series_number=series_number,
        series_total=series_total,
        attributes=build_attributes(row, columns),
        collection=settings.collection,
    )
