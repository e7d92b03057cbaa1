from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

"""ColumnIndex model: semantic field -> header position.

Input files from different teams place their columns in different orders, so
every lookup goes through this mapping instead of a fixed position.
"""

__all__ = [
    "ABSENT",
    "NAME",
    "DESCRIPTION",
    "GENDER",
    "ATTRIBUTES",
    "SERIES_NUMBER",
    "TEAM_NAMES",
    "SEMANTIC_FIELDS",
    "ColumnIndex",
]

# Sentinel position for a column missing from the header
ABSENT = -1

NAME = "name"
DESCRIPTION = "description"
GENDER = "gender"
ATTRIBUTES = "attributes"
SERIES_NUMBER = "series number"
TEAM_NAMES = "team names"

SEMANTIC_FIELDS: tuple[str, ...] = (
    NAME,
    DESCRIPTION,
    GENDER,
    ATTRIBUTES,
    SERIES_NUMBER,
    TEAM_NAMES,
)


@dataclass(frozen=True)
class ColumnIndex:
    """Resolved positions for one file's header. Built once, read-only."""
    positions: Mapping[str, int]

    def position(self, field: str) -> int:
        return self.positions.get(field, ABSENT)

    def has(self, field: str) -> bool:
        return self.position(field) != ABSENT

    def cell(self, row: Sequence[str], field: str) -> str:
        """Return the raw cell for `field`, or "" when the column is absent
        or the row is too short to reach it."""
        pos = self.position(field)
        if pos == ABSENT or pos >= len(row):
            return ""
        return row[pos]

    @property
    def missing(self) -> list[str]:
        return [f for f in SEMANTIC_FIELDS if not self.has(f)]
