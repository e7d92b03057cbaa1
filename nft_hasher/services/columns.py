from __future__ import annotations

import logging
from collections.abc import Sequence

from ..models.column_index import ABSENT, SEMANTIC_FIELDS, ColumnIndex

"""Column resolver.

Earlier versions of the teams' CSV files did not agree on column order (one
team put the filename second, another fourth), so positions are looked up by
header name once per file and reused for every row.
"""

__all__ = [
    "resolve_column",
    "build_column_index",
]

logger = logging.getLogger(__name__)


def resolve_column(header: Sequence[str], field: str) -> int:
    """Return the position of `field` in `header` (case-insensitive), or ABSENT.

    A missing column is reported as a warning; callers treat its cells as empty.
    """
    key = field.lower()
    for index, elem in enumerate(header):
        if elem.lower() == key:
            return index
    logger.warning("No column named: %s", field)
    return ABSENT


def build_column_index(header: Sequence[str]) -> ColumnIndex:
    positions = {field: resolve_column(header, field) for field in SEMANTIC_FIELDS}
    logger.debug("column positions: %s", positions)
    return ColumnIndex(positions=positions)
