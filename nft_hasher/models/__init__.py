"""Domain models for the CSV -> CHIP-0007 hasher.

This package contains the record types that flow through a processing run:
the canonical metadata object, the resolved column positions, the per-run
context and the final run result.
"""

from .chip0007 import Attribute, CanonicalObject, Collection, CollectionAttribute
from .column_index import ABSENT, SEMANTIC_FIELDS, ColumnIndex
from .run_result import RunResult
from .running_context import RunningContext

__all__ = [
    # CHIP-0007 object model
    "Attribute",
    "CanonicalObject",
    "Collection",
    "CollectionAttribute",
    # Processing models
    "ABSENT",
    "SEMANTIC_FIELDS",
    "ColumnIndex",
    "RunningContext",
    "RunResult",
]
