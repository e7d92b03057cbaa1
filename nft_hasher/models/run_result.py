from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

"""Run result model.

Aggregated outcome of a completed file run, used for the SUMMARY line and the
CLI success message. Failed runs raise instead of returning a result.
"""

__all__ = [
    "RunResult",
]


@dataclass(frozen=True)
class RunResult:
    input_path: Path
    output_path: Path
    total_rows: int  # data rows read (blank lines excluded)
    hashed_rows: int  # rows that produced a CanonicalObject
    passthrough_rows: int  # rows written unchanged (empty name)
    series_total: int  # pre-counted newline total
    start_time: datetime
    end_time: datetime
    elapsed_seconds: float
    missing_columns: list[str] = field(default_factory=list)
