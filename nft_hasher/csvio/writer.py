from __future__ import annotations

import csv
import io
from collections.abc import Sequence
from pathlib import Path

from .reader import InputOutputError

"""Buffered CSV output.

Rows are accumulated in memory and written to disk in a single flush once the
run completes, so a failed run leaves no output file behind.
"""

__all__ = [
    "OutputWriteError",
    "OutputBuffer",
]


class OutputWriteError(InputOutputError):
    """Raised when the output file cannot be written."""


class OutputBuffer:
    """In-memory CSV sink. Flush writes the file once.

    - LF line terminator, minimal quoting
    - rows keep whatever length they are given (no padding)
    """
    def __init__(self) -> None:
        self._buf = io.StringIO(newline="")
        self._writer = csv.writer(self._buf, lineterminator="\n")
        self._rows = 0

    def write_row(self, row: Sequence[str]) -> None:
        self._writer.writerow(row)
        self._rows += 1

    def __len__(self) -> int:  # pragma: no cover (trivial)
        return self._rows

    def getvalue(self) -> str:
        return self._buf.getvalue()

    def flush(self, path: Path) -> Path:
        try:
            with path.open("w", encoding="utf-8", newline="") as f:
                f.write(self._buf.getvalue())
        except OSError as e:
            raise OutputWriteError(f"cannot write output file {path}: {e}") from e
        return path
