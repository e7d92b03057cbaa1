from __future__ import annotations

import csv
import io
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from ..errors import ProcessingError

"""CSV input reader.

The whole input file is read into memory once. Two independent passes run
over those same bytes:

1. `count_lines`: raw newline count, used as the series total
2. `BufferedInput.records`: structured CSV parse, header first

Blank lines are skipped by the structured pass (they never reach the row
pipeline) but are still counted by the newline pass.
"""

__all__ = [
    "InputOutputError",
    "EmptyInputError",
    "BufferedInput",
    "load_input",
    "count_lines",
]

INPUT_ENCODING = "utf-8-sig"


class InputOutputError(ProcessingError):
    """Raised when the input cannot be read/parsed or the output cannot be written."""


class EmptyInputError(ProcessingError):
    """Raised when the input has no header row."""


def count_lines(data: bytes) -> int:
    """Count newline bytes, header and blank lines included."""
    return data.count(b"\n")


def _fold_crlf(cell: str) -> str:
    # Quoted multi-line cells from CRLF files carry plain LF line breaks
    return cell.replace("\r\n", "\n") if "\r" in cell else cell


@dataclass(frozen=True)
class BufferedInput:
    path: Path
    data: bytes

    def _text(self) -> str:
        try:
            return self.data.decode(INPUT_ENCODING)
        except UnicodeDecodeError as e:
            raise InputOutputError(f"cannot decode {self.path.name} as UTF-8: {e}") from e

    def records(self) -> Iterator[list[str]]:
        """Yield non-blank CSV records in file order.

        A CRLF inside a quoted cell is folded to LF; a lone CR is kept.

        Raises:
            InputOutputError: on undecodable bytes or malformed CSV
        """
        reader = csv.reader(io.StringIO(self._text(), newline=""))
        try:
            for record in reader:
                if not record:
                    continue
                yield [_fold_crlf(cell) for cell in record]
        except csv.Error as e:
            raise InputOutputError(
                f"malformed CSV in {self.path.name} line {reader.line_num}: {e}"
            ) from e

    def header_and_rows(self) -> tuple[list[str], Iterator[list[str]]]:
        """Split the structured pass into header + remaining rows.

        Raises:
            EmptyInputError: when the file holds no record at all
        """
        records = self.records()
        header = next(records, None)
        if header is None:
            raise EmptyInputError(f"empty CSV file: {self.path}")
        return header, records


def load_input(path: Path) -> BufferedInput:
    try:
        return BufferedInput(path=path, data=path.read_bytes())
    except OSError as e:
        raise InputOutputError(f"cannot open input file {path}: {e}") from e
