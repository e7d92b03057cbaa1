from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path

from ..config.loader import Settings, default_settings
from ..csvio.reader import EmptyInputError, InputOutputError, count_lines, load_input
from ..csvio.writer import OutputBuffer, OutputWriteError
from ..errors import ProcessingError
from ..models.chip0007 import CanonicalObject
from ..models.column_index import SERIES_NUMBER, TEAM_NAMES, ColumnIndex
from ..models.run_result import RunResult
from ..models.running_context import RunningContext
from .builder import build_canonical_object, is_qualifying
from .columns import build_column_index
from .hasher import SerializationError, hash_payload, serialize
from .progress import ProgressTracker, echo

"""Row pipeline: drives one CSV file through resolve -> build -> hash -> write.

States: start (read header, resolve columns, buffer augmented header) ->
per-row loop -> done (single flush of the output). Any ProcessingError raised
along the way is the failed state: nothing has been written to disk yet.
"""

__all__ = [
    "ProcessingError",
    "EmptyInputError",
    "InputOutputError",
    "OutputWriteError",
    "SerializationError",
    "RowOutcome",
    "output_path_for",
    "transform_row",
    "process_file",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RowOutcome:
    """Result of pushing one row through the pipeline."""
    row: list[str]  # row as written to the output
    canonical: CanonicalObject | None = None  # None for passthrough rows
    payload: bytes | None = None
    digest: str | None = None

    @property
    def hashed(self) -> bool:
        return self.digest is not None


def output_path_for(input_path: Path, suffix: str = ".output.csv") -> Path:
    """`data/nfts.csv` -> `data/nfts.output.csv`"""
    return input_path.with_name(input_path.stem + suffix)


def transform_row(
    row: Sequence[str],
    columns: ColumnIndex,
    context: RunningContext,
    series_total: int,
    settings: Settings,
) -> RowOutcome:
    """Apply the per-row rules, updating `context` in place.

    - a non-empty team cell becomes the sticky minting tool
    - rows without a name pass through unchanged; they still consume an
      ordinal when their series-number cell is filled in
    - named rows claim an ordinal, are serialized, echoed and hashed, and
      get the digest appended

    Raises:
        SerializationError: if the object cannot be encoded
    """
    context.observe_team(columns.cell(row, TEAM_NAMES))

    if not is_qualifying(row, columns):
        if columns.cell(row, SERIES_NUMBER) != "":
            context.skip_ordinal()
        return RowOutcome(row=list(row))

    canonical = build_canonical_object(
        row,
        columns,
        minting_tool=context.team_name,
        series_number=context.claim_ordinal(),
        series_total=series_total,
        settings=settings,
    )
    payload = serialize(canonical)
    if settings.echo_json:
        echo(payload.decode("utf-8"))
    digest = hash_payload(payload)
    return RowOutcome(
        row=[*row, digest],
        canonical=canonical,
        payload=payload,
        digest=digest,
    )


def process_file(
    input_path: Path,
    settings: Settings | None = None,
    *,
    output_path: Path | None = None,
) -> RunResult:
    """Process a single CSV file and write `<stem>.output.csv` beside it.

    Args:
        input_path: CSV file to read
        settings: Run settings (defaults when None)
        output_path: Override for the output location

    Returns:
        RunResult with row counts and timing

    Raises:
        InputOutputError: input unreadable/undecodable/malformed
        OutputWriteError: output not writable (an InputOutputError)
        EmptyInputError: input has no header row
        SerializationError: a row's object could not be encoded
    """
    if settings is None:
        settings = default_settings()
    if output_path is None:
        output_path = output_path_for(input_path, settings.output_suffix)

    start_time = datetime.now(UTC)

    source = load_input(input_path)
    # First pass: raw newline count
    series_total = count_lines(source.data)
    logger.info("Counted %d lines in %s", series_total, input_path.name)

    # Second pass: structured CSV parse
    header, rows = source.header_and_rows()
    columns = build_column_index(header)

    out = OutputBuffer()
    out.write_row([*header, settings.hash_column])

    context = RunningContext()
    total_rows = 0
    hashed_rows = 0

    with ProgressTracker(series_total) as progress:
        for row in rows:
            total_rows += 1
            outcome = transform_row(row, columns, context, series_total, settings)
            if outcome.hashed:
                hashed_rows += 1
                logger.debug(
                    "row=%d series_number=%d hash=%s",
                    total_rows,
                    outcome.canonical.series_number,  # type: ignore[union-attr]
                    outcome.digest,
                )
            out.write_row(outcome.row)
            progress.advance(outcome.hashed)

    out.flush(output_path)

    end_time = datetime.now(UTC)
    return RunResult(
        input_path=input_path,
        output_path=output_path,
        total_rows=total_rows,
        hashed_rows=hashed_rows,
        passthrough_rows=total_rows - hashed_rows,
        series_total=series_total,
        start_time=start_time,
        end_time=end_time,
        elapsed_seconds=(end_time - start_time).total_seconds(),
        missing_columns=columns.missing,
    )
