from __future__ import annotations

from ..models.run_result import RunResult

"""SUMMARY line rendering.

Format:
SUMMARY file={name} rows={rows} hashed={hashed} passthrough={passthrough}
series_total={total} missing_columns={a,b|-} elapsed_sec={elapsed}
(the SUMMARY label itself is added by log_summary)
"""

__all__ = [
    "render_summary_line",
    "format_seconds",
]


def format_seconds(seconds: float) -> str:
    if seconds == 0:
        return "0"
    if seconds == int(seconds):
        return str(int(seconds))
    if seconds < 0.01:
        # avoid scientific notation for very small numbers
        return f"{seconds:.6f}".rstrip("0").rstrip(".")
    return f"{seconds:.3f}".rstrip("0").rstrip(".")


def render_summary_line(result: RunResult) -> str:
    """Render the SUMMARY content for a completed run.

    Examples:
        >>> from datetime import datetime, timezone
        >>> from pathlib import Path
        >>> t = datetime(2023, 1, 1, tzinfo=timezone.utc)
        >>> r = RunResult(Path("in.csv"), Path("in.output.csv"), 3, 2, 1, 4, t, t, 0.0)
        >>> render_summary_line(r)
        'file=in.csv rows=3 hashed=2 passthrough=1 series_total=4 missing_columns=- elapsed_sec=0'
    """
    missing = ",".join(c.replace(" ", "_") for c in result.missing_columns) or "-"
    return (
        f"file={result.input_path.name} "
        f"rows={result.total_rows} "
        f"hashed={result.hashed_rows} "
        f"passthrough={result.passthrough_rows} "
        f"series_total={result.series_total} "
        f"missing_columns={missing} "
        f"elapsed_sec={format_seconds(result.elapsed_seconds)}"
    )
