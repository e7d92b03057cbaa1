from __future__ import annotations

import sys
from typing import Any

from tqdm import tqdm
from tqdm.std import tqdm as TqdmType

"""Row progress display with tqdm (TTY only).

In non-TTY environments (CI, redirected output) no bar is created, so the
output stream stays free of ANSI control sequences. Text that must appear
while the bar is live goes through `echo`, which routes via tqdm.write.
"""

__all__ = [
    "ProgressTracker",
    "is_tty_enabled",
    "echo",
]


def is_tty_enabled() -> bool:
    """Check if stdout is a TTY and progress should be displayed."""
    return sys.stdout.isatty()


def echo(text: str) -> None:
    """Print a line without breaking an active progress bar."""
    tqdm.write(text, file=sys.stdout)


class ProgressTracker:
    """Progress tracker over the data rows of one file."""

    def __init__(self, total_rows: int, *, description: str = "Hashing rows") -> None:
        """
        Args:
            total_rows: Expected number of rows (the pre-counted line total)
            description: Description for the progress bar
        """
        self.total_rows = total_rows
        self.description = description
        self.hashed = 0
        self.passthrough = 0

        self.enabled = is_tty_enabled()
        self.pbar: TqdmType[Any] | None
        if self.enabled:
            self.pbar = tqdm(
                total=total_rows,
                desc=description,
                unit="row",
                leave=True,
                position=0,
                ncols=80,
                ascii=True,
            )
        else:
            self.pbar = None

    def advance(self, hashed: bool) -> None:
        if hashed:
            self.hashed += 1
        else:
            self.passthrough += 1
        if self.enabled and self.pbar is not None:
            self.pbar.update(1)
            self.pbar.set_postfix(hashed=self.hashed, passthrough=self.passthrough)

    def close(self) -> None:
        if self.enabled and self.pbar is not None:
            self.pbar.close()
            self.pbar = None

    def __enter__(self) -> ProgressTracker:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
