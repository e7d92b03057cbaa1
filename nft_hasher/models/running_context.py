from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "RunningContext",
]


@dataclass
class RunningContext:
    """Mutable state threaded across the rows of one file.

    - team_name is sticky: it only changes when a non-empty team cell is seen.
    - series_ordinal is the series number the next qualifying row will get.
    """
    team_name: str = ""
    series_ordinal: int = 1

    def observe_team(self, cell: str) -> None:
        if cell != "":
            self.team_name = cell

    def claim_ordinal(self) -> int:
        current = self.series_ordinal
        self.series_ordinal += 1
        return current

    def skip_ordinal(self) -> None:
        self.series_ordinal += 1
