"""Positions and selections supplied by the invoking host."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Tuple

Position = Tuple[int, int]  # (line, column)


@dataclass(frozen=True, slots=True)
class SelectionRange:
    """One user-chosen span; both endpoints are zero-based (line, column)."""

    start: Position
    end: Position

    @classmethod
    def lines(cls, start_line: int, end_line: Optional[int] = None) -> "SelectionRange":
        """Selection covering whole lines ``start_line..end_line`` inclusive."""

        last = start_line if end_line is None else end_line
        return cls(start=(start_line, 0), end=(last, 0))

    @property
    def start_line(self) -> int:
        return self.start[0]

    @property
    def end_line(self) -> int:
        return self.end[0]

    def covers_line(self, line: int) -> bool:
        return self.start_line <= line <= self.end_line


def last_selection(selections: Sequence[SelectionRange]) -> Optional[SelectionRange]:
    """The operative anchor: only the final selection drives insertion."""

    return selections[-1] if selections else None


def line_in_selections(line: int, selections: Iterable[SelectionRange]) -> bool:
    return any(selection.covers_line(line) for selection in selections)
