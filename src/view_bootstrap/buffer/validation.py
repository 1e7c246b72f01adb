"""Validation helpers applied at the invocation boundary."""

from __future__ import annotations

from typing import Iterable

from .state import SelectionRange
from .sync import SelectionValidationError


def ensure_selection(selection: SelectionRange) -> SelectionRange:
    start_line, start_col = selection.start
    end_line, end_col = selection.end
    if min(start_line, start_col, end_line, end_col) < 0:
        raise SelectionValidationError("Negative selection position", selection=selection)
    if selection.start > selection.end:
        raise SelectionValidationError("Selection starts after it ends", selection=selection)
    return selection


def ensure_selections(selections: Iterable[SelectionRange]) -> tuple[SelectionRange, ...]:
    return tuple(ensure_selection(selection) for selection in selections)
