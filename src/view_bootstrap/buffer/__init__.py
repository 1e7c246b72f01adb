"""Line snapshots, selections and host boundary types."""

from .lines import LineBuffer, PatternLike, is_blank, split_lines
from .state import Position, SelectionRange, last_selection, line_in_selections
from .sync import BufferMirror, BufferSync, SelectionValidationError
from .validation import ensure_selection, ensure_selections

__all__ = [
    "LineBuffer",
    "PatternLike",
    "is_blank",
    "split_lines",
    "Position",
    "SelectionRange",
    "last_selection",
    "line_in_selections",
    "BufferMirror",
    "BufferSync",
    "SelectionValidationError",
    "ensure_selection",
    "ensure_selections",
]
