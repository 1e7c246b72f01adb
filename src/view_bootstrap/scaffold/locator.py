"""Anchor queries over a buffer snapshot.

Every query takes the snapshot it should look at. Callers re-query after each
rewrite instead of carrying indices across edits.
"""

from __future__ import annotations

import re
from typing import Optional

from view_bootstrap.buffer import LineBuffer, SelectionRange
from view_bootstrap.config import DEFAULT_CONFIG, Lifecycle, ScaffoldConfig

from .naming import section_label

BLOCK_END_PATTERN = re.compile(r"^\}")


class SectionLocator:
    """Finds the structural anchors the editor inserts against."""

    def __init__(self, config: ScaffoldConfig = DEFAULT_CONFIG) -> None:
        self.config = config
        self.function_end_pattern = re.compile(
            "^" + re.escape(config.member_indent) + r"\}"
        )

    def enclosing_block_end(
        self, buffer: LineBuffer, selection: SelectionRange
    ) -> Optional[int]:
        """First column-0 ``}`` from the end of ``selection`` to the buffer end."""

        start = selection.end_line
        return buffer.find_pattern(
            BLOCK_END_PATTERN, start, buffer.line_count - start
        )

    def function_body_end(
        self, buffer: LineBuffer, start: int, block_end: int
    ) -> Optional[int]:
        """First one-level-indented ``}`` at or after ``start``, before ``block_end``.

        This is brace matching by indentation only: a nested block whose
        closing brace happens to sit at member indentation ends the search
        early.
        """

        return buffer.find_pattern(self.function_end_pattern, start, block_end - start)

    def lifecycle_body_end(
        self, buffer: LineBuffer, selection: SelectionRange, stage: Lifecycle
    ) -> Optional[int]:
        """Closing line of the ``stage`` stub found below ``selection``."""

        block_end = self.enclosing_block_end(buffer, selection)
        if block_end is None:
            return None
        start = selection.end_line
        signature = self.config.lifecycle(stage).signature
        opening = buffer.find_string(signature, start, block_end - start)
        if opening is None:
            return None
        return self.function_body_end(buffer, opening, block_end)

    def has_region(self, buffer: LineBuffer) -> bool:
        return self.config.start_mark in buffer.text

    def region_end(self, buffer: LineBuffer) -> Optional[int]:
        return buffer.find_string(self.config.end_mark, *buffer.full_range())

    def placeholder(self, buffer: LineBuffer, stage: Lifecycle) -> Optional[int]:
        line = self.config.placeholder_line(stage)
        return buffer.find_string(line, *buffer.full_range())

    def section_exists(
        self, buffer: LineBuffer, selection: SelectionRange, name: str
    ) -> bool:
        """Whether ``name`` already has a labelled section below ``selection``."""

        block_end = self.enclosing_block_end(buffer, selection)
        if block_end is None:
            return False
        start = selection.end_line
        label = self.config.mark(section_label(name))
        return buffer.find_string(label, start, block_end - start) is not None


__all__ = ["BLOCK_END_PATTERN", "SectionLocator"]
