"""Immutable line snapshots with bounded search and whole-buffer rewrites."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from re import Pattern
from typing import Iterator, Optional, Sequence, Tuple, Union

PatternLike = Union[str, Pattern[str]]

_BLANK_LINE = re.compile(r"^[ \t]*\r?\n[ \t]*$")


@dataclass(frozen=True, slots=True)
class LineBuffer:
    """Ordered text lines, each keeping its own line terminator.

    A snapshot is never edited in place. Every mutator walks all lines once
    and returns a new snapshot with a bumped ``version``, so indices computed
    against an older snapshot must not be reused after an edit.
    """

    lines: Tuple[str, ...] = field(default_factory=tuple)
    version: int = 0

    @classmethod
    def from_text(cls, text: str) -> "LineBuffer":
        return cls(lines=split_lines(text))

    @property
    def text(self) -> str:
        return "".join(self.lines)

    @property
    def line_count(self) -> int:
        return len(self.lines)

    def full_range(self) -> Tuple[int, int]:
        return (0, len(self.lines))

    def _window(self, start: int, length: int) -> Iterator[Tuple[int, str]]:
        if length <= 0:
            return
        first = max(start, 0)
        last = min(start + length, len(self.lines))
        for index in range(first, last):
            yield index, self.lines[index]

    # -- search ---------------------------------------------------------

    def find_string(self, needle: str, start: int, length: int) -> Optional[int]:
        """Index of the first line in ``[start, start+length)`` containing ``needle``."""

        for index, line in self._window(start, length):
            if needle in line:
                return index
        return None

    def find_pattern(
        self, pattern: PatternLike, start: int, length: int
    ) -> Optional[int]:
        """Index of the first line in the range where ``pattern`` matches."""

        compiled = _compile(pattern)
        for index, line in self._window(start, length):
            if compiled.search(line):
                return index
        return None

    def find_pattern_span(
        self, pattern: PatternLike, start: int, length: int
    ) -> Optional[Tuple[int, int]]:
        """Absolute ``(offset, length)`` of the first match in the line range."""

        compiled = _compile(pattern)
        offset = sum(len(line) for line in self.lines[: max(start, 0)])
        for _index, line in self._window(start, length):
            match = compiled.search(line)
            if match:
                return (offset + match.start(), match.end() - match.start())
            offset += len(line)
        return None

    # -- rewrites -------------------------------------------------------

    def prepend_line(self, index: int, text: str) -> "LineBuffer":
        """Emit ``text`` immediately before line ``index``."""

        return self._rebuild(index, text, keep_target=True)

    def replace_line(self, index: int, text: str) -> "LineBuffer":
        """Substitute line ``index`` with ``text``; an empty string deletes it."""

        return self._rebuild(index, text, keep_target=False)

    def insert_block(self, index: int, block: str) -> "LineBuffer":
        """Prepend ``block`` at ``index``, separated from non-blank code above."""

        if not self._addressable(index):
            return self
        parts = []
        previous_blank = False
        for line_number, line in enumerate(self.lines):
            if line_number == index:
                if not previous_blank:
                    parts.append("\n")
                parts.append(block)
            parts.append(line)
            previous_blank = is_blank(line)
        return self._from_parts(parts)

    def _rebuild(self, index: int, text: str, *, keep_target: bool) -> "LineBuffer":
        if not self._addressable(index):
            return self
        parts = []
        for line_number, line in enumerate(self.lines):
            if line_number == index:
                parts.append(text)
                if keep_target:
                    parts.append(line)
            else:
                parts.append(line)
        return self._from_parts(parts)

    def _addressable(self, index: int) -> bool:
        return 0 <= index < len(self.lines)

    def _from_parts(self, parts: Sequence[str]) -> "LineBuffer":
        rebuilt = "".join(parts)
        return LineBuffer(
            lines=split_lines(rebuilt),
            version=self.version + 1,
        )


def split_lines(text: str) -> Tuple[str, ...]:
    """Split on ``\\n`` only, keeping terminators; other breaks stay inside lines."""

    parts = text.split("\n")
    lines = [part + "\n" for part in parts[:-1]]
    if parts[-1]:
        lines.append(parts[-1])
    return tuple(lines)


def is_blank(line: str) -> bool:
    return _BLANK_LINE.search(line) is not None


def _compile(pattern: PatternLike) -> Pattern[str]:
    if isinstance(pattern, str):
        return re.compile(pattern)
    return pattern


__all__ = ["LineBuffer", "PatternLike", "is_blank", "split_lines"]
