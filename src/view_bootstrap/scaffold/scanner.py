"""Pick declarations out of the selected lines.

Recognition is a single regular expression, not a parser. Only
``let name = TypeName()`` / ``var name = TypeName()`` on one line is
understood; declarations with arguments, computed properties or multi-line
initializers are ignored lines.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, List, Sequence, Union

from view_bootstrap.buffer import LineBuffer, SelectionRange, line_in_selections

DECLARATION_PATTERN = re.compile(r"(let|var) +([a-zA-Z0-9_]+) *= *[a-zA-Z]+\(\)")


@dataclass(frozen=True, slots=True)
class RecognizedDeclaration:
    name: str
    line_index: int


@dataclass(frozen=True, slots=True)
class IgnoredLine:
    line_index: int


ScannedLine = Union[RecognizedDeclaration, IgnoredLine]


def classify_line(line: str, line_index: int = 0) -> ScannedLine:
    match = DECLARATION_PATTERN.search(line)
    if match is None:
        return IgnoredLine(line_index)
    return RecognizedDeclaration(match.group(2), line_index)


def iter_selected(
    buffer: LineBuffer, selections: Sequence[SelectionRange]
) -> Iterator[ScannedLine]:
    """Classify every line that at least one selection touches."""

    for index, line in enumerate(buffer.lines):
        if line_in_selections(index, selections):
            yield classify_line(line, index)


def scan_declarations(
    buffer: LineBuffer, selections: Sequence[SelectionRange]
) -> List[str]:
    """Identifiers in buffer line order; repeated names are kept."""

    return [
        scanned.name
        for scanned in iter_selected(buffer, selections)
        if isinstance(scanned, RecognizedDeclaration)
    ]


__all__ = [
    "DECLARATION_PATTERN",
    "IgnoredLine",
    "RecognizedDeclaration",
    "ScannedLine",
    "classify_line",
    "iter_selected",
    "scan_declarations",
]
