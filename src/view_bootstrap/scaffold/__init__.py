"""Declaration scanning, anchor lookup and the bootstrap editor."""

from .editor import ScaffoldEditor, ScaffoldResult, bootstrap_text
from .locator import SectionLocator
from .naming import proper_name, section_label
from .scanner import (
    DECLARATION_PATTERN,
    IgnoredLine,
    RecognizedDeclaration,
    classify_line,
    scan_declarations,
)

__all__ = [
    "ScaffoldEditor",
    "ScaffoldResult",
    "bootstrap_text",
    "SectionLocator",
    "proper_name",
    "section_label",
    "DECLARATION_PATTERN",
    "IgnoredLine",
    "RecognizedDeclaration",
    "classify_line",
    "scan_declarations",
]
