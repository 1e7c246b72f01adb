"""Derive generated function names and section labels from identifiers."""

from __future__ import annotations


def proper_name(name: str) -> str:
    """Capitalize only the first character: ``fooView`` -> ``FooView``."""

    if len(name) <= 1:
        return name.upper()
    return name[0].upper() + name[1:]


def section_label(name: str) -> str:
    """Split camelCase for humans: ``centeringContainer`` -> ``Centering Container``."""

    parts = []
    for index, char in enumerate(name):
        if index == 0:
            parts.append(char.upper())
        elif "A" <= char <= "Z":
            parts.append(" " + char)
        else:
            parts.append(char)
    return "".join(parts)


__all__ = ["proper_name", "section_label"]
