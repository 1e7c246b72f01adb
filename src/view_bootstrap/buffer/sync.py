"""Boundary types exchanged with hosts that invoke the bootstrap."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from .state import SelectionRange


@dataclass(slots=True)
class BufferMirror:
    """Host-friendly snapshot of a rewritten buffer."""

    text: str
    selections: tuple[SelectionRange, ...] = ()
    version: int = 0
    attributes: dict[str, str] = field(default_factory=dict)


@runtime_checkable
class BufferSync(Protocol):
    """Protocol describing how adapters exchange text with a host widget."""

    def pull_buffer(self) -> BufferMirror:
        """Return the latest text the host should render."""
        ...

    def push_buffer(self, mirror: BufferMirror) -> None:
        """Submit host-side text (user edits) to replace the adapter's copy."""
        ...


class SelectionValidationError(RuntimeError):
    """Raised when a host supplies a selection that cannot exist."""

    def __init__(
        self, message: str, *, selection: SelectionRange | None = None
    ) -> None:
        super().__init__(message)
        self.selection = selection
