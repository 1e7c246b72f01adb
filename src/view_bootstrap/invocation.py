"""Host-facing command: take text plus selections, hand back rewritten text."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional, Sequence

from view_bootstrap.buffer import (
    LineBuffer,
    SelectionRange,
    SelectionValidationError,
    ensure_selections,
)
from view_bootstrap.config import DEFAULT_CONFIG, ScaffoldConfig
from view_bootstrap.runtime import telemetry
from view_bootstrap.scaffold import ScaffoldEditor, ScaffoldResult

CompletionHandler = Callable[[Optional[Exception]], None]


@dataclass(slots=True)
class Invocation:
    """Text and selections supplied by a host; ``text`` is rewritten in place."""

    text: str
    selections: Sequence[SelectionRange] = field(default_factory=tuple)
    result: Optional[ScaffoldResult] = None

    @classmethod
    def from_lines(
        cls, lines: Sequence[str], selections: Sequence[SelectionRange]
    ) -> "Invocation":
        return cls(text="".join(lines), selections=tuple(selections))

    @property
    def lines(self) -> tuple[str, ...]:
        return LineBuffer.from_text(self.text).lines


class BootstrapCommand:
    """Runs the scaffold editor for one invocation and signals completion once."""

    def __init__(self, config: ScaffoldConfig = DEFAULT_CONFIG) -> None:
        self.editor = ScaffoldEditor(config)

    def perform(
        self, invocation: Invocation, completion_handler: CompletionHandler
    ) -> None:
        try:
            selections = ensure_selections(invocation.selections)
        except SelectionValidationError as exc:
            telemetry.record_event(
                "invocation.rejected",
                level="warning",
                data={"reason": str(exc), "selection": exc.selection},
            )
            completion_handler(exc)
            return

        result = self.editor.run(LineBuffer.from_text(invocation.text), selections)
        invocation.result = result
        invocation.text = result.buffer.text
        completion_handler(None)


__all__ = ["BootstrapCommand", "CompletionHandler", "Invocation"]
