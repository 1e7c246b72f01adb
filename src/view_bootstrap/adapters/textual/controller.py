"""Adapter wiring a Textual text area to the bootstrap command via callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from view_bootstrap.buffer import BufferMirror, Position, SelectionRange
from view_bootstrap.invocation import BootstrapCommand, Invocation

HostSelection = Tuple[Position, Position]


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_buffer: Callable[[BufferMirror], None]
    update_status: Callable[[str], None] = _noop
    log: Callable[[str], None] = _noop


class TextualScaffoldAdapter:
    """Keeps the host's text, runs the command on request, pushes results back."""

    def __init__(
        self,
        hooks: TextualUIHooks,
        *,
        text: str = "",
        command: Optional[BootstrapCommand] = None,
    ) -> None:
        self.hooks = hooks
        self.command = command or BootstrapCommand()
        self.text = text
        self.version = 0
        self.selections: tuple[SelectionRange, ...] = ()

    def load(self, text: str) -> None:
        self.text = text
        self.selections = ()
        self.version += 1
        self.hooks.update_buffer(self.pull_buffer())

    def pull_buffer(self) -> BufferMirror:
        return BufferMirror(
            text=self.text, selections=self.selections, version=self.version
        )

    def push_buffer(self, mirror: BufferMirror) -> None:
        """Record host edits without echoing them back to the widget."""

        if mirror.text != self.text:
            self.text = mirror.text
            self.version += 1
        self.selections = tuple(mirror.selections)

    def bootstrap(self, selection: HostSelection) -> bool:
        """Run the command for ``selection``; return whether it completed."""

        start, end = sorted(selection)
        selection_range = SelectionRange(start=tuple(start), end=tuple(end))
        invocation = Invocation(text=self.text, selections=(selection_range,))
        self._log("bootstrap ->", start=start, end=end, version=self.version)

        outcome: list[Optional[Exception]] = []
        self.command.perform(invocation, outcome.append)
        error = outcome[0] if outcome else None
        if error is not None:
            self.hooks.update_status(f"bootstrap failed: {error}")
            self._log("bootstrap <-", error=error)
            return False

        result = invocation.result
        if result is not None and result.changed:
            self.text = invocation.text
            self.version += 1
            self.selections = (selection_range,)
            self.hooks.update_buffer(self.pull_buffer())
        registered = result.registered if result is not None else ()
        if registered:
            self.hooks.update_status("bootstrapped " + ", ".join(registered))
        else:
            self.hooks.update_status("nothing to bootstrap")
        self._log("bootstrap <-", registered=registered, version=self.version)
        return True

    def _log(self, prefix: str, **fields: object) -> None:
        parts = [prefix]
        parts.extend(f"{key}={value!r}" for key, value in fields.items())
        self.hooks.log(" ".join(parts))


__all__ = ["HostSelection", "TextualScaffoldAdapter", "TextualUIHooks"]
