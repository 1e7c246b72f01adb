"""Executable Textual app: edit a file, select declarations, bootstrap them."""

from __future__ import annotations

import argparse
import os
from pathlib import Path
from typing import Optional, Sequence

try:  # pragma: no cover - imported only when the app is run
    from textual.app import App, ComposeResult
    from textual.widgets import Footer, Header, Static, TextArea
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use view_bootstrap.adapters.textual.app"
    ) from exc

from view_bootstrap.buffer import BufferMirror
from view_bootstrap.config import ENV_PREFIX
from view_bootstrap.runtime import telemetry

from .controller import TextualScaffoldAdapter, TextualUIHooks


class BootstrapApp(App[None]):
    """Single-file editor with a bootstrap key binding."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#source {
		height: 1fr;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+b", "bootstrap", "Bootstrap"),
        ("ctrl+s", "save", "Save"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, path: Path, *, encoding: str = "utf-8") -> None:
        super().__init__()
        self.path = path
        self.encoding = encoding
        self.adapter: TextualScaffoldAdapter | None = None
        self._editor: TextArea | None = None
        self._status_widget: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        self._editor = TextArea("", id="source")
        yield self._editor
        self._status_widget = Static("", id="status-line")
        yield self._status_widget
        yield Footer()

    def on_mount(self) -> None:
        hooks = TextualUIHooks(
            update_buffer=self._update_buffer,
            update_status=self._update_status,
            log=self._log_line,
        )
        self.adapter = TextualScaffoldAdapter(hooks)
        text = ""
        if self.path.exists():
            text = self.path.read_text(encoding=self.encoding)
        self.adapter.load(text)
        self._update_status(str(self.path))

    def action_bootstrap(self) -> None:
        if not (self.adapter and self._editor):
            return
        self.adapter.push_buffer(BufferMirror(text=self._editor.text))
        selection = self._editor.selection
        self.adapter.bootstrap((selection.start, selection.end))

    def action_save(self) -> None:
        if not (self.adapter and self._editor):
            return
        self.adapter.push_buffer(BufferMirror(text=self._editor.text))
        self.path.write_text(self.adapter.text, encoding=self.encoding)
        self._update_status(f"saved {self.path}")

    def _update_buffer(self, mirror: BufferMirror) -> None:
        if self._editor is None:
            return
        cursor = self._editor.cursor_location
        self._editor.load_text(mirror.text)
        if cursor[0] < self._editor.document.line_count:
            self._editor.move_cursor(cursor)

    def _update_status(self, status: str) -> None:
        if self._status_widget:
            self._status_widget.update(status)

    def _log_line(self, line: str) -> None:
        telemetry.record_event("textual.adapter", level="debug", data={"line": line})


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Edit a source file and bootstrap selected declarations."
    )
    parser.add_argument("path", type=Path, help="Source file to open")
    parser.add_argument(
        "--encoding",
        default=os.environ.get(f"{ENV_PREFIX}ENCODING", "utf-8"),
        help="File encoding (default: utf-8)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    BootstrapApp(args.path, encoding=args.encoding).run()


if __name__ == "__main__":  # pragma: no cover - manual run
    main()
