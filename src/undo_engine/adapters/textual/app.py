"""Executable Textual app hosting the undo engine editor."""

from __future__ import annotations

import argparse
import os
from typing import Optional, Sequence, Tuple

try:  # pragma: no cover - imported only when demo is run
    from textual import events
    from textual.app import App, ComposeResult
    from textual.containers import Vertical
    from textual.widgets import Footer, Header, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use undo_engine.adapters.textual.app"
    ) from exc

from undo_engine.buffer import BufferView
from undo_engine.editor import Editor
from undo_engine.runtime import TelemetryObserver

from .controller import TextualEditorAdapter, TextualUIHooks

CURSOR_MARK = "│"
FORWARDED_KEYS = {"ctrl+z", "ctrl+y", "ctrl+b", "backspace", "left", "right", "enter"}


def render_view(view: BufferView) -> Tuple[str, str]:
    """Return the buffer text with a cursor mark, plus a format summary line."""

    text = view.text[: view.cursor] + CURSOR_MARK + view.text[view.cursor :]
    formats = ", ".join(
        f"{kind}: " + " ".join(f"[{start},{start + length})" for start, length in runs)
        for kind, runs in view.formats.items()
    )
    return text, formats or "no formatting"


class EditorApp(App[None]):
    """Minimal Textual UI around ``Editor`` with undo/redo key bindings."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#buffer-view {
		height: 1fr;
		border: round $accent;
		padding: 1 1;
		overflow: auto;
	}

	#format-line, #status-line {
		height: 1;
		padding: 0 1;
	}

	#status-line {
		background: $surface-darken-1;
	}
	"""

    BINDINGS = [
        ("ctrl+c", "quit", "Quit"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, *, initial_text: str = "", telemetry_enabled: bool = True) -> None:
        super().__init__()
        self.editor = Editor.from_text(initial_text)
        self.telemetry_enabled = telemetry_enabled
        self.adapter: TextualEditorAdapter | None = None
        self._buffer_widget: Static | None = None
        self._format_widget: Static | None = None
        self._status_widget: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Vertical(id="buffer-area"):
            self._buffer_widget = Static("", id="buffer-view", markup=False)
            yield self._buffer_widget
        self._format_widget = Static("", id="format-line", markup=False)
        self._status_widget = Static("", id="status-line", markup=False)
        yield self._format_widget
        yield self._status_widget
        yield Footer()

    def on_mount(self) -> None:
        if self.telemetry_enabled:
            self.editor.history.subscribe(TelemetryObserver())
        hooks = TextualUIHooks(
            update_buffer=self._update_buffer,
            update_status=self._update_status,
        )
        self.adapter = TextualEditorAdapter(
            self.editor, hooks, trace=self.telemetry_enabled
        )

    def on_key(self, event: events.Key) -> None:
        if not self.adapter:
            return
        if event.key in FORWARDED_KEYS:
            self.adapter.handle_key(event.key)
        elif event.character and event.is_printable:
            self.adapter.handle_key(event.key, text=event.character)
        else:
            return
        event.stop()

    def _update_buffer(self, view: BufferView) -> None:
        text, formats = render_view(view)
        if self._buffer_widget:
            self._buffer_widget.update(text)
        if self._format_widget:
            self._format_widget.update(formats)

    def _update_status(self, status: str) -> None:
        if self._status_widget:
            self._status_widget.update(status)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Run the undo engine Textual demo (ctrl+z undo, ctrl+y redo, "
        "ctrl+b bold previous word)."
    )
    parser.add_argument(
        "--text",
        default=os.environ.get("UNDO_ENGINE_INITIAL_TEXT", ""),
        help="Initial buffer content; the cursor starts at its end",
    )
    parser.add_argument(
        "--no-telemetry",
        action="store_true",
        help="Do not log history events through telelog",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    app = EditorApp(initial_text=args.text, telemetry_enabled=not args.no_telemetry)
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
