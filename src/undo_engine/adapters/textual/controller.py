"""Textual-facing controller that maps key presses onto Editor verbs."""

from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from typing import Callable, Dict, Iterable, Optional

from undo_engine.buffer import BufferView
from undo_engine.editor import EditResult, Editor
from undo_engine.history import HistoryEvent
from undo_engine.runtime import telemetry


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_buffer: Callable[[BufferView], None]
    update_status: Callable[[str], None] = _noop
    log: Callable[[str], None] = _noop


class TextualEditorAdapter:
    """Bridges an ``Editor`` and its history events to a UI surface."""

    def __init__(
        self, editor: Editor, hooks: TextualUIHooks, *, trace: bool = True
    ) -> None:
        self.editor = editor
        self.hooks = hooks
        self.trace = trace
        self._keymap: Dict[str, Callable[[], EditResult]] = {
            "ctrl+z": self.editor.undo,
            "ctrl+y": self.editor.redo,
            "ctrl+b": self._bold_previous_word,
            "backspace": lambda: self.editor.delete_characters(1),
            "left": lambda: self._step_cursor(-1),
            "right": lambda: self._step_cursor(1),
            "enter": lambda: self.editor.type_text("\n"),
        }
        self.editor.history.subscribe(self._handle_history_event)
        self._refresh_buffer()

    def handle_key(
        self,
        key: str,
        *,
        text: Optional[str] = None,
        modifiers: Iterable[str] = (),
    ) -> Optional[EditResult]:
        """Dispatch one key press; returns ``None`` when the key is unbound."""

        normalized = "+".join([*(str(mod).lower() for mod in modifiers), key.lower()])
        action = self._keymap.get(normalized)
        if action is None and text and len(text) == 1 and text.isprintable():
            action = partial(self.editor.type_text, text)
        if action is None:
            self.hooks.log(f"key -> {normalized!r} unbound")
            return None

        if self.trace:
            with telemetry.span(
                "adapter::key", component="textual", metadata={"key": normalized}
            ):
                result = action()
        else:
            result = action()

        self.hooks.update_status(self._status_line(result))
        self._refresh_buffer()
        return result

    def _bold_previous_word(self) -> EditResult:
        content = self.editor.buffer.content()
        end = self.editor.buffer.cursor_position()
        start = end
        while start > 0 and not content[start - 1].isspace():
            start -= 1
        if start == end:
            return EditResult(
                applied=False, status="noop", message="no word before cursor"
            )
        return self.editor.make_bold(start, end - start)

    def _step_cursor(self, delta: int) -> EditResult:
        return self.editor.move_cursor(self.editor.buffer.cursor_position() + delta)

    def _status_line(self, result: EditResult) -> str:
        parts = [result.status]
        if result.label:
            parts.append(result.label)
        if result.message and not result.applied:
            parts.append(result.message)
        history = self.editor.history
        parts.append(f"undo={history.undo_depth} redo={history.redo_depth}")
        return " | ".join(parts)

    def _handle_history_event(self, event: HistoryEvent) -> None:
        self.hooks.log(
            f"history -> {event.action} {event.label!r} applied={event.applied} "
            f"undo={event.undo_depth} redo={event.redo_depth}"
        )

    def _refresh_buffer(self) -> None:
        self.hooks.update_buffer(self.editor.show_content())


__all__ = ["TextualEditorAdapter", "TextualUIHooks"]
