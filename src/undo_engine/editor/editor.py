"""Editor façade translating user verbs into history-managed commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from undo_engine.buffer import (
    BufferView,
    FormatKind,
    FormatLike,
    TextBuffer,
    TextBufferProtocol,
)
from undo_engine.commands import (
    BoldCommand,
    DeleteTextCommand,
    EditorCommand,
    FormatCommand,
    InsertTextCommand,
    MacroCommand,
    MoveCursorCommand,
)
from undo_engine.history import (
    EmptyHistoryError,
    HistoryManager,
    NothingToRedoError,
)


@dataclass(slots=True)
class EditResult:
    """Result returned from every ``Editor`` verb."""

    applied: bool
    status: str = "ok"
    message: Optional[str] = None
    label: Optional[str] = None


class Editor:
    """Public editing surface; every verb is recorded in ``history``."""

    def __init__(
        self,
        buffer: Optional[TextBufferProtocol] = None,
        history: Optional[HistoryManager] = None,
    ) -> None:
        self.buffer: TextBufferProtocol = buffer if buffer is not None else TextBuffer()
        self.history = history or HistoryManager()

    @classmethod
    def from_text(cls, text: str) -> "Editor":
        return cls(buffer=TextBuffer.from_text(text))

    def type_text(self, text: str) -> EditResult:
        return self._run(InsertTextCommand(self.buffer, text))

    def delete_characters(self, count: int) -> EditResult:
        return self._run(DeleteTextCommand(self.buffer, count))

    def make_bold(self, start: int, length: int) -> EditResult:
        return self._run(BoldCommand(self.buffer, start, length))

    def apply_format(
        self, start: int, length: int, kind: FormatLike = FormatKind.BOLD
    ) -> EditResult:
        return self._run(FormatCommand(self.buffer, start, length, kind))

    def move_cursor(self, position: int) -> EditResult:
        return self._run(MoveCursorCommand(self.buffer, position))

    def run_macro(
        self,
        steps: Iterable[Callable[[TextBufferProtocol], EditorCommand]],
        *,
        label: Optional[str] = None,
    ) -> EditResult:
        """Record several commands as a single undoable entry.

        ``steps`` are command factories taking the buffer, e.g.
        ``lambda buf: InsertTextCommand(buf, "x")``.
        """

        commands = [factory(self.buffer) for factory in steps]
        return self._run(MacroCommand(commands, label=label))

    def undo(self) -> EditResult:
        try:
            command = self.history.undo()
        except EmptyHistoryError as exc:
            return EditResult(applied=False, status="empty_history", message=str(exc))
        return EditResult(
            applied=command.reverted,
            status="undone" if command.reverted else "noop",
            label=command.label,
        )

    def redo(self) -> EditResult:
        try:
            command = self.history.redo()
        except NothingToRedoError as exc:
            return EditResult(applied=False, status="nothing_to_redo", message=str(exc))
        return EditResult(
            applied=command.applied,
            status="redone" if command.applied else "noop",
            label=command.label,
        )

    def show_content(self) -> BufferView:
        snapshot = getattr(self.buffer, "snapshot", None)
        if callable(snapshot):
            return snapshot()
        return BufferView(
            version=0,
            text=self.buffer.content(),
            cursor=self.buffer.cursor_position(),
        )

    def _run(self, command: EditorCommand) -> EditResult:
        self.history.execute(command)
        if command.applied:
            return EditResult(applied=True, label=command.label)
        return EditResult(
            applied=False,
            status="noop",
            message="buffer rejected the edit range",
            label=command.label,
        )
