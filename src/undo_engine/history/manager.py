"""Undo/redo stacks driving reversible editor commands."""

from __future__ import annotations

from typing import Iterable, List, Tuple

from undo_engine.commands import EditorCommand

from .events import HistoryEvent, HistoryObserver


class HistoryError(RuntimeError):
    """Base class for recoverable history conditions."""


class EmptyHistoryError(HistoryError):
    """Raised by ``undo`` when no command has been recorded."""


class NothingToRedoError(HistoryError):
    """Raised by ``redo`` when the redo stack is empty."""


class HistoryManager:
    """Owns the undo and redo stacks of one editing session.

    A command lives in exactly one of the two stacks. Executing a new command
    drops every redo entry; they cannot be recovered afterwards.
    """

    def __init__(self, *, observers: Iterable[HistoryObserver] = ()) -> None:
        self._undo_stack: List[EditorCommand] = []
        self._redo_stack: List[EditorCommand] = []
        self._observers: List[HistoryObserver] = list(observers)

    def subscribe(self, observer: HistoryObserver) -> None:
        self._observers.append(observer)

    def unsubscribe(self, observer: HistoryObserver) -> None:
        self._observers.remove(observer)

    @property
    def undo_depth(self) -> int:
        return len(self._undo_stack)

    @property
    def redo_depth(self) -> int:
        return len(self._redo_stack)

    def can_undo(self) -> bool:
        return bool(self._undo_stack)

    def can_redo(self) -> bool:
        return bool(self._redo_stack)

    def undo_labels(self) -> Tuple[str, ...]:
        """Labels of undoable commands, most recent first."""

        return tuple(cmd.label for cmd in reversed(self._undo_stack))

    def redo_labels(self) -> Tuple[str, ...]:
        return tuple(cmd.label for cmd in reversed(self._redo_stack))

    def execute(self, command: EditorCommand) -> EditorCommand:
        command.execute()
        self._undo_stack.append(command)
        dropped = len(self._redo_stack)
        self._redo_stack.clear()
        self._notify("execute", command, applied=command.applied, dropped=dropped)
        return command

    def undo(self) -> EditorCommand:
        if not self._undo_stack:
            raise EmptyHistoryError("Nothing to undo")
        command = self._undo_stack[-1]
        command.undo()
        self._redo_stack.append(self._undo_stack.pop())
        self._notify("undo", command, applied=command.reverted)
        return command

    def redo(self) -> EditorCommand:
        if not self._redo_stack:
            raise NothingToRedoError("Nothing to redo")
        command = self._redo_stack[-1]
        command.execute()
        self._undo_stack.append(self._redo_stack.pop())
        self._notify("redo", command, applied=command.applied)
        return command

    def _notify(
        self, action: str, command: EditorCommand, *, applied: bool, dropped: int = 0
    ) -> None:
        if not self._observers:
            return
        event = HistoryEvent(
            action=action,
            label=command.label,
            applied=applied,
            undo_depth=len(self._undo_stack),
            redo_depth=len(self._redo_stack),
            dropped=dropped,
        )
        for observer in list(self._observers):
            observer(event)
