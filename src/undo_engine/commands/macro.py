"""Composite command running several commands as one history entry."""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from undo_engine.buffer import InvalidRangeError

from .base import EditorCommand


class MacroCommand(EditorCommand):
    """Executes children in order and undoes them in reverse.

    The macro is all-or-nothing: when a child turns into a no-op or raises,
    the children that already ran are undone before the macro reports failure.
    """

    def __init__(
        self, commands: Iterable[EditorCommand], *, label: Optional[str] = None
    ) -> None:
        items = list(commands)
        if not items:
            raise ValueError("MacroCommand needs at least one command")
        buffers = {id(cmd.buffer) for cmd in items}
        if len(buffers) > 1:
            raise ValueError("MacroCommand children must share one buffer")
        super().__init__(items[0].buffer, label=label or f"macro({len(items)})")
        self._items: List[EditorCommand] = items
        self._done: List[EditorCommand] = []

    @property
    def commands(self) -> Sequence[EditorCommand]:
        return tuple(self._items)

    def _apply(self) -> None:
        self._done = []
        try:
            for cmd in self._items:
                cmd.execute()
                self._done.append(cmd)
                if not cmd.applied:
                    raise InvalidRangeError(f"Macro step '{cmd.label}' was rejected")
        except Exception:
            self._rollback()
            raise

    def _revert(self) -> None:
        self._rollback()

    def _rollback(self) -> None:
        while self._done:
            self._done.pop().undo()

    def _discard_capture(self) -> None:
        self._done = []
