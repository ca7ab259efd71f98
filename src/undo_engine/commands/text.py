"""Commands that insert or remove characters around the cursor."""

from __future__ import annotations

from typing import Optional

from undo_engine.buffer import TextBufferProtocol

from .base import EditorCommand


class InsertTextCommand(EditorCommand):
    """Types ``text`` at the cursor."""

    def __init__(self, buffer: TextBufferProtocol, text: str) -> None:
        super().__init__(buffer, label=f"insert {text!r}")
        self.text = text
        self._position: Optional[int] = None

    @property
    def position(self) -> Optional[int]:
        return self._position

    def _apply(self) -> None:
        self._position = self.buffer.cursor_position()
        self.buffer.insert(self._position, self.text)

    def _revert(self) -> None:
        assert self._position is not None
        # Deleting the inserted span also parks the cursor back on _position.
        self.buffer.delete(self._position, len(self.text))

    def _discard_capture(self) -> None:
        self._position = None


class DeleteTextCommand(EditorCommand):
    """Removes ``length`` characters ending at the cursor (backspace)."""

    def __init__(self, buffer: TextBufferProtocol, length: int) -> None:
        if length < 0:
            raise ValueError(f"length must be >= 0, got {length}")
        super().__init__(buffer, label=f"delete {length}")
        self.length = length
        self._position: Optional[int] = None
        self._deleted_text = ""

    @property
    def position(self) -> Optional[int]:
        return self._position

    @property
    def deleted_text(self) -> str:
        return self._deleted_text

    def _apply(self) -> None:
        position = self.buffer.cursor_position()
        start = position - self.length
        deleted = self.buffer.text_range(start, self.length)
        self.buffer.delete(start, self.length)
        self._position = position
        self._deleted_text = deleted

    def _revert(self) -> None:
        assert self._position is not None
        self.buffer.insert(self._position - self.length, self._deleted_text)

    def _discard_capture(self) -> None:
        self._position = None
        self._deleted_text = ""


class MoveCursorCommand(EditorCommand):
    """Moves the cursor to an absolute offset."""

    def __init__(self, buffer: TextBufferProtocol, position: int) -> None:
        super().__init__(buffer, label=f"move cursor {position}")
        self.target = position
        self._previous: Optional[int] = None

    def _apply(self) -> None:
        previous = self.buffer.cursor_position()
        self.buffer.move_cursor(self.target)
        self._previous = previous

    def _revert(self) -> None:
        assert self._previous is not None
        self.buffer.move_cursor(self._previous)

    def _discard_capture(self) -> None:
        self._previous = None
