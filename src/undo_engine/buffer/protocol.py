"""Contract commands rely on when mutating a text buffer."""

from __future__ import annotations

from typing import Protocol, Union

from .state import FormatKind

FormatLike = Union[FormatKind, str]


class TextBufferProtocol(Protocol):
    """Index-based text storage with a single cursor.

    Offsets are character offsets into ``content()``. Implementations raise
    ``InvalidRangeError`` on out-of-range input and leave their state untouched.
    """

    def insert(self, position: int, text: str) -> None:
        """Insert ``text`` at ``position`` and park the cursor after it."""
        ...

    def delete(self, position: int, length: int) -> None:
        """Remove ``length`` characters at ``position``; cursor moves to ``position``."""
        ...

    def apply_format(self, start: int, length: int, kind: FormatLike) -> None:
        ...

    def remove_format(self, start: int, length: int, kind: FormatLike) -> None:
        ...

    def move_cursor(self, position: int) -> None:
        ...

    def text_range(self, start: int, length: int) -> str:
        ...

    def cursor_position(self) -> int:
        ...

    def content(self) -> str:
        ...
