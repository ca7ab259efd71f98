"""Cursor state and format kinds for text buffers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FormatKind(str, Enum):
    """Character formats a buffer can toggle over a range."""

    BOLD = "bold"
    ITALIC = "italic"
    UNDERLINE = "underline"


@dataclass(slots=True)
class BufferState:
    """Mutable cursor info tied to a FormattedText version."""

    cursor: int = 0
    last_change_tick: int = 0

    def set_cursor(self, position: int) -> None:
        self.cursor = position
