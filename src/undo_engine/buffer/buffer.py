"""In-memory text buffer combining formatted text and cursor state."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Mapping, Optional, Tuple

from .document import FormattedText
from .protocol import FormatLike
from .state import BufferState, FormatKind
from .validation import ensure_position, ensure_range


@dataclass(slots=True)
class BufferView:
    version: int
    text: str
    cursor: int
    formats: Mapping[str, Tuple[Tuple[int, int], ...]] = field(default_factory=dict)


class TextBuffer:
    """Reference implementation of ``TextBufferProtocol``.

    Every mutation validates first and swaps the document and cursor together,
    so a rejected call never leaves a half-applied edit behind.
    """

    def __init__(
        self,
        *,
        name: str = "default",
        document: Optional[FormattedText] = None,
        state: Optional[BufferState] = None,
    ) -> None:
        self.name = name
        self.document = document if document is not None else FormattedText()
        self.state = state or BufferState()
        ensure_position(len(self.document), self.state.cursor)

    @classmethod
    def from_text(
        cls, text: str, *, name: str = "default", cursor: Optional[int] = None
    ) -> "TextBuffer":
        position = len(text) if cursor is None else cursor
        return cls(
            name=name,
            document=FormattedText.from_text(text),
            state=BufferState(cursor=position),
        )

    def content(self) -> str:
        return self.document.text

    def cursor_position(self) -> int:
        return self.state.cursor

    def text_range(self, start: int, length: int) -> str:
        start, length = ensure_range(len(self.document), start, length)
        return self.document.slice(start, length)

    def insert(self, position: int, text: str) -> None:
        ensure_position(len(self.document), position)
        self._commit(self.document.insert(position, text), position + len(text))

    def delete(self, position: int, length: int) -> None:
        ensure_range(len(self.document), position, length)
        self._commit(self.document.delete(position, length), position)

    def apply_format(self, start: int, length: int, kind: FormatLike) -> None:
        ensure_range(len(self.document), start, length)
        restyled = self.document.restyle(start, length, _kind_key(kind), enabled=True)
        self._commit(restyled, self.state.cursor)

    def remove_format(self, start: int, length: int, kind: FormatLike) -> None:
        ensure_range(len(self.document), start, length)
        restyled = self.document.restyle(start, length, _kind_key(kind), enabled=False)
        self._commit(restyled, self.state.cursor)

    def move_cursor(self, position: int) -> None:
        ensure_position(len(self.document), position)
        self.state.set_cursor(position)

    def formats_at(self, index: int) -> FrozenSet[str]:
        ensure_range(len(self.document), index, 1)
        return self.document.formats_at(index)

    def format_ranges(self, kind: FormatLike) -> Tuple[Tuple[int, int], ...]:
        return self.document.ranges(_kind_key(kind))

    def snapshot(self) -> BufferView:
        formats = {}
        for kind in FormatKind:
            runs = self.document.ranges(kind.value)
            if runs:
                formats[kind.value] = runs
        return BufferView(
            version=self.document.version,
            text=self.document.text,
            cursor=self.state.cursor,
            formats=formats,
        )

    def _commit(self, document: FormattedText, cursor: int) -> None:
        self.document = document
        self.state.set_cursor(cursor)
        self.state.last_change_tick = document.version


def _kind_key(kind: FormatLike) -> str:
    return FormatKind(kind).value
