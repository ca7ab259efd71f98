"""Range formatting commands."""

from __future__ import annotations

from undo_engine.buffer import FormatKind, FormatLike, TextBufferProtocol

from .base import EditorCommand


class FormatCommand(EditorCommand):
    """Applies ``kind`` over ``[start, start + length)``; undo removes it."""

    stateless = True

    def __init__(
        self,
        buffer: TextBufferProtocol,
        start: int,
        length: int,
        kind: FormatLike = FormatKind.BOLD,
    ) -> None:
        if length < 0:
            raise ValueError(f"length must be >= 0, got {length}")
        self.kind = FormatKind(kind)
        super().__init__(buffer, label=f"{self.kind.value} {start}+{length}")
        self.start = start
        self.length = length

    def _apply(self) -> None:
        self.buffer.apply_format(self.start, self.length, self.kind)

    def _revert(self) -> None:
        self.buffer.remove_format(self.start, self.length, self.kind)


class BoldCommand(FormatCommand):
    def __init__(self, buffer: TextBufferProtocol, start: int, length: int) -> None:
        super().__init__(buffer, start, length, FormatKind.BOLD)
