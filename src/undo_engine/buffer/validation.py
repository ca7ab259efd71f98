"""Range validation shared by buffer implementations."""

from __future__ import annotations


class InvalidRangeError(RuntimeError):
    """Raised when a position/length pair falls outside the buffer content."""

    def __init__(
        self, message: str, *, position: int | None = None, length: int | None = None
    ) -> None:
        super().__init__(message)
        self.position = position
        self.length = length


def ensure_position(size: int, position: int) -> int:
    if position < 0 or position > size:
        raise InvalidRangeError(
            f"Position {position} outside [0, {size}]", position=position
        )
    return position


def ensure_range(size: int, position: int, length: int) -> tuple[int, int]:
    """Return ``(position, length)`` when ``[position, position + length)`` fits."""

    if length < 0:
        raise InvalidRangeError(
            f"Negative length {length}", position=position, length=length
        )
    if position < 0 or position + length > size:
        raise InvalidRangeError(
            f"Range {position}+{length} outside content of size {size}",
            position=position,
            length=length,
        )
    return position, length
