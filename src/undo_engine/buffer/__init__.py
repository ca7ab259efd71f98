"""Buffer contract and the in-memory implementation commands run against."""

from .buffer import BufferView, TextBuffer
from .document import FormattedText
from .protocol import FormatLike, TextBufferProtocol
from .state import BufferState, FormatKind
from .validation import InvalidRangeError, ensure_position, ensure_range

__all__ = [
    "BufferState",
    "BufferView",
    "FormatKind",
    "FormatLike",
    "FormattedText",
    "InvalidRangeError",
    "TextBuffer",
    "TextBufferProtocol",
    "ensure_position",
    "ensure_range",
]
