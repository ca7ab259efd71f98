"""Reversible editor commands."""

from .base import CommandStateError, EditorCommand
from .format import BoldCommand, FormatCommand
from .macro import MacroCommand
from .text import DeleteTextCommand, InsertTextCommand, MoveCursorCommand

__all__ = [
    "BoldCommand",
    "CommandStateError",
    "DeleteTextCommand",
    "EditorCommand",
    "FormatCommand",
    "InsertTextCommand",
    "MacroCommand",
    "MoveCursorCommand",
]
