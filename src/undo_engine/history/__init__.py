"""Undo/redo history management."""

from .events import HistoryEvent, HistoryObserver
from .manager import EmptyHistoryError, HistoryError, HistoryManager, NothingToRedoError

__all__ = [
    "EmptyHistoryError",
    "HistoryError",
    "HistoryEvent",
    "HistoryManager",
    "HistoryObserver",
    "NothingToRedoError",
]
