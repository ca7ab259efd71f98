"""Notifications emitted by the history manager."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True, slots=True)
class HistoryEvent:
    """One transition of the history: ``execute``, ``undo`` or ``redo``."""

    action: str
    label: str
    applied: bool
    undo_depth: int
    redo_depth: int
    dropped: int = 0  # redo entries discarded by a new execute


HistoryObserver = Callable[[HistoryEvent], None]
