"""History observers that forward transitions to telemetry."""

from __future__ import annotations

from typing import Optional

from undo_engine.history import HistoryEvent

from . import telemetry


class TelemetryObserver:
    """Subscribe to a ``HistoryManager`` to log every execute/undo/redo.

    Edits the buffer rejected are logged at ``warning``.
    """

    def __init__(self, *, logger_name: Optional[str] = None, level: str = "info") -> None:
        self.logger_name = logger_name
        self.level = level

    def __call__(self, event: HistoryEvent) -> None:
        telemetry.record_event(
            f"history.{event.action}",
            level=self.level if event.applied else "warning",
            data={
                "label": event.label,
                "applied": event.applied,
                "undo_depth": event.undo_depth,
                "redo_depth": event.redo_depth,
                "dropped": event.dropped,
            },
            logger_name=self.logger_name,
        )
