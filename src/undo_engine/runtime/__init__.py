"""Runtime services layered outside the editing core."""

from . import telemetry
from .observers import TelemetryObserver

__all__ = ["TelemetryObserver", "telemetry"]
