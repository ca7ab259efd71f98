"""User-facing editor verbs."""

from .editor import EditResult, Editor

__all__ = ["EditResult", "Editor"]
