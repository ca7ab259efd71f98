"""Reversible command engine for text-buffer editors."""

__all__ = [
    "adapters",
    "buffer",
    "commands",
    "editor",
    "history",
    "runtime",
]

__version__ = "0.1.0"
