"""Base class for reversible editor commands."""

from __future__ import annotations

from abc import ABC, abstractmethod

from undo_engine.buffer import InvalidRangeError, TextBufferProtocol


class CommandStateError(RuntimeError):
    """Raised when a command is undone before running or run twice in a row."""

    def __init__(self, message: str, *, command: "EditorCommand | None" = None) -> None:
        super().__init__(message)
        self.command = command


class EditorCommand(ABC):
    """Unit of work that knows how to reverse itself.

    Subclasses capture whatever ``_revert`` needs while running ``_apply``.
    A buffer rejecting the edit with ``InvalidRangeError`` turns the command
    into a no-op: nothing is captured and the matching ``undo`` does nothing.
    """

    #: Commands whose inverse only depends on constructor arguments may be
    #: undone without a prior ``execute``.
    stateless: bool = False

    def __init__(self, buffer: TextBufferProtocol, *, label: str) -> None:
        self.buffer = buffer
        self._label = label
        self._executed = False
        self._applied = False
        self._reverted = False

    @property
    def label(self) -> str:
        return self._label

    @property
    def executed(self) -> bool:
        return self._executed

    @property
    def applied(self) -> bool:
        """Whether the last ``execute`` actually changed the buffer."""

        return self._applied

    @property
    def reverted(self) -> bool:
        """Whether the last ``undo`` actually changed the buffer."""

        return self._reverted

    def execute(self) -> None:
        if self._executed:
            raise CommandStateError(
                f"Command '{self.label}' executed twice without undo", command=self
            )
        try:
            self._apply()
        except InvalidRangeError:
            self._discard_capture()
            self._applied = False
        else:
            self._applied = True
        self._executed = True

    def undo(self) -> None:
        if not self._executed:
            if not self.stateless:
                raise CommandStateError(
                    f"Command '{self.label}' undone before execute", command=self
                )
            self._reverted = self._try_revert()
            return
        self._reverted = self._applied and self._try_revert()
        self._executed = False
        self._applied = False

    def _try_revert(self) -> bool:
        try:
            self._revert()
        except InvalidRangeError:
            return False
        return True

    @abstractmethod
    def _apply(self) -> None:
        """Perform the edit and capture what ``_revert`` needs."""

    @abstractmethod
    def _revert(self) -> None:
        """Reverse a successful ``_apply``."""

    def _discard_capture(self) -> None:
        """Forget state captured by an ``_apply`` the buffer rejected."""

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.label!r} executed={self._executed}>"
