from __future__ import annotations

from typing import List

import pytest

from undo_engine.buffer import TextBuffer
from undo_engine.commands import DeleteTextCommand, InsertTextCommand, MoveCursorCommand
from undo_engine.history import (
    EmptyHistoryError,
    HistoryError,
    HistoryEvent,
    HistoryManager,
    NothingToRedoError,
)


def make_history() -> tuple[TextBuffer, HistoryManager, List[HistoryEvent]]:
    events: List[HistoryEvent] = []
    history = HistoryManager(observers=[events.append])
    return TextBuffer(), history, events


def state(buffer: TextBuffer) -> tuple[str, int]:
    return buffer.content(), buffer.cursor_position()


def test_undo_on_empty_history_fails() -> None:
    _, history, _ = make_history()

    with pytest.raises(EmptyHistoryError):
        history.undo()


def test_redo_on_empty_redo_stack_fails() -> None:
    buffer, history, _ = make_history()
    history.execute(InsertTextCommand(buffer, "a"))

    with pytest.raises(NothingToRedoError) as excinfo:
        history.redo()

    assert isinstance(excinfo.value, HistoryError)


def test_undo_reverses_in_reverse_chronological_order() -> None:
    buffer, history, _ = make_history()
    for chunk in ("one", " two", " three"):
        history.execute(InsertTextCommand(buffer, chunk))

    assert history.undo_labels() == ("insert ' three'", "insert ' two'", "insert 'one'")

    history.undo()
    assert state(buffer) == ("one two", 7)
    history.undo()
    assert state(buffer) == ("one", 3)
    history.undo()
    assert state(buffer) == ("", 0)
    assert history.redo_labels() == ("insert 'one'", "insert ' two'", "insert ' three'")


def test_undo_restores_state_before_last_command() -> None:
    buffer, history, _ = make_history()
    history.execute(InsertTextCommand(buffer, "Hello World"))
    history.execute(MoveCursorCommand(buffer, 5))
    history.execute(DeleteTextCommand(buffer, 2))
    before_last = state(buffer)
    history.execute(InsertTextCommand(buffer, "p!"))

    history.undo()

    assert state(buffer) == before_last == ("Hel World", 3)


def test_undo_then_redo_restores_state() -> None:
    buffer, history, _ = make_history()
    history.execute(InsertTextCommand(buffer, "Hello World"))
    history.execute(DeleteTextCommand(buffer, 6))
    before_undo = state(buffer)

    undone = history.undo()
    redone = history.redo()

    assert redone is undone
    assert state(buffer) == before_undo == ("Hello", 5)


def test_execute_invalidates_redo_entries() -> None:
    buffer, history, events = make_history()
    history.execute(InsertTextCommand(buffer, "ab"))
    history.execute(InsertTextCommand(buffer, "cd"))
    history.undo()
    history.undo()
    assert history.can_redo()

    history.execute(InsertTextCommand(buffer, "xy"))

    assert history.redo_depth == 0
    assert events[-1].action == "execute"
    assert events[-1].dropped == 2
    with pytest.raises(NothingToRedoError):
        history.redo()


def test_every_command_held_once_or_dropped() -> None:
    buffer, history, events = make_history()
    executed = 0
    for step in ("x", "y", "undo", "z", "undo", "undo", "redo", "w", "undo"):
        if step == "undo":
            history.undo()
        elif step == "redo":
            history.redo()
        else:
            history.execute(InsertTextCommand(buffer, step))
            executed += 1
        dropped = sum(event.dropped for event in events)
        assert history.undo_depth + history.redo_depth + dropped == executed

    assert history.undo_depth == 1
    assert history.redo_depth == 1
    assert buffer.content() == "x"


def test_noop_command_undo_still_succeeds() -> None:
    buffer, history, events = make_history()
    history.execute(InsertTextCommand(buffer, "abc"))
    history.execute(DeleteTextCommand(buffer, 10))

    history.undo()

    assert state(buffer) == ("abc", 3)
    assert events[-1] == HistoryEvent(
        action="undo", label="delete 10", applied=False, undo_depth=1, redo_depth=1
    )


def test_observers_receive_transitions_until_unsubscribed() -> None:
    buffer, history, events = make_history()
    extra: List[str] = []

    def observer(event: HistoryEvent) -> None:
        extra.append(event.action)

    history.subscribe(observer)
    history.execute(InsertTextCommand(buffer, "a"))
    history.undo()
    history.redo()
    history.unsubscribe(observer)
    history.undo()

    assert extra == ["execute", "undo", "redo"]
    assert [event.action for event in events] == ["execute", "undo", "redo", "undo"]


class FailingRevert(InsertTextCommand):
    def _revert(self) -> None:
        raise RuntimeError("revert exploded")


def test_rejected_undo_keeps_command_in_history() -> None:
    buffer, history, events = make_history()
    history.execute(InsertTextCommand(buffer, "Hello"))
    buffer.delete(0, 3)

    history.undo()

    assert state(buffer) == ("lo", 0)
    assert (history.undo_depth, history.redo_depth) == (0, 1)
    assert events[-1].action == "undo"
    assert events[-1].applied is False


def test_failing_undo_leaves_command_on_undo_stack() -> None:
    buffer, history, events = make_history()
    history.execute(FailingRevert(buffer, "x"))

    with pytest.raises(RuntimeError, match="revert exploded"):
        history.undo()

    assert (history.undo_depth, history.redo_depth) == (1, 0)
    assert history.undo_labels() == ("insert 'x'",)
    assert [event.action for event in events] == ["execute"]
