import pytest

from undo_engine.buffer import (
    BufferState,
    FormatKind,
    InvalidRangeError,
    TextBuffer,
)


def make_buffer(text: str = "Hello World", *, cursor: int | None = None) -> TextBuffer:
    return TextBuffer.from_text(text, cursor=cursor)


def test_from_text_places_cursor_at_end() -> None:
    buffer = make_buffer()

    assert buffer.content() == "Hello World"
    assert buffer.cursor_position() == 11


def test_insert_moves_cursor_after_text() -> None:
    buffer = make_buffer("ad", cursor=1)

    buffer.insert(1, "bc")

    assert buffer.content() == "abcd"
    assert buffer.cursor_position() == 3


def test_delete_parks_cursor_at_position() -> None:
    buffer = make_buffer()

    buffer.delete(5, 6)

    assert buffer.content() == "Hello"
    assert buffer.cursor_position() == 5


def test_out_of_range_delete_leaves_state_unchanged() -> None:
    buffer = make_buffer("abc")
    version = buffer.document.version

    with pytest.raises(InvalidRangeError) as excinfo:
        buffer.delete(-7, 10)

    assert excinfo.value.position == -7
    assert excinfo.value.length == 10
    assert buffer.content() == "abc"
    assert buffer.cursor_position() == 3
    assert buffer.document.version == version


def test_insert_past_end_is_rejected() -> None:
    buffer = make_buffer("abc")

    with pytest.raises(InvalidRangeError):
        buffer.insert(4, "x")

    assert buffer.content() == "abc"


def test_text_range_reads_without_mutating() -> None:
    buffer = make_buffer()

    assert buffer.text_range(5, 6) == " World"
    assert buffer.cursor_position() == 11

    with pytest.raises(InvalidRangeError):
        buffer.text_range(8, 4)


def test_formats_follow_their_characters() -> None:
    buffer = make_buffer(cursor=0)
    buffer.apply_format(0, 5, FormatKind.BOLD)

    buffer.insert(0, "> ")
    assert buffer.format_ranges(FormatKind.BOLD) == ((2, 5),)

    buffer.delete(0, 4)
    assert buffer.format_ranges("bold") == ((0, 3),)
    assert buffer.formats_at(0) == frozenset({"bold"})


def test_format_does_not_move_cursor() -> None:
    buffer = make_buffer()

    buffer.apply_format(0, 5, "italic")
    buffer.remove_format(1, 2, "italic")

    assert buffer.cursor_position() == 11
    assert buffer.format_ranges("italic") == ((0, 1), (3, 2))


def test_removing_absent_format_is_noop() -> None:
    buffer = make_buffer()

    buffer.remove_format(0, 5, FormatKind.UNDERLINE)

    assert buffer.format_ranges(FormatKind.UNDERLINE) == ()


def test_unknown_format_kind_rejected() -> None:
    buffer = make_buffer()

    with pytest.raises(ValueError):
        buffer.apply_format(0, 1, "strikethrough")


def test_snapshot_lists_only_present_formats() -> None:
    buffer = make_buffer()
    buffer.apply_format(6, 5, FormatKind.BOLD)

    view = buffer.snapshot()

    assert view.text == "Hello World"
    assert view.cursor == 11
    assert view.formats == {"bold": ((6, 5),)}


def test_move_cursor_bounds() -> None:
    buffer = make_buffer("abc")

    buffer.move_cursor(0)
    assert buffer.cursor_position() == 0

    with pytest.raises(InvalidRangeError):
        buffer.move_cursor(4)
    assert buffer.cursor_position() == 0


def test_initial_cursor_must_fit_content() -> None:
    with pytest.raises(InvalidRangeError):
        TextBuffer(state=BufferState(cursor=5))
