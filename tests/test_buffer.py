import pytest

from leafedit.buffer import (
    CONTROL_FLAG,
    Key,
    KeyTracker,
    TextBuffer,
    selection_has_newline,
)


def test_key_tracker_plain_key():
    keys = KeyTracker()
    assert keys.press(ord("a")) == ord("a")
    assert keys.keyval == ord("a")


def test_key_tracker_control_flag():
    keys = KeyTracker()
    assert keys.press(ord("a"), True) == ord("a") + CONTROL_FLAG
    assert keys.press(Key.CONTROL_L) == Key.CONTROL_L + CONTROL_FLAG


def test_key_tracker_clear():
    keys = KeyTracker()
    keys.press(Key.TAB)
    keys.clear()
    assert keys.keyval == 0


def test_key_values_fixed():
    keys = KeyTracker()
    assert keys.press(Key.BACKSPACE) == 0xFF08
    assert keys.keyval == 0xFF08
    assert keys.press(Key.DELETE) == 0xFFFF
    assert keys.keyval == 0xFFFF


def test_insert_and_event():
    buffer = TextBuffer("hello")
    seen = []
    buffer.connect("insert-text", lambda start, text: seen.append((start, text, buffer.text)))
    buffer.insert(5, " world")
    assert buffer.text == "hello" + " world"
    assert seen == [(5, " world", "hello world")]
    assert buffer.modified is True


def test_delete_event_sees_old_text():
    buffer = TextBuffer("abcdef")
    seen = []
    buffer.connect("delete-range", lambda s, e: seen.append(buffer.text[s:e]))
    buffer.delete(4, 1)
    assert seen == ["bcd"]
    assert buffer.text == "aef"


def test_marks_follow_edits():
    buffer = TextBuffer("abcdef")
    buffer.place_cursor(3)
    buffer.insert(1, "XY")
    assert buffer.cursor == 5
    buffer.delete(0, 4)
    assert buffer.cursor == 1
    buffer.insert_at_cursor("Z")
    assert buffer.cursor == 2
    assert buffer.text[buffer.cursor - 1] == "Z"


def test_selection_and_delete_selection():
    buffer = TextBuffer("one\ntwo")
    events = []
    buffer.connect("begin-user-action", lambda: events.append("begin"))
    buffer.connect("end-user-action", lambda: events.append("end"))
    assert buffer.delete_selection() is False
    buffer.select_range(5, 2)
    assert buffer.selection_bounds() == (2, 5)
    assert selection_has_newline(buffer) is True
    assert buffer.delete_selection() is True
    assert buffer.text == "onwo"
    assert events == ["begin", "end"]
    assert buffer.selection_bounds() is None


def test_selection_without_newline():
    buffer = TextBuffer("one two")
    buffer.select_range(0, 3)
    assert selection_has_newline(buffer) is False


def test_lines():
    buffer = TextBuffer("a\nbb\nccc")
    assert buffer.line_count() == 3
    assert buffer.line_of_offset(3) == 1
    assert buffer.offset_of_line(2) == buffer.text.index("ccc")
    assert buffer.offset_of_line(10) == len(buffer.text)
    with pytest.raises(ValueError):
        buffer.offset_of_line(-1)


def test_line_round_trip():
    buffer = TextBuffer("x\n\nyz\nw")
    for line in range(buffer.line_count()):
        assert buffer.line_of_offset(buffer.offset_of_line(line)) == line


def test_modified_changed_once():
    buffer = TextBuffer()
    seen = []
    buffer.connect("modified-changed", seen.append)
    buffer.insert(0, "a")
    buffer.insert(1, "b")
    buffer.modified = False
    assert seen == [True, False]


def test_nested_user_actions():
    buffer = TextBuffer()
    events = []
    buffer.connect("begin-user-action", lambda: events.append("begin"))
    buffer.connect("end-user-action", lambda: events.append("end"))
    buffer.begin_user_action()
    buffer.begin_user_action()
    buffer.end_user_action()
    buffer.end_user_action()
    assert events == ["begin", "end"]
    with pytest.raises(RuntimeError):
        buffer.end_user_action()


def test_errors():
    buffer = TextBuffer("abc")
    with pytest.raises(IndexError):
        buffer.insert(4, "x")
    with pytest.raises(IndexError):
        buffer.delete(-1, 2)
    with pytest.raises(ValueError):
        buffer.connect("no-such-event", print)