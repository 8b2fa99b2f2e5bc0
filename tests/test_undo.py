import pytest

from leafedit.buffer import Key, KeyTracker, TextBuffer
from leafedit.undo import Command, UndoManager


def make(text=""):
    buffer = TextBuffer(text)
    keys = KeyTracker()
    return buffer, keys, UndoManager(buffer, keys)


def type_text(buffer, keys, text):
    for ch in text:
        keys.press(ord(ch))
        buffer.begin_user_action()
        buffer.insert_at_cursor(ch)
        buffer.end_user_action()


def press_erase(buffer, keys, key):
    keys.press(key)
    pos = buffer.cursor
    buffer.begin_user_action()
    if key == Key.BACKSPACE:
        buffer.delete(pos - 1, pos)
    else:
        buffer.delete(pos, pos + 1)
    buffer.end_user_action()


def paste(buffer, text):
    buffer.begin_user_action()
    buffer.insert_at_cursor(text)
    buffer.end_user_action()


def test_typed_word_undone_in_one_step():
    buffer, keys, undo = make()
    type_text(buffer, keys, "abc")
    assert undo.can_undo
    undo.undo()
    assert buffer.text == ""
    assert buffer.cursor == 0
    assert undo.can_redo
    assert not undo.can_undo


def test_word_boundary_after_space():
    buffer, keys, undo = make()
    type_text(buffer, keys, "ab cd")
    undo.undo()
    assert buffer.text == "ab "
    undo.undo()
    assert buffer.text == ""


def test_redo_restores_text():
    buffer, keys, undo = make()
    type_text(buffer, keys, "hello")
    undo.undo()
    undo.redo()
    assert buffer.text == "hello"
    assert buffer.cursor == len("hello")
    assert not undo.can_redo


def test_backspace_run_merged():
    buffer, keys, undo = make()
    type_text(buffer, keys, "abc")
    press_erase(buffer, keys, Key.BACKSPACE)
    press_erase(buffer, keys, Key.BACKSPACE)
    assert buffer.text == "a"
    undo.undo()
    assert buffer.text == "abc"
    assert buffer.cursor == 3
    record = undo.redo_stack[-1]
    assert record.command == Command.BS
    assert record.text == "bc"


def test_delete_run_merged():
    buffer, keys, undo = make("abc")
    press_erase(buffer, keys, Key.DELETE)
    press_erase(buffer, keys, Key.DELETE)
    assert buffer.text == "c"
    undo.undo()
    assert buffer.text == "abc"
    assert buffer.cursor == 0
    assert undo.redo_stack[-1].command == Command.DEL


def test_new_edit_clears_redo():
    buffer, keys, undo = make()
    type_text(buffer, keys, "ab")
    undo.undo()
    assert undo.redo_stack
    type_text(buffer, keys, "x")
    assert undo.redo_stack == ()
    assert not undo.can_redo


def test_changes_outside_user_action_not_recorded():
    buffer, keys, undo = make()
    buffer.insert(0, "plain")
    assert undo.undo_stack == ()
    assert not undo.can_undo
    assert undo.undo() == 0
    assert buffer.text == "plain"


def test_paste_after_typing_links_records():
    buffer, keys, undo = make()
    type_text(buffer, keys, "a")
    paste(buffer, "XY")
    assert buffer.text == "aXY"
    assert undo.undo() == 2
    assert buffer.text == ""


def test_sequency_reserve_links_next_record():
    buffer, keys, undo = make()
    paste(buffer, "x")
    undo.set_sequency_reserve()
    paste(buffer, "y")
    paste(buffer, "z")
    assert undo.undo_stack[1].seq is True
    undo.undo()
    assert buffer.text == "x"
    assert undo.redo() == 2
    assert buffer.text == "xyz"


def test_set_sequency_marks_last_record():
    buffer, keys, undo = make()
    paste(buffer, "one")
    undo.set_sequency(True)
    assert undo.undo_stack[-1].seq is True
    undo.set_sequency(False)
    assert undo.undo_stack[-1].seq is False


def test_modified_flag_follows_history():
    buffer, keys, undo = make()
    type_text(buffer, keys, "a")
    assert buffer.modified
    undo.undo()
    assert not buffer.modified
    undo.redo()
    assert buffer.modified


def test_saved_state_moves_modified_step():
    buffer, keys, undo = make()
    type_text(buffer, keys, "ab")
    buffer.modified = False
    assert undo.modified_step == len(undo.undo_stack) == 1
    undo.undo()
    assert buffer.modified
    undo.redo()
    assert not buffer.modified


def test_clear_all_forgets_history():
    buffer, keys, undo = make()
    type_text(buffer, keys, "abc")
    undo.undo()
    type_text(buffer, keys, "d")
    undo.clear_all()
    assert undo.undo_stack == ()
    assert undo.redo_stack == ()
    assert not undo.can_undo and not undo.can_redo
    assert undo.undo() == 0
    assert buffer.text == "d"


@pytest.mark.parametrize("text", ["x", "hello world", "a\nb\tc"])
def test_undo_redo_round_trip(text):
    buffer, keys, undo = make("start ")
    buffer.place_cursor(len(buffer.text))
    type_text(buffer, keys, text)
    after = buffer.text
    while undo.undo():
        pass
    assert buffer.text == "start "
    while undo.redo():
        pass
    assert buffer.text == after