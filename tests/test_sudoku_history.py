# tests/test_sudoku_history.py
from sudoku_history import History, PlaceDigit, ToggleNote

EMPTY = (False,) * 10


def test_push_and_pop_order():
    h = History()
    assert not h.can_undo
    assert h.pop() is None
    a = PlaceDigit(0, 0, 0, 5, EMPTY)
    b = ToggleNote(1, 1, 3, EMPTY)
    h.push(a)
    h.push(b)
    assert len(h) == 2
    assert h.pop() == b
    assert h.pop() == a
    assert not h.can_undo


def test_new_action_clears_redo():
    h = History()
    h.redo_stack.append(PlaceDigit(0, 0, 0, 1, EMPTY))
    assert h.can_redo
    h.push(ToggleNote(0, 0, 1, EMPTY))
    assert not h.can_redo
    assert h.redo_stack == []


def test_clear():
    h = History()
    h.push(PlaceDigit(0, 0, 0, 1, EMPTY))
    h.clear()
    assert len(h) == 0
