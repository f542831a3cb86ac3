# tests/test_sudoku_notes.py
from sudoku_core import PEERS, empty_grid, is_valid
from sudoku_notes import (
    clone_notes,
    empty_notes,
    note_digits,
    prune_after_placement,
    recompute_all,
    toggle_note,
)


def test_recompute_all_matches_constraint_checker(solution):
    for (r, c) in [(0, 0), (0, 4), (4, 4), (8, 2)]:
        solution[r][c] = 0
    notes = recompute_all(solution)
    for r in range(9):
        for c in range(9):
            if solution[r][c] == 0:
                expected = {d for d in range(1, 10) if is_valid(solution, r, c, d)}
                assert note_digits(notes[r][c]) == expected
            else:
                assert note_digits(notes[r][c]) == frozenset()


def test_recompute_all_on_empty_grid():
    notes = recompute_all(empty_grid())
    assert all(note_digits(cell) == frozenset(range(1, 10)) for row in notes for cell in row)


def test_prune_after_placement_clears_row_column_box():
    notes = recompute_all(empty_grid())
    prune_after_placement(notes, 4, 4, 7)
    for r in range(9):
        for c in range(9):
            if (r, c) == (4, 4) or (r, c) in PEERS[(4, 4)]:
                assert not notes[r][c][7]
            else:
                assert notes[r][c][7]
            # les autres chiffres ne bougent pas
            assert notes[r][c][3]


def test_prune_never_adds():
    notes = empty_notes()
    prune_after_placement(notes, 0, 0, 1)
    assert notes == empty_notes()


def test_toggle_note_is_self_inverse():
    notes = empty_notes()
    assert toggle_note(notes, 2, 2, 4) is True
    assert note_digits(notes[2][2]) == {4}
    assert toggle_note(notes, 2, 2, 4) is False
    assert notes == empty_notes()


def test_clone_notes_is_deep():
    notes = empty_notes()
    copy = clone_notes(notes)
    toggle_note(copy, 0, 0, 1)
    assert not notes[0][0][1]
