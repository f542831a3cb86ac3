# tests/test_sudoku_core.py
import random

import pytest

from sudoku_core import (
    PEERS,
    UNITS,
    check_digit,
    check_position,
    digit_counts,
    empty_grid,
    find_empty,
    generate_solution,
    grid_candidates,
    is_complete_solution,
    is_valid,
)


def test_units_and_peers_shape():
    assert len(UNITS) == 27
    assert all(len(unit) == 9 for unit in UNITS)
    assert all(len(p) == 20 for p in PEERS.values())
    assert (0, 0) not in PEERS[(0, 0)]
    assert (2, 2) in PEERS[(0, 0)]
    assert (3, 3) not in PEERS[(0, 0)]


def test_is_valid_row_column_box():
    grid = empty_grid()
    grid[0][0] = 5
    assert not is_valid(grid, 0, 8, 5)  # ligne
    assert not is_valid(grid, 8, 0, 5)  # colonne
    assert not is_valid(grid, 1, 1, 5)  # bloc
    assert is_valid(grid, 4, 4, 5)
    assert is_valid(grid, 0, 8, 6)


def test_is_valid_ignores_the_cell_itself(solution):
    # une case déjà remplie ne se bloque pas elle-même
    assert is_valid(solution, 4, 4, solution[4][4])
    assert not is_valid(solution, 4, 4, solution[4][5])


def test_find_empty_is_row_major(solution):
    assert find_empty(solution) is None
    solution[3][7] = 0
    solution[5][1] = 0
    assert find_empty(solution) == (3, 7)


def test_is_complete_solution(solution):
    assert is_complete_solution(solution)
    solution[0][0], solution[0][1] = solution[0][1], solution[0][0]
    assert not is_complete_solution(solution)
    assert not is_complete_solution(empty_grid())


@pytest.mark.parametrize("seed", [0, 1, 2, 42, 2024])
def test_generate_solution_is_full_and_valid(seed):
    grid = generate_solution(random.Random(seed))
    assert is_complete_solution(grid)
    assert len(set(grid[0])) == 9
    for r in range(9):
        for c in range(9):
            assert is_valid(grid, r, c, grid[r][c])


def test_generate_solution_is_reproducible_with_seed():
    assert generate_solution(random.Random(7)) == generate_solution(random.Random(7))


def test_generate_solution_without_rng():
    assert is_complete_solution(generate_solution())


def test_digit_counts(solution):
    assert digit_counts(solution) == {d: 9 for d in range(1, 10)}
    solution[0][0] = 0
    assert digit_counts(solution)[1] == 8


def test_grid_candidates_matches_is_valid(solution):
    solution[0][0] = 0
    solution[0][1] = 0
    cands = grid_candidates(solution)
    assert cands == {(0, 0): {1}, (0, 1): {2}}


def test_check_position_and_digit():
    check_position(8, 8)
    with pytest.raises(ValueError):
        check_position(9, 0)
    with pytest.raises(ValueError):
        check_position(0, -1)
    check_digit(0, allow_zero=True)
    with pytest.raises(ValueError):
        check_digit(0)
    with pytest.raises(ValueError):
        check_digit(10, allow_zero=True)
