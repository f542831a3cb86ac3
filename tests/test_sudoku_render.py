# tests/test_sudoku_render.py
import random

import matplotlib.pyplot as plt

from sudoku_game import GameInstance, GameSettings
from sudoku_render import (
    blank_puzzle,
    draw_game_page_figure,
    export_game_pdf,
    save_board_png,
)


def make_snapshot(solution, clock):
    game = GameInstance(
        difficulty=None,
        rng=random.Random(0),
        clock=clock,
        settings=GameSettings(show_mistakes=True),
    )
    puzzle = [row[:] for row in solution]
    for (r, c) in [(0, 0), (1, 1), (4, 4)]:
        puzzle[r][c] = 0
    game.load_puzzle(puzzle, solution, "medium")
    game.place_digit(1, 1, 9)          # erreur
    game.toggle_note(0, 0, 1)
    game.toggle_note(0, 0, 7)
    game.place_digit(4, 4, solution[4][4])
    return game.snapshot()


def test_blank_puzzle_keeps_only_givens(solution, clock):
    snap = make_snapshot(solution, clock)
    blank = blank_puzzle(snap)
    assert blank.grid[1][1] == 0
    assert blank.grid[4][4] == 0
    assert blank.grid[0][1] == solution[0][1]
    assert blank.notes[0][0] == frozenset()
    assert blank.wrong_cells == frozenset()
    # l'instantané d'origine n'est pas modifié
    assert snap.grid[1][1] == 9


def test_draw_game_page_figure(solution, clock):
    snap = make_snapshot(solution, clock)
    fig = draw_game_page_figure(snap, title="Test")
    texts = [t.get_text() for t in fig.axes[0].texts]
    assert "Test — Niveau moyen" in texts
    assert any(t.startswith("Temps : 00:00 | Erreurs : 1") for t in texts)
    plt.close(fig)


def test_export_game_pdf(solution, clock, tmp_path):
    snap = make_snapshot(solution, clock)
    out = tmp_path / "partie.pdf"
    assert export_game_pdf(snap, str(out), blank_copy=True) == str(out)
    data = out.read_bytes()
    assert data.startswith(b"%PDF")


def test_save_board_png(solution, clock, tmp_path):
    snap = make_snapshot(solution, clock)
    out = tmp_path / "partie.png"
    save_board_png(snap, str(out), dpi=50)
    assert out.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"
