# sudoku_game.py
"""
État d'une partie de Sudoku :
- grille de travail, masque des indices, notes, solution
- historique d'annulation (undo)
- compteur d'erreurs, chrono, pause
- détection de victoire

Une partie = une instance de GameInstance. Toutes les opérations sont
synchrones et doivent être appelées séquentiellement sur une instance donnée.
Les refus de jeu (case d'indice, partie en pause...) ne lèvent pas
d'exception : ils sont signalés par `notice` dans l'instantané.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, FrozenSet, List, Optional, Tuple
import random
import time

from sudoku_core import (
    Grid,
    Pos,
    SIZE,
    DIGITS,
    check_digit,
    check_position,
    copy_grid,
    digit_counts,
    empty_grid,
    is_complete_solution,
)
from sudoku_difficulty import (
    DEFAULT_DIFFICULTY,
    Difficulty,
    GivenMask,
    generate_puzzle,
    get_profile,
)
from sudoku_history import History, PlaceDigit, ToggleNote
from sudoku_notes import (
    NotesGrid,
    empty_note_set,
    empty_notes,
    note_digits,
    prune_after_placement,
    recompute_all,
    toggle_note as flip_note,
)

# ---------- Notices (refus / événements signalés à l'interface) ----------

NOTICE_NO_GAME = "no_game"
NOTICE_NO_SELECTION = "no_selection"
NOTICE_GIVEN_CELL = "given_cell"
NOTICE_MISTAKE = "mistake"
NOTICE_PAUSED = "paused"
NOTICE_FINISHED = "finished"
NOTICE_NOTHING_TO_UNDO = "nothing_to_undo"
NOTICE_BOARD_FULL = "board_full"
NOTICE_HINT = "hint"
NOTICE_WON = "won"
NOTICE_SOLVED = "solved"


@dataclass
class GameSettings:
    note_mode: bool = False
    auto_notes: bool = False
    show_mistakes: bool = False


@dataclass
class GameStats:
    mistakes: int = 0
    paused: bool = False


@dataclass(frozen=True)
class BoardCheck:
    mistake_count: int
    cells: Tuple[Pos, ...] = ()


@dataclass(frozen=True)
class PuzzleSnapshot:
    """Projection en lecture seule de la partie, prête à afficher."""

    grid: Tuple[Tuple[int, ...], ...]
    given: Tuple[Tuple[bool, ...], ...]
    notes: Tuple[Tuple[FrozenSet[int], ...], ...]
    remaining: Dict[int, int]
    mistakes: int
    won: bool
    solved: bool
    paused: bool
    can_undo: bool
    elapsed: float
    difficulty: Optional[str] = None
    selected: Optional[Pos] = None
    notice: Optional[str] = None
    error_cell: Optional[Pos] = None
    wrong_cells: FrozenSet[Pos] = field(default_factory=frozenset)
    note_mode: bool = False
    auto_notes: bool = False
    show_mistakes: bool = False

    @property
    def finished(self) -> bool:
        return self.won or self.solved

    def value(self, r: int, c: int) -> int:
        return self.grid[r][c]

    def is_given(self, r: int, c: int) -> bool:
        return self.given[r][c]


def format_elapsed(seconds: float) -> str:
    """Chrono au format MM:SS."""
    s = int(seconds)
    return f"{s // 60:02d}:{s % 60:02d}"


class GameInstance:
    def __init__(
        self,
        difficulty: Optional[Difficulty] = DEFAULT_DIFFICULTY,
        rng: Optional[random.Random] = None,
        clock: Optional[Callable[[], float]] = None,
        settings: Optional[GameSettings] = None,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.clock = clock if clock is not None else time.monotonic
        self.settings = settings if settings is not None else GameSettings()

        self.difficulty: Optional[str] = None
        self.solution: Optional[Grid] = None
        self.grid: Grid = empty_grid()
        self.given: GivenMask = [[False] * SIZE for _ in range(SIZE)]
        self.notes: NotesGrid = empty_notes()
        self.history = History()
        self.stats = GameStats()
        self.selected: Optional[Pos] = None
        self.won = False
        self.solved = False
        self.last_notice: Optional[str] = None
        self.last_error: Optional[Pos] = None

        self._elapsed_base = 0.0
        self._clock_start: Optional[float] = None

        if difficulty is not None:
            self.new_game(difficulty)

    # ---------- Cycle de vie ----------

    def new_game(self, difficulty: Optional[Difficulty] = None) -> PuzzleSnapshot:
        if difficulty is None:
            difficulty = self.difficulty or DEFAULT_DIFFICULTY
        profile = get_profile(difficulty)
        puzzle, given, solution = generate_puzzle(profile, self.rng)
        self._reset(puzzle, given, solution, profile.name)
        return self.snapshot()

    def load_puzzle(
        self,
        puzzle: Grid,
        solution: Grid,
        difficulty: Optional[str] = None,
    ) -> PuzzleSnapshot:
        """Démarre une partie sur un couple (puzzle, solution) connu."""
        if len(puzzle) != SIZE or any(len(row) != SIZE for row in puzzle):
            raise ValueError("Le puzzle doit être une grille 9x9")
        if not is_complete_solution(solution):
            raise ValueError("La solution n'est pas une grille complète valide")
        for r in range(SIZE):
            for c in range(SIZE):
                v = puzzle[r][c]
                check_digit(v, allow_zero=True)
                if v and v != solution[r][c]:
                    raise ValueError(
                        f"Indice ({r}, {c}) = {v} incompatible avec la solution"
                    )
        given = [[v != 0 for v in row] for row in puzzle]
        self._reset(copy_grid(puzzle), given, copy_grid(solution), difficulty)
        return self.snapshot()

    def _reset(self, puzzle: Grid, given: GivenMask, solution: Grid, difficulty: Optional[str]) -> None:
        self.difficulty = difficulty
        self.solution = solution
        self.grid = puzzle
        self.given = given
        self.notes = recompute_all(self.grid) if self.settings.auto_notes else empty_notes()
        self.history = History()
        self.stats = GameStats()
        self.selected = None
        self.won = False
        self.solved = False
        self.last_notice = None
        self.last_error = None
        self._elapsed_base = 0.0
        self._clock_start = self.clock()

    # ---------- Chrono / pause ----------

    def elapsed_seconds(self) -> float:
        running = 0.0
        if self._clock_start is not None:
            running = self.clock() - self._clock_start
        return self._elapsed_base + running

    def _stop_clock(self) -> None:
        if self._clock_start is not None:
            self._elapsed_base += self.clock() - self._clock_start
            self._clock_start = None

    def pause(self) -> PuzzleSnapshot:
        self.last_notice = None
        if self.solution is None or self.finished or self.stats.paused:
            return self.snapshot()
        self.stats.paused = True
        self._stop_clock()
        return self.snapshot()

    def resume(self) -> PuzzleSnapshot:
        self.last_notice = None
        if not self.stats.paused or self.finished:
            return self.snapshot()
        self.stats.paused = False
        self._clock_start = self.clock()
        return self.snapshot()

    @property
    def finished(self) -> bool:
        return self.won or self.solved

    def _rejected(self) -> Optional[str]:
        """Raison pour laquelle la partie n'accepte pas d'action, ou None."""
        if self.solution is None:
            return NOTICE_NO_GAME
        if self.finished:
            return NOTICE_FINISHED
        if self.stats.paused:
            return NOTICE_PAUSED
        return None

    # ---------- Sélection ----------

    def select_cell(self, r: int, c: int) -> PuzzleSnapshot:
        check_position(r, c)
        self.last_notice = None
        self.selected = (r, c)
        return self.snapshot()

    def move_selection(self, dr: int, dc: int) -> PuzzleSnapshot:
        self.last_notice = None
        if self.selected is None:
            self.selected = (0, 0)
        else:
            r, c = self.selected
            r = min(SIZE - 1, max(0, r + dr))
            c = min(SIZE - 1, max(0, c + dc))
            self.selected = (r, c)
        return self.snapshot()

    def input_digit(self, digit: int) -> PuzzleSnapshot:
        """Saisie sur la case sélectionnée (clavier / pavé numérique)."""
        check_digit(digit, allow_zero=True)
        if self.selected is None:
            self.last_notice = NOTICE_NO_SELECTION
            return self.snapshot()
        r, c = self.selected
        if self.given[r][c]:
            self.last_notice = NOTICE_GIVEN_CELL
            self.last_error = None
            return self.snapshot()
        if self.settings.note_mode and digit != 0:
            return self.toggle_note(r, c, digit)
        return self.place_digit(r, c, digit)

    # ---------- Édition ----------

    def place_digit(self, r: int, c: int, digit: int) -> PuzzleSnapshot:
        check_position(r, c)
        check_digit(digit, allow_zero=True)
        self.last_notice = self._rejected()
        self.last_error = None
        if self.last_notice:
            return self.snapshot()

        if self.given[r][c]:
            self.last_notice = NOTICE_GIVEN_CELL
            return self.snapshot()

        previous = self.grid[r][c]
        if previous == digit:
            return self.snapshot()

        self.history.push(
            PlaceDigit(r, c, previous, digit, tuple(self.notes[r][c]))
        )
        self.grid[r][c] = digit

        if digit != 0:
            self.notes[r][c] = empty_note_set()
            if self.settings.auto_notes:
                prune_after_placement(self.notes, r, c, digit)

            if digit != self.solution[r][c]:
                self.stats.mistakes += 1
                self.last_notice = NOTICE_MISTAKE
                self.last_error = (r, c)

        self._check_win()
        return self.snapshot()

    def erase(self, r: int, c: int) -> PuzzleSnapshot:
        return self.place_digit(r, c, 0)

    def toggle_note(self, r: int, c: int, digit: int) -> PuzzleSnapshot:
        check_position(r, c)
        check_digit(digit)
        self.last_notice = self._rejected()
        self.last_error = None
        if self.last_notice:
            return self.snapshot()

        if self.given[r][c]:
            self.last_notice = NOTICE_GIVEN_CELL
            return self.snapshot()

        previous = tuple(self.notes[r][c])
        flip_note(self.notes, r, c, digit)
        self.history.push(ToggleNote(r, c, digit, previous))
        return self.snapshot()

    def undo(self) -> PuzzleSnapshot:
        self.last_notice = self._rejected()
        self.last_error = None
        if self.last_notice:
            return self.snapshot()

        record = self.history.pop()
        if record is None:
            self.last_notice = NOTICE_NOTHING_TO_UNDO
            return self.snapshot()

        if isinstance(record, PlaceDigit):
            self.grid[record.r][record.c] = record.previous_value
            self.notes[record.r][record.c] = list(record.previous_notes)
        elif isinstance(record, ToggleNote):
            self.notes[record.r][record.c] = list(record.previous_notes)
        else:
            raise TypeError(f"Action d'historique inconnue : {record!r}")
        return self.snapshot()

    # ---------- Outils ----------

    def hint(self) -> PuzzleSnapshot:
        self.last_notice = self._rejected()
        self.last_error = None
        if self.last_notice:
            return self.snapshot()

        empties = [
            (r, c) for r in range(SIZE) for c in range(SIZE) if self.grid[r][c] == 0
        ]
        if not empties:
            self.last_notice = NOTICE_BOARD_FULL
            return self.snapshot()

        r, c = self.rng.choice(empties)
        self.selected = (r, c)
        snap = self.place_digit(r, c, self.solution[r][c])
        if self.last_notice is None:
            self.last_notice = NOTICE_HINT
            snap = self.snapshot()
        return snap

    def wrong_cells(self) -> List[Pos]:
        if self.solution is None:
            return []
        return [
            (r, c)
            for r in range(SIZE)
            for c in range(SIZE)
            if self.grid[r][c] != 0 and self.grid[r][c] != self.solution[r][c]
        ]

    def check_board(self) -> BoardCheck:
        """Lecture seule : cases remplies en désaccord avec la solution."""
        cells = tuple(self.wrong_cells())
        return BoardCheck(mistake_count=len(cells), cells=cells)

    def solve(self) -> PuzzleSnapshot:
        """Abandon : la grille devient la solution. Non annulable."""
        self.last_error = None
        if self.solution is None or self.finished:
            self.last_notice = self._rejected()
            return self.snapshot()
        self.grid = copy_grid(self.solution)
        self.solved = True
        self.stats.paused = True
        self._stop_clock()
        self.last_notice = NOTICE_SOLVED
        return self.snapshot()

    def _check_win(self) -> None:
        if self.grid == self.solution:
            self.won = True
            self._stop_clock()
            self.last_notice = NOTICE_WON

    # ---------- Réglages ----------

    def set_note_mode(self, enabled: bool) -> PuzzleSnapshot:
        self.last_notice = None
        self.settings.note_mode = bool(enabled)
        return self.snapshot()

    def toggle_note_mode(self) -> PuzzleSnapshot:
        return self.set_note_mode(not self.settings.note_mode)

    def set_auto_notes(self, enabled: bool) -> PuzzleSnapshot:
        self.last_notice = None
        self.settings.auto_notes = bool(enabled)
        if self.settings.auto_notes:
            self.notes = recompute_all(self.grid)
        return self.snapshot()

    def set_show_mistakes(self, enabled: bool) -> PuzzleSnapshot:
        self.last_notice = None
        self.settings.show_mistakes = bool(enabled)
        return self.snapshot()

    # ---------- Instantané ----------

    def remaining_counts(self) -> Dict[int, int]:
        counts = digit_counts(self.grid)
        return {d: SIZE - counts[d] for d in DIGITS}

    def snapshot(self) -> PuzzleSnapshot:
        wrong: FrozenSet[Pos] = frozenset()
        if self.settings.show_mistakes:
            wrong = frozenset(self.wrong_cells())
        return PuzzleSnapshot(
            grid=tuple(tuple(row) for row in self.grid),
            given=tuple(tuple(row) for row in self.given),
            notes=tuple(tuple(note_digits(cell) for cell in row) for row in self.notes),
            remaining=self.remaining_counts(),
            mistakes=self.stats.mistakes,
            won=self.won,
            solved=self.solved,
            paused=self.stats.paused,
            can_undo=self.history.can_undo,
            elapsed=self.elapsed_seconds(),
            difficulty=self.difficulty,
            selected=self.selected,
            notice=self.last_notice,
            error_cell=self.last_error,
            wrong_cells=wrong,
            note_mode=self.settings.note_mode,
            auto_notes=self.settings.auto_notes,
            show_mistakes=self.settings.show_mistakes,
        )
