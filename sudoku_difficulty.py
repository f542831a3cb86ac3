# sudoku_difficulty.py
"""
Profils de difficulté et découpe (« carving ») d'une grille complète.

La difficulté se mesure uniquement au nombre de trous : aucune analyse
des techniques de résolution, aucune garantie d'unicité de la solution.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple, Dict, Optional, Union
import random

from sudoku_core import Grid, SIZE, copy_grid, count_filled, generate_solution

GivenMask = List[List[bool]]


# ====================================================
#   PROFILS
# ====================================================

@dataclass(frozen=True)
class DifficultyProfile:
    name: str
    holes: int

    @property
    def clues(self) -> int:
        return SIZE * SIZE - self.holes


EASY_PROFILE = DifficultyProfile("easy", 30)
MEDIUM_PROFILE = DifficultyProfile("medium", 45)
HARD_PROFILE = DifficultyProfile("hard", 55)
EXPERT_PROFILE = DifficultyProfile("expert", 64)

PROFILES: Dict[str, DifficultyProfile] = {
    EASY_PROFILE.name: EASY_PROFILE,
    MEDIUM_PROFILE.name: MEDIUM_PROFILE,
    HARD_PROFILE.name: HARD_PROFILE,
    EXPERT_PROFILE.name: EXPERT_PROFILE,
}

DEFAULT_DIFFICULTY = EASY_PROFILE.name

Difficulty = Union[str, DifficultyProfile]


def get_profile(difficulty: Difficulty) -> DifficultyProfile:
    if isinstance(difficulty, DifficultyProfile):
        return difficulty
    profile = PROFILES.get(difficulty)
    if profile is None:
        raise ValueError(f"Difficulté inconnue : {difficulty}")
    return profile


# ====================================================
#   DÉCOUPE
# ====================================================

def carve(
    solution: Grid,
    difficulty: Difficulty,
    rng: Optional[random.Random] = None,
) -> Tuple[Grid, GivenMask]:
    """
    Retire `profile.holes` cases de la solution.

    Tirage uniforme d'une case : si elle est remplie on la vide, sinon on
    retire un autre tirage. Retourne (puzzle, masque des indices).
    """
    profile = get_profile(difficulty)
    rng = rng if rng is not None else random.Random()

    if count_filled(solution) < profile.holes:
        raise ValueError(
            f"Grille trop vide pour {profile.holes} trous "
            f"({count_filled(solution)} cases remplies)"
        )

    puzzle = copy_grid(solution)
    given: GivenMask = [[v != 0 for v in row] for row in solution]

    holes = profile.holes
    while holes > 0:
        r = rng.randrange(SIZE)
        c = rng.randrange(SIZE)
        if puzzle[r][c] != 0:
            puzzle[r][c] = 0
            given[r][c] = False
            holes -= 1

    return puzzle, given


def generate_puzzle(
    difficulty: Difficulty,
    rng: Optional[random.Random] = None,
) -> Tuple[Grid, GivenMask, Grid]:
    """Solution aléatoire + découpe. Retourne (puzzle, masque, solution)."""
    rng = rng if rng is not None else random.Random()
    full = generate_solution(rng)
    puzzle, given = carve(full, difficulty, rng)
    return puzzle, given, full
