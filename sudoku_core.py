# sudoku_core.py
"""
Moteur Sudoku commun :
- grille 9x9
- UNITS / PEERS
- vérification de placement
- génération d'une grille complète (backtracking à pile explicite)
"""

from __future__ import annotations
import random
from typing import List, Tuple, Dict, Set, Optional

Grid = List[List[int]]
Pos = Tuple[int, int]

SIZE = 9
BOX = 3
DIGITS: Tuple[int, ...] = tuple(range(1, 10))

# ---------- UNITS & PEERS communs ----------

UNITS: List[List[Pos]] = []
PEERS: Dict[Pos, Set[Pos]] = {}

# Lignes
for r in range(9):
    UNITS.append([(r, c) for c in range(9)])
# Colonnes
for c in range(9):
    UNITS.append([(r, c) for r in range(9)])
# Blocs 3x3
for br in range(0, 9, 3):
    for bc in range(0, 9, 3):
        UNITS.append([(br + dr, bc + dc) for dr in range(3) for dc in range(3)])

# Voisins de chaque case
for r in range(9):
    for c in range(9):
        peers = set()
        peers |= {(r, cc) for cc in range(9) if cc != c}
        peers |= {(rr, c) for rr in range(9) if rr != r}
        br, bc = 3 * (r // 3), 3 * (c // 3)
        peers |= {
            (br + dr, bc + dc)
            for dr in range(3)
            for dc in range(3)
            if (br + dr, bc + dc) != (r, c)
        }
        PEERS[(r, c)] = peers


def box_index(r: int, c: int) -> int:
    return (r // 3) * 3 + (c // 3)


def empty_grid() -> Grid:
    return [[0] * SIZE for _ in range(SIZE)]


def copy_grid(grid: Grid) -> Grid:
    return [row[:] for row in grid]


def count_filled(grid: Grid) -> int:
    return sum(1 for row in grid for v in row if v)


def digit_counts(grid: Grid) -> Dict[int, int]:
    """Nombre d'occurrences de chaque chiffre 1..9 dans la grille."""
    counts = {d: 0 for d in DIGITS}
    for row in grid:
        for v in row:
            if v:
                counts[v] += 1
    return counts


def check_position(r: int, c: int) -> None:
    if not (0 <= r < SIZE and 0 <= c < SIZE):
        raise ValueError(f"Case hors grille : ({r}, {c})")


def check_digit(digit: int, allow_zero: bool = False) -> None:
    low = 0 if allow_zero else 1
    if not isinstance(digit, int) or not (low <= digit <= 9):
        raise ValueError(f"Chiffre invalide : {digit!r} (attendu {low}..9)")


# ---------- Vérification de placement ----------

def is_valid(grid: Grid, r: int, c: int, digit: int) -> bool:
    """
    True si `digit` n'apparaît dans aucune case voisine de (r, c)
    (même ligne, même colonne, même bloc). La case elle-même est ignorée.
    Ne dit rien sur la solution attendue du puzzle.
    """
    return all(grid[rr][cc] != digit for (rr, cc) in PEERS[(r, c)])


def find_empty(grid: Grid) -> Pos | None:
    for r in range(9):
        for c in range(9):
            if grid[r][c] == 0:
                return r, c
    return None


def is_complete_solution(grid: Grid) -> bool:
    """Grille pleine où chaque ligne, colonne et bloc contient 1..9 une seule fois."""
    if len(grid) != SIZE or any(len(row) != SIZE for row in grid):
        return False
    expected = set(DIGITS)
    return all({grid[r][c] for (r, c) in unit} == expected for unit in UNITS)


# ---------- Génération d'une grille complète ----------

def _shuffled_digits(rng: random.Random) -> List[int]:
    vals = list(DIGITS)
    rng.shuffle(vals)
    return vals


def generate_solution(rng: Optional[random.Random] = None) -> Grid:
    """
    Génère une grille complète valide (9x9).

    Backtracking sur la première case vide (ordre ligne par ligne), chiffres
    essayés dans un ordre mélangé. La récursion est remplacée par une pile de
    frames (case, candidats restants) : la profondeur reste bornée à 81.
    """
    rng = rng if rng is not None else random.Random()
    grid = empty_grid()

    start = find_empty(grid)
    stack: List[Tuple[Pos, List[int]]] = [(start, _shuffled_digits(rng))]

    while stack:
        (r, c), remaining = stack[-1]
        # on repart toujours d'une case vide avant d'essayer le candidat suivant
        grid[r][c] = 0

        placed = False
        while remaining:
            v = remaining.pop()
            if is_valid(grid, r, c, v):
                grid[r][c] = v
                placed = True
                break

        if not placed:
            # retour arrière : la case parente sera remise à zéro au tour suivant
            stack.pop()
            continue

        nxt = find_empty(grid)
        if nxt is None:
            return grid
        stack.append((nxt, _shuffled_digits(rng)))

    raise RuntimeError("Backtracking épuisé sans grille complète (état impossible)")


def grid_candidates(grid: Grid) -> Dict[Pos, Set[int]]:
    """Retourne un dict {(r,c): {candidats}} pour les cellules vides."""
    cands: Dict[Pos, Set[int]] = {}
    for r in range(9):
        for c in range(9):
            if grid[r][c] == 0:
                cands[(r, c)] = {v for v in DIGITS if is_valid(grid, r, c, v)}
    return cands
