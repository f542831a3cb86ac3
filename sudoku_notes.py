# sudoku_notes.py
"""
Notes (candidats) par case.

Chaque case porte une liste de 10 booléens indexée 1..9 (l'index 0 est
inutilisé). Les notes sont un brouillon : rien n'oblige une note manuelle
à être juste.
"""

from __future__ import annotations
from typing import List, FrozenSet

from sudoku_core import Grid, SIZE, DIGITS, PEERS, grid_candidates

NoteSet = List[bool]
NotesGrid = List[List[NoteSet]]


def empty_note_set() -> NoteSet:
    return [False] * 10


def empty_notes() -> NotesGrid:
    return [[empty_note_set() for _ in range(SIZE)] for _ in range(SIZE)]


def clone_note_set(notes: NoteSet) -> NoteSet:
    return list(notes)


def clone_notes(notes: NotesGrid) -> NotesGrid:
    return [[list(cell) for cell in row] for row in notes]


def note_digits(notes: NoteSet) -> FrozenSet[int]:
    return frozenset(d for d in DIGITS if notes[d])


def recompute_all(grid: Grid) -> NotesGrid:
    """
    Notes complètes : pour chaque case vide, exactement les chiffres que
    `is_valid` accepte. Les cases remplies restent sans note.
    """
    notes = empty_notes()
    for (r, c), cands in grid_candidates(grid).items():
        for d in cands:
            notes[r][c][d] = True
    return notes


def prune_after_placement(notes: NotesGrid, r: int, c: int, digit: int) -> None:
    """
    Retire `digit` des notes de la ligne, de la colonne et du bloc de (r, c).
    N'ajoute jamais de candidat : à utiliser après un recompute_all.
    """
    notes[r][c][digit] = False
    for (rr, cc) in PEERS[(r, c)]:
        notes[rr][cc][digit] = False


def toggle_note(notes: NotesGrid, r: int, c: int, digit: int) -> bool:
    """Inverse la présence de `digit` dans la case. Retourne le nouvel état."""
    notes[r][c][digit] = not notes[r][c][digit]
    return notes[r][c][digit]
