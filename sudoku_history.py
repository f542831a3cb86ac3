# sudoku_history.py
"""
Journal d'annulation : deux piles d'actions.

Toute nouvelle action vide la pile de rétablissement (redo). Le moteur ne
rejoue jamais cette pile : c'est un choix produit assumé.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple, Union


@dataclass(frozen=True)
class PlaceDigit:
    r: int
    c: int
    previous_value: int
    new_value: int
    previous_notes: Tuple[bool, ...]


@dataclass(frozen=True)
class ToggleNote:
    r: int
    c: int
    digit: int
    previous_notes: Tuple[bool, ...]


EditRecord = Union[PlaceDigit, ToggleNote]


class History:
    def __init__(self) -> None:
        self.undo_stack: List[EditRecord] = []
        self.redo_stack: List[EditRecord] = []

    def push(self, record: EditRecord) -> None:
        self.undo_stack.append(record)
        self.redo_stack.clear()

    def pop(self) -> Optional[EditRecord]:
        if not self.undo_stack:
            return None
        return self.undo_stack.pop()

    @property
    def can_undo(self) -> bool:
        return bool(self.undo_stack)

    @property
    def can_redo(self) -> bool:
        return bool(self.redo_stack)

    def clear(self) -> None:
        self.undo_stack.clear()
        self.redo_stack.clear()

    def __len__(self) -> int:
        return len(self.undo_stack)
