"""
core - Ядро Peg Solitaire

Доска, клетки, ходы и их перебор.
"""

from .board import Board
from .moves import (
    Direction, Position, Move,
    FIRST_CANDIDATE, first_candidate, next_candidate, iter_candidates
)
from .utils import (
    Cell, CHAR_TO_CELL, MAX_ACTIVE_POSITIONS,
    index_to_pos
)

__all__ = [
    'Board', 'Cell', 'Direction', 'Position', 'Move',
    'FIRST_CANDIDATE', 'first_candidate', 'next_candidate', 'iter_candidates',
    'CHAR_TO_CELL', 'MAX_ACTIVE_POSITIONS',
    'index_to_pos'
]
