"""
solvers - Решатели Peg Solitaire

Экспортирует:
- BacktrackingSolver: итеративный перебор с возвратом
- MemoStrategy: способ хранения мертвых состояний (none/hashmap/bitfield)
- create_store: фабрика хранилищ с откатом bitfield → hashmap
"""

from .base import BaseSolver, SolverStats, SolveStatus
from .memo import (
    MemoStrategy, DEFAULT_STRATEGY, BITFIELD_ACTIVE_LIMIT,
    DeadStateStore, NullStore, HashSetStore, BitfieldStore, create_store
)
from .backtracking import BacktrackingSolver

__all__ = [
    'BaseSolver',
    'SolverStats',
    'SolveStatus',
    'MemoStrategy',
    'DEFAULT_STRATEGY',
    'BITFIELD_ACTIVE_LIMIT',
    'DeadStateStore',
    'NullStore',
    'HashSetStore',
    'BitfieldStore',
    'create_store',
    'BacktrackingSolver',
]
