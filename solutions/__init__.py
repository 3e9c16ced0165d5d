"""
solutions - Проверка найденных решений.
"""

from .verify import replay_moves, verify_solution

__all__ = [
    'replay_moves',
    'verify_solution',
]
