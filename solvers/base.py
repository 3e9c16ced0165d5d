"""
solvers/base.py

Базовый класс для решателей.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

from utils.logging import get_logger


class SolveStatus(Enum):
    """Состояние решателя."""
    NOT_RUN = 'not_run'
    UNSOLVED = 'unsolved'   # поиск идёт
    SOLVED = 'solved'
    FAILED = 'failed'


@dataclass
class SolverStats:
    """Статистика работы решателя."""
    nodes_visited: int = 0
    nodes_pruned: int = 0
    dead_states: int = 0
    max_depth: int = 0
    time_elapsed: float = 0.0
    solution_length: int = 0

    def __str__(self) -> str:
        return (
            f"Nodes: {self.nodes_visited}, "
            f"Pruned: {self.nodes_pruned}, "
            f"Dead: {self.dead_states}, "
            f"Depth: {self.max_depth}, "
            f"Time: {self.time_elapsed:.3f}s"
        )


class BaseSolver(ABC):
    """
    Базовый класс решателя.

    Решатель создаётся для одной доски; solve() выполняет поиск один раз.
    """

    def __init__(self, verbose: bool = False):
        self.verbose = verbose
        self.stats = SolverStats()
        self.status = SolveStatus.NOT_RUN

    @abstractmethod
    def solve(self) -> bool:
        """
        Решает головоломку.

        Returns:
            True если решение найдено
        """
        pass

    def _log(self, message: str) -> None:
        """Пишет в лог: INFO если verbose=True, иначе DEBUG."""
        message = f"[{self.__class__.__name__}] {message}"
        if self.verbose:
            get_logger().info(message)
        else:
            get_logger().debug(message)
