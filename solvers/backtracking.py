"""
solvers/backtracking.py

Итеративный backtracking с мемоизацией мертвых состояний.

Вместо рекурсии — явный стек ходов и индекс глубины. Стек имеет
длину peg_count - 1: каждый ход снимает ровно один колышек, поэтому
доска решена, когда сделаны все ходы стека.
"""

import time
from typing import List, Optional, Union

from .base import BaseSolver, SolveStatus, SolverStats
from .memo import DEFAULT_STRATEGY, MemoStrategy, create_store
from core.board import Board
from core.moves import FIRST_CANDIDATE, Move, next_candidate


class BacktrackingSolver(BaseSolver):
    """
    Решатель перебором с возвратом.

    Особенности:
    - Кандидаты перебираются в фиксированном порядке (направление,
      столбец, строка), допустимость проверяет Board.apply_move
    - Доска, из которой перебраны все ходы, отмечается мертвой
    - Детерминирован: для доски и стратегии всегда одно и то же решение
    """

    def __init__(self, board: Board,
                 strategy: Union[MemoStrategy, str] = DEFAULT_STRATEGY,
                 verbose: bool = False):
        """
        Args:
            board: начальная позиция (не изменяется решателем)
            strategy: способ хранения мертвых состояний
            verbose: выводить ход поиска в лог с уровнем INFO
        """
        super().__init__(verbose=verbose)
        self._original = board.copy()
        self._working = board.copy()
        self._store = create_store(strategy, board.active_position_count)
        self._peg_count = self._working.peg_count()
        self._stack: List[Move] = [FIRST_CANDIDATE] * max(0, self._peg_count - 1)
        self._depth = 0

    @property
    def strategy(self) -> MemoStrategy:
        """Фактическая стратегия (BITFIELD может смениться на HASHMAP)."""
        return self._store.strategy

    @property
    def depth(self) -> int:
        """Текущая глубина поиска (индекс хода в стеке); обновляется во время solve()."""
        return self._depth

    def solve(self) -> bool:
        """
        Запускает поиск. Повторные вызовы возвращают сохранённый результат.

        Returns:
            True если решение найдено
        """
        if self.status is SolveStatus.SOLVED:
            return True
        if self.status is SolveStatus.FAILED:
            return False

        self.status = SolveStatus.UNSOLVED
        self.stats = SolverStats()
        self._log(
            f"Starting backtracking (pegs={self._peg_count}, "
            f"positions={self._working.active_position_count}, memo={self.strategy.value})"
        )

        start = time.perf_counter()
        if self._stack:
            solved = self._search()
        else:
            # Без ходов: решено, если колышек ровно один
            solved = self._peg_count == 1
        self.stats.time_elapsed = time.perf_counter() - start
        self.stats.dead_states = len(self._store)

        if solved:
            self.status = SolveStatus.SOLVED
            self.stats.solution_length = len(self._stack)
            self._log(f"Solution found: {len(self._stack)} moves")
        else:
            self.status = SolveStatus.FAILED
            self._log("No solution found")

        self._log(f"Stats: {self.stats}")
        return solved

    def _search(self) -> bool:
        """Основной цикл перебора с возвратом."""
        board = self._working
        store = self._store
        stack = self._stack
        stats = self.stats
        rows, cols = board.row_count, board.col_count
        last = len(stack) - 1
        depth = 0

        while True:
            move = stack[depth]
            success = board.apply_move(move)

            if success:
                stats.nodes_visited += 1
                # Состояние уже признано мертвым в другой ветке — откатываем
                if store.is_dead(board.fingerprint()):
                    board.apply_move(move, reversed=True)
                    stats.nodes_pruned += 1
                    success = False

            if success:
                if depth == last:
                    stats.max_depth = last + 1
                    return True
                depth += 1
                self._depth = depth
                if depth > stats.max_depth:
                    stats.max_depth = depth
                stack[depth] = FIRST_CANDIDATE
                continue

            # Следующий кандидат; если на этой глубине всё перебрано —
            # отмечаем доску мертвой и возвращаемся на уровень выше
            while True:
                candidate, has_more = next_candidate(stack[depth], rows, cols)
                if has_more:
                    stack[depth] = candidate
                    break
                if depth == 0:
                    return False
                store.record(board.fingerprint())
                depth -= 1
                self._depth = depth
                board.apply_move(stack[depth], reversed=True)

    def moves(self) -> List[Move]:
        """
        Стек ходов (длина peg_count - 1).

        Вся последовательность имеет смысл только если доска решена.
        """
        return list(self._stack)

    def solution(self) -> Optional[List[Move]]:
        """Ходы решения или None, если решение не найдено."""
        if self.status is SolveStatus.SOLVED:
            return list(self._stack)
        return None

    def current_board(self) -> Board:
        """
        Текущая доска: исходная до запуска, решённая после успеха,
        последняя опробованная после неудачи.
        """
        return self._working

    def original_board(self) -> Board:
        """Копия исходной доски."""
        return self._original
