"""
tools/compare_times.py

Замер времени решения для разных стратегий мемоизации.

Время измеряется только для solve(): создание решателя (в том числе
выделение битового поля) в замер не входит.
"""

import cProfile
import io
import pstats
from typing import Any, Callable, Dict, Iterable, List

from core.board import Board
from solvers.backtracking import BacktrackingSolver
from solvers.memo import MemoStrategy
from utils.monitoring import get_monitor, monitor_time


def time_solve(board: Board, strategy: MemoStrategy) -> Dict[str, Any]:
    """
    Решает доску и замеряет время solve().

    Args:
        board: начальная позиция
        strategy: стратегия мемоизации

    Returns:
        Словарь с результатом замера
    """
    solver = BacktrackingSolver(board, strategy)
    operation = f"solve_{solver.strategy.value}"

    solved = monitor_time(operation)(solver.solve)()
    elapsed = get_monitor().last_time(operation)

    return {
        'strategy': MemoStrategy(strategy).value,
        'effective_strategy': solver.strategy.value,
        'solved': solved,
        'time_elapsed': elapsed,
        'nodes_visited': solver.stats.nodes_visited,
        'nodes_pruned': solver.stats.nodes_pruned,
        'dead_states': solver.stats.dead_states,
        'final_board': solver.current_board().render(),
    }


def compare_strategies(board: Board,
                       strategies: Iterable[MemoStrategy] = tuple(MemoStrategy)) -> List[Dict[str, Any]]:
    """Запускает time_solve для каждой стратегии."""
    return [time_solve(board, strategy) for strategy in strategies]


def print_comparison(results: List[Dict[str, Any]],
                     printer: Callable[[str], None] = print) -> None:
    """Выводит сравнение стратегий."""
    printer("=" * 72)
    printer(f"{'Стратегия':<12} {'Факт.':<10} {'Время':>12} {'Узлов':>12} {'Мертвых':>12} {'':>6}")
    printer("-" * 72)

    for r in results:
        status = "✅" if r['solved'] else "❌"
        printer(f"{r['strategy']:<12} {r['effective_strategy']:<10} "
                f"{r['time_elapsed'] * 1000:>10.1f}ms {r['nodes_visited']:>12} "
                f"{r['dead_states']:>12} {status:>6}")

    printer("=" * 72)


def profile_solve(board: Board, strategy: MemoStrategy = MemoStrategy.HASHMAP,
                  sort_by: str = 'cumulative', limit: int = 20) -> str:
    """
    Профилирует solve() через cProfile.

    Returns:
        Статистика pstats в виде строки
    """
    solver = BacktrackingSolver(board, strategy)
    profiler = cProfile.Profile()
    profiler.enable()
    try:
        solver.solve()
    finally:
        profiler.disable()

    stream = io.StringIO()
    stats = pstats.Stats(profiler, stream=stream)
    stats.sort_stats(sort_by)
    stats.print_stats(limit)
    return stream.getvalue()
