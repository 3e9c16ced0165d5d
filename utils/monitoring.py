"""
utils/monitoring.py

Мониторинг производительности: время решения по стратегиям.
"""

import time
from typing import Dict, List, Any, Optional
from collections import defaultdict
from functools import wraps

from .logging import get_logger


class PerformanceMonitor:
    """Монитор производительности."""

    def __init__(self):
        self.metrics: Dict[str, List[float]] = defaultdict(list)
        self.logger = get_logger()

    def record_time(self, operation: str, elapsed: float):
        """
        Записывает время выполнения операции.

        Args:
            operation: имя операции
            elapsed: время в секундах
        """
        self.metrics[operation].append(elapsed)
        self.logger.debug(f"{operation}: {elapsed:.3f}s")

    def last_time(self, operation: str) -> float:
        """Последнее записанное время операции (0.0 если записей нет)."""
        times = self.metrics.get(operation)
        return times[-1] if times else 0.0

    def get_stats(self, operation: Optional[str] = None) -> Dict[str, Any]:
        """
        Возвращает статистику.

        Args:
            operation: имя операции (если None, возвращает общую статистику)

        Returns:
            Словарь со статистикой
        """
        if operation:
            if operation not in self.metrics:
                return {}

            times = self.metrics[operation]
            return {
                'operation': operation,
                'count': len(times),
                'total': sum(times),
                'average': sum(times) / len(times),
                'min': min(times),
                'max': max(times),
                'last': times[-1]
            }

        stats = {
            'operations': {},
            'total_operations': sum(len(times) for times in self.metrics.values())
        }
        for op in self.metrics:
            stats['operations'][op] = self.get_stats(op)
        return stats

    def reset(self):
        """Сбрасывает все метрики."""
        self.metrics.clear()


# Глобальный монитор
_monitor: Optional[PerformanceMonitor] = None


def get_monitor() -> PerformanceMonitor:
    """Возвращает глобальный монитор."""
    global _monitor
    if _monitor is None:
        _monitor = PerformanceMonitor()
    return _monitor


def monitor_time(operation: str):
    """
    Декоратор для мониторинга времени выполнения.

    Usage:
        @monitor_time('solve')
        def solve():
            ...
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            monitor = get_monitor()
            start = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception:
                monitor.record_time(f"{operation}_error", time.perf_counter() - start)
                raise
            monitor.record_time(operation, time.perf_counter() - start)
            return result
        return wrapper
    return decorator
