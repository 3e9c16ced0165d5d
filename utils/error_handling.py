"""
utils/error_handling.py

Иерархия исключений и декоратор обработки ошибок.
"""

from typing import Callable, Any
from functools import wraps

from .logging import get_logger


class SolverError(Exception):
    """Базовое исключение для решателей."""
    pass


class InvalidLayoutError(SolverError, ValueError):
    """Некорректное текстовое описание доски."""
    pass


class AllocationFailure(SolverError, MemoryError):
    """Не удалось выделить память под битовое поле мертвых состояний."""
    pass


class InvalidMoveError(SolverError):
    """Недопустимый ход при воспроизведении решения."""
    pass


class InvalidRequestError(SolverError, ValueError):
    """Некорректные параметры запроса (например, неизвестная стратегия)."""
    pass


def handle_errors(on_error: Callable[[SolverError], Any], log_error: bool = True):
    """
    Декоратор: SolverError из функции превращается в результат on_error(e).

    Args:
        on_error: строит возвращаемое значение по исключению
        log_error: логировать ли ошибку (WARNING)
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except SolverError as e:
                if log_error:
                    get_logger().warning(f"{func.__name__}: {e}")
                return on_error(e)
        return wrapper
    return decorator
