"""
utils - Логирование, обработка ошибок и мониторинг.
"""

from .logging import SolverLogger, get_logger, configure_logging
from .error_handling import (
    SolverError, InvalidLayoutError, AllocationFailure, InvalidMoveError,
    InvalidRequestError, handle_errors
)
from .monitoring import PerformanceMonitor, get_monitor, monitor_time

__all__ = [
    'SolverLogger', 'get_logger', 'configure_logging',
    'SolverError', 'InvalidLayoutError', 'AllocationFailure', 'InvalidMoveError',
    'InvalidRequestError', 'handle_errors',
    'PerformanceMonitor', 'get_monitor', 'monitor_time'
]
