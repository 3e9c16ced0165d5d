"""
utils/logging.py

Логирование peg_backtrack.

Один именованный логгер с выводом в stdout; configure_logging()
переключает подробный режим и файл лога для CLI и веб-приложения.
"""

import logging
import sys
from typing import Optional

LOGGER_NAME = "peg_backtrack"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def _formatter() -> logging.Formatter:
    return logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)


class SolverLogger:
    """Обёртка над логгером peg_backtrack."""

    def __init__(self, level: int = logging.INFO):
        self.logger = logging.getLogger(LOGGER_NAME)
        self.file_handler: Optional[logging.FileHandler] = None

        if not self.logger.handlers:
            console = logging.StreamHandler(sys.stdout)
            console.setFormatter(_formatter())
            self.logger.addHandler(console)
        self.set_level(level)

    def set_level(self, level: int):
        """Уровень логгера и всех его handlers."""
        self.logger.setLevel(level)
        for handler in self.logger.handlers:
            handler.setLevel(level)

    def log_to_file(self, path: Optional[str]):
        """
        Дублирует лог в файл; None отключает запись в файл.

        Предыдущий файл лога закрывается.
        """
        if self.file_handler is not None:
            self.logger.removeHandler(self.file_handler)
            self.file_handler.close()
            self.file_handler = None

        if path:
            handler = logging.FileHandler(path, encoding='utf-8')
            handler.setFormatter(_formatter())
            handler.setLevel(self.logger.level)
            self.logger.addHandler(handler)
            self.file_handler = handler

    def debug(self, message: str):
        self.logger.debug(message)

    def info(self, message: str):
        self.logger.info(message)

    def warning(self, message: str):
        self.logger.warning(message)

    def error(self, message: str, exc_info: bool = False):
        self.logger.error(message, exc_info=exc_info)


_default_logger: Optional[SolverLogger] = None


def get_logger(level: Optional[int] = None) -> SolverLogger:
    """
    Глобальный логгер.

    Args:
        level: если задан, применяется к логгеру и его handlers
    """
    global _default_logger
    if _default_logger is None:
        _default_logger = SolverLogger(logging.INFO if level is None else level)
    elif level is not None:
        _default_logger.set_level(level)
    return _default_logger


def configure_logging(verbose: bool = False, log_file: Optional[str] = None) -> SolverLogger:
    """
    Настраивает логгер для запуска решателя.

    Args:
        verbose: уровень DEBUG вместо INFO
        log_file: путь к файлу лога (None — только stdout)

    Returns:
        SolverLogger
    """
    logger = get_logger(logging.DEBUG if verbose else logging.INFO)
    logger.log_to_file(log_file)
    return logger
