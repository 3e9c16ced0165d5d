"""
tests/test_cli_and_tools.py

Тесты CLI (main.py), замеров времени и обработки ошибок.
"""

import logging

import pytest

from core.board import Board
from main import main, EXIT_SOLVED, EXIT_FAILED, EXIT_INVALID
from solvers import MemoStrategy
from tools.compare_times import time_solve, compare_strategies, print_comparison, profile_solve
from utils.error_handling import InvalidLayoutError, InvalidMoveError, handle_errors
from utils.logging import LOGGER_NAME, configure_logging, get_logger
from utils.monitoring import get_monitor, monitor_time


def test_cli_solves_preset(capsys):
    assert main(['--board', 'line']) == EXIT_SOLVED

    out = capsys.readouterr().out
    assert "Найдено решение за 5 ходов" in out
    assert "Мемоизация: hashmap" in out


def test_cli_layout_argument(capsys):
    assert main(['--layout', '01010101010', '--memo', 'none']) == EXIT_FAILED
    assert "Решение не найдено" in capsys.readouterr().out


def test_cli_multiline_layout_and_steps(capsys):
    assert main(['--layout', '0010\\n0010\\n0000\\n0000', '--steps']) == EXIT_SOLVED
    out = capsys.readouterr().out
    assert "C1 ↓" in out
    assert "0000\n0000\n0010\n0000" in out


def test_cli_file_input(tmp_path, capsys):
    path = tmp_path / "board.txt"
    path.write_text("110\n", encoding='utf-8')

    assert main([str(path), '--memo', 'bitfield']) == EXIT_SOLVED
    assert "Мемоизация: bitfield" in capsys.readouterr().out


def test_cli_invalid_layout(capsys):
    assert main(['--layout', '123']) == EXIT_INVALID
    assert "Недопустимый символ" in capsys.readouterr().out


def test_cli_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.txt")]) == EXIT_INVALID


def test_cli_compare(capsys):
    assert main(['--board', 'square', '--compare']) == EXIT_SOLVED
    out = capsys.readouterr().out
    for strategy in MemoStrategy:
        assert strategy.value in out


@pytest.fixture
def restore_logging():
    yield
    configure_logging()


def test_cli_log_file(tmp_path, restore_logging):
    log_file = tmp_path / "solver.log"
    assert main(['--board', 'line', '--verbose', '--log-file', str(log_file)]) == EXIT_SOLVED

    text = log_file.read_text(encoding='utf-8')
    assert "Solution found: 5 moves" in text
    assert LOGGER_NAME in text


def test_configure_logging(tmp_path, restore_logging):
    logger = configure_logging(verbose=True, log_file=str(tmp_path / "a.log"))
    assert logger.logger.name == "peg_backtrack"
    assert logger.logger.level == logging.DEBUG
    first = logger.file_handler
    assert first in logger.logger.handlers

    # Повторная настройка заменяет файл лога, а не добавляет второй
    configure_logging(log_file=str(tmp_path / "b.log"))
    assert first not in logger.logger.handlers
    assert logger.logger.level == logging.INFO

    configure_logging()
    assert logger.file_handler is None
    assert not any(isinstance(h, logging.FileHandler) for h in logger.logger.handlers)


def test_get_logger_applies_level(restore_logging):
    assert get_logger(logging.WARNING).logger.level == logging.WARNING
    assert get_logger().logger.level == logging.WARNING
    assert get_logger(logging.INFO).logger.level == logging.INFO


def test_time_solve():
    get_monitor().reset()
    result = time_solve(Board("11010101010"), MemoStrategy.HASHMAP)

    assert result['solved'] is True
    assert result['strategy'] == 'hashmap'
    assert result['effective_strategy'] == 'hashmap'
    assert result['time_elapsed'] >= 0
    assert result['final_board'] == "00000000001"
    assert get_monitor().get_stats('solve_hashmap')['count'] == 1
    assert get_monitor().last_time('solve_hashmap') == result['time_elapsed']


def test_compare_strategies_agree():
    results = compare_strategies(Board("0111\n1111\n1111"))

    assert [r['strategy'] for r in results] == ['none', 'hashmap', 'bitfield']
    assert all(r['solved'] for r in results)
    assert len({r['final_board'] for r in results}) == 1

    lines = []
    print_comparison(results, printer=lines.append)
    assert len(lines) == len(results) + 4


def test_profile_solve():
    report = profile_solve(Board("11010101010"), limit=5)
    assert "function calls" in report


def test_monitor_time_decorator():
    monitor = get_monitor()
    monitor.reset()

    @monitor_time('square')
    def square(x):
        return x * x

    assert square(3) == 9
    assert monitor.get_stats('square')['count'] == 1
    assert monitor.get_stats()['total_operations'] == 1


def test_handle_errors_maps_solver_error():
    @handle_errors(on_error=lambda e: isinstance(e, InvalidLayoutError))
    def build(layout):
        return Board(layout)

    assert build("abc") is True
    assert build("110").render() == "110"


def test_handle_errors_passes_other_exceptions():
    @handle_errors(on_error=lambda e: None, log_error=False)
    def broken():
        raise KeyError("board")

    with pytest.raises(KeyError):
        broken()

    @handle_errors(on_error=type)
    def illegal():
        raise InvalidMoveError("A1")

    assert illegal() is InvalidMoveError
