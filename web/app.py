"""
web/app.py

Flask веб-приложение для Peg Solitaire Solver (JSON API).
"""

import os
import sys

from flask import Flask, jsonify, request

# Добавляем корень проекта в path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.board import Board
from peg_io.parser import PRESETS
from peg_io.visualizer import format_move
from solvers import BacktrackingSolver, MemoStrategy, DEFAULT_STRATEGY
from utils.error_handling import InvalidLayoutError, InvalidRequestError, handle_errors
from utils.logging import configure_logging
from utils.monitoring import get_monitor, monitor_time

app = Flask(__name__)
logger = configure_logging(
    verbose=bool(os.environ.get('PEG_BACKTRACK_VERBOSE')),
    log_file=os.environ.get('PEG_BACKTRACK_LOG_FILE'),
)


def _error(message: str, status: int = 400):
    return jsonify({'success': False, 'error': message}), status


def _board_from_request(data: dict) -> Board:
    """
    Доска из JSON: поле layout (текст) или board (имя раскладки).

    Raises:
        InvalidLayoutError: некорректное описание или неизвестная раскладка
    """
    if 'layout' in data:
        layout = data['layout']
        if not isinstance(layout, str):
            raise InvalidLayoutError("Поле layout должно быть строкой")
        return Board(layout)

    name = data.get('board', 'english')
    if name not in PRESETS:
        raise InvalidLayoutError(f"Неизвестная доска: {name}")
    return Board(PRESETS[name])


def _move_to_json(move) -> dict:
    return {
        'row': move.pos.row,
        'col': move.pos.col,
        'direction': move.direction.name.lower(),
        'text': format_move(move),
    }


@app.route('/api/boards', methods=['GET'])
def boards():
    """Стандартные раскладки."""
    return jsonify({
        'success': True,
        'boards': PRESETS,
        'memo': [s.value for s in MemoStrategy],
        'default_memo': DEFAULT_STRATEGY.value,
    })


@app.route('/api/validate', methods=['POST'])
def validate():
    """Валидация описания доски."""
    data = request.get_json(silent=True) or {}

    try:
        board = _board_from_request(data)
    except InvalidLayoutError as e:
        return jsonify({'success': True, 'valid': False, 'error': str(e)})

    return jsonify({
        'success': True,
        'valid': True,
        'rows': board.row_count,
        'cols': board.col_count,
        'active_positions': board.active_position_count,
        'pegs': board.peg_count(),
    })


@app.route('/api/solve', methods=['POST'])
@handle_errors(on_error=lambda e: _error(str(e)))
def solve():
    """
    API для решения головоломки.

    Входные данные:
    {
        "layout": "111\\n0 1",   // описание доски
        "board": "english",      // или имя стандартной раскладки
        "memo": "hashmap"        // none / hashmap / bitfield
    }
    """
    data = request.get_json(silent=True) or {}
    board = _board_from_request(data)

    memo = data.get('memo', DEFAULT_STRATEGY.value)
    try:
        strategy = MemoStrategy(memo)
    except ValueError:
        raise InvalidRequestError(f"Неизвестная стратегия мемоизации: {memo}")

    logger.info(f"Solve request: memo={strategy.value}, pegs={board.peg_count()}, "
                f"positions={board.active_position_count}")

    solver = BacktrackingSolver(board, strategy)
    solved = monitor_time('api_solve')(solver.solve)()
    elapsed = get_monitor().last_time('api_solve')

    return jsonify({
        'success': True,
        'solved': solved,
        'memo': solver.strategy.value,
        'moves': [_move_to_json(m) for m in solver.solution() or []],
        'final_board': solver.current_board().render(),
        'time': round(elapsed, 4),
        'stats': {
            'nodes_visited': solver.stats.nodes_visited,
            'nodes_pruned': solver.stats.nodes_pruned,
            'dead_states': solver.stats.dead_states,
            'max_depth': solver.stats.max_depth,
        },
    })


if __name__ == '__main__':
    app.run(host='127.0.0.1', port=int(os.environ.get('PORT', 5000)))
