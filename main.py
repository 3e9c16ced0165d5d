#!/usr/bin/env python3
"""
main.py

Точка входа для Peg Solitaire Solver.

Использование:
    python main.py                           # английская доска
    python main.py board.txt                 # доска из файла
    python main.py --board line              # стандартная раскладка
    python main.py --layout "11010101010"    # описание в командной строке
    python main.py --memo bitfield           # выбор мемоизации
    python main.py --compare                 # сравнение всех стратегий
"""

import sys
import argparse

from peg_io import PRESETS, parse_layout, load_layout, display_board, format_solution, print_moves
from solvers import BacktrackingSolver, MemoStrategy, DEFAULT_STRATEGY, BITFIELD_ACTIVE_LIMIT
from tools.compare_times import compare_strategies, print_comparison
from utils.error_handling import InvalidLayoutError
from utils.logging import configure_logging
from utils.monitoring import get_monitor, monitor_time

EXIT_SOLVED = 0
EXIT_FAILED = 1
EXIT_INVALID = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Peg Solitaire Solver',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Формат доски: ' ' — вне доски, '1' — колышек, '0' — дырка,
строки разделены переводом строки.

Примеры:
  python main.py                     # английская доска
  python main.py --board line        # маленькая доска в одну строку
  python main.py --memo none         # без мемоизации (медленно)
  python main.py --compare           # сравнить none/hashmap/bitfield
        """
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        'input', nargs='?',
        help='Файл с описанием доски'
    )
    source.add_argument(
        '--board', '-b', choices=sorted(PRESETS),
        help='Стандартная раскладка (default: english)'
    )
    source.add_argument(
        '--layout', '-l',
        help='Описание доски; строки разделяются \\n'
    )
    parser.add_argument(
        '--memo', '-m', choices=[s.value for s in MemoStrategy],
        default=DEFAULT_STRATEGY.value,
        help=(f'Хранение мертвых состояний (default: {DEFAULT_STRATEGY.value}). '
              'bitfield занимает 2^N бит для N клеток (1 ГБ для английской доски); '
              f'при N > {BITFIELD_ACTIVE_LIMIT} используется hashmap')
    )
    parser.add_argument(
        '--compare', action='store_true',
        help='Сравнить время решения для всех стратегий'
    )
    parser.add_argument(
        '--steps', action='store_true',
        help='Показать доску после каждого хода'
    )
    parser.add_argument(
        '--verbose', '-v', action='store_true',
        help='Подробный лог решателя'
    )
    parser.add_argument(
        '--log-file',
        help='Дублировать лог в файл'
    )
    return parser


def read_layout(args: argparse.Namespace) -> str:
    """Текст доски по аргументам командной строки."""
    if args.input:
        return load_layout(args.input)
    if args.layout is not None:
        return args.layout.replace('\\n', '\n')
    return PRESETS[args.board or 'english']


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    configure_logging(args.verbose, args.log_file)

    try:
        board = parse_layout(read_layout(args))
    except InvalidLayoutError as e:
        print(f"❌ Ошибка: {e}")
        return EXIT_INVALID
    except OSError as e:
        print(f"❌ Не удалось прочитать файл: {e}")
        return EXIT_INVALID

    print("=" * 50)
    print("🎯 Peg Solitaire Solver")
    print("=" * 50)
    print(f"\nНачальная позиция ({board.peg_count()} колышков, "
          f"{board.active_position_count} клеток):")
    print(display_board(board))

    if args.compare:
        results = compare_strategies(board)
        print()
        print_comparison(results)
        return EXIT_SOLVED if all(r['solved'] for r in results) else EXIT_FAILED

    solver = BacktrackingSolver(board, args.memo, verbose=args.verbose)
    print(f"\n🔧 Мемоизация: {solver.strategy.value}")
    print("-" * 50)

    solved = monitor_time('solve')(solver.solve)()
    elapsed = get_monitor().last_time('solve')

    print(f"\n{format_solution(solver.solution())}")
    if solved and args.steps:
        print()
        print_moves(board, solver.moves())
    print("\nИтоговая позиция:")
    print(display_board(solver.current_board()))
    print(f"\n⏱ Время: {elapsed:.3f}с")
    print(f"📊 Статистика: {solver.stats}")

    return EXIT_SOLVED if solved else EXIT_FAILED


if __name__ == "__main__":
    sys.exit(main())
