"""
core/board.py

Доска произвольной формы: плотная сетка клеток + упакованное
64-битное представление активных клеток.

Обе формы меняются только вместе, внутри _set(). Упакованное значение
используется как отпечаток состояния для мемоизации: бит i равен 1,
если в i-й активной клетке (сканирование слева направо, сверху вниз)
стоит колышек. Неиспользуемые биты всегда 0, поэтому отпечаток можно
использовать как индекс в битовом поле размера 2^active_position_count.
"""

from typing import List

from .moves import Move, Position
from .utils import Cell, CHAR_TO_CELL, MAX_ACTIVE_POSITIONS
from utils.error_handling import InvalidLayoutError

Grid = List[List[Cell]]


class Board:
    """
    Доска Peg Solitaire.

    Форма (размеры, заблокированные клетки) фиксируется при создании.
    Состояние меняется только через apply_move.
    """
    __slots__ = ('_grid', '_index_map', '_packed', '_active', '_rows', '_cols')

    def __init__(self, layout: str):
        """
        Строит доску из текстового описания.

        Строки разделены переводом строки; ' ' — вне доски,
        '1' — колышек, '0' — дырка.

        Raises:
            InvalidLayoutError: недопустимый символ, строки разной длины,
                пустая доска или больше 64 активных клеток
        """
        grid: Grid = []
        index_map: List[List[int]] = []
        packed = 0
        active = 0

        lines = layout.split('\n')
        if len(lines) > 1 and not lines[-1]:
            # Завершающий перевод строки не добавляет строку
            lines.pop()

        for line in lines:
            if line.endswith('\r'):
                line = line[:-1]
            cells = []
            indexes = []
            for ch in line:
                cell = CHAR_TO_CELL.get(ch)
                if cell is None:
                    raise InvalidLayoutError(f"Недопустимый символ в описании доски: {ch!r}")
                if cell is Cell.BLOCKED:
                    # Для клеток вне доски индекс никогда не используется
                    indexes.append(0)
                else:
                    if active == MAX_ACTIVE_POSITIONS:
                        raise InvalidLayoutError(
                            f"Доска не может содержать больше {MAX_ACTIVE_POSITIONS} активных клеток"
                        )
                    if cell is Cell.PEG:
                        packed |= 1 << active
                    indexes.append(active)
                    active += 1
                cells.append(cell)
            grid.append(cells)
            index_map.append(indexes)

        if not grid:
            raise InvalidLayoutError("Доска размера 0")

        cols = len(grid[0])
        if cols == 0 or active == 0:
            raise InvalidLayoutError("Доска размера 0")

        for row in grid:
            if len(row) != cols:
                raise InvalidLayoutError("Все строки доски должны быть одной длины")

        self._grid = grid
        self._index_map = index_map
        self._packed = packed
        self._active = active
        self._rows = len(grid)
        self._cols = cols

    def copy(self) -> 'Board':
        """Независимая копия доски."""
        other = Board.__new__(Board)
        other._grid = [row[:] for row in self._grid]
        other._index_map = self._index_map  # форма неизменна — можно разделять
        other._packed = self._packed
        other._active = self._active
        other._rows = self._rows
        other._cols = self._cols
        return other

    @property
    def active_position_count(self) -> int:
        """Количество активных клеток (колышки + дырки)."""
        return self._active

    @property
    def row_count(self) -> int:
        return self._rows

    @property
    def col_count(self) -> int:
        return self._cols

    def fingerprint(self) -> int:
        """Упакованное состояние доски — O(1)."""
        return self._packed

    def count(self, cell: Cell) -> int:
        """Количество клеток данного вида."""
        return sum(row.count(cell) for row in self._grid)

    def peg_count(self) -> int:
        """Количество колышков."""
        return bin(self._packed).count('1')

    def cell(self, pos: Position) -> Cell:
        """Клетка в позиции pos (с проверкой границ)."""
        row, col = pos
        if not (0 <= row < self._rows and 0 <= col < self._cols):
            raise IndexError(f"Позиция {tuple(pos)} вне доски {self._rows}x{self._cols}")
        return self._grid[row][col]

    def apply_move(self, move: Move, reversed: bool = False) -> bool:
        """
        Пытается сделать ход.

        Если ход допустим — обновляет доску и возвращает True, иначе
        возвращает False и доску не меняет. С reversed=True выполняет
        обратный ход: отменяет ранее сделанный ход move.

        Args:
            move: ход
            reversed: обратный ход

        Returns:
            True если ход сделан
        """
        (row, col), direction = move
        dr, dc = direction.value
        t_row, t_col = row + 2 * dr, col + 2 * dc

        rows, cols = self._rows, self._cols
        if not (0 <= row < rows and 0 <= col < cols and 0 <= t_row < rows and 0 <= t_col < cols):
            return False

        if reversed:
            from_state, to_state = Cell.HOLE, Cell.PEG
        else:
            from_state, to_state = Cell.PEG, Cell.HOLE

        m_row, m_col = row + dr, col + dc
        grid = self._grid
        if (grid[row][col] is not from_state or grid[m_row][m_col] is not from_state
                or grid[t_row][t_col] is not to_state):
            return False

        self._set(row, col, to_state)
        self._set(m_row, m_col, to_state)
        self._set(t_row, t_col, from_state)
        return True

    def _set(self, row: int, col: int, cell: Cell) -> None:
        """Меняет клетку и соответствующий бит упакованного состояния."""
        self._grid[row][col] = cell
        mask = 1 << self._index_map[row][col]
        if cell is Cell.PEG:
            self._packed |= mask
        else:
            self._packed &= ~mask

    def render(self) -> str:
        """Текстовое представление в формате конструктора."""
        return '\n'.join(''.join(cell.value for cell in row) for row in self._grid)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    __hash__ = None

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Board({self._rows}x{self._cols}, {self.peg_count()} pegs, {self._active} positions)"
