"""
core/moves.py

Ходы и их перебор.

Перебор задаёт полный детерминированный порядок всех пар
(позиция, направление) — без проверки допустимости. Допустимость
определяет только Board.apply_move.
"""

from enum import Enum
from typing import Iterator, NamedTuple, Tuple


class Direction(Enum):
    """Направление хода. Порядок членов — порядок перебора."""
    UP = (-1, 0)
    RIGHT = (0, 1)
    DOWN = (1, 0)
    LEFT = (0, -1)

    @property
    def dr(self) -> int:
        return self.value[0]

    @property
    def dc(self) -> int:
        return self.value[1]

    @property
    def arrow(self) -> str:
        return _ARROWS[self]


_ARROWS = {
    Direction.UP: '↑',
    Direction.RIGHT: '→',
    Direction.DOWN: '↓',
    Direction.LEFT: '←',
}

# Направление → следующее в цикле (LEFT не имеет следующего)
_NEXT_DIRECTION = {
    Direction.UP: Direction.RIGHT,
    Direction.RIGHT: Direction.DOWN,
    Direction.DOWN: Direction.LEFT,
}


class Position(NamedTuple):
    """Позиция (row, col). Может временно выходить за пределы доски."""
    row: int
    col: int


class Move(NamedTuple):
    """Ход: колышек из pos прыгает в направлении direction."""
    pos: Position
    direction: Direction

    def middle(self) -> Position:
        """Клетка, через которую прыгает колышек."""
        d = self.direction
        return Position(self.pos.row + d.dr, self.pos.col + d.dc)

    def target(self) -> Position:
        """Клетка, куда приземляется колышек."""
        d = self.direction
        return Position(self.pos.row + 2 * d.dr, self.pos.col + 2 * d.dc)


FIRST_CANDIDATE = Move(Position(0, 0), Direction.UP)


def first_candidate() -> Move:
    """Первый ход в порядке перебора: (0, 0), вверх."""
    return FIRST_CANDIDATE


def next_candidate(current: Move, rows: int, cols: int) -> Tuple[Move, bool]:
    """
    Следующий кандидат после current.

    Сначала меняется направление (UP → RIGHT → DOWN → LEFT), затем
    столбец, затем строка.

    Args:
        current: последний опробованный ход
        rows, cols: размеры доски

    Returns:
        (ход, has_more). При has_more=False кандидаты исчерпаны,
        возвращённый ход использовать нельзя.
    """
    direction = _NEXT_DIRECTION.get(current.direction)
    if direction is not None:
        return Move(current.pos, direction), True

    row, col = current.pos
    if col < cols - 1:
        return Move(Position(row, col + 1), Direction.UP), True
    if row < rows - 1:
        return Move(Position(row + 1, 0), Direction.UP), True
    return Move(Position(row + 1, 0), Direction.UP), False


def iter_candidates(rows: int, cols: int) -> Iterator[Move]:
    """Все кандидаты доски rows × cols в порядке перебора."""
    move, has_more = FIRST_CANDIDATE, rows > 0 and cols > 0
    while has_more:
        yield move
        move, has_more = next_candidate(move, rows, cols)
