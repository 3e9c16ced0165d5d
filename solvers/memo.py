"""
solvers/memo.py

Хранилища мертвых состояний (досок, из которых нет решения).

Ключ — отпечаток доски (Board.fingerprint()). Три стратегии:
- NONE: ничего не хранит, все состояния считаются выигрышными
- HASHMAP: множество (set) отпечатков
- BITFIELD: битовое поле размера 2^active_positions, индекс = отпечаток.
  Без хеширования, но память экспоненциальна: для английской доски
  (33 клетки) это 1 ГБ. Если выделить память не удалось — используется
  HASHMAP.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Set, Union

from utils.error_handling import AllocationFailure
from utils.logging import get_logger


class MemoStrategy(Enum):
    """Способ хранения мертвых состояний."""
    NONE = 'none'
    HASHMAP = 'hashmap'
    BITFIELD = 'bitfield'


DEFAULT_STRATEGY = MemoStrategy.HASHMAP

# Выше этого числа активных клеток битовое поле (2^n бит) не выделяется
BITFIELD_ACTIVE_LIMIT = 34


class DeadStateStore(ABC):
    """Хранилище мертвых состояний."""

    strategy: MemoStrategy

    @abstractmethod
    def record(self, key: int) -> None:
        """Отмечает состояние как мертвое."""

    @abstractmethod
    def is_dead(self, key: int) -> bool:
        """True если состояние уже отмечено мертвым."""

    @abstractmethod
    def __len__(self) -> int:
        """Количество отмеченных состояний."""


class NullStore(DeadStateStore):
    """Без мемоизации."""
    strategy = MemoStrategy.NONE

    def record(self, key: int) -> None:
        pass

    def is_dead(self, key: int) -> bool:
        return False

    def __len__(self) -> int:
        return 0


class HashSetStore(DeadStateStore):
    """Мемоизация через set."""
    strategy = MemoStrategy.HASHMAP

    def __init__(self):
        self._dead: Set[int] = set()

    def record(self, key: int) -> None:
        self._dead.add(key)

    def is_dead(self, key: int) -> bool:
        return key in self._dead

    def __len__(self) -> int:
        return len(self._dead)


class BitfieldStore(DeadStateStore):
    """
    Мемоизация через битовое поле.

    Бит key поля — признак мертвого состояния key. Размер поля
    2^active_positions бит, выделяется в конструкторе.
    """
    strategy = MemoStrategy.BITFIELD

    def __init__(self, active_positions: int, limit: int = BITFIELD_ACTIVE_LIMIT):
        """
        Raises:
            AllocationFailure: поле слишком велико или память не выделена
        """
        if active_positions > limit:
            raise AllocationFailure(
                f"Битовое поле на 2^{active_positions} бит превышает лимит 2^{limit}"
            )
        size = max(1, (1 << active_positions) >> 3)
        try:
            self._bits = self._allocate(size)
        except (MemoryError, OverflowError) as e:
            raise AllocationFailure(
                f"Не удалось выделить {size} байт под битовое поле"
            ) from e
        self._count = 0

    @staticmethod
    def _allocate(size: int) -> bytearray:
        return bytearray(size)

    def record(self, key: int) -> None:
        byte, bit = key >> 3, 1 << (key & 7)
        if not self._bits[byte] & bit:
            self._bits[byte] |= bit
            self._count += 1

    def is_dead(self, key: int) -> bool:
        return bool(self._bits[key >> 3] & (1 << (key & 7)))

    def __len__(self) -> int:
        return self._count


def create_store(strategy: Union[MemoStrategy, str], active_positions: int,
                 bitfield_limit: int = BITFIELD_ACTIVE_LIMIT) -> DeadStateStore:
    """
    Создаёт хранилище для выбранной стратегии.

    Для BITFIELD при нехватке памяти возвращает HashSetStore и пишет
    предупреждение в лог. Исключение наружу не выходит.

    Args:
        strategy: стратегия (MemoStrategy или её строковое значение)
        active_positions: число активных клеток доски
        bitfield_limit: максимум активных клеток для битового поля

    Returns:
        DeadStateStore
    """
    strategy = MemoStrategy(strategy)

    if strategy is MemoStrategy.NONE:
        return NullStore()
    if strategy is MemoStrategy.HASHMAP:
        return HashSetStore()

    try:
        return BitfieldStore(active_positions, limit=bitfield_limit)
    except AllocationFailure as e:
        get_logger().warning(
            f"Bitfield allocation failed ({e}); falling back to hashmap memoization"
        )
        return HashSetStore()
