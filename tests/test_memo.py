"""
tests/test_memo.py

Тесты хранилищ мертвых состояний и отката bitfield → hashmap.
"""

import logging

import pytest

from peg_io.parser import preset_board
from solvers.memo import (
    BITFIELD_ACTIVE_LIMIT, MemoStrategy, NullStore, HashSetStore, BitfieldStore, create_store
)
from utils.error_handling import AllocationFailure


def test_null_store():
    store = NullStore()
    store.record(5)

    assert store.is_dead(5) is False
    assert len(store) == 0
    assert store.strategy is MemoStrategy.NONE


@pytest.mark.parametrize("store", [HashSetStore(), BitfieldStore(6)])
def test_record_and_lookup(store):
    """Тест: отмеченные состояния находятся, остальные — нет."""
    assert not store.is_dead(13)

    store.record(13)
    store.record(13)
    store.record(0)
    store.record(63)

    assert store.is_dead(13)
    assert store.is_dead(0)
    assert store.is_dead(63)
    assert not store.is_dead(12)
    assert not store.is_dead(14)
    assert len(store) == 3


def test_bitfield_tiny_board():
    """Тест: для 1-2 клеток поле занимает минимум один байт."""
    store = BitfieldStore(1)
    store.record(1)
    assert store.is_dead(1)
    assert not store.is_dead(0)


def test_bitfield_over_limit_raises():
    with pytest.raises(AllocationFailure):
        BitfieldStore(50)

    with pytest.raises(MemoryError):
        BitfieldStore(10, limit=8)


def test_create_store_strategies():
    assert isinstance(create_store(MemoStrategy.NONE, 10), NullStore)
    assert isinstance(create_store(MemoStrategy.HASHMAP, 10), HashSetStore)
    assert isinstance(create_store(MemoStrategy.BITFIELD, 10), BitfieldStore)
    assert create_store('hashmap', 10).strategy is MemoStrategy.HASHMAP

    with pytest.raises(ValueError):
        create_store('bogus', 10)


def test_create_store_falls_back_over_limit(caplog):
    """Тест: слишком большое поле → hashmap + предупреждение в логе."""
    with caplog.at_level(logging.WARNING):
        store = create_store(MemoStrategy.BITFIELD, 50)

    assert isinstance(store, HashSetStore)
    assert store.strategy is MemoStrategy.HASHMAP
    assert "falling back to hashmap" in caplog.text


def test_create_store_falls_back_on_memory_error(monkeypatch, caplog):
    """Тест: MemoryError при выделении не выходит наружу."""
    def fail(size):
        raise MemoryError()

    monkeypatch.setattr(BitfieldStore, '_allocate', staticmethod(fail))

    with caplog.at_level(logging.WARNING):
        store = create_store(MemoStrategy.BITFIELD, 20)

    assert isinstance(store, HashSetStore)
    assert "Bitfield allocation failed" in caplog.text

    store.record(7)
    assert store.is_dead(7)


def test_expanded_board_uses_hashmap(caplog):
    """Тест: расширенная доска (39 клеток) не выделяет битовое поле."""
    board = preset_board('expanded')
    assert board.active_position_count > BITFIELD_ACTIVE_LIMIT

    with caplog.at_level(logging.WARNING):
        store = create_store(MemoStrategy.BITFIELD, board.active_position_count)

    assert isinstance(store, HashSetStore)
    assert "falling back to hashmap" in caplog.text
