"""Tests for owning and borrowing traversal."""

import logging

import pytest

from conslist import ConsList, Drain, ListIter


def test_borrowing_traversal_is_restartable() -> None:
    """Test two borrowing passes yield the same sequence."""
    lst = ConsList([10, 20, 30])
    first = list(lst)
    second = list(lst)
    assert first == second == [10, 20, 30]
    assert lst.size() == 3


def test_borrowing_yields_same_objects() -> None:
    """Test borrowing traversal yields the stored elements themselves."""
    items = [object(), object()]
    lst = ConsList(items)
    for stored, seen in zip(items, lst):
        assert seen is stored


def test_borrowing_iterator_protocol() -> None:
    """Test the borrowing iterator steps one node at a time."""
    it = iter(ConsList(["a", "b"]))
    assert isinstance(it, ListIter)
    assert iter(it) is it
    assert next(it) == "a"
    assert next(it) == "b"
    with pytest.raises(StopIteration):
        next(it)


def test_borrowing_empty() -> None:
    """Test borrowing traversal of an empty list."""
    assert list(ConsList()) == []


def test_drain_consumes_in_order() -> None:
    """Test owning traversal yields all elements and empties the list."""
    lst = ConsList[int]()
    for value in (1, 2, 3, 4):
        lst.append(value)
    drained = lst.drain()
    assert isinstance(drained, Drain)
    assert list(drained) == [1, 2, 3, 4]
    assert lst.size() == 0
    assert not lst


def test_drain_is_not_restartable() -> None:
    """Test a second drain of a consumed list yields nothing."""
    lst = ConsList([1, 2])
    assert list(lst.drain()) == [1, 2]
    assert list(lst.drain()) == []


def test_exhausted_drain_stays_exhausted() -> None:
    """Test a finished drain ignores elements added to its list afterwards."""
    lst = ConsList([1])
    it = lst.drain()
    assert list(it) == [1]
    lst.append(5)
    assert list(it) == []
    with pytest.raises(StopIteration):
        next(it)
    assert list(lst) == [5]


def test_drain_exhaustion_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    """Test exhausting a drain emits one debug record."""
    lst = ConsList([1])
    it = lst.drain()
    with caplog.at_level(logging.DEBUG, logger="conslist.traversal"):
        list(it)
        list(it)
    records = [r for r in caplog.records if r.name == "conslist.traversal"]
    assert len(records) == 1
    assert "exhausted" in records[0].getMessage()


def test_borrowing_continues_past_removed_node() -> None:
    """Test removing the node under a borrowing cursor keeps the rest reachable."""
    lst = ConsList([1, 2, 3, 4])
    it = iter(lst)
    assert next(it) == 1
    assert lst.remove(1) == 2
    assert list(it) == [2, 3, 4]
    assert list(lst) == [1, 3, 4]


def test_borrowing_continues_past_drained_node() -> None:
    """Test draining the head under a borrowing cursor keeps the rest reachable."""
    lst = ConsList([1, 2, 3])
    it = iter(lst)
    assert next(lst.drain()) == 1
    assert list(it) == [1, 2, 3]
    assert list(lst) == [2, 3]


def test_partial_drain() -> None:
    """Test the list holds the remaining tail after a partial drain."""
    lst = ConsList([1, 2, 3])
    it = lst.drain()
    assert next(it) == 1
    assert list(lst) == [2, 3]
    assert lst.retrieve(0) == 2
    lst.prepend(0)
    assert list(it) == [0, 2, 3]
    with pytest.raises(StopIteration):
        next(it)


def test_drain_then_reuse() -> None:
    """Test a drained list can be filled again."""
    lst = ConsList([1])
    list(lst.drain())
    lst.append(5)
    assert list(lst) == [5]
