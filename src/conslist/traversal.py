"""Owning and borrowing iterators over a ConsList."""

import logging
from collections.abc import Iterator
from typing import TYPE_CHECKING, Generic

from conslist.node import Empty, Node
from conslist.types import T

if TYPE_CHECKING:
    from conslist.linkedlist import ConsList

logger = logging.getLogger(__name__)


class Drain(Iterator[T], Generic[T]):
    """
    Owning traversal: consumes the source list head-first.

    Each step unlinks the head node, installs its rest as the new head and
    yields the value. The source is empty once the iterator is exhausted, so a
    drain cannot be restarted. An exhausted drain releases its source and
    keeps raising StopIteration even if the list is refilled.
    """

    __slots__ = ("_source",)

    def __init__(self, source: "ConsList[T]") -> None:
        self._source: ConsList[T] | None = source

    def __next__(self) -> T:
        source = self._source
        if source is None:
            raise StopIteration
        head = source._head
        if isinstance(head, Empty):
            logger.debug("drain of list %#x exhausted", id(source))
            self._source = None
            raise StopIteration
        source._head = head.rest
        return head.value


class ListIter(Iterator[T], Generic[T]):
    """Borrowing traversal: walks the chain without touching it."""

    __slots__ = ("_cursor",)

    def __init__(self, head: Node[T]) -> None:
        self._cursor = head

    def __next__(self) -> T:
        node = self._cursor
        if isinstance(node, Empty):
            raise StopIteration
        self._cursor = node.rest
        return node.value
