"""Generic singly-linked list built on the Empty/Filled node shape."""

import logging
import operator
from collections.abc import Iterable
from typing import Generic, SupportsIndex

from conslist.errors import ListIndexError
from conslist.node import EMPTY, Empty, Filled, Node
from conslist.traversal import Drain, ListIter
from conslist.types import T

logger = logging.getLogger(__name__)


class ConsList(Generic[T]):
    """
    Singly-linked list whose identity is its head node.

    Every mutation replaces the node held in a slot, either the list's own
    head or a parent node's ``rest``. Out-of-range access is reported as
    ``None`` rather than raised; only ``lst[i]`` raises.

    All walks are explicit cursor loops, so long lists never approach the
    interpreter's recursion limit.
    """

    __slots__ = ("_head",)

    def __init__(self, iterable: Iterable[T] | None = None) -> None:
        """
        Initialize the list.

        Args:
            iterable: Optional items to append, in order.
        """
        self._head: Node[T] = EMPTY
        if iterable is not None:
            tail: Filled[T] | None = None
            for value in iterable:
                node = Filled(value)
                if tail is None:
                    self._head = node
                else:
                    tail.rest = node
                tail = node

    @classmethod
    def new(cls) -> "ConsList[T]":
        """Return a new, empty list."""
        return cls()

    def _node_at(self, index: SupportsIndex) -> Filled[T] | None:
        """Return the node at ``index`` or None when it is outside 0..size-1."""
        remaining = operator.index(index)
        if remaining < 0:
            return None
        node = self._head
        while isinstance(node, Filled):
            if remaining == 0:
                return node
            remaining -= 1
            node = node.rest
        return None

    def size(self) -> int:
        """Return the number of elements. O(n)."""
        count = 0
        node = self._head
        while isinstance(node, Filled):
            count += 1
            node = node.rest
        return count

    def retrieve(self, index: SupportsIndex) -> T | None:
        """
        Return the element at ``index`` without removing it.

        Args:
            index: Position counted from the head (0 = first element)

        Returns:
            The element, or None if ``index`` is negative or ``>= size()``.
        """
        node = self._node_at(index)
        if node is None:
            logger.debug("retrieve: index %s not found", index)
            return None
        return node.value

    def get_root(self) -> T | None:
        """Return the first element, or None for an empty list."""
        return self.retrieve(0)

    def append(self, value: T) -> None:
        """Insert ``value`` as the new last element. O(n)."""
        node = self._head
        if isinstance(node, Empty):
            self._head = Filled(value)
            return
        while isinstance(node.rest, Filled):
            node = node.rest
        node.rest = Filled(value)

    def prepend(self, value: T) -> None:
        """Insert ``value`` as the new first element. O(1)."""
        self._head = Filled(value, self._head)

    def remove(self, index: SupportsIndex) -> T | None:
        """
        Unlink the element at ``index`` and return it.

        The parent of the removed node is re-linked to the removed node's rest,
        collapsing exactly one link. The removed node keeps its rest, so a
        borrowing iterator positioned on it carries on into the list.

        Args:
            index: Position counted from the head (0 = first element)

        Returns:
            The removed element, or None if ``index`` is out of range.
        """
        position = operator.index(index)
        if position == 0:
            target = self._head
            if isinstance(target, Empty):
                logger.debug("remove: index 0 not found in empty list")
                return None
            self._head = target.rest
        else:
            parent = self._node_at(position - 1) if position > 0 else None
            if parent is None or isinstance(parent.rest, Empty):
                logger.debug("remove: index %s not found", position)
                return None
            target = parent.rest
            parent.rest = target.rest

        return target.value

    def drain(self) -> Drain[T]:
        """Return an iterator that consumes this list from the head."""
        return Drain(self)

    def __iter__(self) -> ListIter[T]:
        """Return a non-consuming iterator over the elements."""
        return ListIter(self._head)

    def __len__(self) -> int:
        """Return the number of elements in the list."""
        return self.size()

    def __bool__(self) -> bool:
        """Return True if the list is non-empty."""
        return isinstance(self._head, Filled)

    def __getitem__(self, index: SupportsIndex) -> T:
        """Return the element at ``index``, raising ListIndexError if out of range."""
        node = self._node_at(index)
        if node is None:
            raise ListIndexError(f"list index {operator.index(index)} out of range")
        return node.value

    def __contains__(self, value: object) -> bool:
        """Return True if an element is or equals ``value``."""
        return any(item is value or item == value for item in self)

    def __eq__(self, other: object) -> bool:
        """Return True if both lists hold equal elements in the same order."""
        if not isinstance(other, ConsList):
            return NotImplemented
        left: Node[T] = self._head
        right: Node[object] = other._head
        while isinstance(left, Filled) and isinstance(right, Filled):
            if left.value != right.value:
                return False
            left, right = left.rest, right.rest
        return isinstance(left, Empty) and isinstance(right, Empty)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        """Return the list as ``ConsList([...])``."""
        return f"{type(self).__name__}({list(self)!r})"
