"""Node shape of the singly-linked list: a value followed by the rest, or nothing."""

from typing import Generic, TypeAlias

from conslist.types import T


class Empty:
    """Terminal node. Marks the end of a chain and doubles as the empty list."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "EMPTY"


# Empty carries no data, so a single shared instance is enough
EMPTY = Empty()


class Filled(Generic[T]):
    """A node holding one value and exclusively owning the rest of the chain."""

    __slots__ = ("value", "rest")

    def __init__(self, value: T, rest: "Node[T]" = EMPTY) -> None:
        self.value = value
        self.rest: Node[T] = rest

    def __repr__(self) -> str:
        return f"Filled({self.value!r}, ...)"


Node: TypeAlias = Empty | Filled[T]
