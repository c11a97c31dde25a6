"""conslist - Generic singly-linked list with owning and borrowing traversal."""

from conslist.errors import ConsListError, ListIndexError
from conslist.linkedlist import ConsList
from conslist.node import EMPTY, Empty, Filled, Node
from conslist.traversal import Drain, ListIter

__version__ = "0.0.1"

__all__ = [
    "ConsList",
    "Drain",
    "ListIter",
    "Empty",
    "Filled",
    "Node",
    "EMPTY",
    "ConsListError",
    "ListIndexError",
]
