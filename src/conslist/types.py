"""Type definitions for conslist."""

from typing import TypeVar

# Generic type variable for list elements
T = TypeVar("T")  # Element type
