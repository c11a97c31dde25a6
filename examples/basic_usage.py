"""Basic usage example for conslist."""

import logging

from conslist import ConsList


def main() -> None:
    """Demonstrate basic list operations."""
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    print("=== Building ===\n")
    scores = ConsList[int]()
    for value in (10, 20, 30, 40, 50):
        scores.append(value)
    print(f"List: {scores!r} (size {scores.size()})")
    print(f"Index 1: {scores.retrieve(1)}, index 3: {scores.retrieve(3)}")
    print(f"Index 9: {scores.retrieve(9)}\n")

    print("=== Removing ===\n")
    print(f"Removed index 1: {scores.remove(1)} -> {list(scores)}")
    print(f"Removed index 0: {scores.remove(0)} -> {list(scores)}\n")

    scores.prepend(5)
    print(f"After prepend: {list(scores)}\n")

    print("=== Draining ===\n")
    for value in scores.drain():
        print(f"  Took {value}")
    print(f"Size after drain: {scores.size()}")


if __name__ == "__main__":
    main()
