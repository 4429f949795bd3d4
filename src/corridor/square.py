"""
A square on the board, its label notation, and the squares next to it

(placed in its own module as every other module needs to import it)
"""

from __future__ import annotations

from dataclasses import dataclass
from string import ascii_uppercase

from src.core.exceptions import ParseError

# Board is 9x9. Kept adjustable so the rules never hard-code the size
BOARD_DIMENSIONS = (9, 9)
COLUMN_LETTERS = ascii_uppercase[: BOARD_DIMENSIONS[0]]

Vector = tuple[int, int]

# Order matters only for deterministic output: up, down, left, right
ORTHOGONAL_DELTAS: tuple[Vector, ...] = ((0, 1), (0, -1), (-1, 0), (1, 0))


@dataclass(frozen=True)
class Square:
    x: int
    y: int

    @classmethod
    def from_label(cls, label: str) -> Square:
        """Label notation: 'A1' - 'I9' get converted to (0,0) - (8,8)"""
        if len(label) < 2:
            raise ParseError(f"Cannot interpret {label!r} as a square.")

        column, row = label[0], label[1:]
        if column not in COLUMN_LETTERS:
            raise ParseError(
                f"Column {column!r} of {label!r} not in {COLUMN_LETTERS[0]}-{COLUMN_LETTERS[-1]}."
            )
        # isdecimal() rejects signs and whitespace, the round trip rejects leading zeros ('A01')
        if not row.isdecimal() or str(int(row)) != row:
            raise ParseError(f"Row {row!r} of {label!r} is not a row number.")

        square = cls(COLUMN_LETTERS.index(column), int(row) - 1)
        if not square.is_within_bounds():
            raise ParseError(
                f"Row {row!r} of {label!r} not in 1-{BOARD_DIMENSIONS[1]}."
            )
        return square

    def to_label(self) -> str:
        if not self.is_within_bounds():
            raise ParseError(f"{self} has no label: it lies outside the board.")
        return f"{COLUMN_LETTERS[self.x]}{self.y + 1}"

    def is_within_bounds(self) -> bool:
        return (0 <= self.x < BOARD_DIMENSIONS[0]) and (
            0 <= self.y < BOARD_DIMENSIONS[1]
        )

    def shift(self, delta: Vector) -> Square:
        """The square one step along delta. Can be off the board: check is_within_bounds() before using it."""
        dx, dy = delta
        return Square(self.x + dx, self.y + dy)

    def neighbours(self) -> list[Square]:
        """The (at most 4) squares sharing an edge with this one"""
        return [
            neighbour
            for neighbour in (self.shift(delta) for delta in ORTHOGONAL_DELTAS)
            if neighbour.is_within_bounds()
        ]

    def is_adjacent(self, other: Square) -> bool:
        return abs(self.x - other.x) + abs(self.y - other.y) == 1


def direction(from_square: Square, to_square: Square) -> Vector:
    """Unit step leading from one square to an adjacent one"""
    return (to_square.x - from_square.x, to_square.y - from_square.y)
