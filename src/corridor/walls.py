"""
Wall geometry

A wall sits on the grooves between squares and is two squares long. It is identified by its anchor square
(the lower-left square it touches) and its orientation:

* Horizontal wall at (ax, ay): blocks stepping between rows ay and ay+1, in columns ax and ax+1.
* Vertical wall at (ax, ay): blocks stepping between columns ax and ax+1, in rows ay and ay+1.

Hence a wall anchored in the last row or column would stick out of the board: anchors run over 8x8 squares.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from src.core.exceptions import ParseError
from src.corridor.square import BOARD_DIMENSIONS, Square

WALL_LENGTH = 2
ANCHOR_DIMENSIONS = (
    BOARD_DIMENSIONS[0] - (WALL_LENGTH - 1),
    BOARD_DIMENSIONS[1] - (WALL_LENGTH - 1),
)


class Orientation(Enum):
    """Values are the prefixes used in the wall notation."""

    HORIZONTAL = "h"
    VERTICAL = "v"


ORIENTATION_PREFIXES: dict[str, Orientation] = {
    orientation.value: orientation for orientation in Orientation
}


@dataclass(frozen=True)
class WallPlacement:
    anchor: Square
    orientation: Orientation

    @classmethod
    def from_label(cls, label: str) -> WallPlacement:
        """Wall notation: orientation prefix followed by the anchor square, ex. 'hD2' or 'vA1'"""
        if not label or label[0] not in ORIENTATION_PREFIXES:
            raise ParseError(
                f"Cannot interpret {label!r} as a wall: must start with one of {','.join(ORIENTATION_PREFIXES)}."
            )
        return cls(Square.from_label(label[1:]), ORIENTATION_PREFIXES[label[0]])

    def to_label(self) -> str:
        return f"{self.orientation.value}{self.anchor.to_label()}"

    def is_on_board(self) -> bool:
        """Does the whole wall fit on the board?"""
        return (0 <= self.anchor.x < ANCHOR_DIMENSIONS[0]) and (
            0 <= self.anchor.y < ANCHOR_DIMENSIONS[1]
        )

    def collides_with(self, other: WallPlacement) -> bool:
        """
        Two walls collide when they share an anchor, whatever their orientations.

        Same orientation: it is the very same wall.
        Different orientations: they would cross each other in the middle.

        NOTE: Walls of the same orientation that overlap for a single square (ex. 'hD2' and 'hE2') are NOT
        considered colliding.
        """
        return self.anchor == other.anchor

    def blocks(self, from_square: Square, to_square: Square) -> bool:
        """Does this wall stand on the edge between two adjacent squares?"""
        if not from_square.is_adjacent(to_square):
            return False

        low, high = sorted([from_square, to_square], key=lambda sq: (sq.y, sq.x))
        covered = range(WALL_LENGTH)
        if self.orientation == Orientation.HORIZONTAL:
            # step along a column, crossing the groove above the anchor's row
            return (
                low.x == high.x
                and low.y == self.anchor.y
                and (low.x - self.anchor.x) in covered
            )
        # step along a row, crossing the groove right of the anchor's column
        return (
            low.y == high.y
            and min(low.x, high.x) == self.anchor.x
            and (low.y - self.anchor.y) in covered
        )


def is_blocked(walls: list[WallPlacement], from_square: Square, to_square: Square) -> bool:
    return any(wall.blocks(from_square, to_square) for wall in walls)


def all_wall_placements() -> list[WallPlacement]:
    """Every wall that fits on the board: both orientations on every anchor."""
    return [
        WallPlacement(Square(x, y), orientation)
        for orientation in Orientation
        for y in range(ANCHOR_DIMENSIONS[1])
        for x in range(ANCHOR_DIMENSIONS[0])
    ]
