"""
The two kinds of moves a player can make, and the parser that tells them apart.

Both share one notation:
* "E2"  : move your pawn to E2
* "hD2" : place a horizontal wall anchored at D2
"""

from __future__ import annotations

from dataclasses import dataclass

from src.core.exceptions import ParseError
from src.corridor.square import Square
from src.corridor.walls import ORIENTATION_PREFIXES, WallPlacement


@dataclass(frozen=True)
class PawnMove:
    square: Square

    def to_label(self) -> str:
        return self.square.to_label()


@dataclass(frozen=True)
class WallMove:
    wall: WallPlacement

    def to_label(self) -> str:
        return self.wall.to_label()


Move = PawnMove | WallMove


def parse_move(label: str) -> Move:
    """Single entrypoint from notation to a Move: the orientation prefix decides what kind of move it is."""
    if not isinstance(label, str) or not label:
        raise ParseError(f"Cannot interpret {label!r} as a move.")

    if label[0] in ORIENTATION_PREFIXES:
        return WallMove(WallPlacement.from_label(label))
    return PawnMove(Square.from_label(label))
