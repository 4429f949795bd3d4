"""
The move history is the entire state of a game.

Everything else (whose turn it is, where the pawns stand, which walls are placed) is replayed from it on every query.
There is no board object that could drift away from the history.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional, Self

from src.core.exceptions import CorruptHistoryError
from src.core.shared_types import Player
from src.corridor.moves import Move, PawnMove, WallMove, parse_move
from src.corridor.square import BOARD_DIMENSIONS, Square
from src.corridor.walls import WallPlacement

HISTORY_DELIMITER = ";"

# Pawns start in the middle of their own back row and race to the opposite one
_CENTER_COLUMN = BOARD_DIMENSIONS[0] // 2
START_SQUARES: dict[Player, Square] = {
    Player.FIRST: Square(_CENTER_COLUMN, 0),
    Player.SECOND: Square(_CENTER_COLUMN, BOARD_DIMENSIONS[1] - 1),
}
GOAL_ROWS: dict[Player, int] = {
    Player.FIRST: BOARD_DIMENSIONS[1] - 1,
    Player.SECOND: 0,
}


@dataclass(frozen=True)
class History:
    """Ordered, append-only sequence of moves. Player 0 made the moves at even indices."""

    moves: tuple[Move, ...] = ()

    @classmethod
    def from_string(cls, history: str) -> Self:
        """
        Moves are joined by ';'
        ----

        ex) "E2;E8;hD2" : player 0 stepped to E2, player 1 to E8, then player 0 placed a wall.
        The empty string is a game where nobody moved yet.
        """
        if history == "":
            return cls()
        return cls(tuple(parse_move(label) for label in history.split(HISTORY_DELIMITER)))

    def to_string(self) -> str:
        return HISTORY_DELIMITER.join(move.to_label() for move in self.moves)

    def append(self, move: Move) -> Self:
        """Return a new history with the move added. The original stays untouched."""
        return type(self)(self.moves + (move,))

    def __len__(self) -> int:
        return len(self.moves)

    def __iter__(self) -> Iterator[Move]:
        return iter(self.moves)


# --- HISTORY INTERPRETER ---
def next_player(history: History) -> Player:
    """Players alternate, so the parity of the number of moves made decides."""
    return Player(len(history) % 2)


def group_moves_by_player(history: History) -> tuple[list[Move], list[Move]]:
    """Split the moves by the player who made them, keeping their order."""
    return list(history.moves[0::2]), list(history.moves[1::2])


def locate_walls(history: History) -> list[WallPlacement]:
    """All walls placed so far, in the order they were placed. Walls belong to the board, not to a player."""
    return [move.wall for move in history if isinstance(move, WallMove)]


def locate_pawn(history: History, player: Player) -> Square:
    """The square the player's last pawn move went to. Start square if the player never moved the pawn."""
    player_moves = group_moves_by_player(history)[player]
    pawn_moves = [move for move in player_moves if isinstance(move, PawnMove)]
    if not pawn_moves:
        return START_SQUARES[player]

    square = pawn_moves[-1].square
    if not square.is_within_bounds():
        raise CorruptHistoryError(
            f"Pawn of player {player.value} ended up outside the board on {square}."
        )
    return square


def locate_next_pawn(history: History, player: Optional[Player] = None) -> Square:
    """Where is the pawn of the player to move? (Or of the player explicitly asked for)"""
    if player is None:
        player = next_player(history)
    return locate_pawn(history, player)


def locate_pawns(history: History) -> tuple[Square, Square]:
    """Both pawns, indexed by player. Fails loudly if they share a square."""
    pawns = (
        locate_pawn(history, Player.FIRST),
        locate_pawn(history, Player.SECOND),
    )
    if pawns[0] == pawns[1]:
        raise CorruptHistoryError(
            f"Both pawns stand on {pawns[0].to_label()}. A pawn can never land on the other pawn."
        )
    return pawns


def head_to_head(history: History) -> bool:
    """
    Pawns are head to head when they stand on adjacent squares.

    NOTE: Walls play no role here. A wall between the two pawns is taken care of by the pawn move rules.
    """
    first, second = locate_pawns(history)
    return first.is_adjacent(second)


def winner(history: History) -> Optional[Player]:
    """The player whose pawn reached the goal row, if any."""
    pawns = locate_pawns(history)
    for player in Player:
        if pawns[player].y == GOAL_ROWS[player]:
            return player
    return None
