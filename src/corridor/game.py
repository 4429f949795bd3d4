"""
Entrypoint into the domain layer.

Everything here speaks the notation used outside the engine: the history is a ';'-joined string, squares are labels
like 'E5' and walls labels like 'hD2'. Every function is pure: it parses the history, replays it, and answers.
Malformed labels raise a ParseError; they are never silently treated as an illegal move.
"""

import logging
from typing import Optional

from src.core.shared_types import Player
from src.corridor import history as hist
from src.corridor import rules
from src.corridor.history import History
from src.corridor.moves import Move, WallMove, parse_move
from src.corridor.square import Square
from src.corridor.walls import WallPlacement

logger = logging.getLogger(__name__)


# --- COORDINATES ---
def to_square_label(x: int, y: int) -> str:
    return Square(x, y).to_label()


def from_square_label(label: str) -> Square | WallPlacement:
    """
    'F1' --> Square(5, 0)
    'hF1' --> the wall anchored on Square(5, 0), with its orientation
    """
    move = parse_move(label)
    if isinstance(move, WallMove):
        return move.wall
    return move.square


def neighbours(label: str) -> list[str]:
    return [square.to_label() for square in Square.from_label(label).neighbours()]


# --- WALLS ---
def is_wall_move(move: str) -> bool:
    return isinstance(parse_move(move), WallMove)


def is_colliding_wall(wall: str, other_wall: str) -> bool:
    return WallPlacement.from_label(wall).collides_with(WallPlacement.from_label(other_wall))


# --- HISTORY ---
def locate_walls(history: str) -> list[str]:
    return [wall.to_label() for wall in hist.locate_walls(History.from_string(history))]


def next_player(history: str) -> int:
    return hist.next_player(History.from_string(history)).value


def group_moves_by_player(history: str) -> list[list[str]]:
    """ex) 'E2;E8;E3;E7' --> [['E2', 'E3'], ['E8', 'E7']]"""
    return [
        [move.to_label() for move in moves]
        for moves in hist.group_moves_by_player(History.from_string(history))
    ]


def locate_next_pawn(history: str, player: Optional[int] = None) -> str:
    """Square of the pawn of the player to move, or of the given player (0 or 1)."""
    asked_player = Player(player) if player is not None else None
    return hist.locate_next_pawn(History.from_string(history), asked_player).to_label()


def head_to_head(history: str) -> bool:
    return hist.head_to_head(History.from_string(history))


def winner(history: str) -> Optional[int]:
    """Index of the player who reached the goal row. None while the race is on."""
    player = hist.winner(History.from_string(history))
    return player.value if player is not None else None


# --- LEGAL MOVES ---
def get_legal_pawn_moves(history: str) -> set[str]:
    return {square.to_label() for square in rules.legal_pawn_moves(History.from_string(history))}


def get_legal_wall_moves(history: str) -> set[str]:
    return {wall.to_label() for wall in rules.legal_wall_moves(History.from_string(history))}


def is_valid_move(history: str, move: str) -> bool:
    """
    Is the move in the legal set of the player to act?
    ----

    NOTE: The first move of the game needs no special treatment. An empty history replays to the starting position,
    where the legal pawn moves are exactly the three open neighbours of E1, and every wall that fits is legal.
    """
    candidate = parse_move(move)
    replayed = History.from_string(history)
    is_legal = _is_legal(replayed, candidate)
    if not is_legal:
        logger.debug("Rejected move %r after %d moves", move, len(replayed))
    return is_legal


def update_game_state(history: str, move: str) -> str:
    """
    Append the move to the history.

    NOTE: No legality check: that is what is_valid_move() is for. Callers validate first, then update.
    """
    return History.from_string(history).append(parse_move(move)).to_string()


# -- PRIVATE HELPERS ---
def _is_legal(history: History, move: Move) -> bool:
    if isinstance(move, WallMove):
        return move.wall in rules.legal_wall_moves(history)
    return move.square in rules.legal_pawn_moves(history)
