"""
Legal move generation for the player to act.

Two independent move sets:
* wall placements: every wall that fits on the board, minus those colliding with a placed wall.
* pawn moves: single steps that do not cross a wall, with the jump rules when the pawns are head to head.

NOTE: A wall that cuts a pawn off from its goal row is still legal here.
"""

import logging

from src.corridor.history import History, locate_pawns, locate_walls, next_player
from src.corridor.square import ORTHOGONAL_DELTAS, Square, Vector, direction
from src.corridor.walls import WallPlacement, all_wall_placements, is_blocked

logger = logging.getLogger(__name__)


def legal_wall_moves(history: History) -> list[WallPlacement]:
    placed_walls = locate_walls(history)
    legal_walls = [
        candidate
        for candidate in all_wall_placements()
        if not any(candidate.collides_with(placed) for placed in placed_walls)
    ]
    logger.debug(
        "%d legal wall placements after %d placed walls",
        len(legal_walls),
        len(placed_walls),
    )
    return legal_walls


def legal_pawn_moves(history: History) -> list[Square]:
    """
    Pawn moves for the player to act
    ----

    1. Step to any of the (up to 4) neighbouring squares, unless a wall stands in between.
    2. Neighbour taken by the opponent? Jump over it, landing on the square straight behind.
    3. Square behind the opponent off the board or walled off? Step diagonally: land beside the opponent instead.
    4. Never land on the opponent.

    Returned without duplicates, in the order they are found.
    """
    player = next_player(history)
    pawns = locate_pawns(history)
    own_square = pawns[player]
    opponent_square = pawns[player.opponent]
    walls = locate_walls(history)

    moves: list[Square] = []
    for neighbour in own_square.neighbours():
        if is_blocked(walls, own_square, neighbour):
            continue

        if neighbour != opponent_square:
            moves.append(neighbour)
            continue

        # head to head: the opponent blocks the direct step
        moves.extend(_jump_moves(own_square, opponent_square, walls))

    unique_moves = list(dict.fromkeys(move for move in moves if move != opponent_square))
    logger.debug(
        "%d legal pawn moves for player %d on %s",
        len(unique_moves),
        player.value,
        own_square.to_label(),
    )
    return unique_moves


def _jump_moves(
    own_square: Square, opponent_square: Square, walls: list[WallPlacement]
) -> list[Square]:
    """Moves that replace the step onto the opponent's square."""
    jump_direction = direction(own_square, opponent_square)
    straight_jump = opponent_square.shift(jump_direction)
    if _can_step(opponent_square, straight_jump, walls):
        return [straight_jump]

    # can't jump straight: land diagonally, on either side of the opponent
    return [
        diagonal
        for diagonal in (
            opponent_square.shift(delta)
            for delta in _perpendicular_deltas(jump_direction)
        )
        if _can_step(opponent_square, diagonal, walls)
    ]


def _can_step(from_square: Square, to_square: Square, walls: list[WallPlacement]) -> bool:
    return to_square.is_within_bounds() and not is_blocked(walls, from_square, to_square)


def _perpendicular_deltas(delta: Vector) -> list[Vector]:
    dx, dy = delta
    return [other for other in ORTHOGONAL_DELTAS if other[0] * dx + other[1] * dy == 0]
