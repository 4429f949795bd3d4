"""
Orchestration of requests coming from a caller (API router, game loop, UI) to the rules engine.

The service keeps nothing between calls: storing the returned history is up to the caller.
"""

import logging

from src.api.models import (
    GameStateRequest,
    GameStateResponse,
    LegalMovesRequest,
    LegalMovesResponse,
    MoveRequest,
)
from src.core.exceptions import IllegalMoveError
from src.corridor import game

logger = logging.getLogger(__name__)


class CorridorService:
    """Orchestration of layers for the corridor game."""

    def legal_moves(self, request: LegalMovesRequest) -> LegalMovesResponse:
        """
        Preview the legal moves of the player to act.
        ----
        Sorted, so a frontend can display them in a stable order.
        """
        return LegalMovesResponse(
            history=request.history,
            player=game.next_player(request.history),
            pawn_moves=sorted(game.get_legal_pawn_moves(request.history)),
            wall_moves=sorted(game.get_legal_wall_moves(request.history)),
        )

    def make_move(self, request: MoveRequest) -> GameStateResponse:
        """
        Attempt a move
        -----

        1. validate the move against the legal set
        2. append it to the history
        3. report the state the new history replays to
        """
        if not game.is_valid_move(request.history, request.move):
            raise IllegalMoveError(f"Move not allowed: {request.move}")

        new_history = game.update_game_state(request.history, request.move)
        state = self._create_state_response(new_history)
        logger.info(
            "Accepted move %s, player %d to act next", request.move, state.next_player
        )
        return state

    def get_game_state(self, request: GameStateRequest) -> GameStateResponse:
        """Summary of what the history replays to."""
        return self._create_state_response(request.history)

    # -- Internal helpers --
    def _create_state_response(self, history: str) -> GameStateResponse:
        return GameStateResponse(
            history=history,
            next_player=game.next_player(history),
            pawns=[game.locate_next_pawn(history, player) for player in (0, 1)],
            walls=game.locate_walls(history),
            head_to_head=game.head_to_head(history),
            winner=game.winner(history),
        )
