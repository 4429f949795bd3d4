"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

import pytest

from src.services.corridor_service import CorridorService

# Both pawns marched up the E-file until they met: player 0 on E5, player 1 on E6, player 1 to move.
HEAD_TO_HEAD_HISTORY = "E2;E8;E3;E7;E4;E6;E5"


@pytest.fixture
def head_to_head_history() -> str:
    return HEAD_TO_HEAD_HISTORY


@pytest.fixture
def service() -> CorridorService:
    """The service keeps no state, so a fresh one per test is as good as a shared one."""
    return CorridorService()
