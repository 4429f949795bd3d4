"""
Type definitions used across layers
"""

from enum import IntEnum


class Player(IntEnum):
    """Players are identified by the parity of the ply they move on."""

    FIRST = 0
    SECOND = 1

    @property
    def opponent(self) -> "Player":
        return Player(1 - self.value)
