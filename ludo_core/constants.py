"""
Constants and configuration values for the Ludo race engine.
Centralized location for all game rules and track layout constants.
"""

from typing import Set, Tuple


class GameConstants:
    """Core game constants and rules."""

    # Track dimensions
    RING_SIZE = 52
    HOME_LANE_SIZE = 5  # transit slots; the finished slot comes after them
    TOKENS_PER_PLAYER = 4
    MIN_PLAYERS = 2
    MAX_PLAYERS = 4

    # Dice
    DICE_MIN = 1
    DICE_MAX = 6
    EXIT_BASE_ROLL = 6
    EXTRA_TURN_ROLL = 6

    # Win condition
    TOKENS_TO_WIN = 4


class BoardConstants:
    """Ring layout constants, indexed by player seat."""

    # Ring index where each seat's tokens enter from base
    ENTRY_OFFSETS: Tuple[int, ...] = (0, 13, 26, 39)

    # Ring index after which each seat turns off into its home lane
    HOME_ENTRY_OFFSETS: Tuple[int, ...] = (50, 11, 24, 37)

    # Star squares (safe for all players)
    STAR_SQUARES: Set[int] = {8, 21, 34, 47}

    @classmethod
    def get_all_safe_squares(cls) -> Set[int]:
        """Get all safe squares on the ring (entries plus stars)."""
        all_safe = cls.STAR_SQUARES.copy()
        all_safe.update(cls.ENTRY_OFFSETS)
        return all_safe
