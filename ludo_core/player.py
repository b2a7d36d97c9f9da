"""
Player representation for the Ludo race engine.
Each player sits at a seat, carries a color tag and controls 4 tokens.
"""

from enum import Enum
from typing import List, Optional

from .board import DEFAULT_TOPOLOGY, TrackTopology
from .constants import GameConstants
from .token import Token


class PlayerColor(Enum):
    """Available player colors, in seat order. Presentation only."""

    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"

    @classmethod
    def for_seat(cls, player_id: int) -> "PlayerColor":
        return list(cls)[player_id]


class Player:
    """
    Represents a player in the Ludo game.
    """

    def __init__(self, player_id: int, color: Optional[PlayerColor] = None):
        """
        Initialize a player with their seat and 4 tokens.

        Args:
            player_id: Seat of the player (0-3), also selects its ring offsets
            color: Player's color; defaults to the color of the seat
        """
        self.player_id = player_id
        self.color = color or PlayerColor.for_seat(player_id)
        self.tokens: List[Token] = [
            Token(token_id=i, player_id=player_id)
            for i in range(GameConstants.TOKENS_PER_PLAYER)
        ]

    def get_movable_tokens(
        self, dice_value: int, topology: TrackTopology = DEFAULT_TOPOLOGY
    ) -> List[Token]:
        """
        Get all tokens that can be moved with the given dice value.

        Args:
            dice_value: The value rolled on the dice (1-6)
            topology: Ring layout used to resolve this seat's offsets

        Returns:
            List[Token]: List of tokens that can make valid moves
        """
        return [token for token in self.tokens if token.can_move(dice_value, topology)]

    def get_finished_tokens_count(self) -> int:
        """Get the number of tokens that have reached the terminal slot."""
        return sum(1 for token in self.tokens if token.is_finished())

    def has_won(self) -> bool:
        """Check if player has won (all 4 tokens finished)."""
        return self.get_finished_tokens_count() == GameConstants.TOKENS_TO_WIN

