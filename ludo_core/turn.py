"""Turn state machine: whose turn it is and which intent comes next."""

from enum import Enum
from typing import Optional, Tuple

from .constants import GameConstants


class TurnPhase(Enum):
    AWAITING_ROLL = "awaiting_roll"
    AWAITING_MOVE = "awaiting_move"
    GAME_OVER = "game_over"


class TurnState:
    """
    Phase bookkeeping for one match.

    Flow: AWAITING_ROLL -> AWAITING_MOVE -> (AWAITING_ROLL | GAME_OVER).
    A roll without legal moves passes the turn straight away, so a phase
    with zero options is never exposed.
    """

    def __init__(self, num_players: int):
        self.num_players = num_players
        self.current_player_index: int = 0
        self.last_roll: Optional[int] = None
        self.phase = TurnPhase.AWAITING_ROLL
        self.winner_id: Optional[int] = None
        self.legal_token_ids: Tuple[int, ...] = ()

    @property
    def is_over(self) -> bool:
        return self.phase is TurnPhase.GAME_OVER

    def record_roll(self, roll: int) -> None:
        self.last_roll = roll

    def await_move(self, legal_token_ids: Tuple[int, ...]) -> None:
        self.legal_token_ids = tuple(legal_token_ids)
        self.phase = TurnPhase.AWAITING_MOVE

    def pass_turn(self) -> None:
        """Hand the dice to the next seat."""
        self.current_player_index = (self.current_player_index + 1) % self.num_players
        self.last_roll = None
        self.legal_token_ids = ()
        self.phase = TurnPhase.AWAITING_ROLL

    def complete_move(self, mover_has_won: bool) -> bool:
        """
        Resolve the step shared by auto-applied and selected moves.

        Returns:
            bool: True if the same seat rolls again
        """
        self.legal_token_ids = ()
        if mover_has_won:
            self.winner_id = self.current_player_index
            self.phase = TurnPhase.GAME_OVER
            return False

        if self.last_roll == GameConstants.EXTRA_TURN_ROLL:
            self.last_roll = None
            self.phase = TurnPhase.AWAITING_ROLL
            return True

        self.pass_turn()
        return False
