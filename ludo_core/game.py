"""
Match controller for the Ludo race engine.
Owns players, tokens and the turn state; every mutation goes through
roll_dice() or select_token().
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from loguru import logger

from .board import DEFAULT_TOPOLOGY, TrackTopology
from .config import GameConfig
from .constants import GameConstants
from .dice import Dice, RandomDice
from .exceptions import (
    IllegalSelection,
    InvalidPlayerCount,
    NotAwaitingMove,
    NotAwaitingRoll,
)
from .player import Player, PlayerColor
from .token import Position, Token, TokenState, capture_at
from .turn import TurnPhase, TurnState


@dataclass(frozen=True)
class PlayerState:
    player_id: int
    color: PlayerColor
    positions: Tuple[Position, ...]

    @property
    def finished_count(self) -> int:
        return sum(1 for position in self.positions if position.state is TokenState.FINISHED)

    def to_dict(self) -> Dict:
        return {
            "player_id": self.player_id,
            "color": self.color.value,
            "tokens": [
                {
                    "token_id": token_id,
                    "state": position.state.value,
                    "ring_index": getattr(position, "ring_index", None),
                    "lane_index": getattr(position, "lane_index", None),
                }
                for token_id, position in enumerate(self.positions)
            ],
        }


@dataclass(frozen=True)
class MatchState:
    """Read-only snapshot of a match, handed to renderers."""

    players: Tuple[PlayerState, ...]
    current_player_index: int
    last_roll: Optional[int]
    phase: TurnPhase
    winner_id: Optional[int]
    legal_token_ids: Tuple[int, ...] = ()  # only filled while awaiting a move

    @property
    def num_players(self) -> int:
        return len(self.players)

    @property
    def is_game_over(self) -> bool:
        return self.phase is TurnPhase.GAME_OVER

    def position_of(self, player_id: int, token_id: int) -> Position:
        return self.players[player_id].positions[token_id]

    def to_dict(self) -> Dict:
        return {
            "num_players": self.num_players,
            "current_player_index": self.current_player_index,
            "last_roll": self.last_roll,
            "phase": self.phase.value,
            "winner_id": self.winner_id,
            "legal_token_ids": list(self.legal_token_ids),
            "players": [player.to_dict() for player in self.players],
        }


@dataclass(frozen=True)
class MoveResult:
    player_id: int
    token_id: int
    dice_value: int
    old_position: Position
    new_position: Position
    captured: Tuple[Tuple[int, int], ...] = ()  # (player_id, token_id) sent to base
    extra_turn: bool = False
    won: bool = False


@dataclass(frozen=True)
class RollResult:
    roll: int
    legal_token_ids: Tuple[int, ...]
    auto_applied: bool
    turn_passed: bool = False
    move: Optional[MoveResult] = None

    @property
    def moved_token_id(self) -> Optional[int]:
        return self.move.token_id if self.move else None

    @property
    def captured(self) -> Tuple[Tuple[int, int], ...]:
        return self.move.captured if self.move else ()


class LudoGame:
    """
    Controller for one match of 2-4 players.

    Tokens and turn bookkeeping are private mutable state; callers read the
    match through get_snapshot() and change it only via the two intents.
    Rejected intents raise before anything is modified.
    """

    def __init__(
        self,
        num_players: int,
        dice: Optional[Dice] = None,
        config: Optional[GameConfig] = None,
        topology: TrackTopology = DEFAULT_TOPOLOGY,
    ):
        if not isinstance(num_players, int) or not (
            GameConstants.MIN_PLAYERS <= num_players <= GameConstants.MAX_PLAYERS
        ):
            raise InvalidPlayerCount(num_players)

        self.config = config or GameConfig()
        self.dice = dice or RandomDice(self.config.dice_seed)
        self.topology = topology
        self.players: List[Player] = [Player(player_id=i) for i in range(num_players)]
        self.turn = TurnState(num_players)
        self.last_move: Optional[MoveResult] = None
        logger.debug(f"Created {num_players}-player match")

    @classmethod
    def create_match(
        cls,
        num_players: int,
        dice: Optional[Dice] = None,
        config: Optional[GameConfig] = None,
        topology: TrackTopology = DEFAULT_TOPOLOGY,
    ) -> "LudoGame":
        return cls(num_players, dice=dice, config=config, topology=topology)

    @property
    def num_players(self) -> int:
        return len(self.players)

    @property
    def game_over(self) -> bool:
        return self.turn.is_over

    def get_current_player(self) -> Player:
        return self.players[self.turn.current_player_index]

    def get_legal_token_ids(self, player: Player, dice_value: int) -> Tuple[int, ...]:
        return tuple(
            token.token_id for token in player.get_movable_tokens(dice_value, self.topology)
        )

    def roll_dice(self) -> RollResult:
        """
        Roll for the current player and resolve what the roll allows.

        No legal token passes the turn; a single legal token is played at once
        when the auto-apply policy is on; otherwise the match waits for
        select_token().

        Raises:
            NotAwaitingRoll: If the match is not in the roll phase
        """
        if self.turn.phase is not TurnPhase.AWAITING_ROLL:
            raise NotAwaitingRoll(f"Cannot roll while {self.turn.phase.value}")

        roll = self.dice.roll()
        player = self.get_current_player()
        legal = self.get_legal_token_ids(player, roll)
        self.turn.record_roll(roll)
        logger.debug(f"Player {player.player_id} rolled {roll}, legal tokens {list(legal)}")

        if not legal:
            self.turn.pass_turn()
            logger.debug(f"Player {player.player_id} has no move, turn passes")
            return RollResult(roll, legal, auto_applied=False, turn_passed=True)

        if len(legal) == 1 and self.config.auto_apply_single_move:
            move = self._apply_move(player, player.tokens[legal[0]], roll)
            return RollResult(roll, legal, auto_applied=True, move=move)

        self.turn.await_move(legal)
        return RollResult(roll, legal, auto_applied=False)

    def select_token(self, token_id: int) -> MatchState:
        """
        Play the pending roll with one of the current player's tokens.

        Raises:
            NotAwaitingMove: If no roll is waiting for a selection
            IllegalSelection: If the token is not in the legal set of that roll
        """
        if self.turn.phase is not TurnPhase.AWAITING_MOVE:
            raise NotAwaitingMove(f"Cannot select a token while {self.turn.phase.value}")
        if token_id not in self.turn.legal_token_ids:
            raise IllegalSelection(token_id, self.turn.legal_token_ids)

        player = self.get_current_player()
        self._apply_move(player, player.tokens[token_id], self.turn.last_roll)
        return self.get_snapshot()

    def _apply_move(self, player: Player, token: Token, dice_value: int) -> MoveResult:
        old_position = token.position
        token.move(dice_value, self.topology)
        captured = capture_at(token, self._all_tokens(), self.topology)
        for victim in captured:
            logger.debug(
                f"Player {player.player_id} token {token.token_id} captured "
                f"player {victim.player_id} token {victim.token_id} at {token.position}"
            )

        won = player.has_won()
        extra_turn = self.turn.complete_move(won)
        if won:
            logger.debug(f"Player {player.player_id} wins")
        elif extra_turn:
            logger.debug(f"Player {player.player_id} rolled a 6 and goes again")

        self.last_move = MoveResult(
            player_id=player.player_id,
            token_id=token.token_id,
            dice_value=dice_value,
            old_position=old_position,
            new_position=token.position,
            captured=tuple((victim.player_id, victim.token_id) for victim in captured),
            extra_turn=extra_turn,
            won=won,
        )
        return self.last_move

    def _all_tokens(self) -> List[Token]:
        return [token for player in self.players for token in player.tokens]

    def get_snapshot(self) -> MatchState:
        return MatchState(
            players=tuple(
                PlayerState(
                    player_id=player.player_id,
                    color=player.color,
                    positions=tuple(token.position for token in player.tokens),
                )
                for player in self.players
            ),
            current_player_index=self.turn.current_player_index,
            last_roll=self.turn.last_roll,
            phase=self.turn.phase,
            winner_id=self.turn.winner_id,
            legal_token_ids=self.turn.legal_token_ids,
        )

    def restart(self) -> MatchState:
        """Start a fresh match with the same seats, dice and settings."""
        self.players = [Player(player_id=i) for i in range(self.num_players)]
        self.turn = TurnState(self.num_players)
        self.last_move = None
        logger.debug(f"Restarted {self.num_players}-player match")
        return self.get_snapshot()


def create_match(
    num_players: int,
    dice: Optional[Dice] = None,
    config: Optional[GameConfig] = None,
    topology: TrackTopology = DEFAULT_TOPOLOGY,
) -> LudoGame:
    """Create a match with every token at base and the first seat to roll."""
    return LudoGame.create_match(num_players, dice=dice, config=config, topology=topology)
