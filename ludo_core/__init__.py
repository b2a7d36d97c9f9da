"""
Ludo Race Engine
Rules and turn state for a 2-4 player race game; rendering lives elsewhere.
"""

from ludo_core.board import DEFAULT_TOPOLOGY, TrackTopology
from ludo_core.config import GameConfig
from ludo_core.constants import BoardConstants, GameConstants
from ludo_core.dice import Dice, RandomDice, ScriptedDice
from ludo_core.exceptions import (
    IllegalSelection,
    InvalidPlayerCount,
    LudoError,
    NotAwaitingMove,
    NotAwaitingRoll,
)
from ludo_core.game import (
    LudoGame,
    MatchState,
    MoveResult,
    PlayerState,
    RollResult,
    create_match,
)
from ludo_core.player import Player, PlayerColor
from ludo_core.token import (
    AtBase,
    Finished,
    InHomeLane,
    OnTrack,
    Position,
    Token,
    TokenState,
    is_legal,
    next_position,
)
from ludo_core.turn import TurnPhase

__all__ = [
    "LudoGame",
    "create_match",
    "MatchState",
    "PlayerState",
    "RollResult",
    "MoveResult",
    "Player",
    "PlayerColor",
    "TrackTopology",
    "DEFAULT_TOPOLOGY",
    "Token",
    "TokenState",
    "Position",
    "AtBase",
    "OnTrack",
    "InHomeLane",
    "Finished",
    "is_legal",
    "next_position",
    "TurnPhase",
    "Dice",
    "RandomDice",
    "ScriptedDice",
    "GameConfig",
    "GameConstants",
    "BoardConstants",
    "LudoError",
    "InvalidPlayerCount",
    "NotAwaitingRoll",
    "NotAwaitingMove",
    "IllegalSelection",
]
