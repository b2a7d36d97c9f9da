"""
Token representation for the Ludo race engine.
Each player has 4 tokens; a token's position is one of four tagged variants.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Iterable, List, Optional, Union

from .board import DEFAULT_TOPOLOGY, TrackTopology
from .constants import GameConstants


class TokenState(Enum):
    """Possible states of a token."""

    AT_BASE = "at_base"  # Token waits in its player's base
    ON_TRACK = "on_track"  # Token is on the shared ring
    IN_HOME_LANE = "in_home_lane"  # Token is in its player's private lane
    FINISHED = "finished"  # Token has reached the terminal slot


@dataclass(frozen=True)
class AtBase:
    state: ClassVar[TokenState] = TokenState.AT_BASE

    def __str__(self) -> str:
        return "base"


@dataclass(frozen=True)
class OnTrack:
    ring_index: int
    state: ClassVar[TokenState] = TokenState.ON_TRACK

    def __str__(self) -> str:
        return f"ring {self.ring_index}"


@dataclass(frozen=True)
class InHomeLane:
    lane_index: int
    state: ClassVar[TokenState] = TokenState.IN_HOME_LANE

    def __str__(self) -> str:
        return f"lane {self.lane_index}"


@dataclass(frozen=True)
class Finished:
    state: ClassVar[TokenState] = TokenState.FINISHED

    def __str__(self) -> str:
        return "finished"


Position = Union[AtBase, OnTrack, InHomeLane, Finished]

AT_BASE = AtBase()
FINISHED = Finished()


def next_position(
    position: Position,
    player_id: int,
    dice_value: int,
    topology: TrackTopology = DEFAULT_TOPOLOGY,
) -> Optional[Position]:
    """
    Compute where a token lands after playing `dice_value`.

    Args:
        position: Current position of the token
        player_id: Seat owning the token
        dice_value: The value rolled on the dice (1-6)
        topology: Ring layout used to resolve seat offsets

    Returns:
        Optional[Position]: The new position, or None if the roll cannot be
        played by this token
    """
    lane_size = topology.home_lane_size

    if isinstance(position, AtBase):
        # Entering consumes the whole roll
        if dice_value == GameConstants.EXIT_BASE_ROLL:
            return OnTrack(topology.entry_offsets[player_id])
        return None

    if isinstance(position, OnTrack):
        remaining = topology.distance_to_home_entry(player_id, position.ring_index)
        if dice_value <= remaining:
            return OnTrack((position.ring_index + dice_value) % topology.ring_size)
        over = dice_value - remaining - 1
        if over < lane_size:
            return InHomeLane(over)
        if over == lane_size:
            return FINISHED
        return None

    if isinstance(position, InHomeLane):
        target = position.lane_index + dice_value
        if target == lane_size:
            return FINISHED
        if target < lane_size:
            return InHomeLane(target)
        return None

    # Finished is terminal
    return None


def is_legal(
    position: Position,
    player_id: int,
    dice_value: int,
    topology: TrackTopology = DEFAULT_TOPOLOGY,
) -> bool:
    """Check if a token at `position` can play `dice_value`. No side effects."""
    return next_position(position, player_id, dice_value, topology) is not None


def progress(
    position: Position, player_id: int, topology: TrackTopology = DEFAULT_TOPOLOGY
) -> int:
    """Relative steps travelled from the entry cell; -1 while at base."""
    if isinstance(position, AtBase):
        return -1
    if isinstance(position, OnTrack):
        return topology.relative_steps(player_id, position.ring_index)
    if isinstance(position, InHomeLane):
        return topology.ring_span(player_id) + 1 + position.lane_index
    return topology.finish_distance(player_id)


@dataclass
class Token:
    """
    Represents a single token/piece in the Ludo game.
    """

    token_id: int  # 0, 1, 2, 3 for each player
    player_id: int
    position: Position = field(default=AT_BASE)

    @property
    def state(self) -> TokenState:
        return self.position.state

    def is_at_base(self) -> bool:
        """Check if token is still in its base."""
        return isinstance(self.position, AtBase)

    def is_finished(self) -> bool:
        """Check if token has reached the terminal slot."""
        return isinstance(self.position, Finished)

    def can_move(
        self, dice_value: int, topology: TrackTopology = DEFAULT_TOPOLOGY
    ) -> bool:
        """Check if this token can play the given dice value."""
        return is_legal(self.position, self.player_id, dice_value, topology)

    def get_target_position(
        self, dice_value: int, topology: TrackTopology = DEFAULT_TOPOLOGY
    ) -> Optional[Position]:
        """Position after moving with dice_value, or None when illegal."""
        return next_position(self.position, self.player_id, dice_value, topology)

    def move(self, dice_value: int, topology: TrackTopology = DEFAULT_TOPOLOGY) -> bool:
        """
        Move the token based on dice value.

        Returns:
            bool: True if move was successful, False if the roll is illegal
        """
        target = self.get_target_position(dice_value, topology)
        if target is None:
            return False
        self.position = target
        return True

    def send_to_base(self) -> None:
        self.position = AT_BASE

    def progress(self, topology: TrackTopology = DEFAULT_TOPOLOGY) -> int:
        return progress(self.position, self.player_id, topology)


def capture_at(
    mover: Token,
    tokens: Iterable[Token],
    topology: TrackTopology = DEFAULT_TOPOLOGY,
) -> List[Token]:
    """
    Send every opposing token sharing the mover's ring cell back to base.

    Only applies when the mover sits on the ring at a non-safe cell. All
    opponents on the cell are captured together; the mover's own tokens are
    never touched.

    Returns:
        List[Token]: Tokens that were sent back to base
    """
    if not isinstance(mover.position, OnTrack):
        return []
    ring_index = mover.position.ring_index
    if topology.is_safe(ring_index):
        return []

    captured = [
        token
        for token in tokens
        if token.player_id != mover.player_id
        and isinstance(token.position, OnTrack)
        and token.position.ring_index == ring_index
    ]
    for token in captured:
        token.send_to_base()
    return captured
