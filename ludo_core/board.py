"""
Track topology for the Ludo race engine.
Describes the shared ring and where each seat enters and leaves it.
"""

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Tuple

from .constants import BoardConstants, GameConstants


@dataclass(frozen=True)
class TrackTopology:
    """
    Immutable description of the shared ring.

    All per-seat asymmetry of the board lives here, so piece logic can stay
    player-agnostic: callers only ever ask where a seat's relative step lands
    on the ring and how far a ring cell is from that seat's home entry.
    """

    ring_size: int = GameConstants.RING_SIZE
    home_lane_size: int = GameConstants.HOME_LANE_SIZE
    entry_offsets: Tuple[int, ...] = BoardConstants.ENTRY_OFFSETS
    home_entry_offsets: Tuple[int, ...] = BoardConstants.HOME_ENTRY_OFFSETS
    safe_cells: FrozenSet[int] = field(
        default_factory=lambda: frozenset(BoardConstants.get_all_safe_squares())
    )

    def __post_init__(self):
        if self.ring_size <= 0 or self.home_lane_size <= 0:
            raise ValueError("Ring and home lane sizes must be positive")
        if len(self.entry_offsets) != GameConstants.MAX_PLAYERS:
            raise ValueError(
                f"Expected {GameConstants.MAX_PLAYERS} entry offsets, "
                f"got {len(self.entry_offsets)}"
            )
        if len(self.home_entry_offsets) != len(self.entry_offsets):
            raise ValueError("Every seat needs both an entry and a home entry offset")
        cells = (*self.entry_offsets, *self.home_entry_offsets, *self.safe_cells)
        for cell in cells:
            if not 0 <= cell < self.ring_size:
                raise ValueError(f"Ring index {cell} outside 0..{self.ring_size - 1}")
        # Normalize so callers may pass any iterable of cells
        object.__setattr__(self, "safe_cells", frozenset(self.safe_cells))

    def ring_index_of(self, player_id: int, relative_steps: int) -> int:
        """Absolute ring index reached after `relative_steps` from the seat's entry."""
        return (self.entry_offsets[player_id] + relative_steps) % self.ring_size

    def relative_steps(self, player_id: int, ring_index: int) -> int:
        """Steps from the seat's entry to `ring_index` (inverse of ring_index_of)."""
        return (ring_index - self.entry_offsets[player_id]) % self.ring_size

    def distance_to_home_entry(self, player_id: int, ring_index: int) -> int:
        """Ring steps left before the seat must turn off into its home lane."""
        return (
            self.home_entry_offsets[player_id] - ring_index + self.ring_size
        ) % self.ring_size

    def ring_span(self, player_id: int) -> int:
        """Ring steps between the seat's entry cell and its home entry cell."""
        return self.distance_to_home_entry(player_id, self.entry_offsets[player_id])

    def finish_distance(self, player_id: int) -> int:
        """Total relative steps from the entry cell to the finished slot."""
        return self.ring_span(player_id) + 1 + self.home_lane_size

    def is_safe(self, ring_index: int) -> bool:
        """Check if a ring cell is immune to capture."""
        return ring_index in self.safe_cells

    def to_dict(self) -> Dict:
        """Layout summary for renderers mapping abstract cells to pixels."""
        return {
            "ring_size": self.ring_size,
            "home_lane_size": self.home_lane_size,
            "entry_offsets": list(self.entry_offsets),
            "home_entry_offsets": list(self.home_entry_offsets),
            "safe_cells": sorted(self.safe_cells),
        }


DEFAULT_TOPOLOGY = TrackTopology()
