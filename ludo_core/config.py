import os
from dataclasses import dataclass
from typing import Optional

_TRUTHY = ("true", "1", "yes")


def _optional_int(raw: Optional[str]) -> Optional[int]:
    if raw is None or not raw.strip():
        return None
    return int(raw)


@dataclass
class GameConfig:
    """Engine and simulation settings."""

    auto_apply_single_move: bool = True  # play a lone legal move without a selection
    dice_seed: Optional[int] = None
    log_level: str = "INFO"
    max_turns: int = 2000  # simulation safety cap

    @classmethod
    def from_env(cls) -> "GameConfig":
        """Create config from environment variables with proper type conversion."""
        return cls(
            auto_apply_single_move=os.getenv("LUDO_AUTO_APPLY_SINGLE_MOVE", "true").lower()
            in _TRUTHY,
            dice_seed=_optional_int(os.getenv("LUDO_DICE_SEED")),
            log_level=os.getenv("LUDO_LOG_LEVEL", "INFO").upper(),
            max_turns=max(1, int(os.getenv("LUDO_MAX_TURNS", "2000"))),
        )
