"""Dice sources. The engine only ever draws rolls through one of these."""

import random
from typing import Iterable, Optional, Protocol

from .constants import GameConstants


class Dice(Protocol):
    def roll(self) -> int: ...


class RandomDice:
    """Uniform six-sided die backed by its own seedable generator."""

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self.rng = random.Random(seed)

    def roll(self) -> int:
        return self.rng.randint(GameConstants.DICE_MIN, GameConstants.DICE_MAX)


class ScriptedDice:
    """Replays a fixed sequence of rolls, for tests and deterministic replays."""

    def __init__(self, values: Iterable[int]):
        self.values = []
        self._cursor = 0
        self.push(*values)

    def roll(self) -> int:
        if self._cursor >= len(self.values):
            raise ValueError("Scripted dice exhausted")
        value = self.values[self._cursor]
        self._cursor += 1
        return value

    def push(self, *values: int) -> None:
        for value in values:
            if not GameConstants.DICE_MIN <= value <= GameConstants.DICE_MAX:
                raise ValueError(f"Dice value {value} outside 1..6")
        self.values.extend(values)

    @property
    def remaining(self) -> int:
        return len(self.values) - self._cursor
