from __future__ import annotations

import random
from collections import deque
from dataclasses import dataclass, field
from typing import Iterable

from .config import config
from .errors import DieExhaustedError


@dataclass(slots=True)
class Die:
    """Uniform six-sided die backed by a replaceable random source."""

    rng: random.Random = field(default_factory=random.Random)

    def roll(self) -> int:
        return self.rng.randint(1, config.DICE_FACES)


class ScriptedDie(Die):
    """Die that replays a fixed sequence of rolls, for tests and demos."""

    __slots__ = ("_rolls",)

    def __init__(self, rolls: Iterable[int]):
        super().__init__()
        self._rolls: deque[int] = deque()
        self.extend(rolls)

    def extend(self, rolls: Iterable[int]) -> None:
        for value in rolls:
            value = int(value)
            if not 1 <= value <= config.DICE_FACES:
                raise ValueError(f"Die roll {value} outside 1..{config.DICE_FACES}")
            self._rolls.append(value)

    @property
    def remaining(self) -> int:
        return len(self._rolls)

    def roll(self) -> int:
        if not self._rolls:
            raise DieExhaustedError("Scripted die has no rolls left")
        return self._rolls.popleft()
