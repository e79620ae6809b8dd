"""
Lucky Toss - Test Helpers

Deterministic RandomSource used across the engine tests.
"""

from collections import deque
from typing import Iterable


class ScriptedRandomSource:
    """
    RandomSource that replays queued values.

    Dice faces and coin flips come from separate queues. Once a queue is
    empty the fill value is returned, so tests only script the draws they
    care about.
    """

    def __init__(
        self,
        dice: Iterable[int] = (),
        flips: Iterable[bool] = (),
        fill_die: int = 1,
        fill_flip: bool = False,
    ) -> None:
        self.dice = deque(dice)
        self.flips = deque(flips)
        self.fill_die = fill_die
        self.fill_flip = fill_flip
        self.dice_drawn = 0
        self.flips_drawn = 0

    def queue_dice(self, *values: int) -> None:
        self.dice.extend(values)

    def queue_flips(self, *values: bool) -> None:
        self.flips.extend(values)

    def roll_die(self) -> int:
        self.dice_drawn += 1
        return self.dice.popleft() if self.dice else self.fill_die

    def flip(self) -> bool:
        self.flips_drawn += 1
        return self.flips.popleft() if self.flips else self.fill_flip
