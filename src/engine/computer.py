"""
Lucky Toss - Computer Opponent

The computer plays a maximum-3-roll turn with a fully random policy:
after the initial throw it flips a coin to decide whether to re-roll at all,
then flips a coin per die to decide which dice to re-roll. It never evaluates
whether a re-roll helps it.

Every re-rolled value is added to the turn score on top of the initial sum;
the replaced value is not subtracted.
"""

import logging
from typing import ClassVar, Sequence

from src.engine.base import MAX_ROLLS, NUM_DICE
from src.engine.randomness import RandomSource
from src.engine.validators import validate_dice_values

logger = logging.getLogger(__name__)


class ComputerOpponent:
    """Stateless simulation of the computer's turn."""

    MAX_ROLLS: ClassVar[int] = MAX_ROLLS

    @classmethod
    def simulate_turn(
        cls,
        initial_dice: Sequence[int],
        rng: RandomSource,
    ) -> tuple[list[int], int]:
        """Play out the computer's turn from its initial throw.

        Args:
            initial_dice: The computer hand from the initial throw
            rng: Source for re-roll decisions and new faces

        Returns:
            Tuple of (final_dice, turn_score)
        """
        dice = list(validate_dice_values(initial_dice, min_count=NUM_DICE, max_count=NUM_DICE))
        roll_count = 1
        score = sum(dice)

        while roll_count < cls.MAX_ROLLS:
            if not rng.flip():
                break
            added = 0
            for i in range(len(dice)):
                if rng.flip():
                    dice[i] = rng.roll_die()
                    added += dice[i]
            score += added
            roll_count += 1
            logger.debug("Computer re-roll %d: %s (+%d)", roll_count, dice, added)

        return dice, score
