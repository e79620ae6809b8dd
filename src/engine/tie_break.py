"""
Lucky Toss - Sudden-Death Tie-Break

When both players reach the target on the same turn with equal totals,
each side rolls five fresh dice and the higher sum wins. Equal sums roll
again. Without a round limit the loop terminates with probability 1 but has
no hard cap.
"""

import logging

from src.engine.base import NUM_DICE, Outcome, TieBreakRound
from src.engine.errors import TieBreakExhausted
from src.engine.randomness import RandomSource, roll_hand

logger = logging.getLogger(__name__)


def sudden_death(
    rng: RandomSource,
    max_rounds: int | None = None,
) -> tuple[Outcome, list[TieBreakRound]]:
    """Roll sudden-death rounds until one side has the higher sum.

    Args:
        rng: Source for the tie-break dice
        max_rounds: Optional round limit (None = unbounded)

    Returns:
        Tuple of (winning outcome, every round rolled)

    Raises:
        TieBreakExhausted: If max_rounds rounds were all tied
    """
    rounds: list[TieBreakRound] = []
    while max_rounds is None or len(rounds) < max_rounds:
        human = tuple(roll_hand(rng, NUM_DICE))
        computer = tuple(roll_hand(rng, NUM_DICE))
        current = TieBreakRound(human_dice=human, computer_dice=computer)
        rounds.append(current)
        logger.debug(
            "Sudden death round %d: human %d vs computer %d",
            len(rounds), current.human_sum, current.computer_sum,
        )
        if current.is_tied:
            continue
        if current.human_sum > current.computer_sum:
            return Outcome.HUMAN_WINS, rounds
        return Outcome.COMPUTER_WINS, rounds

    raise TieBreakExhausted(f"Sudden death still tied after {max_rounds} rounds.")
