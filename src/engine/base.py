"""
Lucky Toss - Game Engine Base Classes

This module defines the foundational data structures and enums used throughout
the game engine. Dice are immutable value objects; the game state is a single
mutable aggregate owned by the TurnEngine and only changed through its commands.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence

NUM_DICE = 5
DIE_FACES = 6
MAX_ROLLS = 3
DEFAULT_TARGET = 101


class Player(Enum):
    """The two sides of a game."""
    HUMAN = "human"
    COMPUTER = "computer"


class Outcome(Enum):
    """Terminal marker for a game."""
    NONE = "none"
    HUMAN_WINS = "human_wins"
    COMPUTER_WINS = "computer_wins"

    @property
    def winner(self) -> Player | None:
        """The winning side, or None while the game is still running."""
        if self is Outcome.HUMAN_WINS:
            return Player.HUMAN
        if self is Outcome.COMPUTER_WINS:
            return Player.COMPUTER
        return None

    @property
    def message(self) -> str:
        """Announcement shown to the human player."""
        if self is Outcome.HUMAN_WINS:
            return "You win!"
        if self is Outcome.COMPUTER_WINS:
            return "You lose."
        return ""


@dataclass(frozen=True)
class Die:
    """
    A single human die.

    Attributes:
        value: Face value (1-6)
        kept: Whether the die is excluded from the next re-roll
    """
    value: int
    kept: bool = False

    def __post_init__(self) -> None:
        """Validate the face value."""
        if not (1 <= self.value <= DIE_FACES):
            raise ValueError(
                f"Invalid die value {self.value}. Must be between 1 and {DIE_FACES}."
            )

    def toggled(self) -> "Die":
        """Return a copy with the kept flag flipped."""
        return Die(value=self.value, kept=not self.kept)


@dataclass(frozen=True)
class TieBreakRound:
    """
    One sudden-death round.

    Attributes:
        human_dice: The five dice rolled for the human
        computer_dice: The five dice rolled for the computer
    """
    human_dice: tuple[int, ...]
    computer_dice: tuple[int, ...]

    @property
    def human_sum(self) -> int:
        return sum(self.human_dice)

    @property
    def computer_sum(self) -> int:
        return sum(self.computer_dice)

    @property
    def is_tied(self) -> bool:
        return self.human_sum == self.computer_sum


@dataclass
class GameState:
    """
    Complete state of a game in progress.

    Attributes:
        human_dice: The human hand (always NUM_DICE dice)
        computer_dice: The computer hand as face values (always NUM_DICE)
        target_score: Total needed to win; None until set
        human_total: Cumulative human score across turns
        computer_total: Cumulative computer score across turns
        human_roll_count: Rolls taken this turn (0 = not yet thrown)
        human_turn_score: Pips accumulated this turn, not yet banked
        outcome: Terminal marker, set once per game
        turn_number: 1-based turn counter
        last_computer_turn_score: What the computer scored in the last turn
        tie_break_rounds: Sudden-death rounds that decided the outcome
        games_played: Finished games since the engine was created
        human_wins: Games won by the human
        computer_wins: Games won by the computer
    """
    human_dice: list[Die]
    computer_dice: list[int]
    target_score: int | None = None
    human_total: int = 0
    computer_total: int = 0
    human_roll_count: int = 0
    human_turn_score: int = 0
    outcome: Outcome = Outcome.NONE
    turn_number: int = 1
    last_computer_turn_score: int = 0
    tie_break_rounds: list[TieBreakRound] = field(default_factory=list)
    games_played: int = 0
    human_wins: int = 0
    computer_wins: int = 0

    def __post_init__(self) -> None:
        """Validate hand sizes."""
        if len(self.human_dice) != NUM_DICE:
            raise ValueError(
                f"Human hand must have exactly {NUM_DICE} dice, got {len(self.human_dice)}."
            )
        if len(self.computer_dice) != NUM_DICE:
            raise ValueError(
                f"Computer hand must have exactly {NUM_DICE} dice, got {len(self.computer_dice)}."
            )

    @property
    def human_values(self) -> tuple[int, ...]:
        """Face values of the human hand."""
        return tuple(d.value for d in self.human_dice)

    @property
    def kept_indices(self) -> frozenset[int]:
        """Indices of human dice marked as kept."""
        return frozenset(i for i, d in enumerate(self.human_dice) if d.kept)

    @property
    def is_target_set(self) -> bool:
        return self.target_score is not None

    @property
    def is_game_over(self) -> bool:
        return self.outcome is not Outcome.NONE

    @classmethod
    def from_values(
        cls,
        human: Sequence[int],
        computer: Sequence[int],
        **kwargs,
    ) -> "GameState":
        """Create a state from plain face values (all human dice unkept)."""
        return cls(
            human_dice=[Die(value=v) for v in human],
            computer_dice=list(computer),
            **kwargs,
        )
