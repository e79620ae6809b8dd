"""
Lucky Toss - State Snapshots

Pydantic read models handed to the presentation layer. A snapshot is a
frozen copy of the engine's GameState; mutating the engine afterwards never
changes a snapshot already returned.
"""

from pydantic import BaseModel, Field

from src.engine.base import MAX_ROLLS, GameState, Outcome, TieBreakRound


class DieView(BaseModel):
    """A human die as shown to the caller."""

    value: int = Field(ge=1, le=6)
    kept: bool = False

    model_config = {"frozen": True}


class TieBreakRoundView(BaseModel):
    """One sudden-death round with its sums."""

    human_dice: tuple[int, ...]
    computer_dice: tuple[int, ...]
    human_sum: int
    computer_sum: int

    model_config = {"frozen": True}

    @classmethod
    def from_round(cls, tie_round: TieBreakRound) -> "TieBreakRoundView":
        return cls(
            human_dice=tie_round.human_dice,
            computer_dice=tie_round.computer_dice,
            human_sum=tie_round.human_sum,
            computer_sum=tie_round.computer_sum,
        )


class GameSnapshot(BaseModel):
    """Read-only view of a game in progress."""

    target_score: int | None = None
    human_dice: tuple[DieView, ...]
    computer_dice: tuple[int, ...]
    human_total: int = 0
    computer_total: int = 0
    human_roll_count: int = Field(default=0, ge=0, le=MAX_ROLLS)
    human_turn_score: int = 0
    outcome: Outcome = Outcome.NONE
    turn_number: int = 1
    last_computer_turn_score: int = 0
    tie_break_rounds: tuple[TieBreakRoundView, ...] = ()
    games_played: int = 0
    human_wins: int = 0
    computer_wins: int = 0

    model_config = {"frozen": True}

    @classmethod
    def from_state(cls, state: GameState) -> "GameSnapshot":
        """Copy a live GameState into an immutable snapshot."""
        return cls(
            target_score=state.target_score,
            human_dice=tuple(DieView(value=d.value, kept=d.kept) for d in state.human_dice),
            computer_dice=tuple(state.computer_dice),
            human_total=state.human_total,
            computer_total=state.computer_total,
            human_roll_count=state.human_roll_count,
            human_turn_score=state.human_turn_score,
            outcome=state.outcome,
            turn_number=state.turn_number,
            last_computer_turn_score=state.last_computer_turn_score,
            tie_break_rounds=tuple(TieBreakRoundView.from_round(r) for r in state.tie_break_rounds),
            games_played=state.games_played,
            human_wins=state.human_wins,
            computer_wins=state.computer_wins,
        )

    @property
    def human_values(self) -> tuple[int, ...]:
        return tuple(d.value for d in self.human_dice)

    @property
    def kept_indices(self) -> frozenset[int]:
        return frozenset(i for i, d in enumerate(self.human_dice) if d.kept)

    @property
    def is_game_over(self) -> bool:
        return self.outcome is not Outcome.NONE

    @property
    def rerolls_remaining(self) -> int:
        """Re-rolls left this turn (0 before the initial throw)."""
        if self.human_roll_count == 0:
            return 0
        return MAX_ROLLS - self.human_roll_count

    @property
    def can_throw(self) -> bool:
        return (
            not self.is_game_over
            and self.target_score is not None
            and self.human_roll_count == 0
        )

    @property
    def can_reroll(self) -> bool:
        return (
            not self.is_game_over
            and self.target_score is not None
            and 1 <= self.human_roll_count < MAX_ROLLS
        )

    @property
    def can_score(self) -> bool:
        return (
            not self.is_game_over
            and self.target_score is not None
            and 1 <= self.human_roll_count <= MAX_ROLLS
        )

    @property
    def can_toggle(self) -> bool:
        return not self.is_game_over and self.human_roll_count < MAX_ROLLS
