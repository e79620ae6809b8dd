"""
Lucky Toss - Turn Engine

Owns the single GameState of a human-vs-computer game and exposes the
command API the presentation layer drives:

    set_target -> throw_initial -> [toggle_keep / re_roll]* -> score_turn

Each command validates its preconditions before touching state. A failed
command raises an EngineError subclass and leaves the state unchanged.
The engine never schedules anything on its own: after a win it only marks
the outcome, and the caller decides when to call reset().
Events queued by a command reach listeners only after the command has
finished, so a listener may safely issue the next command.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from src.config.settings import Settings, get_settings
from src.engine.base import MAX_ROLLS, NUM_DICE, Die, GameState, Outcome, TieBreakRound
from src.engine.computer import ComputerOpponent
from src.engine.errors import PreconditionNotMet, TargetAlreadySet
from src.engine.events import EventDispatcher, EventPayload, GameEvent, Listener
from src.engine.randomness import RandomSource, SeededRandomSource, roll_hand
from src.engine.snapshot import GameSnapshot
from src.engine.tie_break import sudden_death
from src.engine.validators import parse_target_input, validate_die_index

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def command(method: F) -> F:
    """Run an engine command, delivering its events once it has completed.

    Events queued by nested commands (re_roll scoring the third roll) are
    held until the outermost command returns or raises, so listeners never
    observe or re-enter a half-finished command.
    """

    @functools.wraps(method)
    def wrapper(self: "TurnEngine", *args: Any, **kwargs: Any) -> Any:
        self._depth += 1
        try:
            return method(self, *args, **kwargs)
        finally:
            self._depth -= 1
            if self._depth == 0:
                self._flush_events()

    return wrapper  # type: ignore[return-value]


class TurnEngine:
    """Rules engine for one game instance.

    Not thread-safe; callers sharing an engine must serialize commands.
    """

    def __init__(
        self,
        rng: RandomSource | None = None,
        settings: Settings | None = None,
        state: GameState | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._rng = rng if rng is not None else SeededRandomSource(self._settings.rng_seed)
        self._events = EventDispatcher()
        self._pending: list[EventPayload] = []
        self._depth = 0
        self._state = state if state is not None else self._fresh_state()

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def rng(self) -> RandomSource:
        return self._rng

    def get_state(self) -> GameSnapshot:
        """Read-only snapshot of the current state."""
        return GameSnapshot.from_state(self._state)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register an event listener; returns a callable that unsubscribes it."""
        return self._events.subscribe(listener)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @command
    def set_target(self, value: str | int | None = None) -> int:
        """Fix the target score for this game.

        Empty input selects the configured default target.

        Raises:
            TargetAlreadySet: If a target was already set this game
            InvalidTarget: If the input is non-numeric or not positive
        """
        if self._state.is_target_set:
            raise TargetAlreadySet(
                f"Target score is already set to {self._state.target_score}."
            )
        target = parse_target_input(value, default=self._settings.default_target)
        self._state.target_score = target
        logger.info("Target score set to %d", target)
        self._emit(GameEvent.TARGET_SET, target=target)
        return target

    @command
    def throw_initial(self) -> GameSnapshot:
        """Throw fresh dice for both players to start the human turn."""
        state = self._state
        self._require_in_play("throw")
        if state.human_roll_count != 0:
            raise PreconditionNotMet(
                f"Dice already thrown this turn (roll {state.human_roll_count})."
            )

        human = roll_hand(self._rng, NUM_DICE)
        computer = roll_hand(self._rng, NUM_DICE)

        state.human_dice = [Die(value=v) for v in human]
        state.computer_dice = computer
        state.human_roll_count = 1
        state.human_turn_score = sum(human)
        logger.debug("Initial throw: human %s computer %s", human, computer)
        self._emit(GameEvent.DICE_THROWN, human=tuple(human), computer=tuple(computer))
        return self.get_state()

    @command
    def toggle_keep(self, index: int) -> GameSnapshot:
        """Flip the kept flag on one human die.

        Raises:
            IndexOutOfRange: If index is not in [0, 5)
            PreconditionNotMet: After the third roll or once the game is over
        """
        state = self._state
        validate_die_index(index, len(state.human_dice))
        if state.is_game_over:
            raise PreconditionNotMet("Cannot keep dice after the game is over.")
        if state.human_roll_count >= MAX_ROLLS:
            raise PreconditionNotMet("Cannot keep dice after the final roll.")

        state.human_dice[index] = state.human_dice[index].toggled()
        kept = state.human_dice[index].kept
        self._emit(GameEvent.DIE_TOGGLED, index=index, kept=kept)
        return self.get_state()

    @command
    def re_roll(self) -> GameSnapshot:
        """Re-roll every human die not marked as kept.

        Each new face is added to the turn score. Reaching the third roll
        scores the turn immediately.
        """
        state = self._state
        self._require_in_play("re-roll")
        if not 1 <= state.human_roll_count < MAX_ROLLS:
            raise PreconditionNotMet(
                f"Cannot re-roll at roll {state.human_roll_count}; "
                f"re-rolls are allowed after rolls 1 to {MAX_ROLLS - 1}."
            )

        new_dice: list[Die] = []
        added = 0
        for die in state.human_dice:
            if die.kept:
                new_dice.append(die)
                continue
            value = self._rng.roll_die()
            new_dice.append(Die(value=value))
            added += value

        state.human_dice = new_dice
        state.human_turn_score += added
        state.human_roll_count += 1
        logger.debug(
            "Re-roll %d: %s (+%d, turn score %d)",
            state.human_roll_count, state.human_values, added, state.human_turn_score,
        )
        self._emit(GameEvent.DICE_REROLLED, added=added, roll_count=state.human_roll_count)

        if state.human_roll_count == MAX_ROLLS:
            snapshot, _ = self.score_turn()
            return snapshot
        return self.get_state()

    @command
    def score_turn(self) -> tuple[GameSnapshot, Outcome]:
        """Bank the human turn, play the computer turn and check for a winner.

        Returns:
            Tuple of (snapshot after scoring, outcome)

        Raises:
            PreconditionNotMet: Before the initial throw or once the game is over
            TieBreakExhausted: If a configured sudden-death limit runs out
        """
        state = self._state
        self._require_in_play("score")
        if not 1 <= state.human_roll_count <= MAX_ROLLS:
            raise PreconditionNotMet("Cannot score before the initial throw.")

        target = state.target_score
        human_total = state.human_total + state.human_turn_score
        computer_dice, computer_turn_score = ComputerOpponent.simulate_turn(
            state.computer_dice, self._rng
        )
        computer_total = state.computer_total + computer_turn_score
        outcome, rounds = self._evaluate(human_total, computer_total, target)

        next_human: list[int] = []
        next_computer: list[int] = []
        if outcome is Outcome.NONE:
            next_human = roll_hand(self._rng, NUM_DICE)
            next_computer = roll_hand(self._rng, NUM_DICE)

        # Commit
        banked = state.human_turn_score
        state.human_total = human_total
        state.computer_dice = computer_dice
        state.computer_total = computer_total
        state.last_computer_turn_score = computer_turn_score
        state.tie_break_rounds = rounds
        state.outcome = outcome

        if outcome is Outcome.NONE:
            state.human_dice = [Die(value=v) for v in next_human]
            state.computer_dice = next_computer
            state.human_roll_count = 0
            state.human_turn_score = 0
            state.turn_number += 1
        else:
            state.games_played += 1
            if outcome is Outcome.HUMAN_WINS:
                state.human_wins += 1
            else:
                state.computer_wins += 1

        logger.info(
            "Turn scored: human +%d (%d), computer +%d (%d), target %d",
            banked, human_total, computer_turn_score, computer_total, target,
        )

        for number, tie_round in enumerate(rounds, start=1):
            self._emit(
                GameEvent.TIE_BREAK_ROUND,
                round=number,
                human_sum=tie_round.human_sum,
                computer_sum=tie_round.computer_sum,
            )
        self._emit(
            GameEvent.TURN_SCORED,
            human_turn_score=banked,
            computer_turn_score=computer_turn_score,
            outcome=outcome,
        )
        if outcome is not Outcome.NONE:
            logger.info("Game over: %s (%d-%d)", outcome.name, human_total, computer_total)
            self._emit(GameEvent.GAME_WON, outcome=outcome, winner=outcome.winner)

        return self.get_state(), outcome

    @command
    def reset(self) -> GameSnapshot:
        """Start a fresh game at the same target score."""
        previous = self._state
        self._state = self._fresh_state(
            target_score=previous.target_score,
            games_played=previous.games_played,
            human_wins=previous.human_wins,
            computer_wins=previous.computer_wins,
        )
        logger.info("Game reset (target %s)", previous.target_score)
        self._emit(GameEvent.GAME_RESET, target=previous.target_score)
        return self.get_state()

    @command
    def new_game(self) -> GameSnapshot:
        """Start a fresh game with the target score unset."""
        previous = self._state
        self._state = self._fresh_state(
            games_played=previous.games_played,
            human_wins=previous.human_wins,
            computer_wins=previous.computer_wins,
        )
        logger.info("New game started")
        self._emit(GameEvent.NEW_GAME)
        return self.get_state()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _fresh_state(self, **kwargs: Any) -> GameState:
        human = roll_hand(self._rng, NUM_DICE)
        computer = roll_hand(self._rng, NUM_DICE)
        return GameState.from_values(human, computer, **kwargs)

    def _require_in_play(self, command: str) -> None:
        if self._state.is_game_over:
            raise PreconditionNotMet(
                f"Cannot {command}: game is over ({self._state.outcome.name})."
            )
        if not self._state.is_target_set:
            raise PreconditionNotMet(f"Cannot {command}: target score is not set.")

    def _evaluate(
        self,
        human_total: int,
        computer_total: int,
        target: int,
    ) -> tuple[Outcome, list[TieBreakRound]]:
        if human_total >= target and computer_total >= target and human_total == computer_total:
            return sudden_death(self._rng, self._settings.tie_break_max_rounds)
        if human_total >= target:
            return Outcome.HUMAN_WINS, []
        if computer_total >= target:
            return Outcome.COMPUTER_WINS, []
        return Outcome.NONE, []

    def _emit(self, event: GameEvent, **data: Any) -> None:
        if self._events.listener_count == 0:
            return
        self._pending.append(EventPayload(event=event, snapshot=self.get_state(), data=data))

    def _flush_events(self) -> None:
        pending, self._pending = self._pending, []
        for payload in pending:
            self._events.emit(payload)
