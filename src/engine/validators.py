"""
Lucky Toss - Input Validation Utilities

Provides validation functions for game engine inputs. All validators
either return validated data or raise descriptive exceptions.
"""

from typing import Sequence

from src.engine.base import DEFAULT_TARGET, DIE_FACES, NUM_DICE
from src.engine.errors import IndexOutOfRange, InvalidTarget


def validate_dice_values(
    values: Sequence[int],
    min_count: int = 1,
    max_count: int | None = None
) -> tuple[int, ...]:
    """
    Validate and normalize dice values.

    Args:
        values: Sequence of dice values to validate
        min_count: Minimum number of dice required
        max_count: Maximum number of dice allowed (None = no limit)

    Returns:
        Validated values as a tuple

    Raises:
        ValueError: If validation fails
    """
    if not values:
        if min_count > 0:
            raise ValueError(f"At least {min_count} dice required.")
        return tuple()

    values_tuple = tuple(values)
    count = len(values_tuple)

    if count < min_count:
        raise ValueError(f"At least {min_count} dice required, got {count}.")

    if max_count is not None and count > max_count:
        raise ValueError(f"At most {max_count} dice allowed, got {count}.")

    for i, value in enumerate(values_tuple):
        if not isinstance(value, int) or isinstance(value, bool):
            raise ValueError(f"Die value at index {i} must be an integer, got {type(value).__name__}.")
        if not (1 <= value <= DIE_FACES):
            raise ValueError(
                f"Die value at index {i} is {value}, must be between 1 and {DIE_FACES}."
            )

    return values_tuple


def validate_die_index(index: int, dice_count: int = NUM_DICE) -> int:
    """
    Validate the index of a die in the human hand.

    Args:
        index: Index of the die
        dice_count: Total number of dice in the hand

    Returns:
        Validated index

    Raises:
        IndexOutOfRange: If the index is not an integer in [0, dice_count)
    """
    if not isinstance(index, int) or isinstance(index, bool):
        raise IndexOutOfRange(f"Die index must be an integer, got {type(index).__name__}.")

    if not (0 <= index < dice_count):
        raise IndexOutOfRange(
            f"Die index {index} is out of range. Must be between 0 and {dice_count - 1}."
        )

    return index


def validate_target_score(score: int) -> int:
    """
    Validate target score for a game.

    Args:
        score: Target score to validate

    Returns:
        Validated score

    Raises:
        InvalidTarget: If score is not a positive integer
    """
    if not isinstance(score, int) or isinstance(score, bool):
        raise InvalidTarget(f"Target score must be an integer, got {type(score).__name__}.")

    if score <= 0:
        raise InvalidTarget(f"Target score must be positive, got {score}.")

    return score


def parse_target_input(value: str | int | None, default: int = DEFAULT_TARGET) -> int:
    """
    Parse raw target input from the presentation layer.

    Empty input (None or a blank string) yields the default target.

    Args:
        value: Raw input, e.g. the contents of a text field
        default: Target used when no input was given

    Returns:
        Validated positive target score

    Raises:
        InvalidTarget: If the input is present but non-numeric or non-positive
    """
    if value is None:
        return validate_target_score(default)

    if isinstance(value, str):
        text = value.strip()
        if not text:
            return validate_target_score(default)
        try:
            parsed = int(text)
        except ValueError:
            raise InvalidTarget(f"Target score must be a whole number, got {value!r}.") from None
        return validate_target_score(parsed)

    return validate_target_score(value)
