"""
Lucky Toss - Engine Errors

Every command validates before it mutates; a failed command raises one of
these and leaves the game state exactly as it was.
"""


class EngineError(Exception):
    """Base class for all turn engine errors."""


class InvalidTarget(EngineError, ValueError):
    """Target input is non-numeric or not a positive integer."""


class PreconditionNotMet(EngineError):
    """A command was issued in a state that forbids it."""


class TargetAlreadySet(PreconditionNotMet):
    """The target score is fixed for the rest of the game."""


class IndexOutOfRange(EngineError, IndexError):
    """A die index outside the hand was given."""


class TieBreakExhausted(EngineError, RuntimeError):
    """Sudden death hit its configured round limit without a winner."""
