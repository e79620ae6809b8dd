"""
Lucky Toss Game Engine.

Pure Python game logic with zero UI dependencies.
Handles dice rolling, keep/re-roll turns, computer play, and win detection.
"""

from src.engine.base import (
    DEFAULT_TARGET,
    MAX_ROLLS,
    NUM_DICE,
    Die,
    GameState,
    Outcome,
    Player,
    TieBreakRound,
)
from src.engine.errors import (
    EngineError,
    IndexOutOfRange,
    InvalidTarget,
    PreconditionNotMet,
    TargetAlreadySet,
    TieBreakExhausted,
)
from src.engine.randomness import RandomSource, SeededRandomSource
from src.engine.snapshot import DieView, GameSnapshot, TieBreakRoundView
from src.engine.events import EventPayload, GameEvent
from src.engine.computer import ComputerOpponent
from src.engine.turn_engine import TurnEngine

__all__ = [
    # Constants
    "DEFAULT_TARGET",
    "MAX_ROLLS",
    "NUM_DICE",
    # Data Classes
    "Die",
    "GameState",
    "TieBreakRound",
    # Enums
    "Outcome",
    "Player",
    "GameEvent",
    # Errors
    "EngineError",
    "IndexOutOfRange",
    "InvalidTarget",
    "PreconditionNotMet",
    "TargetAlreadySet",
    "TieBreakExhausted",
    # Randomness
    "RandomSource",
    "SeededRandomSource",
    # Snapshots & Events
    "DieView",
    "GameSnapshot",
    "TieBreakRoundView",
    "EventPayload",
    # Engines
    "ComputerOpponent",
    "TurnEngine",
]
