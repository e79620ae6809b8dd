"""
Lucky Toss - Engine Event Definitions

Event types and payloads emitted by the TurnEngine after each command,
plus the listener registry that dispatches them to the presentation layer.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Callable

from src.engine.snapshot import GameSnapshot

logger = logging.getLogger(__name__)


class GameEvent(Enum):
    """Events that can occur during a game."""

    TARGET_SET = auto()
    DICE_THROWN = auto()
    DIE_TOGGLED = auto()
    DICE_REROLLED = auto()
    TURN_SCORED = auto()
    TIE_BREAK_ROUND = auto()
    GAME_WON = auto()
    GAME_RESET = auto()
    NEW_GAME = auto()


@dataclass
class EventPayload:
    """Wrapper for an engine event and the state it produced."""

    event: GameEvent
    snapshot: GameSnapshot
    data: dict[str, Any] = field(default_factory=dict)


Listener = Callable[[EventPayload], None]


class EventDispatcher:
    """Fan-out of engine events to registered listeners.

    Listeners run synchronously, in registration order, on the thread that
    issued the command. A failing listener is logged and skipped so the
    remaining listeners and the engine itself are unaffected.
    """

    def __init__(self) -> None:
        self._listeners: list[Listener] = []

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener.

        Returns:
            A callable that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def emit(self, payload: EventPayload) -> None:
        """Dispatch a payload to every listener."""
        logger.debug("Dispatching %s to %d listeners", payload.event.name, len(self._listeners))
        for listener in list(self._listeners):
            try:
                listener(payload)
            except Exception:
                logger.exception("Error in listener for event %s", payload.event.name)
