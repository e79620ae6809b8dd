"""
Lucky Toss - Test Configuration and Fixtures

Common fixtures and a scripted random source for deterministic engine tests.
"""

import pytest

from src.config.settings import Settings
from src.engine.base import GameState
from src.engine.turn_engine import TurnEngine
from tests.helpers import ScriptedRandomSource


# =============================================================================
# RANDOMNESS & SETTINGS
# =============================================================================

@pytest.fixture
def scripted_rng() -> ScriptedRandomSource:
    """Scripted source with empty queues (all 1s, computer never re-rolls)."""
    return ScriptedRandomSource()


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the environment and any .env file."""
    return Settings(_env_file=None)


# =============================================================================
# ENGINE FIXTURES
# =============================================================================

@pytest.fixture
def engine(scripted_rng: ScriptedRandomSource, settings: Settings) -> TurnEngine:
    """Engine with a scripted source; the starting hands are all 1s."""
    return TurnEngine(rng=scripted_rng, settings=settings)


@pytest.fixture
def ready_engine(engine: TurnEngine) -> TurnEngine:
    """Engine with the default target (101) already set."""
    engine.set_target("")
    return engine


@pytest.fixture
def make_engine(settings: Settings):
    """Factory building an engine around a hand-made state."""

    def _make(
        rng: ScriptedRandomSource,
        human: tuple[int, ...] = (1, 1, 1, 1, 1),
        computer: tuple[int, ...] = (1, 1, 1, 1, 1),
        **state_fields,
    ) -> TurnEngine:
        state = GameState.from_values(human, computer, **state_fields)
        return TurnEngine(rng=rng, settings=settings, state=state)

    return _make
