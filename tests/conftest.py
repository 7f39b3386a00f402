"""Shared test fixtures for Hunt the Wumpus."""

import pytest
from doubles import RecordingSink

from wumpus.config import Config
from wumpus.engine.dice import Dice
from wumpus.engine.state import GameState


@pytest.fixture
def dice() -> Dice:
    return Dice(seed=42)


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def quiet_state() -> GameState:
    """Player in room 1 with nothing nearby: neighbours are 2, 5 and 8."""
    return GameState(player=1, monster=20, pit1=18, pit2=19, bat1=17, bat2=16)


@pytest.fixture
def test_config() -> Config:
    return Config(seed=7)
