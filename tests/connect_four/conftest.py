from __future__ import annotations

import random

import pytest

from connect_four.app.controller import SessionController
from connect_four.app.scheduler import Scheduler
from connect_four.core.rules import ConnectFourEngine
from tests.connect_four.unit.helpers import LeftmostStrategy, RecordingEngine, RecordingSurface


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1337)


@pytest.fixture
def engine() -> RecordingEngine:
    return RecordingEngine(ConnectFourEngine(strategy=LeftmostStrategy()))


@pytest.fixture
def scheduler() -> Scheduler:
    return Scheduler()


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface(700, 600)


@pytest.fixture
def controller(
    engine: RecordingEngine,
    scheduler: Scheduler,
    surface: RecordingSurface,
    seeded_rng: random.Random,
) -> SessionController:
    return SessionController(engine, scheduler, rng=seeded_rng, surface=surface)
