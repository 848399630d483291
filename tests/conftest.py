"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures required for testing multiple layers.
"""

from random import Random

import pytest

from src.micattix.board import Board
from tests.helpers import EventRecorder

# Marker on (1, 2), every other cell holds a 1
UNIFORM_LAYOUT = "1 1 1 1/1 1 X 1/1 1 1 1/1 1 1 1"
# Marker on (0, 0) with a single tile left in its row
LAST_TILE_LAYOUT = "X . 5 ./. . . ./. . . ./. . . ."


@pytest.fixture
def rng() -> Random:
    """Fixed seed, so shuffled boards are reproducible"""
    return Random(1234)


@pytest.fixture
def uniform_board() -> Board:
    return Board.from_layout(UNIFORM_LAYOUT)


@pytest.fixture
def last_tile_board() -> Board:
    return Board.from_layout(LAST_TILE_LAYOUT)


@pytest.fixture
def recorder() -> EventRecorder:
    return EventRecorder()
