"""Unit tests for /src/micattix/events.py"""

import pytest

from src.micattix.cell import Cell
from src.micattix.events import GameEnded, MoveMade, RoundEnded
from src.micattix.pieces import Piece
from src.micattix.players import Player


def test_events_are_hashable() -> None:
    events = {
        RoundEnded(None, {Player.FIRST: 1}),
        RoundEnded(None, {Player.FIRST: 1}),
        GameEnded(Player.SECOND, {Player.FIRST: 1, Player.SECOND: 4}),
        MoveMade(Player.FIRST, Cell(0, 1), Piece.number(3)),
    }
    assert len(events) == 3


def test_score_tables_cannot_be_changed_by_a_listener() -> None:
    round_ended = RoundEnded(Player.FIRST, {Player.FIRST: 5, Player.SECOND: 0})
    game_ended = GameEnded(Player.FIRST, {Player.FIRST: 5, Player.SECOND: 0})

    with pytest.raises(TypeError):
        round_ended.scores[Player.SECOND] = 99  # type: ignore[index]
    with pytest.raises(TypeError):
        game_ended.totals[Player.SECOND] = 99  # type: ignore[index]

    assert round_ended.scores == {Player.FIRST: 5, Player.SECOND: 0}


def test_score_tables_are_copied_on_creation() -> None:
    """The caller's dict may keep changing after the event is built"""
    scores = {Player.FIRST: 5, Player.SECOND: 0}
    event = RoundEnded(Player.FIRST, scores)

    scores[Player.SECOND] = 12

    assert event.scores == {Player.FIRST: 5, Player.SECOND: 0}


def test_events_compare_by_value() -> None:
    assert RoundEnded(None, {Player.FIRST: 3}) == RoundEnded(None, {Player.FIRST: 3})
    assert RoundEnded(None, {Player.FIRST: 3}) != RoundEnded(None, {Player.FIRST: 4})
    assert GameEnded(None, {}) != RoundEnded(None, {})
