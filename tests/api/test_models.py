import logging

import pytest

from src.api.models import MoveRequest, NewGameRequest
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import BoardSize, GameMode
from src.micattix.cell import Cell


# -- Validation - NewGameRequest --
def test_defaults() -> None:
    request = NewGameRequest()
    assert request.board_size == BoardSize.SMALL
    assert request.game_mode == GameMode.TWO_PLAYERS


@pytest.mark.parametrize(
    "choice, expected",
    [
        ("1", BoardSize.SMALL),
        ("2", BoardSize.LARGE),
        ("6x6", BoardSize.LARGE),
        (" Large ", BoardSize.LARGE),
        (BoardSize.LARGE, BoardSize.LARGE),
    ],
)
def test_board_size_choices(choice: str, expected: BoardSize) -> None:
    assert NewGameRequest(board_size=choice).board_size == expected


@pytest.mark.parametrize(
    "choice, expected",
    [
        ("1", GameMode.TWO_PLAYERS),
        ("2", GameMode.FOUR_PLAYERS),
        ("four", GameMode.FOUR_PLAYERS),
        ("two players", GameMode.TWO_PLAYERS),
        (GameMode.FOUR_PLAYERS, GameMode.FOUR_PLAYERS),
    ],
)
def test_game_mode_choices(choice: str, expected: GameMode) -> None:
    assert NewGameRequest(game_mode=choice).game_mode == expected


@pytest.mark.parametrize("choice", ["3", "", "huge", "8x8"])
def test_unknown_board_size_falls_back_with_a_warning(
    choice: str, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.WARNING):
        request = NewGameRequest(board_size=choice)

    assert request.board_size == BoardSize.SMALL
    assert "Invalid board size" in caplog.text


@pytest.mark.parametrize("choice", ["3", "", "many"])
def test_unknown_game_mode_falls_back_with_a_warning(
    choice: str, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.WARNING):
        request = NewGameRequest(game_mode=choice)

    assert request.game_mode == GameMode.TWO_PLAYERS
    assert "Invalid game mode" in caplog.text


# -- Validation - MoveRequest --
def test_move_from_text() -> None:
    request = MoveRequest.from_text(" 1, 3 ")
    assert (request.row, request.col) == (1, 3)
    assert request.to_cell() == Cell(1, 3)


@pytest.mark.parametrize(
    "text",
    [
        "nonsense",  # no separator
        "1,2,3",  # too many parts
        "a,b",  # not numbers
        "1,",  # missing column
    ],
)
def test_invalid_move_text(text: str) -> None:
    with pytest.raises(InvalidRequestError):
        MoveRequest.from_text(text)


@pytest.mark.parametrize("row, col", [(-1, 0), (0, -2)])
def test_negative_coordinates(row: int, col: int) -> None:
    with pytest.raises(InvalidRequestError):
        MoveRequest(row=row, col=col)


def test_bounds_are_not_checked_here() -> None:
    """Legality, bounds included, is decided by the engine"""
    assert MoveRequest(row=9, col=9).to_cell() == Cell(9, 9)
