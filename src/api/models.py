"""Request and Response models exchanged with presentation layers"""

from typing import Any, Self

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.logging_config import get_logger
from src.core.shared_types import BoardSize, GameMode
from src.micattix.cell import Cell

logger = get_logger(__name__)

PlayerName = str

# Menu choices offered by the front-ends, plus a few spellings people type anyway
BOARD_SIZE_CHOICES: dict[str, BoardSize] = {
    "1": BoardSize.SMALL,
    "4x4": BoardSize.SMALL,
    "small": BoardSize.SMALL,
    "2": BoardSize.LARGE,
    "6x6": BoardSize.LARGE,
    "large": BoardSize.LARGE,
}

GAME_MODE_CHOICES: dict[str, GameMode] = {
    "1": GameMode.TWO_PLAYERS,
    "two": GameMode.TWO_PLAYERS,
    "two players": GameMode.TWO_PLAYERS,
    "2": GameMode.FOUR_PLAYERS,
    "4": GameMode.FOUR_PLAYERS,
    "four": GameMode.FOUR_PLAYERS,
    "four players": GameMode.FOUR_PLAYERS,
}

DEFAULT_BOARD_SIZE = BoardSize.SMALL
DEFAULT_GAME_MODE = GameMode.TWO_PLAYERS


# --- REQUEST MODELS ---
class NewGameRequest(BaseModel):
    """
    Choice of board size and player count.
    ---
    Unrecognised input is not an error: it falls back to the small board / two players, with a warning.
    """

    board_size: BoardSize = DEFAULT_BOARD_SIZE
    game_mode: GameMode = DEFAULT_GAME_MODE

    @field_validator("board_size", mode="before")
    @classmethod
    def validate_board_size(cls, value: Any) -> BoardSize:
        if isinstance(value, BoardSize):
            return value
        choice = BOARD_SIZE_CHOICES.get(str(value).strip().lower())
        if choice is None:
            logger.warning(
                "Invalid board size %r, using the %s board", value, DEFAULT_BOARD_SIZE
            )
            return DEFAULT_BOARD_SIZE
        return choice

    @field_validator("game_mode", mode="before")
    @classmethod
    def validate_game_mode(cls, value: Any) -> GameMode:
        if isinstance(value, GameMode):
            return value
        choice = GAME_MODE_CHOICES.get(str(value).strip().lower())
        if choice is None:
            logger.warning(
                "Invalid game mode %r, using %s mode", value, DEFAULT_GAME_MODE
            )
            return DEFAULT_GAME_MODE
        return choice


class MoveRequest(BaseModel):
    """A target cell. Only the shape is checked here, legality is up to the engine."""

    row: int
    col: int

    @field_validator(*["row", "col"])
    @classmethod
    def validate_coordinate(cls, value: int) -> int:
        if value < 0:
            raise InvalidRequestError(f"Coordinates cannot be negative: {value}")
        return value

    @classmethod
    def from_text(cls, text: str) -> Self:
        """Parse what a user typed, ex. '1,2'"""
        parts = text.strip().split(",")
        if len(parts) != 2:
            raise InvalidRequestError(f"Enter a move as 'row,col', got {text!r}")
        try:
            row, col = (int(part.strip()) for part in parts)
        except ValueError as e:
            raise InvalidRequestError(f"Invalid coordinates: {text!r}") from e
        return cls(row=row, col=col)

    def to_cell(self) -> Cell:
        return Cell(self.row, self.col)


# --- RESPONSE MODELS ---
class GameSnapshot(BaseModel):
    """Everything a front-end needs to draw the current state"""

    board_size: BoardSize
    game_mode: GameMode
    grid: list[list[str]]
    round: int
    current_player: PlayerName
    round_scores: dict[PlayerName, int]
    total_scores: dict[PlayerName, int]
    valid_moves: list[tuple[int, int]]
    round_over: bool
