"""
Type definitions used across layers (domain, boundary models, front-ends)
"""

from enum import StrEnum


class BoardSize(StrEnum):
    SMALL = "small"
    LARGE = "large"

    @property
    def dimensions(self) -> tuple[int, int]:
        """(rows, cols) of the grid"""
        return BOARD_DIMENSIONS[self]


BOARD_DIMENSIONS: dict[BoardSize, tuple[int, int]] = {
    BoardSize.SMALL: (4, 4),
    BoardSize.LARGE: (6, 6),
}


class GameMode(StrEnum):
    TWO_PLAYERS = "two players"
    FOUR_PLAYERS = "four players"
