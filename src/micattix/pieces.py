"""Defines what a cell of the grid can hold"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Self


class PieceType(Enum):
    EMPTY = auto()
    NUMBER = auto()
    CROSS = auto()


@dataclass(frozen=True)
class Piece:
    type: PieceType
    value: int = 0

    @classmethod
    def number(cls, value: int) -> Self:
        return cls(PieceType.NUMBER, value)

    @classmethod
    def cross(cls) -> Self:
        """The single movable marker"""
        return cls(PieceType.CROSS)

    @classmethod
    def empty(cls) -> Self:
        """A cell whose tile has been captured"""
        return cls(PieceType.EMPTY)

    @property
    def is_number(self) -> bool:
        return self.type == PieceType.NUMBER

    @property
    def is_cross(self) -> bool:
        return self.type == PieceType.CROSS

    @property
    def is_empty(self) -> bool:
        return self.type == PieceType.EMPTY

    def __str__(self) -> str:
        """Three characters wide, so a row of cells lines up in a console"""
        if self.is_number:
            return f"{self.value:>3}"
        return "  X" if self.is_cross else "   "
