"""
A cell on the grid

(placed in its own module as multiple other modules need to import it)
"""

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Cell:
    row: int
    col: int

    def to_text(self) -> str:
        return f"{self.row},{self.col}"

    def is_within_bounds(self, dimensions: tuple[int, int]) -> bool:
        rows, cols = dimensions
        return (0 <= self.row < rows) and (0 <= self.col < cols)

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"
