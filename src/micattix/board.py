"""The Game board holds the tiles and the marker, and implements every rule that changes what lies on the grid"""

from dataclasses import dataclass, field
from random import Random
from typing import Callable, Optional, Self

from src.core.exceptions import BoardConstructionError, InvalidMoveError
from src.core.logging_config import get_logger
from src.core.shared_types import BOARD_DIMENSIONS, BoardSize
from src.micattix.cell import Cell
from src.micattix.pieces import Piece
from src.micattix.players import Axis, Player

logger = get_logger(__name__)

TileSetFn = Callable[[], list[Piece]]

LAYOUT_CROSS = "X"
LAYOUT_EMPTY = "."


def small_tile_set() -> list[Piece]:
    """4x4: 1-7 twice each, one 8 and the marker"""
    tiles = [Piece.number(value) for value in range(1, 8) for _ in range(2)]
    tiles.append(Piece.number(8))
    tiles.append(Piece.cross())
    return tiles


def large_tile_set() -> list[Piece]:
    """
    6x6: 1-9 twice each, -1 to -10 once each, one +10 and the marker.
    ---
    That only makes 30 pieces, so 1-6 are added once more to fill the 36 cells.
    NOTE: the filler makes the distribution lopsided towards low values. Kept as is: changing it changes the game.
    """
    tiles = [Piece.number(value) for value in range(1, 10) for _ in range(2)]
    tiles.extend(Piece.number(-value) for value in range(1, 11))
    tiles.append(Piece.number(10))
    tiles.append(Piece.cross())
    tiles.extend(Piece.number(value) for value in range(1, 7))
    return tiles


TILE_SETS: dict[BoardSize, TileSetFn] = {
    BoardSize.SMALL: small_tile_set,
    BoardSize.LARGE: large_tile_set,
}


@dataclass
class Board:
    size: BoardSize
    position: dict[Cell, Piece]
    cross_position: Cell = field(init=False)

    def __post_init__(self) -> None:
        crosses = [cell for cell, piece in self.position.items() if piece.is_cross]
        if len(crosses) != 1:
            raise BoardConstructionError(
                f"A board must hold exactly one marker, found {len(crosses)}."
            )
        self.cross_position = crosses[0]

    @classmethod
    def new(cls, size: BoardSize, rng: Optional[Random] = None) -> Self:
        """Shuffle the tile set of this board size and lay it out row by row."""
        rng = rng or Random()
        rows, cols = size.dimensions

        tiles = TILE_SETS[size]()
        if len(tiles) != rows * cols:
            raise BoardConstructionError(
                f"Tile set for a {size} board has {len(tiles)} pieces, the grid has {rows * cols} cells."
            )
        rng.shuffle(tiles)

        cells = [Cell(row, col) for row in range(rows) for col in range(cols)]
        board = cls(size, dict(zip(cells, tiles)))
        logger.debug("New %s board, marker at %s", size, board.cross_position)
        return board

    @classmethod
    def from_layout(cls, layout: str) -> Self:
        """Construct a board from a compact text layout.

        Rows are separated by slashes, cells by whitespace:
        * an integer is a numbered tile (may be negative)
        * X is the marker
        * . is an empty cell
        ex. "1 2 X 3/4 . 5 6/7 7 1 2/8 3 4 5"

        The number of rows decides the board size. Exactly one marker is required.
        """
        rows = [row.split() for row in layout.strip().split("/")]
        size = next(
            (s for s, dims in BOARD_DIMENSIONS.items() if dims == (len(rows), len(rows))),
            None,
        )
        if size is None or any(len(row) != len(rows) for row in rows):
            raise BoardConstructionError(f"Layout is not a supported square grid: {layout!r}")

        position: dict[Cell, Piece] = {}
        for row_idx, row in enumerate(rows):
            for col_idx, token in enumerate(row):
                position[Cell(row_idx, col_idx)] = _piece_from_token(token)

        return cls(size, position)

    def to_layout(self) -> str:
        """Reverse of from_layout"""
        rows, cols = self.size.dimensions
        return "/".join(
            " ".join(_piece_to_token(self.get_piece(row, col)) for col in range(cols))
            for row in range(rows)
        )

    @property
    def dimensions(self) -> tuple[int, int]:
        return self.size.dimensions

    def piece(self, cell: Cell) -> Piece:
        return self.position[cell]

    def get_piece(self, row: int, col: int) -> Piece:
        """Out of bounds reads as an empty cell, so presentation code can probe freely."""
        return self.position.get(Cell(row, col), Piece.empty())

    def set_piece(self, row: int, col: int, piece: Piece) -> None:
        """
        Overwrite a single cell. Meant for setting up test scenarios.
        ---
        Writing a marker moves the marker there; the previous marker cell becomes empty if it still holds it.
        The marker cell itself can only be overwritten with a marker, move the marker away first.
        Out-of-bounds writes are ignored.
        """
        cell = Cell(row, col)
        if not cell.is_within_bounds(self.dimensions):
            return
        if cell == self.cross_position and not piece.is_cross:
            raise BoardConstructionError(f"Cannot overwrite the marker at {cell} with {piece!r}.")
        if piece.is_cross and cell != self.cross_position:
            if self.position[self.cross_position].is_cross:
                self.position[self.cross_position] = Piece.empty()
            self.cross_position = cell
        self.position[cell] = piece

    def get_valid_moves(self, player: Player) -> list[Cell]:
        """
        Every other non-empty cell in the marker's row (horizontal players) or column (vertical players),
        in ascending order along that line.
        """
        rows, cols = self.dimensions
        marker = self.cross_position
        if player.axis == Axis.HORIZONTAL:
            line = [Cell(marker.row, col) for col in range(cols)]
        else:
            line = [Cell(row, marker.col) for row in range(rows)]
        return [
            cell for cell in line if cell != marker and not self.piece(cell).is_empty
        ]

    def make_move(self, player: Player, target: Cell) -> Piece:
        """Slide the marker onto target and return the piece it captured."""
        if target not in self.get_valid_moves(player):
            raise InvalidMoveError(f"Invalid move to {target}")

        captured = self.piece(target)
        self.position[self.cross_position] = Piece.empty()
        self.position[target] = Piece.cross()
        self.cross_position = target
        return captured

    def is_game_over(self) -> bool:
        """No numbered tile left on the grid"""
        return not any(piece.is_number for piece in self.position.values())

    def count_pieces(self) -> dict[str, int]:
        """Census of the grid: numbered tiles, markers and empty cells"""
        census = {"number": 0, "cross": 0, "empty": 0}
        for piece in self.position.values():
            census[piece.type.name.lower()] += 1
        return census

    def display(self) -> str:
        """Human-readable grid, one line per row"""
        rows, cols = self.dimensions
        return "".join(
            " ".join(str(self.get_piece(row, col)) for col in range(cols)) + " \n"
            for row in range(rows)
        )


def _piece_from_token(token: str) -> Piece:
    if token == LAYOUT_CROSS:
        return Piece.cross()
    if token == LAYOUT_EMPTY:
        return Piece.empty()
    try:
        return Piece.number(int(token))
    except ValueError as e:
        raise BoardConstructionError(f"Cannot interpret layout cell {token!r}") from e


def _piece_to_token(piece: Piece) -> str:
    if piece.is_number:
        return str(piece.value)
    return LAYOUT_CROSS if piece.is_cross else LAYOUT_EMPTY
