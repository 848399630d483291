"""Per-player score keeping within a round"""

from dataclasses import dataclass, field
from typing import Optional

from src.micattix.pieces import Piece
from src.micattix.players import Player


@dataclass
class PlayerScore:
    pieces: list[Piece] = field(default_factory=list)  # capture history, in order
    total: int = 0

    def add_piece(self, piece: Piece) -> None:
        """Only numbered tiles count towards the total, but every capture is kept in the history."""
        if piece.is_number:
            self.total += piece.value
        self.pieces.append(piece)


def highest_scorer(totals: dict[Player, int]) -> Optional[Player]:
    """
    Whoever has the strictly highest total.
    ---
    A tie at the top is a draw (None). Ties further down do not matter.
    """
    if not totals:
        return None
    best = max(totals.values())
    leaders = [player for player, total in totals.items() if total == best]
    return leaders[0] if len(leaders) == 1 else None
