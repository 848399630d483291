"""
The GameSession owns all mutable game state: the board, whose turn it is, the scores of the running round,
the cumulative totals and the round counter. Everything else reads it or calls its methods.
"""

from dataclasses import dataclass, field
from random import Random
from typing import Optional, Self

from src.core.logging_config import get_logger
from src.core.shared_types import BoardSize, GameMode
from src.micattix.board import Board
from src.micattix.cell import Cell
from src.micattix.pieces import Piece
from src.micattix.players import Player, next_player, players_for_mode
from src.micattix.scoring import PlayerScore, highest_scorer

logger = get_logger(__name__)


@dataclass
class GameSession:
    board: Board
    game_mode: GameMode
    players: list[Player]
    current_player: Player
    scores: dict[Player, PlayerScore]
    total_scores: dict[Player, int]
    round: int = 1
    rng: Random = field(default_factory=Random, repr=False)

    @classmethod
    def new(
        cls, size: BoardSize, game_mode: GameMode, rng: Optional[Random] = None
    ) -> Self:
        """Start round 1 on a freshly shuffled board."""
        rng = rng or Random()
        return cls.new_with_board(Board.new(size, rng), game_mode, rng)

    @classmethod
    def new_with_board(
        cls, board: Board, game_mode: GameMode, rng: Optional[Random] = None
    ) -> Self:
        """Start round 1 on a board prepared by the caller (scripted scenarios)."""
        players = players_for_mode(game_mode)
        return cls(
            board=board,
            game_mode=game_mode,
            players=players,
            current_player=players[0],
            scores={player: PlayerScore() for player in players},
            total_scores={player: 0 for player in players},
            rng=rng or Random(),
        )

    def process_move(self, target: Cell) -> Piece:
        """
        Move the marker for the current player.
        ---
        On success the captured tile is credited to the mover and the turn passes on.
        An InvalidMoveError from the board propagates untouched, and the turn does not pass.
        """
        captured = self.board.make_move(self.current_player, target)
        if captured.is_number:
            self.scores[self.current_player].add_piece(captured)
        self.current_player = next_player(self.current_player, self.players)
        return captured

    def is_round_over(self) -> bool:
        return self.board.is_game_over()

    def get_round_winner(self) -> Optional[Player]:
        """None while the round is running, or when the top score is shared."""
        if not self.is_round_over():
            return None
        return highest_scorer(self.round_totals())

    def get_overall_winner(self) -> Optional[Player]:
        return highest_scorer(self.total_scores)

    def start_next_round(self) -> None:
        """
        Bank the round scores, deal a new board of the same size and reset the round scores.
        The starting seat rotates with the round number.
        """
        for player in self.players:
            self.total_scores[player] += self.scores[player].total

        self.board = Board.new(self.board.size, self.rng)
        self.scores = {player: PlayerScore() for player in self.players}
        self.round += 1
        self.current_player = self.players[(self.round - 1) % len(self.players)]
        logger.info(
            "Round %d started, %s to move", self.round, self.current_player.name
        )

    def round_totals(self) -> dict[Player, int]:
        return {player: self.scores[player].total for player in self.players}

    def cumulative_totals(self) -> dict[Player, int]:
        return dict(self.total_scores)

    def get_player_name(self, player: Player) -> str:
        return f"Player {player.number} ({player.axis.name.lower()})"
