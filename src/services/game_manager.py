"""Orchestration between presentation layers and the game session: every outcome becomes a published event."""

from random import Random
from typing import Optional, Self

from src.api.models import GameSnapshot
from src.core.exceptions import InvalidMoveError
from src.core.logging_config import get_logger
from src.core.shared_types import BoardSize, GameMode
from src.micattix.board import Board
from src.micattix.cell import Cell
from src.micattix.events import (
    GameEnded,
    GameEvent,
    GameEventListener,
    GameStarted,
    InvalidMove,
    MoveMade,
    RoundEnded,
    RoundStarted,
)
from src.micattix.players import Player
from src.micattix.session import GameSession

logger = get_logger(__name__)


class GameManager:
    """
    Entry point for front-ends.
    ---
    Listeners are notified synchronously, in registration order, before the triggering call returns.
    Listeners must not call back into the manager's mutating methods from on_event.
    """

    def __init__(self, session: GameSession) -> None:
        self.session = session
        self._listeners: list[GameEventListener] = []

    @classmethod
    def new(
        cls, size: BoardSize, game_mode: GameMode, rng: Optional[Random] = None
    ) -> Self:
        return cls(GameSession.new(size, game_mode, rng))

    @classmethod
    def new_with_board(
        cls, board: Board, game_mode: GameMode, rng: Optional[Random] = None
    ) -> Self:
        return cls(GameSession.new_with_board(board, game_mode, rng))

    def add_listener(self, listener: GameEventListener) -> None:
        self._listeners.append(listener)

    # -- Front-end operations --
    def start_game(self) -> None:
        logger.info(
            "Game started: %s board, %s", self.session.board.size, self.session.game_mode
        )
        self._notify(GameStarted())
        self._notify(RoundStarted(self.session.round))

    def make_move(self, target: Cell) -> None:
        """Attempt a move for whoever's turn it is. Rejections are reported as an InvalidMove event, never raised."""
        player = self.session.current_player

        try:
            captured = self.session.process_move(target)
        except InvalidMoveError as e:
            logger.info("Rejected move by %s to %s: %s", player.name, target, e)
            self._notify(InvalidMove(player, target, str(e)))
            return

        self._notify(MoveMade(player, target, captured))

        if self.session.is_round_over():
            winner = self.session.get_round_winner()
            logger.info(
                "Round %d ended, winner: %s",
                self.session.round,
                winner.name if winner else "draw",
            )
            self._notify(RoundEnded(winner, self.session.round_totals()))

    def start_next_round(self) -> None:
        self.session.start_next_round()
        self._notify(RoundStarted(self.session.round))

    def end_game(self) -> None:
        """Report the overall result. Session state is left as it is, so this may be called mid-round."""
        winner = self.session.get_overall_winner()
        logger.info("Game ended, overall winner: %s", winner.name if winner else "draw")
        self._notify(GameEnded(winner, self.session.cumulative_totals()))

    # -- Read-only views --
    def valid_moves(self) -> list[Cell]:
        """Where the current player may move the marker"""
        return self.session.board.get_valid_moves(self.session.current_player)

    def snapshot(self) -> GameSnapshot:
        session = self.session
        rows, cols = session.board.dimensions
        return GameSnapshot(
            board_size=session.board.size,
            game_mode=session.game_mode,
            grid=[
                [str(session.board.get_piece(row, col)).strip() for col in range(cols)]
                for row in range(rows)
            ],
            round=session.round,
            current_player=_player_key(session.current_player),
            round_scores={
                _player_key(player): total
                for player, total in session.round_totals().items()
            },
            total_scores={
                _player_key(player): total
                for player, total in session.cumulative_totals().items()
            },
            valid_moves=[(cell.row, cell.col) for cell in self.valid_moves()],
            round_over=session.is_round_over(),
        )

    # -- Internal helpers --
    def _notify(self, event: GameEvent) -> None:
        for listener in self._listeners:
            listener.on_event(event)


def _player_key(player: Player) -> str:
    return player.name.lower()
