"""Text front-end: renders the game in a terminal and reads moves typed as 'row,col'."""

from random import Random
from typing import Callable, Mapping, Optional

from src.api.models import MoveRequest, NewGameRequest
from src.core.config import get_settings
from src.core.exceptions import InvalidRequestError
from src.core.logging_config import setup_logging
from src.micattix.events import (
    GameEnded,
    GameEvent,
    GameStarted,
    InvalidMove,
    MoveMade,
    RoundEnded,
    RoundStarted,
)
from src.micattix.players import Player
from src.services.game_manager import GameManager

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

QUIT_COMMAND = "quit"


class ConsoleUI:
    def __init__(
        self,
        manager: GameManager,
        input_fn: InputFn = input,
        output_fn: OutputFn = print,
    ) -> None:
        self.manager = manager
        self._input = input_fn
        self._output = output_fn
        manager.add_listener(self)

    def run(self) -> None:
        """Play rounds until the user quits or declines another round."""
        self.manager.start_game()

        while True:
            self._render()
            command = self._ask("Enter move (row,col): ")
            if command is None or command == QUIT_COMMAND:
                self.manager.end_game()
                return

            try:
                request = MoveRequest.from_text(command)
            except InvalidRequestError as e:
                self._output(str(e))
                continue

            target = request.to_cell()
            if not target.is_within_bounds(self.manager.session.board.dimensions):
                self._output("Invalid coordinates!")
                continue

            self.manager.make_move(target)

            if self.manager.session.is_round_over():
                answer = self._ask("Start next round? (y/n): ")
                if answer is not None and answer.lower() == "y":
                    self.manager.start_next_round()
                else:
                    self.manager.end_game()
                    return

    def on_event(self, event: GameEvent) -> None:
        session = self.manager.session
        if isinstance(event, GameStarted):
            self._output("Game started!")
        elif isinstance(event, RoundStarted):
            self._output(f"Round {event.round} started!")
        elif isinstance(event, MoveMade):
            self._output(
                f"{session.get_player_name(event.player)} moved to {event.target} and got {str(event.captured).strip()}"
            )
        elif isinstance(event, InvalidMove):
            self._output(
                f"Invalid move by {session.get_player_name(event.player)}: {event.reason}"
            )
        elif isinstance(event, RoundEnded):
            self._output("Round ended!")
            self._print_scores(event.scores, "score")
            self._print_winner(event.winner, "Winner", "Round ended in a draw")
        elif isinstance(event, GameEnded):
            self._output("Game ended!")
            self._print_scores(event.totals, "total score")
            self._print_winner(
                event.winner, "Overall winner", "Game ended in a draw"
            )

    # -- Internal helpers --
    def _render(self) -> None:
        session = self.manager.session
        self._output(session.board.display())
        self._output(f"Current player: {session.get_player_name(session.current_player)}")
        self._print_scores(session.round_totals(), "score")
        moves = ", ".join(cell.to_text() for cell in self.manager.valid_moves())
        self._output(f"Valid moves: {moves}")

    def _print_scores(self, scores: Mapping[Player, int], label: str) -> None:
        for player, score in scores.items():
            self._output(f"{self.manager.session.get_player_name(player)} {label}: {score}")

    def _print_winner(
        self, winner: Optional[Player], prefix: str, draw_message: str
    ) -> None:
        if winner is None:
            self._output(draw_message)
        else:
            self._output(f"{prefix}: {self.manager.session.get_player_name(winner)}")

    def _ask(self, prompt: str) -> Optional[str]:
        """None when input is exhausted"""
        try:
            return self._input(prompt).strip()
        except EOFError:
            return None


def choose_new_game(input_fn: InputFn = input, output_fn: OutputFn = print) -> NewGameRequest:
    """Ask for board size and player count. Settings, when present, skip the question."""
    settings = get_settings()

    board_size = settings.default_board_size
    if board_size is None:
        output_fn("Select board size (1: 4x4, 2: 6x6)")
        board_size = input_fn("> ")

    game_mode = settings.default_game_mode
    if game_mode is None:
        output_fn("Select game mode (1: 2 Players, 2: 4 Players)")
        game_mode = input_fn("> ")

    return NewGameRequest(board_size=board_size, game_mode=game_mode)


def main() -> None:
    setup_logging()
    print("Welcome to Micattix!")

    request = choose_new_game()
    seed = get_settings().seed
    rng = Random(seed) if seed is not None else None
    manager = GameManager.new(request.board_size, request.game_mode, rng)
    ConsoleUI(manager).run()


if __name__ == "__main__":
    main()
