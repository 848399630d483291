"""Players, the axis each of them moves the marker along, and the turn order per game mode"""

from enum import Enum, auto

from src.core.shared_types import GameMode


class Axis(Enum):
    HORIZONTAL = auto()  # along the marker's row
    VERTICAL = auto()  # along the marker's column


class Player(Enum):
    """Enumeration order is the turn order"""

    FIRST = auto()
    SECOND = auto()
    THIRD = auto()
    FOURTH = auto()

    @property
    def axis(self) -> Axis:
        return PLAYER_AXIS[self]

    @property
    def number(self) -> int:
        """1-based seat number, as shown to humans"""
        return list(Player).index(self) + 1


PLAYER_AXIS: dict[Player, Axis] = {
    Player.FIRST: Axis.HORIZONTAL,
    Player.SECOND: Axis.VERTICAL,
    Player.THIRD: Axis.HORIZONTAL,
    Player.FOURTH: Axis.VERTICAL,
}

ACTIVE_PLAYERS: dict[GameMode, tuple[Player, ...]] = {
    GameMode.TWO_PLAYERS: (Player.FIRST, Player.SECOND),
    GameMode.FOUR_PLAYERS: (Player.FIRST, Player.SECOND, Player.THIRD, Player.FOURTH),
}


def players_for_mode(mode: GameMode) -> list[Player]:
    return list(ACTIVE_PLAYERS[mode])


def next_player(current: Player, active_players: list[Player]) -> Player:
    """
    Whose turn is it after `current`?
    ---
    Cycles through the active players in order. With two players this is a plain swap.
    """
    index = active_players.index(current)
    return active_players[(index + 1) % len(active_players)]
