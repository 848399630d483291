"""
Events published by the GameManager, and the contract listeners (presentation layers) implement.

Events are immutable values: produced once per state change, handed to every listener, not kept by the engine.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Protocol

from src.micattix.cell import Cell
from src.micattix.pieces import Piece
from src.micattix.players import Player


@dataclass(frozen=True)
class GameEvent:
    """Common base, so listeners can type their callback against a single class"""


@dataclass(frozen=True)
class GameStarted(GameEvent):
    pass


@dataclass(frozen=True)
class RoundStarted(GameEvent):
    round: int


@dataclass(frozen=True)
class MoveMade(GameEvent):
    player: Player
    target: Cell
    captured: Piece


@dataclass(frozen=True)
class InvalidMove(GameEvent):
    player: Player
    target: Cell
    reason: str


@dataclass(frozen=True)
class RoundEnded(GameEvent):
    winner: Optional[Player]  # None: draw
    scores: Mapping[Player, int] = field(hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "scores", MappingProxyType(dict(self.scores)))


@dataclass(frozen=True)
class GameEnded(GameEvent):
    winner: Optional[Player]  # None: draw
    totals: Mapping[Player, int] = field(hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "totals", MappingProxyType(dict(self.totals)))


class GameEventListener(Protocol):
    """Anything that wants to be told about state changes"""

    def on_event(self, event: GameEvent) -> None: ...
