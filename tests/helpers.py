"""Test doubles shared by several test modules"""

from src.micattix.events import GameEvent


class EventRecorder:
    """Listener that simply keeps everything it is told"""

    def __init__(self) -> None:
        self.events: list[GameEvent] = []

    def on_event(self, event: GameEvent) -> None:
        self.events.append(event)
