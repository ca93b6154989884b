"""Message bus abstract base class."""

from abc import ABC, abstractmethod
from typing import Any, Callable


class MessageBus(ABC):
    """Pub/sub channel the engine uses to hand snapshots to UI/debug observers."""

    @abstractmethod
    def publish(self, topic: str, message: Any) -> None:
        """Deliver a message to every subscriber of `topic`."""

    @abstractmethod
    def subscribe(self, topic: str, callback: Callable[[Any], None]) -> None:
        """Register a callback for `topic`."""

    @abstractmethod
    def unsubscribe(self, topic: str, callback: Callable[[Any], None]) -> None:
        """Remove a previously registered callback."""
