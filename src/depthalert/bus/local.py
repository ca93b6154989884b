"""Synchronous in-process message bus."""

import logging
import threading
from collections import defaultdict
from typing import Any, Callable

from depthalert.bus.base import MessageBus

logger = logging.getLogger(__name__)


class LocalBus(MessageBus):
    """Synchronous local pub/sub bus.

    Callbacks run in the publisher's thread, i.e. the thread driving
    ObstacleEngine.process_frame. A failing subscriber is logged and skipped
    so it can never interrupt frame processing.
    """

    def __init__(self) -> None:
        self._subscribers: dict[str, list[Callable]] = defaultdict(list)
        self._lock = threading.Lock()

    def publish(self, topic: str, message: Any) -> None:
        with self._lock:
            callbacks = list(self._subscribers.get(topic, ()))
        for callback in callbacks:
            try:
                callback(message)
            except Exception:
                logger.exception("Error in subscriber for topic %s", topic)

    def subscribe(self, topic: str, callback: Callable[[Any], None]) -> None:
        with self._lock:
            if callback not in self._subscribers[topic]:
                self._subscribers[topic].append(callback)

    def unsubscribe(self, topic: str, callback: Callable[[Any], None]) -> None:
        with self._lock:
            try:
                self._subscribers[topic].remove(callback)
            except ValueError:
                pass
