"""Abstract base classes for the depth source and the feedback collaborators."""

from abc import ABC, abstractmethod

from depthalert.bus.messages import DepthFrame, HapticPattern


class DepthSource(ABC):
    """Abstract depth frame source (sensor session)."""

    @abstractmethod
    def start(self) -> None:
        """Initialize and start the sensor."""

    @abstractmethod
    def read(self) -> DepthFrame:
        """Read a single frame (blocks until available)."""

    @abstractmethod
    def stop(self) -> None:
        """Stop and release sensor resources."""

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, *exc):
        self.stop()


class Announcer(ABC):
    """Speech output."""

    @abstractmethod
    def speak_now(self, text: str) -> None:
        """Interrupt any utterance in progress and speak `text` immediately."""

    def stop(self) -> None:
        """Release speech resources."""


class Haptics(ABC):
    """Vibration output. Requests are fire-and-forget."""

    @abstractmethod
    def play(self, pattern: HapticPattern) -> None:
        """Play a haptic pattern."""

    def stop(self) -> None:
        """Release haptic resources."""
