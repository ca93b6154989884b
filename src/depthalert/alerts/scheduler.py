"""Announcement scheduler — rate-limits haptic and speech alerts per channel."""

from __future__ import annotations

import logging
import threading

from depthalert.alerts.phrases import critical_message, warning_message
from depthalert.bus.messages import AlertLevel, AnnouncementChannel, Zone
from depthalert.hardware.base import Announcer, Haptics

logger = logging.getLogger(__name__)


class AnnouncementScheduler:
    """Decides which alerts reach the haptic and speech collaborators, and when.

    Each channel keeps its own cooldown, measured from that channel's last
    dispatch. Haptics fire for WARNING and above every `haptic_cooldown`
    seconds; speech fires for WARNING and above every `speech_cooldown`
    seconds, with CRITICAL taking the slot when both would qualify.
    """

    def __init__(
        self,
        announcer: Announcer,
        haptics: Haptics,
        haptic_cooldown: float = 0.5,
        speech_cooldown: float = 3.0,
    ) -> None:
        self._announcer = announcer
        self._haptics = haptics
        self.haptic_cooldown = haptic_cooldown
        self.speech_cooldown = speech_cooldown

        self._last_haptic_time = float("-inf")
        self._last_speech_time = float("-inf")
        self._lock = threading.Lock()

    @property
    def last_haptic_time(self) -> float:
        return self._last_haptic_time

    @property
    def last_speech_time(self) -> float:
        return self._last_speech_time

    def evaluate(
        self, level: AlertLevel, distance: float, zone: Zone, now: float
    ) -> list[AnnouncementChannel]:
        """Dispatch whatever the current alert and cooldowns allow.

        Returns the channels that were dispatched on this call.
        """
        dispatched = []
        with self._lock:
            if self._haptic(level, now):
                dispatched.append(AnnouncementChannel.HAPTIC)
            if self._speech(level, distance, zone, now):
                dispatched.append(AnnouncementChannel.SPEECH)
        return dispatched

    def _haptic(self, level: AlertLevel, now: float) -> bool:
        if level < AlertLevel.WARNING:
            return False
        if now - self._last_haptic_time < self.haptic_cooldown:
            return False
        self._last_haptic_time = now
        pattern = level.haptic_pattern
        logger.debug("Haptic %s (%s)", pattern.value, level.name)
        self._haptics.play(pattern)
        return True

    def _speech(self, level: AlertLevel, distance: float, zone: Zone, now: float) -> bool:
        if level < AlertLevel.WARNING:
            return False
        if now - self._last_speech_time < self.speech_cooldown:
            return False
        self._last_speech_time = now
        if level == AlertLevel.CRITICAL:
            text = critical_message(distance, zone)
            logger.warning("CRITICAL: %s", text)
        else:
            text = warning_message(distance, zone)
            logger.info("Warning: %s", text)
        self._announcer.speak_now(text)
        return True
