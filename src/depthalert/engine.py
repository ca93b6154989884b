"""Obstacle engine — per-frame analysis, classification and alert dispatch."""

from __future__ import annotations

import logging
import threading
import time
from typing import Callable

from omegaconf import DictConfig

from depthalert.alerts.classifier import AlertClassifier
from depthalert.alerts.phrases import describe_surroundings
from depthalert.alerts.scheduler import AnnouncementScheduler
from depthalert.bus.base import MessageBus
from depthalert.bus.messages import (
    AlertLevel, DepthFrame, FloorChangeEvent, HapticPattern, ObstacleSummary,
    TOPIC_ALERT_DISPATCH, TOPIC_FLOOR_CHANGE, TOPIC_OBSTACLE_SUMMARY,
)
from depthalert.errors import FrameShapeError
from depthalert.hardware.base import Announcer, Haptics
from depthalert.perception.floor_detector import FloorChangeDetector
from depthalert.perception.zone_analyzer import ZoneAnalyzer

logger = logging.getLogger(__name__)


class ObstacleEngine:
    """Orchestrates zone analysis, floor detection, classification and announcements.

    process_frame must be called from one thread at a time; it is serialized
    internally anyway so the cooldowns can never double-dispatch. Other threads
    read the latest immutable snapshot through latest_summary() and
    latest_floor_event().
    """

    def __init__(
        self,
        announcer: Announcer,
        haptics: Haptics,
        analyzer: ZoneAnalyzer | None = None,
        floor_detector: FloorChangeDetector | None = None,
        classifier: AlertClassifier | None = None,
        haptic_cooldown: float = 0.5,
        speech_cooldown: float = 3.0,
        bus: MessageBus | None = None,
        clock: Callable[[], float] = time.monotonic,
        announce_state_changes: bool = True,
    ) -> None:
        self._announcer = announcer
        self._haptics = haptics
        self._classifier = classifier or AlertClassifier()
        self._analyzer = analyzer or ZoneAnalyzer(caution_distance=self._classifier.caution_distance)
        self._floor_detector = floor_detector or FloorChangeDetector()
        self._scheduler = AnnouncementScheduler(
            announcer, haptics,
            haptic_cooldown=haptic_cooldown,
            speech_cooldown=speech_cooldown,
        )
        self._bus = bus
        self._clock = clock
        self._announce_state_changes = announce_state_changes

        self._process_lock = threading.Lock()
        self._state_lock = threading.Lock()
        self._paused = False
        self._latest_summary = ObstacleSummary.empty()
        self._latest_floor_event: FloorChangeEvent | None = None
        self._latest_level = AlertLevel.SAFE

    @property
    def scheduler(self) -> AnnouncementScheduler:
        return self._scheduler

    @property
    def classifier(self) -> AlertClassifier:
        return self._classifier

    @property
    def is_paused(self) -> bool:
        with self._state_lock:
            return self._paused

    def process_frame(
        self, frame: DepthFrame, now: float | None = None
    ) -> tuple[ObstacleSummary, FloorChangeEvent | None] | None:
        """Analyze one frame and dispatch whatever alerts the cooldowns allow.

        Returns (summary, floor_event), or None while paused.
        Raises FrameShapeError for malformed frames; the previous summary is kept.
        """
        with self._process_lock:
            if self.is_paused:
                return None
            if now is None:
                now = self._clock()

            try:
                summary = self._analyzer.analyze(frame)
                floor_event = self._floor_detector.detect(frame)
            except FrameShapeError as e:
                logger.warning("Rejected frame %d: %s", frame.frame_id, e)
                raise

            level = self._classifier.classify(summary.nearest_distance)

            # pause() may land while the frame is being analyzed. The paused
            # check and the dispatch share the state lock so nothing is
            # announced once pause() has returned.
            with self._state_lock:
                if self._paused:
                    logger.debug("Discarded frame %d, paused during analysis", frame.frame_id)
                    return None
                previous = self._latest_level
                self._latest_summary = summary
                self._latest_floor_event = floor_event
                self._latest_level = level
                dispatched = self._scheduler.evaluate(
                    level, summary.nearest_distance, summary.nearest_zone, now
                )

            if level != previous:
                logger.info("Alert level: %s -> %s (nearest=%.2fm %s)",
                            previous.name, level.name, summary.nearest_distance,
                            summary.nearest_zone.value)
            if floor_event is not None:
                logger.info("%s (confidence=%.2f)", floor_event.description, floor_event.confidence)

            if self._bus is not None:
                self._bus.publish(TOPIC_OBSTACLE_SUMMARY, summary)
                if floor_event is not None:
                    self._bus.publish(TOPIC_FLOOR_CHANGE, floor_event)
                if dispatched:
                    self._bus.publish(TOPIC_ALERT_DISPATCH, dispatched)

            return summary, floor_event

    def latest_summary(self) -> ObstacleSummary:
        with self._state_lock:
            return self._latest_summary

    def latest_floor_event(self) -> FloorChangeEvent | None:
        with self._state_lock:
            return self._latest_floor_event

    def latest_alert_level(self) -> AlertLevel:
        with self._state_lock:
            return self._latest_level

    def pause(self) -> None:
        """Stop analyzing and announcing until resume() is called."""
        with self._state_lock:
            if self._paused:
                return
            self._paused = True
        logger.info("Obstacle engine paused")
        if self._announce_state_changes:
            self._announcer.speak_now("Scanning paused")
            self._haptics.play(HapticPattern.TAP)

    def resume(self) -> None:
        with self._state_lock:
            if not self._paused:
                return
            self._paused = False
        logger.info("Obstacle engine resumed")
        if self._announce_state_changes:
            self._announcer.speak_now("Scanning resumed")
            self._haptics.play(HapticPattern.TAP)

    def announce_surroundings(self) -> str:
        """Speak a description of every zone from the latest summary."""
        text = describe_surroundings(self.latest_summary(), self._classifier.caution_distance)
        self._announcer.speak_now(text)
        self._haptics.play(HapticPattern.SUCCESS)
        return text


def create_engine(
    cfg: DictConfig,
    announcer: Announcer,
    haptics: Haptics,
    bus: MessageBus | None = None,
    clock: Callable[[], float] = time.monotonic,
) -> ObstacleEngine:
    """Build an ObstacleEngine from the `engine` section of the config."""
    ecfg = cfg.get("engine", {})
    thresholds = ecfg.get("thresholds", {})
    cooldowns = ecfg.get("cooldowns", {})
    acfg = ecfg.get("analyzer", {})
    fcfg = ecfg.get("floor", {})

    classifier = AlertClassifier(
        critical_distance=thresholds.get("critical", 0.5),
        warning_distance=thresholds.get("warning", 1.0),
        caution_distance=thresholds.get("caution", 2.0),
    )
    analyzer = ZoneAnalyzer(
        stride=acfg.get("stride", 4),
        min_valid_depth=acfg.get("min_valid_depth", 0.0),
        max_valid_depth=acfg.get("max_valid_depth", 10.0),
        caution_distance=classifier.caution_distance,
    )
    floor_detector = FloorChangeDetector(
        column_stride=fcfg.get("column_stride", 4),
        row_stride=fcfg.get("row_stride", 2),
        min_valid_depth=fcfg.get("min_valid_depth", 0.1),
        max_valid_depth=fcfg.get("max_valid_depth", 5.0),
        min_samples=fcfg.get("min_samples", 11),
        step_threshold=fcfg.get("step_threshold", 0.15),
        estimated_height=fcfg.get("estimated_height", 0.15),
    )
    return ObstacleEngine(
        announcer,
        haptics,
        analyzer=analyzer,
        floor_detector=floor_detector,
        classifier=classifier,
        haptic_cooldown=cooldowns.get("haptic", 0.5),
        speech_cooldown=cooldowns.get("speech", 3.0),
        bus=bus,
        clock=clock,
        announce_state_changes=ecfg.get("announce_state_changes", True),
    )
