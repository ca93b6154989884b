"""Haptic patterns sent over HTTP to a wearable vibration controller."""

import logging
import queue
import threading

import requests
from omegaconf import DictConfig

from depthalert.bus.messages import HapticPattern
from depthalert.hardware.base import Haptics

logger = logging.getLogger(__name__)


class HttpHaptics(Haptics):
    """Sends `GET <base_url><pattern>?intensity=<0..1>` to the controller.

    Requests go out on a worker thread. While one is still pending, new
    patterns are dropped; the next frame asks again.
    """

    def __init__(self, cfg: DictConfig) -> None:
        self._base_url = cfg.get("url", "http://192.168.1.125/")
        self._timeout = cfg.get("timeout", 0.5)
        self._intensity = max(0.0, min(1.0, cfg.get("intensity", 1.0)))
        self._session = requests.Session()
        self._queue: queue.Queue[HapticPattern] = queue.Queue(maxsize=1)
        self._running = True
        self._thread = threading.Thread(target=self._run, name="haptics", daemon=True)
        self._thread.start()
        logger.info("HttpHaptics sending to %s", self._base_url)

    def play(self, pattern: HapticPattern) -> None:
        try:
            self._queue.put_nowait(pattern)
        except queue.Full:
            logger.debug("Haptic request pending, dropping %s", pattern.value)

    def _run(self) -> None:
        while self._running:
            try:
                pattern = self._queue.get(timeout=0.5)
            except queue.Empty:
                continue
            self._send(pattern)

    def _send(self, pattern: HapticPattern) -> None:
        url = self._base_url + pattern.value
        try:
            response = self._session.get(
                url, params={"intensity": f"{self._intensity:.2f}"}, timeout=self._timeout
            )
            response.raise_for_status()
            logger.debug("Sent haptic %s: %s", pattern.value, response.status_code)
        except requests.RequestException as e:
            logger.warning("Haptic request %s failed: %s", url, e)

    def stop(self) -> None:
        self._running = False
        self._thread.join(timeout=1.0)
        self._session.close()
        logger.info("HttpHaptics stopped")
