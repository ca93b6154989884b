"""Offline speech output through pyttsx3."""

import logging
import queue
import threading

from omegaconf import DictConfig

from depthalert.hardware.base import Announcer

logger = logging.getLogger(__name__)


class Pyttsx3Announcer(Announcer):
    """Speaks on a background worker thread so process_frame never blocks on audio.

    speak_now drops anything still queued and interrupts the current utterance
    before queueing the new text. pyttsx3 engines are not thread-safe, so the
    interrupt is only a flag here; the worker stops its own engine from the
    started-word callback.
    """

    def __init__(self, cfg: DictConfig) -> None:
        self._rate = cfg.get("rate", None)
        self._volume = cfg.get("volume", 1.0)
        self._queue: queue.Queue[str] = queue.Queue()
        self._interrupt = threading.Event()
        self._engine = None
        self._running = True
        self._thread = threading.Thread(target=self._run, name="tts", daemon=True)
        self._thread.start()

    def speak_now(self, text: str) -> None:
        cleared = 0
        while True:
            try:
                self._queue.get_nowait()
            except queue.Empty:
                break
            self._queue.task_done()
            cleared += 1
        if cleared:
            logger.debug("Dropped %d queued utterances", cleared)

        self._interrupt.set()
        self._queue.put(text)

    def _on_word(self, name, location, length) -> None:
        # Runs on the worker thread, inside runAndWait()
        if self._interrupt.is_set():
            self._engine.stop()

    def _init_engine(self) -> None:
        try:
            import pyttsx3

            self._engine = pyttsx3.init()
            self._engine.setProperty("volume", self._volume)
            if self._rate is not None:
                self._engine.setProperty("rate", self._rate)
            self._engine.connect("started-word", self._on_word)
            logger.info("pyttsx3 speech ready (rate=%s)", self._engine.getProperty("rate"))
        except Exception:
            logger.exception("Failed to initialize pyttsx3")
            self._engine = None

    def _run(self) -> None:
        self._init_engine()

        while self._running:
            try:
                text = self._queue.get(timeout=0.5)
            except queue.Empty:
                continue
            self._interrupt.clear()
            try:
                if self._engine is None:
                    logger.warning("No speech engine, dropping: %s", text)
                    continue
                self._engine.say(text)
                self._engine.runAndWait()
            except Exception:
                logger.exception("Failed to speak: %s", text)
            finally:
                self._queue.task_done()

    def stop(self) -> None:
        self._running = False
        self._thread.join(timeout=1.0)
        logger.info("Pyttsx3Announcer stopped")
