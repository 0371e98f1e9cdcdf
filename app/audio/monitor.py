from __future__ import annotations

import logging
import threading
from collections import deque
from typing import Callable, Optional, Protocol

from audio.level import DEFAULT_MIN_DECIBELS, normalized_level

logger = logging.getLogger("audio.monitor")


class MeterUnavailableError(RuntimeError):
    """Raised when the input device cannot be opened (missing device, no permission)."""


class LevelMeter(Protocol):
    def start(self) -> None: ...

    def average_power(self) -> float: ...

    def stop(self) -> None: ...


def default_meter() -> LevelMeter:
    # Deferred: importing sounddevice fails outright on hosts without PortAudio.
    try:
        from audio.meter import SoundDeviceMeter
    except OSError as e:
        raise MeterUnavailableError(str(e)) from e
    return SoundDeviceMeter()


class MicrophoneMonitor:
    """
    Polls a level meter on a fixed period and keeps the last `window` levels.

    The window starts filled with zeros so the bar chart always has `window`
    bars. Levels are normalized to [0, 2] (see `normalized_level`).
    """

    def __init__(
        self,
        meter: Optional[LevelMeter] = None,
        interval: float = 0.1,
        window: int = 30,
        on_update: Optional[Callable[[float], None]] = None,
        min_decibels: float = DEFAULT_MIN_DECIBELS,
        meter_factory: Callable[[], LevelMeter] = default_meter,
    ):
        if interval <= 0:
            raise ValueError("interval must be positive")
        if window < 1:
            raise ValueError("window must be at least 1")

        self.interval = interval
        self.window = window
        self.on_update = on_update
        self.min_decibels = min_decibels
        self._meter = meter
        self._meter_factory = meter_factory
        self._meter_open = False

        self._lock = threading.Lock()
        self._samples: deque[float] = deque([0.0] * window, maxlen=window)
        self._sample = 0.0
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    @property
    def sample(self) -> float:
        with self._lock:
            return self._sample

    def samples(self) -> list[float]:
        with self._lock:
            return list(self._samples)

    def poll(self) -> float:
        """One tick: read the meter, publish the level, push it into the window."""
        if self._meter is None:
            raise MeterUnavailableError("No meter attached; call start() first")
        level = normalized_level(self._meter.average_power(), self.min_decibels)
        with self._lock:
            self._sample = level
            self._samples.append(level)
        if self.on_update is not None:
            self.on_update(level)
        return level

    def start(self) -> bool:
        """Open the meter and start polling. Returns False if the device is unavailable."""
        if self.is_running:
            return True

        created = self._meter is None
        try:
            if created:
                self._meter = self._meter_factory()
            self._meter.start()
        except (MeterUnavailableError, OSError) as e:
            logger.warning("Microphone unavailable: %s", e)
            # A caller-supplied meter is kept for the next attempt.
            if created:
                self._meter = None
            return False

        self._meter_open = True
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, name="microphone-monitor", daemon=True)
        self._thread.start()
        logger.info("Monitoring started (interval=%ss, window=%s)", self.interval, self.window)
        return True

    resume_monitoring = start

    def _run(self) -> None:
        while not self._stop.wait(self.interval):
            try:
                self.poll()
            except Exception:
                logger.exception("Polling failed; stopping monitor")
                self._stop.set()
                self._release_meter()

    def stop_monitoring(self) -> None:
        """Stop polling and close the meter. Safe to call when already stopped."""
        self._stop.set()
        thread, self._thread = self._thread, None
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout=max(self.interval * 5, 1.0))
        if self._release_meter() or thread is not None:
            logger.info("Monitoring stopped")

    def _release_meter(self) -> bool:
        with self._lock:
            was_open, self._meter_open = self._meter_open, False
        if not was_open or self._meter is None:
            return False
        try:
            self._meter.stop()
        except (MeterUnavailableError, OSError) as e:
            logger.warning("Failed to release microphone: %s", e)
        return True

    def toggle(self) -> bool:
        if self.is_running:
            self.stop_monitoring()
        else:
            self.start()
        return self.is_running
