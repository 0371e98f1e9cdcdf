from __future__ import annotations

import logging
import threading
from typing import Optional

import sounddevice as sd

from audio.level import rms_decibels
from audio.monitor import MeterUnavailableError

logger = logging.getLogger("audio.meter")

SAMPLE_RATE = 44100
NO_READING_DB = -100.0


class SoundDeviceMeter:
    """
    Level meter on the default input device.

    Opens a mono `sounddevice.InputStream` and keeps the average power of the
    most recent block. Nothing is written to disk.
    """

    def __init__(self, samplerate: int = SAMPLE_RATE, device: Optional[int] = None):
        self.samplerate = samplerate
        self.device = device
        self._stream: Optional[sd.InputStream] = None
        self._lock = threading.Lock()
        self._power = NO_READING_DB

    def _callback(self, indata, frames, time_info, status) -> None:
        if status:
            logger.debug("Input stream status: %s", status)
        power = rms_decibels(indata[:, 0])
        with self._lock:
            self._power = power

    def start(self) -> None:
        if self._stream is not None:
            return
        try:
            stream = sd.InputStream(
                samplerate=self.samplerate,
                channels=1,
                dtype="float32",
                device=self.device,
                callback=self._callback,
            )
            stream.start()
        except sd.PortAudioError as e:
            raise MeterUnavailableError(str(e)) from e
        self._stream = stream
        logger.info("Input stream opened (samplerate=%s, device=%s)", self.samplerate, self.device)

    def average_power(self) -> float:
        with self._lock:
            return self._power

    def stop(self) -> None:
        if self._stream is None:
            return
        try:
            self._stream.stop()
            self._stream.close()
        except sd.PortAudioError as e:
            raise MeterUnavailableError(str(e)) from e
        finally:
            self._stream = None
            with self._lock:
                self._power = NO_READING_DB
        logger.info("Input stream closed")
