"""
Unit tests for microphone level mapping and the polling monitor.
"""

import math
import threading
import time

import numpy as np
import pytest

from audio.level import OVERVIEW_SAMPLES, normalized_level, rms_decibels
from audio.monitor import MeterUnavailableError, MicrophoneMonitor
from views import bars


class FakeMeter:
    """Scripted meter: returns the queued powers in order, then repeats the last one."""

    def __init__(self, powers=(-20.0,)):
        self.powers = list(powers)
        self.started = False
        self.stopped = False
        self.stop_calls = 0

    def start(self):
        self.started = True

    def average_power(self):
        if len(self.powers) > 1:
            return self.powers.pop(0)
        return self.powers[0]

    def stop(self):
        self.stopped = True
        self.stop_calls += 1


class BrokenMeter(FakeMeter):
    def start(self):
        raise MeterUnavailableError("no input device")


class FailingMeter(FakeMeter):
    """Opens fine, then every read fails."""

    def average_power(self):
        raise RuntimeError("input overflow")


class FlakyMeter(FakeMeter):
    """Fails to open once, then opens normally."""

    def __init__(self):
        super().__init__()
        self.attempts = 0

    def start(self):
        self.attempts += 1
        if self.attempts == 1:
            raise MeterUnavailableError("device busy")
        super().start()


def _wait_until_stopped(monitor, timeout=2.0):
    deadline = time.monotonic() + timeout
    while monitor.is_running and time.monotonic() < deadline:
        time.sleep(0.01)
    return not monitor.is_running


class TestNormalizedLevel:
    """Decibel to display amplitude mapping."""

    def test_below_floor_is_silence(self):
        assert normalized_level(-100.0) == 0.0

    def test_at_floor_is_zero(self):
        assert normalized_level(-80.0) == pytest.approx(0.0)

    def test_full_scale_caps_at_one(self):
        assert normalized_level(0.0) == 1.0
        assert normalized_level(3.0) == 1.0

    def test_mid_range(self):
        min_amp = 10 ** (-80 * 0.05)
        expected = math.sqrt((0.1 - min_amp) / (1 - min_amp)) * 2
        assert normalized_level(-20.0) == pytest.approx(expected)

    def test_monotonic_between_floor_and_zero(self):
        levels = [normalized_level(p) for p in range(-79, 0)]
        assert levels == sorted(levels)

    def test_custom_floor(self):
        assert normalized_level(-70.0, min_decibels=-60.0) == 0.0

    def test_overview_samples(self):
        assert len(OVERVIEW_SAMPLES) == 30
        assert max(OVERVIEW_SAMPLES) <= 2.0


class TestRmsDecibels:
    """Block power in dBFS."""

    def test_full_scale(self):
        assert rms_decibels(np.ones(256, dtype=np.float32)) == pytest.approx(0.0)

    def test_tenth_scale(self):
        assert rms_decibels(np.full(256, 0.1, dtype=np.float32)) == pytest.approx(-20.0, abs=1e-4)

    def test_silence_and_empty(self):
        assert rms_decibels(np.zeros(256, dtype=np.float32)) == -160.0
        assert rms_decibels(np.array([], dtype=np.float32)) == -160.0


class TestMicrophoneMonitor:
    """Polling, rolling window and lifecycle."""

    def test_window_starts_with_zeros(self):
        monitor = MicrophoneMonitor(meter=FakeMeter(), window=5)
        assert monitor.samples() == [0.0] * 5
        assert monitor.sample == 0.0

    def test_poll_publishes_and_appends(self):
        updates = []
        monitor = MicrophoneMonitor(meter=FakeMeter([0.0]), window=3, on_update=updates.append)
        level = monitor.poll()
        assert level == 1.0
        assert monitor.sample == 1.0
        assert monitor.samples() == [0.0, 0.0, 1.0]
        assert updates == [1.0]

    def test_window_drops_oldest(self):
        monitor = MicrophoneMonitor(meter=FakeMeter([0.0, -100.0, 0.0, 0.0]), window=3)
        for _ in range(4):
            monitor.poll()
        assert monitor.samples() == [0.0, 1.0, 1.0]
        assert len(monitor.samples()) == 3

    def test_poll_without_meter(self):
        monitor = MicrophoneMonitor(meter_factory=BrokenMeter)
        with pytest.raises(MeterUnavailableError):
            monitor.poll()

    def test_start_with_unavailable_device_stays_stopped(self):
        monitor = MicrophoneMonitor(meter_factory=BrokenMeter)
        assert monitor.start() is False
        assert monitor.is_running is False

    def test_start_polls_on_thread_and_stop_releases_meter(self):
        meter = FakeMeter([-20.0])
        ticked = threading.Event()
        monitor = MicrophoneMonitor(meter=meter, interval=0.01, window=4, on_update=lambda _: ticked.set())

        assert monitor.start() is True
        assert meter.started
        assert monitor.is_running
        assert ticked.wait(timeout=2.0)

        monitor.stop_monitoring()
        assert monitor.is_running is False
        assert meter.stopped
        assert monitor.samples()[-1] == pytest.approx(normalized_level(-20.0))

    def test_toggle(self):
        monitor = MicrophoneMonitor(meter=FakeMeter(), interval=0.01)
        assert monitor.toggle() is True
        assert monitor.toggle() is False

    @pytest.mark.parametrize("kwargs", [{"interval": 0}, {"interval": -1}, {"window": 0}])
    def test_invalid_settings(self, kwargs):
        with pytest.raises(ValueError):
            MicrophoneMonitor(meter=FakeMeter(), **kwargs)

    def test_polling_error_releases_meter(self):
        meter = FailingMeter()
        monitor = MicrophoneMonitor(meter=meter, interval=0.01)

        assert monitor.start() is True
        assert _wait_until_stopped(monitor)
        assert meter.stop_calls == 1

        # Stopping afterwards does not close the meter a second time.
        monitor.stop_monitoring()
        assert meter.stop_calls == 1

    def test_stop_when_never_started_leaves_meter_alone(self):
        meter = FakeMeter()
        monitor = MicrophoneMonitor(meter=meter)
        monitor.stop_monitoring()
        assert meter.stop_calls == 0

    def test_failed_start_keeps_supplied_meter(self):
        meter = FlakyMeter()
        factory_calls = []

        def factory():
            factory_calls.append(1)
            return FakeMeter()

        monitor = MicrophoneMonitor(meter=meter, interval=0.01, meter_factory=factory)
        assert monitor.start() is False
        assert monitor.start() is True
        assert meter.attempts == 2
        assert factory_calls == []
        monitor.stop_monitoring()
        assert meter.stop_calls == 1

    def test_failed_start_drops_factory_meter(self):
        created = []

        def factory():
            meter = FlakyMeter() if not created else FakeMeter()
            created.append(meter)
            return meter

        monitor = MicrophoneMonitor(interval=0.01, meter_factory=factory)
        assert monitor.start() is False
        assert monitor.start() is True
        assert len(created) == 2
        monitor.stop_monitoring()
        assert created[1].stopped


class TestStopMicrophone:
    """Leaving the Sound Bars page closes the input device."""

    def test_releases_meter_after_polling_error(self, monkeypatch):
        meter = FailingMeter()
        monitor = MicrophoneMonitor(meter=meter, interval=0.01)
        monkeypatch.setattr(bars.st, "session_state", {bars.MONITOR_KEY: monitor})

        monitor.start()
        assert _wait_until_stopped(monitor)
        bars.stop_microphone()

        assert monitor.is_running is False
        assert meter.stop_calls == 1

    def test_stops_running_monitor(self, monkeypatch):
        meter = FakeMeter()
        monitor = MicrophoneMonitor(meter=meter, interval=0.01)
        monkeypatch.setattr(bars.st, "session_state", {bars.MONITOR_KEY: monitor})

        monitor.start()
        bars.stop_microphone()

        assert monitor.is_running is False
        assert meter.stop_calls == 1

    def test_no_monitor_is_a_no_op(self, monkeypatch):
        monkeypatch.setattr(bars.st, "session_state", {})
        bars.stop_microphone()
