from __future__ import annotations

import math

import numpy as np

DEFAULT_MIN_DECIBELS = -80.0
SILENCE_DB = -160.0

# Fixed series shown in the gallery preview, where no microphone is opened.
OVERVIEW_SAMPLES = [
    0.35948253, 0.30943906, 1.8279682, 1.4172969, 1.0933701, 0.82585114,
    0.65808016, 0.5297032, 0.4252133, 0.35630605, 0.33213347, 0.30106705,
    0.25619543, 0.29941928, 0.29297554, 0.30697352, 0.2800905, 1.272397,
    1.0106244, 0.7855328, 0.62092084, 0.48508847, 0.41100854, 0.4160625,
    0.40260378, 0.36971658, 0.31220895, 0.2956296, 0.8334926, 0.6564857,
]


def normalized_level(average_power: float, min_decibels: float = DEFAULT_MIN_DECIBELS) -> float:
    """
    Map an average power reading (dBFS, <= 0) to a display amplitude in [0, 2].

    Readings below `min_decibels` are silence (0); readings at or above full
    scale are capped at 1. In between, the amplitude is rescaled linearly
    above the floor and square-rooted so quiet input still moves the bars.
    """
    if average_power < min_decibels:
        return 0.0
    if average_power >= 0.0:
        return 1.0

    amp = 10 ** (average_power * 0.05)
    min_amp = 10 ** (min_decibels * 0.05)
    adjusted = (amp - min_amp) / (1.0 - min_amp)
    return math.sqrt(adjusted) * 2


def rms_decibels(block: np.ndarray) -> float:
    """Average power of a float block in dBFS, floored at -160."""
    if block.size == 0:
        return SILENCE_DB
    rms = float(np.sqrt(np.mean(np.square(block, dtype=np.float64))))
    if rms <= 0.0:
        return SILENCE_DB
    return max(20.0 * float(np.log10(rms)), SILENCE_DB)
