"""Step detection on the smoothed motion-intensity signal."""

import logging
from typing import List, Sequence

import numpy as np

from .models import StepDetectionResult, ThresholdModel

logger = logging.getLogger(__name__)

THRESHOLD_FACTOR = 0.3
MIN_PEAK_DISTANCE = 2
DUPLICATE_RATE_TOLERANCE = 1.0
DUPLICATE_WINDOW = 3


def rates_of_change(signal: Sequence[float]) -> np.ndarray:
    """First differences, one shorter than the signal."""
    values = np.asarray(signal, dtype=np.float64)
    if len(values) < 2:
        return np.zeros(0, dtype=np.float64)
    return values[1:] - values[:-1]


def threshold_model(rates: Sequence[float]) -> ThresholdModel:
    """Mean-based threshold. The standard deviation does not affect it."""
    rates = np.asarray(rates, dtype=np.float64)
    if len(rates) == 0:
        return ThresholdModel(mean=0.0, std_dev=0.0, threshold=0.0)

    mean = float(rates.sum() / len(rates))
    std_dev = float(np.sqrt(((rates - mean) ** 2).sum() / len(rates)))
    return ThresholdModel(mean=mean, std_dev=std_dev, threshold=mean * THRESHOLD_FACTOR)


def is_duplicate_peak(index: int, last_peak_index: int, rates: Sequence[float]) -> bool:
    if last_peak_index < 0:
        return False
    return (
        abs(rates[index] - rates[last_peak_index]) < DUPLICATE_RATE_TOLERANCE
        and (index - last_peak_index) < DUPLICATE_WINDOW
    )


class StepDetector:
    """
    Counts footstrikes as descending edges in the rate of change.

    A rate index is a step when the rate around it exceeds the adaptive
    threshold, the rate is falling, and it is far enough from the previous
    step. A final step may be added from the last rate alone.
    """

    def __init__(self, stride: float):
        self.stride = stride

    def detect(self, filtered: Sequence[float]) -> StepDetectionResult:
        rates = rates_of_change(filtered)
        model = threshold_model(rates)
        threshold = model.threshold
        values: List[float] = rates.tolist()

        peaks: List[int] = []
        last_peak_index = -MIN_PEAK_DISTANCE

        for i in range(1, len(values) - 2):
            is_peak = (
                (values[i - 1] > threshold or values[i] > threshold)
                and values[i] > values[i + 1]
                and (i - last_peak_index) > MIN_PEAK_DISTANCE
            )
            if is_peak and not is_duplicate_peak(i, last_peak_index, values):
                peaks.append(i)
                last_peak_index = i

        boundary_step = bool(
            values
            and values[-1] > threshold
            and (len(values) - 1 - last_peak_index) > MIN_PEAK_DISTANCE
        )

        steps = len(peaks) + int(boundary_step)
        logger.debug(
            "Counted %d steps over %d rates (threshold %.3f)",
            steps,
            len(values),
            threshold,
        )
        return StepDetectionResult(
            steps=steps,
            distance=steps * self.stride,
            stride=self.stride,
            threshold=model,
            rates=values,
            peaks=peaks,
            boundary_step=boundary_step,
        )


def detect_steps(filtered: Sequence[float], stride: float) -> StepDetectionResult:
    return StepDetector(stride).detect(filtered)
