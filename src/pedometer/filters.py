"""Second-order IIR (biquad) filtering with fixed coefficient tables."""

import logging
from typing import Sequence, Tuple

import numpy as np
from pydantic import BaseModel, ConfigDict, field_validator

logger = logging.getLogger(__name__)


class FilterCoefficients(BaseModel):
    """Feedback (alpha) and feed-forward (beta) weights of one biquad design."""

    model_config = ConfigDict(frozen=True)

    name: str
    alpha: Tuple[float, float, float]
    beta: Tuple[float, float, float]

    @field_validator("alpha")
    @classmethod
    def validate_alpha(cls, v: Tuple[float, float, float]) -> Tuple[float, float, float]:
        if v[0] != 1:
            raise ValueError("alpha[0] must be 1")
        return v


# Designs assume the fixed sampling rate of the recording device
LOW_0HZ = FilterCoefficients(
    name="low_0_hz",
    alpha=(1, -1.979133761292768, 0.979521463540373),
    beta=(0.000086384997973502, 0.000172769995947004, 0.000086384997973502),
)

LOW_5HZ = FilterCoefficients(
    name="low_5_hz",
    alpha=(1, -1.80898117793047, 0.827224480562408),
    beta=(0.095465967120306, -0.172688631608676, 0.095465967120306),
)

HIGH_1HZ = FilterCoefficients(
    name="high_1_hz",
    alpha=(1, -1.905384612118461, 0.910092542787947),
    beta=(0.953986986993339, -1.907503180919730, 0.953986986993339),
)


def biquad(signal: Sequence[float], coefficients: FilterCoefficients) -> np.ndarray:
    """
    Run the biquad recursion over a whole signal.

    The first two outputs are seeded with zero, so ``len(output) == len(signal)``
    and ``output[:2]`` is always ``[0, 0]`` (or shorter for tiny inputs).

    Args:
        signal: Input samples
        coefficients: Filter design to apply

    Returns:
        New float64 array, the input is left untouched
    """
    x = np.asarray(signal, dtype=np.float64)
    n = len(x)
    y = np.zeros(n, dtype=np.float64)

    a0, a1, a2 = (float(c) for c in coefficients.alpha)
    b0, b1, b2 = (float(c) for c in coefficients.beta)

    # alpha[0] scales the sum, it is not a normalising divisor
    for i in range(2, n):
        y[i] = a0 * (
            b0 * x[i]
            + b1 * x[i - 1]
            + b2 * x[i - 2]
            - a1 * y[i - 1]
            - a2 * y[i - 2]
        )

    logger.debug("Applied %s filter to %d samples", coefficients.name, n)
    return y


class BiquadFilter:
    """Callable wrapper binding a coefficient table to the biquad recursion."""

    def __init__(self, coefficients: FilterCoefficients):
        self.coefficients = coefficients

    def apply(self, signal: Sequence[float]) -> np.ndarray:
        return biquad(signal, self.coefficients)

    __call__ = apply

    def __repr__(self) -> str:
        return f"BiquadFilter({self.coefficients.name})"


def low_0_hz(signal: Sequence[float]) -> np.ndarray:
    """Near-DC low-pass used to estimate gravity."""
    return biquad(signal, LOW_0HZ)


def low_5_hz(signal: Sequence[float]) -> np.ndarray:
    """5 Hz low-pass used to smooth motion intensity."""
    return biquad(signal, LOW_5HZ)


def high_1_hz(signal: Sequence[float]) -> np.ndarray:
    """1 Hz high-pass. Available, not used by the pipeline."""
    return biquad(signal, HIGH_1HZ)
