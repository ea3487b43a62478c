"""Project user motion onto gravity to get a scalar motion intensity."""

import logging
from typing import Optional, Sequence

import numpy as np

from .decomposer import vector_count
from .errors import FormatError
from .filters import LOW_5HZ, BiquadFilter
from .models import Sample

logger = logging.getLogger(__name__)

INTENSITY_GAIN = 3.0


class AccelerationProjector:
    """Dot product of user and gravity vectors, smoothed at 5 Hz."""

    def __init__(self, smoothing_filter: Optional[BiquadFilter] = None):
        self.smoothing_filter = smoothing_filter or BiquadFilter(LOW_5HZ)

    def intensity(self, samples: Sequence[Sample]) -> np.ndarray:
        """Unsmoothed ``|user . gravity| * 3.0`` for every sample."""
        if not samples:
            return np.zeros(0, dtype=np.float64)
        if vector_count(samples) != 2:
            raise FormatError("Projection needs [user, gravity] samples", sample_index=0)

        dot = np.array([s.user.dot(s.gravity) for s in samples], dtype=np.float64)
        return np.abs(dot) * INTENSITY_GAIN

    def smooth(self, intensity: Sequence[float]) -> np.ndarray:
        return self.smoothing_filter.apply(intensity)

    def project(self, samples: Sequence[Sample]) -> np.ndarray:
        """Smoothed motion intensity, one value per sample."""
        filtered = self.smooth(self.intensity(samples))
        logger.debug("Projected %d samples onto gravity", len(filtered))
        return filtered


def project(samples: Sequence[Sample]) -> np.ndarray:
    return AccelerationProjector().project(samples)
