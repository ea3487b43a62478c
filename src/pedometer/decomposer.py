"""Split total acceleration into gravity and user motion."""

import logging
from typing import List, Optional, Sequence

import numpy as np

from .errors import FormatError
from .filters import LOW_0HZ, BiquadFilter
from .models import Sample, TriaxialVector

logger = logging.getLogger(__name__)


def vector_count(samples: Sequence[Sample]) -> int:
    """
    Shared number of vectors per sample.

    Raises:
        FormatError: If the count is not 1 or 2, or differs between samples
    """
    expected = len(samples[0])
    if expected not in (1, 2):
        raise FormatError(
            f"Unsupported sample with {expected} vectors, expected 1 or 2",
            sample_index=0,
        )
    for index, sample in enumerate(samples):
        if len(sample) != expected:
            raise FormatError(
                f"Inconsistent sample with {len(sample)} vectors, expected {expected}",
                sample_index=index,
            )
    return expected


class MotionDecomposer:
    """Estimates gravity per axis with a near-DC low-pass filter."""

    def __init__(self, gravity_filter: Optional[BiquadFilter] = None):
        self.gravity_filter = gravity_filter or BiquadFilter(LOW_0HZ)

    def decompose(self, samples: Sequence[Sample]) -> List[Sample]:
        """
        Return ``[user, gravity]`` samples.

        Already decomposed input is passed through unchanged. Each axis is
        filtered across the whole time series since the filter carries state
        from one sample to the next.
        """
        if not samples:
            return []

        if vector_count(samples) == 2:
            return list(samples)

        total = np.array([s.total.as_tuple() for s in samples], dtype=np.float64)
        gravity = np.column_stack(
            [self.gravity_filter.apply(total[:, axis]) for axis in range(3)]
        )
        user = total - gravity

        logger.debug("Decomposed %d samples into user and gravity", len(samples))
        return [
            Sample(vectors=(TriaxialVector.of(u), TriaxialVector.of(g)))
            for u, g in zip(user.tolist(), gravity.tolist())
        ]


def decompose(samples: Sequence[Sample]) -> List[Sample]:
    return MotionDecomposer().decompose(samples)
