"""Global test configuration and fixtures."""

import numpy as np
import pytest

from pedometer.models import Sample
from pedometer.user import UserProfile

GRAVITY = 1.0


def walking_samples(cycles: int = 10, period: int = 50, amplitude: float = 0.3) -> list:
    """Total acceleration bouncing along the gravity axis."""
    t = np.arange(cycles * period)
    z = GRAVITY + amplitude * np.sin(2 * np.pi * t / period)
    return [Sample.of((0.02, -0.01, float(v))) for v in z]


@pytest.fixture()
def walk():
    """Ten gait cycles at two cycles per second."""
    return walking_samples()


@pytest.fixture()
def walk_raw(walk):
    """The same walk in wire format."""
    return ";".join(",".join(repr(c) for c in s.total.as_tuple()) for s in walk)


@pytest.fixture()
def male_user():
    return UserProfile(gender="male", height=180)


@pytest.fixture()
def impulse_samples():
    """Three decomposed samples with a single late spike of intensity 3.0."""
    return [
        Sample.of((0.0, 0.0, 0.0), (0.0, 0.0, 1.0)),
        Sample.of((0.0, 0.0, 0.0), (0.0, 0.0, 1.0)),
        Sample.of((0.5, 0.0, 0.0), (2.0, 0.0, 0.0)),
    ]
