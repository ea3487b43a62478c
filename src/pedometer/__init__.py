"""
Pedometer - step counting and distance estimation from accelerometer data
"""

__version__ = "0.1.0"

from pedometer.decomposer import MotionDecomposer
from pedometer.detector import StepDetector
from pedometer.errors import FormatError, PedometerError, ValidationError
from pedometer.filters import HIGH_1HZ, LOW_0HZ, LOW_5HZ, BiquadFilter, FilterCoefficients
from pedometer.models import Sample, StepDetectionResult, ThresholdModel, Trial, TriaxialVector
from pedometer.parser import parse
from pedometer.pipeline import Pipeline
from pedometer.projector import AccelerationProjector
from pedometer.user import Gender, UserProfile, resolve_stride

__all__ = [
    "AccelerationProjector",
    "BiquadFilter",
    "FilterCoefficients",
    "FormatError",
    "Gender",
    "HIGH_1HZ",
    "LOW_0HZ",
    "LOW_5HZ",
    "MotionDecomposer",
    "PedometerError",
    "Pipeline",
    "Sample",
    "StepDetectionResult",
    "StepDetector",
    "ThresholdModel",
    "Trial",
    "TriaxialVector",
    "UserProfile",
    "ValidationError",
    "parse",
    "resolve_stride",
]
