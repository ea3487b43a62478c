"""Orchestrates parsing, decomposition, projection and step detection."""

import logging
from typing import List, Optional, Sequence

import numpy as np

from .decomposer import MotionDecomposer
from .detector import StepDetector
from .models import Sample, StepDetectionResult, Trial
from .parser import parse
from .projector import AccelerationProjector
from .user import UserProfile

logger = logging.getLogger(__name__)


class Pipeline:
    """Runs every stage once and keeps each stage's output for inspection."""

    samples: List[Sample]
    decomposed: List[Sample]
    intensity: np.ndarray
    filtered: np.ndarray
    detection: StepDetectionResult

    def __init__(self, user: Optional[UserProfile] = None, trial: Optional[Trial] = None):
        self.user = user or UserProfile()
        self.trial = trial
        self.decomposer = MotionDecomposer()
        self.projector = AccelerationProjector()
        self.detector = StepDetector(self.user.stride)

    @classmethod
    def run(
        cls,
        raw: str,
        user: Optional[UserProfile] = None,
        trial: Optional[Trial] = None,
    ) -> "Pipeline":
        pipeline = cls(user, trial)
        pipeline.feed(parse(raw))
        return pipeline

    @classmethod
    def from_samples(
        cls,
        samples: Sequence[Sample],
        user: Optional[UserProfile] = None,
        trial: Optional[Trial] = None,
    ) -> "Pipeline":
        pipeline = cls(user, trial)
        pipeline.feed(samples)
        return pipeline

    def feed(self, samples: Sequence[Sample]) -> StepDetectionResult:
        self.samples = list(samples)
        self.decomposed = self.decomposer.decompose(self.samples)
        self.intensity = self.projector.intensity(self.decomposed)
        self.filtered = self.projector.smooth(self.intensity)
        self.detection = self.detector.detect(self.filtered)

        logger.info(
            "Processed %d samples: %d steps, distance %.2f",
            len(self.samples),
            self.steps,
            self.distance,
        )
        return self.detection

    @property
    def steps(self) -> int:
        return self.detection.steps

    @property
    def distance(self) -> float:
        return self.detection.distance

    @property
    def step_error(self) -> Optional[int]:
        """Detected minus expected steps, when the trial records a count."""
        if self.trial is None or self.trial.expected_steps is None:
            return None
        return self.steps - self.trial.expected_steps
