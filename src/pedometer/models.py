"""Data models for step counting."""

from typing import List, Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .errors import ValidationError


class TriaxialVector(BaseModel):
    """One acceleration reading along the x, y and z axes."""

    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    z: float

    @classmethod
    def of(cls, components: Sequence[float]) -> "TriaxialVector":
        x, y, z = components
        return cls(x=x, y=y, z=z)

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def dot(self, other: "TriaxialVector") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z


class Sample(BaseModel):
    """
    Vectors captured at a single time step.

    One vector is raw total acceleration, two vectors are an already
    decomposed ``[user, gravity]`` pair.
    """

    model_config = ConfigDict(frozen=True)

    vectors: Tuple[TriaxialVector, ...]

    @classmethod
    def of(cls, *components: Sequence[float]) -> "Sample":
        return cls(vectors=tuple(TriaxialVector.of(c) for c in components))

    def __len__(self) -> int:
        return len(self.vectors)

    @property
    def is_decomposed(self) -> bool:
        return len(self.vectors) == 2

    @property
    def total(self) -> TriaxialVector:
        return self.vectors[0]

    @property
    def user(self) -> TriaxialVector:
        return self.vectors[0]

    @property
    def gravity(self) -> TriaxialVector:
        return self.vectors[1]


class Trial(BaseModel):
    """Optional metadata describing the recorded walk."""

    model_config = ConfigDict(frozen=True)

    name: Optional[str] = Field(default=None, description="Trial label")
    expected_steps: Optional[int] = Field(
        default=None, description="Step count observed by hand, if known"
    )

    @field_validator("expected_steps")
    @classmethod
    def validate_expected_steps(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and v < 0:
            raise ValidationError("Invalid expected steps", field="expected_steps")
        return v


class ThresholdModel(BaseModel):
    """Statistics of the rate sequence used to derive the peak threshold."""

    model_config = ConfigDict(frozen=True)

    mean: float
    std_dev: float = Field(description="Population standard deviation, diagnostic only")
    threshold: float


class StepDetectionResult(BaseModel):
    """Step count plus everything needed to explain how it was reached."""

    model_config = ConfigDict(frozen=True)

    steps: int = Field(ge=0)
    distance: float
    stride: float
    threshold: ThresholdModel
    rates: List[float] = Field(default_factory=list)
    peaks: List[int] = Field(
        default_factory=list, description="Rate indices accepted as steps by the scan"
    )
    boundary_step: bool = Field(
        default=False, description="Whether the final rate added a step"
    )
