"""User profile and stride resolution."""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .errors import ValidationError


class Gender(str, Enum):
    FEMALE = "female"
    MALE = "male"


# Stride per unit of height
MULTIPLIERS = {Gender.FEMALE: 0.413, Gender.MALE: 0.415}

# Stride when only gender is known
AVERAGES = {Gender.FEMALE: 70.0, Gender.MALE: 78.0}


def resolve_stride(gender: Optional[Gender] = None, height: Optional[float] = None) -> float:
    """
    Derive a stride from whatever the user told us.

    Order matters: gender and height, then height alone, then gender alone,
    then the population average.
    """
    if gender is not None and height is not None:
        return MULTIPLIERS[gender] * height
    if height is not None:
        return height * (sum(MULTIPLIERS.values()) / len(MULTIPLIERS))
    if gender is not None:
        return AVERAGES[gender]
    return sum(AVERAGES.values()) / len(AVERAGES)


def _blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _positive(value: Any, field: str) -> Optional[float]:
    if _blank(value):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid {field}", field=field) from None
    if not number > 0:
        raise ValidationError(f"Invalid {field}", field=field)
    return number


class UserProfile(BaseModel):
    """Who is walking. Stride is resolved once at construction."""

    model_config = ConfigDict(frozen=True)

    gender: Optional[Gender] = None
    height: Optional[float] = Field(default=None, description="Same unit as stride")
    stride: float = Field(description="Distance covered per step")

    @model_validator(mode="before")
    @classmethod
    def resolve(cls, data: Any) -> Any:
        data = dict(data or {})

        gender = data.get("gender")
        if _blank(gender):
            gender = None
        elif isinstance(gender, Gender):
            pass
        else:
            try:
                gender = Gender(str(gender).strip().lower())
            except ValueError:
                raise ValidationError("Invalid gender", field="gender") from None

        height = _positive(data.get("height"), "height")
        stride = _positive(data.get("stride"), "stride")
        if stride is None:
            stride = resolve_stride(gender, height)

        return {"gender": gender, "height": height, "stride": stride}
