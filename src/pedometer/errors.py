"""
Error types raised at the pedometer input boundaries
"""

from typing import Optional


class PedometerError(Exception):
    """Base class for all pedometer errors"""


class FormatError(PedometerError):
    """Raw accelerometer data does not have the expected shape"""

    def __init__(
        self,
        message: str,
        sample_index: Optional[int] = None,
        group_index: Optional[int] = None,
    ):
        self.sample_index = sample_index
        self.group_index = group_index
        location = []
        if sample_index is not None:
            location.append(f"sample {sample_index}")
        if group_index is not None:
            location.append(f"group {group_index}")
        if location:
            message = f"{message} ({', '.join(location)})"
        super().__init__(message)


class ValidationError(PedometerError):
    """User profile or trial values are out of range"""

    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        super().__init__(message)
