"""
Parser for the raw accelerometer wire format

Samples are separated by ``;``, vector groups within a sample by ``|`` and
vector components by ``,``::

    0.1,0.2,0.9;0.1,0.3,1.0              total acceleration
    0.1,0.2,0.0|0.0,0.0,1.0;...          user acceleration | gravity
"""

import logging
from typing import List

from .errors import FormatError
from .models import Sample, TriaxialVector

logger = logging.getLogger(__name__)

SAMPLE_SEPARATOR = ";"
GROUP_SEPARATOR = "|"
COMPONENT_SEPARATOR = ","


def _parse_vector(group: str, sample_index: int, group_index: int) -> TriaxialVector:
    components = group.split(COMPONENT_SEPARATOR)
    if len(components) != 3:
        raise FormatError(
            "Bad input, ensure data is formatted as x,y,z coordinates",
            sample_index=sample_index,
            group_index=group_index,
        )
    try:
        x, y, z = (float(c) for c in components)
    except ValueError:
        raise FormatError(
            f"Bad input, non-numeric coordinate in {group.strip()!r}",
            sample_index=sample_index,
            group_index=group_index,
        ) from None
    return TriaxialVector(x=x, y=y, z=z)


def parse(raw: str) -> List[Sample]:
    """
    Parse and validate a raw accelerometer string.

    Args:
        raw: Wire format string

    Returns:
        Samples that all carry the same number of vectors (1 or 2)

    Raises:
        FormatError: On any shape violation, with the offending indices
    """
    text = (raw or "").strip().rstrip(SAMPLE_SEPARATOR)
    if not text:
        raise FormatError("Bad input, no samples found")

    samples: List[Sample] = []
    group_count = None

    for sample_index, chunk in enumerate(text.split(SAMPLE_SEPARATOR)):
        groups = chunk.split(GROUP_SEPARATOR)
        if len(groups) not in (1, 2):
            raise FormatError(
                f"Bad input, expected 1 or 2 vector groups, found {len(groups)}",
                sample_index=sample_index,
            )
        if group_count is None:
            group_count = len(groups)
        elif len(groups) != group_count:
            raise FormatError(
                f"Bad input, expected {group_count} vector groups like the first "
                f"sample, found {len(groups)}",
                sample_index=sample_index,
            )

        vectors = tuple(
            _parse_vector(group, sample_index, group_index)
            for group_index, group in enumerate(groups)
        )
        samples.append(Sample(vectors=vectors))

    logger.debug("Parsed %d samples with %d vector groups", len(samples), group_count)
    return samples
