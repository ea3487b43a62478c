"""Diagnostic reporting for step detection results."""

from typing import Any, Dict, List, Optional

import structlog

from .models import StepDetectionResult
from .pipeline import Pipeline


def _rounded(values: List[float], digits: int = 3) -> List[float]:
    return [round(v, digits) for v in values]


def report(
    result: StepDetectionResult,
    logger: Optional[structlog.stdlib.BoundLogger] = None,
) -> None:
    """
    Emit the threshold, rates, individual peaks and final count as log events.

    Args:
        result: Output of the step detector
        logger: Logger to emit on, defaults to this module's logger
    """
    log = logger or structlog.get_logger(__name__)
    rates = result.rates
    model = result.threshold

    log.info(
        "threshold_calculated",
        mean_rate=round(model.mean, 3),
        std_dev=round(model.std_dev, 3),
        threshold=round(model.threshold, 3),
    )
    log.debug("rates_computed", count=len(rates), rates=_rounded(rates))

    for index in result.peaks:
        log.debug(
            "step_detected",
            index=index,
            prev_rate=round(rates[index - 1], 3),
            rate=round(rates[index], 3),
            next_rate=round(rates[index + 1], 3),
        )

    if result.boundary_step:
        log.debug("final_step_detected", rate=round(rates[-1], 3))

    log.info(
        "steps_counted",
        steps=result.steps,
        distance=round(result.distance, 3),
        stride=round(result.stride, 3),
    )


def summarize(pipeline: Pipeline) -> Dict[str, Any]:
    """JSON-ready summary of a finished pipeline run."""
    detection = pipeline.detection
    trial = pipeline.trial
    return {
        "steps": detection.steps,
        "distance": detection.distance,
        "stride": detection.stride,
        "samples": len(pipeline.samples),
        "threshold": detection.threshold.model_dump(),
        "peaks": list(detection.peaks),
        "boundary_step": detection.boundary_step,
        "trial": trial.model_dump() if trial is not None else None,
        "step_error": pipeline.step_error,
    }


def render_text(pipeline: Pipeline) -> str:
    """Human readable summary, one fact per line."""
    detection = pipeline.detection
    model = detection.threshold
    lines = []

    if pipeline.trial is not None and pipeline.trial.name:
        lines.append(f"Trial: {pipeline.trial.name}")
    lines.extend(
        [
            f"Samples: {len(pipeline.samples)}",
            f"Mean rate: {model.mean:.3f}",
            f"Standard deviation: {model.std_dev:.3f}",
            f"Threshold: {model.threshold:.3f}",
            f"Peaks: {', '.join(str(p) for p in detection.peaks) or 'none'}",
            f"Steps: {detection.steps}",
            f"Stride: {detection.stride:.2f}",
            f"Distance: {detection.distance:.2f}",
        ]
    )
    if pipeline.step_error is not None:
        lines.append(f"Step error: {pipeline.step_error:+d}")
    return "\n".join(lines)
