"""HTTP API with health endpoints and batch step analysis."""

from contextlib import asynccontextmanager
from typing import Any, Dict, Optional, Union

import structlog
import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from .config import settings
from .errors import FormatError, PedometerError, ValidationError
from .logging import setup_logging
from .models import Trial
from .pipeline import Pipeline
from .reporting import report, summarize
from .user import UserProfile

logger = structlog.get_logger(__name__)

ready = False


class AnalyzeRequest(BaseModel):
    """Raw accelerometer data plus optional profile and trial details."""

    data: str = Field(description="Samples in x,y,z;x,y,z or x,y,z|x,y,z;... format")
    gender: Optional[str] = None
    height: Optional[Union[float, str]] = None
    stride: Optional[Union[float, str]] = None
    trial: Optional[Trial] = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle."""
    global ready

    setup_logging(settings.service_name, settings)
    ready = True
    logger.info("Pedometer API started", port=settings.port)

    yield

    ready = False


app = FastAPI(
    title="Pedometer",
    description="Counts steps and distance from accelerometer data",
    version="1.0.0",
    lifespan=lifespan,
)


@app.exception_handler(PedometerError)
async def pedometer_error_handler(request: Request, exc: PedometerError) -> JSONResponse:
    content: Dict[str, Any] = {"error": type(exc).__name__, "detail": str(exc)}
    if isinstance(exc, FormatError):
        content["sample_index"] = exc.sample_index
        content["group_index"] = exc.group_index
    if isinstance(exc, ValidationError):
        content["field"] = exc.field

    logger.warning("Rejected analysis request", error=content["error"], detail=content["detail"])
    return JSONResponse(status_code=422, content=content)


@app.get("/healthz")
async def liveness():
    """Liveness check endpoint."""
    return {"status": "alive"}


@app.get("/readyz")
async def readiness():
    """Readiness check endpoint."""
    if ready:
        return {"status": "ready"}
    return Response(
        content='{"status": "not ready"}',
        status_code=503,
        media_type="application/json",
    )


@app.post("/analyze")
def analyze(request: AnalyzeRequest) -> Dict[str, Any]:
    """Run the full pipeline over one batch of samples."""
    user = UserProfile(gender=request.gender, height=request.height, stride=request.stride)
    pipeline = Pipeline.run(request.data, user, request.trial)
    if settings.report_diagnostics:
        report(pipeline.detection)

    return summarize(pipeline)


if __name__ == "__main__":
    uvicorn.run(
        "pedometer.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
