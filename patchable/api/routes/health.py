"""Health check and metrics endpoints."""

from datetime import UTC, datetime

from fastapi import APIRouter, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from pydantic import BaseModel

from patchable import __version__
from patchable.api.dependencies import DemoStoreDep

router = APIRouter()


class HealthResponse(BaseModel):
    """Service health."""

    status: str
    version: str
    timestamp: datetime
    demo_models: int


@router.get("/health", response_model=HealthResponse)
async def health_check(store: DemoStoreDep) -> HealthResponse:
    """Report service status and the size of the demo store."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        timestamp=datetime.now(UTC),
        demo_models=len(await store.list_all()),
    )


async def metrics() -> Response:
    """Prometheus metrics in text exposition format."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
