"""
Resource API - General Routes
==============================

What:  Server metadata (GET /about) and liveness probe (GET /healthcheck).
How:   Both are static passthroughs; neither touches the database.
Who:   Operators, load balancers and container health checks.
"""

from fastapi import APIRouter

from resource_api import __version__
from resource_api.config import settings
from resource_api.schemas.resource import AboutResponse, HealthResponse

router = APIRouter(tags=["About"])


@router.get(
    "/about",
    response_model=AboutResponse,
    summary="Get metadata about the server",
)
async def about() -> AboutResponse:
    return AboutResponse(name=settings.app_name, version=__version__, build=settings.build)


@router.get(
    "/healthcheck",
    response_model=HealthResponse,
    summary="The health check endpoint",
    description="Reports that the process is up and serving requests.",
)
async def healthcheck() -> HealthResponse:
    return HealthResponse(message="OK")
