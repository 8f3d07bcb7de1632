"""
FastAPI router definitions for the API endpoints.
"""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from kibana_me_logs import __version__
from kibana_me_logs.api.dependencies import get_open_app_logs_uc
from kibana_me_logs.api.schemas import (
    DashboardLinkResponse,
    ErrorResponse,
    HealthResponse,
)
from kibana_me_logs.exceptions import (
    BaseAppError,
    ConfigurationError,
    CorrelationMismatchError,
    InvalidInputError,
    NoRouteError,
    NotBoundError,
    NotFoundError,
)

router = APIRouter()


def _status_code_for(error: BaseAppError) -> int:
    if isinstance(error, (NotFoundError, NotBoundError)):
        return 404
    if isinstance(error, CorrelationMismatchError):
        return 409
    if isinstance(error, (NoRouteError, InvalidInputError)):
        return 422
    if isinstance(error, ConfigurationError):
        return 500
    # MalformedResponseError, PlatformCommandError: upstream failures
    return 502


@router.get("/health", response_model=HealthResponse)
def health():
    return HealthResponse(status="ok", version=__version__)


@router.get(
    "/dashboard-url",
    response_model=DashboardLinkResponse,
    responses={
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
    },
)
def dashboard_url(
    kibana_app: str = Query(..., min_length=1, description="Kibana application name"),
    app: str = Query(..., min_length=1, description="Application whose logs to show"),
    service: Optional[str] = Query(None, description="Shared service label"),
):
    """
    Resolve the Kibana dashboard URL of an application without opening it.

    Raises:
        HTTPException: If any precondition fails
    """
    try:
        link = get_open_app_logs_uc(service).resolve(kibana_app, app)
        return DashboardLinkResponse.from_entity(link)
    except BaseAppError as e:
        raise HTTPException(status_code=_status_code_for(e), detail=str(e))
