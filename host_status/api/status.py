from fastapi import APIRouter, Depends

from host_status.api.auth import require_bearer_token
from host_status.config import Settings, get_settings
from host_status.models.status import StatusResponse
from host_status.services import status_monitor

router = APIRouter()


@router.get(
    "/status",
    response_model=StatusResponse,
    summary="Host status snapshot",
    dependencies=[Depends(require_bearer_token)],
    responses={401: {"description": "Missing or wrong bearer token"}},
)
def server_status(settings: Settings = Depends(get_settings)) -> StatusResponse:
    """
    Return a fresh snapshot of host health.

    The probes block on subprocesses, so this is a plain (sync) route that
    FastAPI runs in its threadpool. Sensor failures only blank out the
    affected fields; they never turn into an error response.
    """
    return status_monitor.get_status(settings)
