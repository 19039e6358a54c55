"""Health-check endpoints."""

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import PlainTextResponse

from ...volumes import VolumeFileSystem, VolumeSnapshot, any_modified

NOT_MODIFIED_BODY = "Volume has not been modified"

router = APIRouter()


def _get_snapshot(request: Request) -> VolumeSnapshot:
    return request.app.state.snapshot


def _get_filesystem(request: Request) -> VolumeFileSystem:
    return request.app.state.filesystem


@router.get("/", operation_id="probe_root", summary="Volume staleness probe")
@router.get("/health", operation_id="probe_health", summary="Volume staleness probe")
@router.get("/healthz", operation_id="probe_healthz", summary="Volume staleness probe")
def probe(
    snapshot: VolumeSnapshot = Depends(_get_snapshot),
    fs: VolumeFileSystem = Depends(_get_filesystem),
) -> Response:
    """Fail with 500 once any watched volume has rotated since startup."""
    if any_modified(snapshot, fs):
        return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    return PlainTextResponse(NOT_MODIFIED_BODY)
