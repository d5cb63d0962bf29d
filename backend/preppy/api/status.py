"""
Copy/paste/load banners. Clipboard access happens in the client, which reports
the outcome here; loads are reported by the import endpoints themselves.
"""

from fastapi import APIRouter

from preppy.schemas.editor import StatusReport, StatusResponse
from preppy.services.status import StatusFlag, status_board

router = APIRouter(prefix="/status")


@router.get("", response_model=StatusResponse)
def get_status() -> StatusResponse:
    return StatusResponse(flags=status_board.snapshot())


@router.post("/{flag}", response_model=StatusResponse)
def report_status(flag: StatusFlag, body: StatusReport) -> StatusResponse:
    status_board.report(flag, body.outcome)
    return StatusResponse(flags=status_board.snapshot())
