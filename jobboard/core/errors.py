# jobboard/core/errors.py
"""
Domain errors raised by repositories and action services.

Each error carries the HTTP status the API answers with; the handler
registered in jobboard.main renders them as {"detail": ...}.
"""
from fastapi import Request
from fastapi.responses import JSONResponse


class JobBoardError(Exception):
    status_code = 400

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class NotFoundError(JobBoardError):
    status_code = 404


class PermissionDeniedError(JobBoardError):
    status_code = 403


class AccountRestrictedError(PermissionDeniedError):
    """Suspended user account or suspended/deleted company."""


class ConflictError(JobBoardError):
    status_code = 409


class InvalidStateError(JobBoardError):
    status_code = 400


async def job_board_error_handler(request: Request, exc: JobBoardError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})
