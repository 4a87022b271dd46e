"""INBOUND WMS - API response helpers."""
from fastapi import Request, status
from fastapi.responses import JSONResponse

from inbound_wms.core.exceptions import InboundError, InvalidStateError, NotFoundError, ValidationError
from inbound_wms.schemas.common import ApiResponse

_STATUS_BY_ERROR: dict[type[InboundError], int] = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ValidationError: status.HTTP_400_BAD_REQUEST,
    InvalidStateError: status.HTTP_409_CONFLICT,
}


def error_response(code: str, message: str, field_errors: list[dict] | None = None, meta: dict | None = None) -> dict:
    return ApiResponse(
        error={
            "code": code,
            "message": message,
            "field_errors": field_errors or [],
        },
        meta=meta,
    ).model_dump(mode="json")


def status_for(exc: InboundError) -> int:
    for error_type, status_code in _STATUS_BY_ERROR.items():
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_400_BAD_REQUEST


async def inbound_error_handler(request: Request, exc: InboundError) -> JSONResponse:
    """Render pipeline errors in the standard envelope; the message is passed through untouched."""
    return JSONResponse(
        status_code=status_for(exc),
        content=error_response(exc.code, exc.message),
    )
