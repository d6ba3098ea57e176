from typing import Any, Dict, List, Optional

from fastapi import Request, status
from fastapi.responses import JSONResponse


class ApiError(Exception):
    """Carries the exact JSON body and status code of a rejected request."""

    def __init__(self, status_code: int, payload: Optional[Any] = None):
        super().__init__(status_code, payload)
        self.status_code = status_code
        self.payload = payload


def bad_request_message(message: str) -> ApiError:
    return ApiError(status.HTTP_400_BAD_REQUEST, {"message": message})


def validation_failed(errors: List[Dict[str, str]] | Dict[str, str]) -> ApiError:
    return ApiError(status.HTTP_400_BAD_REQUEST, {"errors": errors})


def empty_request() -> ApiError:
    return bad_request_message("Requested data is empty")


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(content=exc.payload, status_code=exc.status_code)
