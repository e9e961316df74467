"""
Exception handlers mapping domain errors to HTTP responses.

Every error response has the shape {"error": {"message": ..., "status": ...}}.
"""

import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.exceptions import JoblyError, Unauthorized

logger = logging.getLogger(__name__)


def error_response(status_code: int, message, headers=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": {"message": message, "status": status_code}},
        headers=headers,
    )


async def jobly_error_handler(request: Request, exc: JoblyError) -> JSONResponse:
    logger.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, Unauthorized) else None
    return error_response(exc.status_code, exc.message, headers)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Bad request bodies and query strings are a 400 in this API, not 422
    messages = [
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
        for err in exc.errors()
    ]
    return error_response(400, messages)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(JoblyError, jobly_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
