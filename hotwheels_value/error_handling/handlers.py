"""
FastAPI exception handlers.

Renders service errors as the JSON bodies clients expect:
400 ``{"message", "details"}`` for bad input, 500 ``{"message"}`` otherwise.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .errors import HotWheelsValueError, SearchValidationError, format_validation_errors


logger = logging.getLogger(__name__)

UNKNOWN_ERROR_MESSAGE = "An unknown error occurred"


async def search_validation_error_handler(request: Request, exc: SearchValidationError):
    logger.info(f"Rejected search parameters: {exc.details}")
    return JSONResponse(
        status_code=400,
        content={"message": str(exc), "details": exc.details},
    )


# /api/listings validates its own raw string params; this covers typed params on other routes
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    details = format_validation_errors(exc.errors(), strip_source=True)
    logger.info(f"Rejected request parameters: {details}")
    return JSONResponse(
        status_code=400,
        content={"message": "Invalid search parameters", "details": details},
    )


async def service_error_handler(request: Request, exc: HotWheelsValueError):
    return JSONResponse(
        status_code=500,
        content={"message": str(exc) or UNKNOWN_ERROR_MESSAGE},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the service's exception handlers on ``app``."""
    app.add_exception_handler(SearchValidationError, search_validation_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(HotWheelsValueError, service_error_handler)
