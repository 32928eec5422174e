from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
import traceback
import logging
from typing import Dict, Any

from app.config import DEBUG
from services.error_types import (
    HVACIntakeError, ValidationError, ConfigurationError, CriticalError,
)

logger = logging.getLogger(__name__)


def create_error_response(error_type: str, message: str) -> Dict[str, Any]:
    """Create structured error response"""
    return {
        "error": {
            "type": error_type,
            "message": message
        }
    }


def _status_for(exc: HVACIntakeError) -> int:
    if isinstance(exc, ValidationError):
        return 400
    if isinstance(exc, ConfigurationError):
        return 503
    return 500


async def intake_exception_handler(request: Request, exc: HVACIntakeError):
    status_code = _status_for(exc)
    if isinstance(exc, CriticalError) and status_code >= 500:
        logger.error(f"{type(exc).__name__} on {request.url.path}: {exc}")
    else:
        logger.warning(f"{type(exc).__name__} on {request.url.path}: {exc}")

    return JSONResponse(
        status_code=status_code,
        content=create_error_response(type(exc).__name__, exc.message),
    )


async def traceback_exception_handler(request: Request, exc: Exception):
    tb = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    logger.error(tb)

    message = tb if DEBUG else "Internal server error"
    return JSONResponse(
        status_code=500,
        content=create_error_response("InternalServerError", message),
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(HVACIntakeError, intake_exception_handler)
    app.add_exception_handler(Exception, traceback_exception_handler)
