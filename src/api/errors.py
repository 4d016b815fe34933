"""
Exception handlers - map domain errors to the {"mensaje": ...} error body.

Caller-correctable errors (validation, duplicate email, malformed request)
become 400 responses. Unknown routes become a 404 "Recurso no encontrado";
other routing errors keep their status with the reason as the message.
Configuration faults and anything unexpected become a 500 with a fixed
message; details only go to the server log.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.domain.exceptions import ConfigurationFault, DuplicateEmail, ValidationFailure

logger = logging.getLogger(__name__)

DUPLICATE_EMAIL_MESSAGE = "El correo ya registrado"
MALFORMED_REQUEST_MESSAGE = "Validación fallida"
INTERNAL_ERROR_MESSAGE = "Error interno del servidor"
NOT_FOUND_MESSAGE = "Recurso no encontrado"


def _error(status_code: int, message: str, headers: dict[str, str] | None = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"mensaje": message}, headers=headers)


async def handle_validation_failure(request: Request, exc: ValidationFailure) -> JSONResponse:
    return _error(status.HTTP_400_BAD_REQUEST, exc.message)


async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    return _error(status.HTTP_400_BAD_REQUEST, MALFORMED_REQUEST_MESSAGE)


async def handle_duplicate_email(request: Request, exc: DuplicateEmail) -> JSONResponse:
    return _error(status.HTTP_400_BAD_REQUEST, DUPLICATE_EMAIL_MESSAGE)


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Routing errors (unknown path, wrong method) keep the mensaje body."""
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return _error(exc.status_code, NOT_FOUND_MESSAGE, exc.headers)
    return _error(exc.status_code, str(exc.detail), exc.headers)


async def handle_configuration_fault(request: Request, exc: ConfigurationFault) -> JSONResponse:
    logger.critical("Configuration fault on %s %s", request.method, request.url.path, exc_info=exc)
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the error-body handlers on an application."""
    app.add_exception_handler(ValidationFailure, handle_validation_failure)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(DuplicateEmail, handle_duplicate_email)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(ConfigurationFault, handle_configuration_fault)
    app.add_exception_handler(Exception, handle_unexpected)
