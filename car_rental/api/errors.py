"""
Traducción de errores de dominio a respuestas HTTP.

- EntityNotFoundError -> 404
- BusinessRuleError -> 400
- UserAlreadyExistsError, OptimisticLockError -> 409
- cualquier otra excepción -> 500 con un error_id opaco
"""

import logging
import uuid

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from car_rental.domain.errors import (
    BusinessRuleError,
    DomainError,
    EntityNotFoundError,
    OptimisticLockError,
    UserAlreadyExistsError,
)

logger = logging.getLogger(__name__)


def status_for(exc: DomainError) -> int:
    if isinstance(exc, EntityNotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, BusinessRuleError):
        return status.HTTP_400_BAD_REQUEST
    if isinstance(exc, (UserAlreadyExistsError, OptimisticLockError)):
        return status.HTTP_409_CONFLICT
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    status_code = status_for(exc)
    if status_code >= 500:
        logger.error(
            "Unmapped domain error",
            exc_info=exc,
            extra={"code": exc.code, "path": request.url.path},
        )
    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.message, "code": exc.code},
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Global exception handler to prevent stack trace exposure to clients.
    All unhandled exceptions are logged internally and return a generic error message.
    """
    error_id = str(uuid.uuid4())

    logger.error(
        "Unhandled exception occurred",
        exc_info=exc,
        extra={
            "error_id": error_id,
            "path": request.url.path,
            "method": request.method,
            "client_host": request.client.host if request.client else None,
        }
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "detail": "Internal server error",
            "error_id": error_id,
            "message": "An unexpected error occurred. Please contact support with the error_id if the issue persists."
        }
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(Exception, global_exception_handler)
