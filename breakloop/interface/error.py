"""Interface layer errors and their HTTP mapping."""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
import logfire

from breakloop.domain.error import (
    BusinessRuleViolationError,
    NotFoundError,
    ValidationError,
)


class InterfaceError(Exception):
    """Base interface error."""

    pass


class MissingIdentityError(InterfaceError):
    """Request did not say which user is acting."""

    def __init__(self) -> None:
        super().__init__("Missing X-User-Id header")


def register_error_handlers(app: FastAPI) -> None:
    """Map domain and interface errors to HTTP responses.

    Args:
        app: FastAPI application
    """

    @app.exception_handler(MissingIdentityError)
    async def missing_identity(request: Request, exc: MissingIdentityError):
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED, content={"detail": str(exc)}
        )

    @app.exception_handler(NotFoundError)
    async def not_found(request: Request, exc: NotFoundError):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)}
        )

    @app.exception_handler(BusinessRuleViolationError)
    async def rule_violation(request: Request, exc: BusinessRuleViolationError):
        logfire.warn("Business rule violated", path=request.url.path, error=str(exc))
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)}
        )

    @app.exception_handler(ValidationError)
    async def domain_validation(request: Request, exc: ValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)}
        )
