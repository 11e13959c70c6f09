"""Exception handlers mapping domain errors to JSON responses."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
import structlog

from multifinance.domain.exceptions import (
    CustomerAlreadyRegisteredException,
    CustomerNotFoundException,
    CustomerNotVerifiedException,
    DomainException,
    InfrastructureException,
    InsufficientLimitException,
    InvalidLimitAmountException,
    InvalidRequestException,
    InvalidVerificationStateException,
    LimitNotSetException,
    TenorNotFoundException,
    TransactionTimeoutException,
)
from .request_context import get_request_id

logger = structlog.get_logger(__name__)

STATUS_CODES: dict[type[DomainException], int] = {
    CustomerNotFoundException: 404,
    TenorNotFoundException: 404,
    LimitNotSetException: 404,
    CustomerNotVerifiedException: 422,
    InsufficientLimitException: 422,
    InvalidLimitAmountException: 400,
    InvalidRequestException: 400,
    CustomerAlreadyRegisteredException: 409,
    InvalidVerificationStateException: 409,
}


def status_code_for(exc: DomainException) -> int:
    """HTTP status for a domain exception, 400 when unmapped."""
    for exc_type in type(exc).__mro__:
        if exc_type in STATUS_CODES:
            return STATUS_CODES[exc_type]
    return 400


def _error_response(status_code: int, code: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": code,
            "message": message,
            "request_id": get_request_id(),
        },
    )


def error_handler_middleware(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI app.

    Maps domain exceptions to appropriate HTTP responses.
    """

    @app.exception_handler(TransactionTimeoutException)
    async def transaction_timeout_handler(
        request: Request,
        exc: TransactionTimeoutException,
    ) -> JSONResponse:
        """Handle a transaction that did not finish before its deadline."""
        logger.error(
            "transaction_timeout",
            operation=exc.operation,
            timeout=exc.timeout,
        )
        return _error_response(503, exc.code, exc.public_message)

    @app.exception_handler(InfrastructureException)
    async def infrastructure_error_handler(
        request: Request,
        exc: InfrastructureException,
    ) -> JSONResponse:
        """Handle storage failures."""
        logger.error(
            "infrastructure_error",
            operation=exc.operation,
            message=exc.message,
            cause=repr(exc.__cause__) if exc.__cause__ else None,
        )
        return _error_response(500, exc.code, exc.public_message)

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle business rule violations."""
        status_code = status_code_for(exc)
        logger.warning(
            "domain_exception",
            code=exc.code,
            message=exc.message,
            status_code=status_code,
        )
        return _error_response(status_code, exc.code, exc.public_message)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception(
            "unhandled_exception",
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return _error_response(500, "INTERNAL_ERROR", "An unexpected error occurred.")
