"""Render account-operation failures and malformed bodies as the {isSuccess, message} wire shape."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from portal.services.errors import AccountError, InternalError

logger = logging.getLogger(__name__)


def status_for(exc: AccountError) -> int:
    """Every expected rejection is a 400; only internal failures are a 500."""
    if isinstance(exc, InternalError):
        return status.HTTP_500_INTERNAL_SERVER_ERROR
    return status.HTTP_400_BAD_REQUEST


def failure(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"isSuccess": False, "message": message},
    )


def invalid_fields(exc: RequestValidationError) -> list[str]:
    """Field names from pydantic error locations, e.g. ("body", "password") -> "password"."""
    names: list[str] = []
    for error in exc.errors():
        # JSON decode errors carry a character offset instead of a field name.
        loc = [part for part in error.get("loc", ()) if part != "body"]
        name = loc[0] if loc and isinstance(loc[0], str) else "body"
        if name not in names:
            names.append(name)
    return names


async def account_error_handler(request: Request, exc: AccountError) -> JSONResponse:
    logger.info(
        "%s %s rejected: reason=%s",
        request.method,
        request.url.path,
        exc.reason.value,
    )
    return failure(status_for(exc), exc.message)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    fields = invalid_fields(exc)
    logger.info("%s %s rejected: invalid fields=%s", request.method, request.url.path, fields)
    return failure(
        status.HTTP_400_BAD_REQUEST,
        f"Invalid request fields: {', '.join(fields)}",
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register handlers on the app (call once at startup)."""
    app.add_exception_handler(AccountError, account_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
