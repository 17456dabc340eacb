"""
Error handlers for FastAPI applications using queryable-extensions.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from queryable_extensions.errors.exceptions import QueryableExtensionsError

if TYPE_CHECKING:
    from fastapi import FastAPI

log = logging.getLogger("queryable.ext")


async def queryable_error_handler(request: Request, exc: QueryableExtensionsError) -> JSONResponse:
    """
    Convert QueryableExtensionsError exceptions to JSON responses.

    Every library error is a caller configuration mistake, so all of them map to 400.

    Args:
        request: The HTTP request that triggered the error
        exc: The error that was raised

    Returns:
        JSONResponse with error details
    """
    log.warning(
        "Rejected sort/pagination request: %s",
        exc.details,
        extra={
            "error_type": exc.error_type,
            "path": request.url.path,
            "method": request.method,
        },
    )

    return JSONResponse(
        status_code=400,
        content=exc.to_dict(),
    )


async def pydantic_validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    """
    Convert Pydantic validation errors to JSON responses.

    Args:
        request: The HTTP request that triggered the error
        exc: The Pydantic validation error

    Returns:
        JSONResponse with validation error details
    """
    log.warning(
        "Validation error: %s",
        str(exc),
        extra={
            "path": request.url.path,
            "method": request.method,
        },
    )

    return JSONResponse(
        status_code=400,
        content={
            "error": "client_error",
            "details": f"Validation error: {str(exc)}",
        },
    )


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Convert FastAPI request validation errors (e.g. ?page=abc) to the same 400 shape.

    Args:
        request: The HTTP request that triggered the error
        exc: The request validation error

    Returns:
        JSONResponse with validation error details
    """
    log.warning(
        "Request validation error: %s",
        str(exc),
        extra={
            "path": request.url.path,
            "method": request.method,
        },
    )

    return JSONResponse(
        status_code=400,
        content={
            "error": "client_error",
            "details": f"Validation error: {exc.errors()}",
        },
    )


def register_error_handlers(app: FastAPI) -> None:
    """
    Register all error handlers with the FastAPI application.

    Args:
        app: The FastAPI application instance
    """
    app.add_exception_handler(QueryableExtensionsError, queryable_error_handler)
    app.add_exception_handler(ValidationError, pydantic_validation_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
