#!/usr/bin/env python3
"""
Custom exceptions and error handlers for the web application.

Lookups that miss (volunteer, organization, opportunity) are raised by the
service layer, never by the matching engine, and are mapped to HTTP
responses here.
"""

import logging
from fastapi import Request, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ServiceException(Exception):
    """Base exception for service layer errors."""
    status_code = 500


class VolunteerNotFoundException(ServiceException):
    """Raised when a user has no volunteer profile."""
    status_code = 404


class OrganizationNotFoundException(ServiceException):
    """Raised when an organization is not found."""
    status_code = 404


class OpportunityNotFoundException(ServiceException):
    """Raised when an opportunity is not found."""
    status_code = 404


class OpportunityNotActiveException(ServiceException):
    """Raised when applying to an opportunity that is not active."""
    status_code = 400


class DuplicateApplicationException(ServiceException):
    """Raised when a volunteer applies to the same opportunity twice."""
    status_code = 400


class DuplicateVolunteerException(ServiceException):
    """Raised when a user already has a volunteer profile."""
    status_code = 400


async def service_exception_handler(
    request: Request,
    exc: ServiceException
) -> JSONResponse:
    """
    Handle service layer exceptions.

    Args:
        request: The FastAPI request.
        exc: The service exception.

    Returns:
        JSONResponse with error details.
    """
    if exc.status_code >= 500:
        logger.error(f"Service error in {request.url.path}: {exc}", exc_info=True)
    else:
        logger.info(f"{exc.__class__.__name__} in {request.url.path}: {exc}")

    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "error": str(exc),
            "type": exc.__class__.__name__
        }
    )


async def http_exception_handler(
    request: Request,
    exc: HTTPException
) -> JSONResponse:
    """
    Handle FastAPI HTTP exceptions with consistent format.
    """
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "error": exc.detail,
            "type": "HTTPException"
        }
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle request body validation errors.
    """
    errors = exc.errors()
    fields = sorted({".".join(str(p) for p in err.get("loc", ())[1:]) for err in errors})
    return JSONResponse(
        status_code=422,
        content={
            "success": False,
            "error": f"Invalid or missing fields: {', '.join(f for f in fields if f)}",
            "type": "ValidationError"
        }
    )


async def general_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    Handle unexpected exceptions.
    """
    logger.exception(f"Unexpected error in {request.url.path}")

    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": "Internal server error",
            "type": "InternalError"
        }
    )
