"""
Custom exception handlers for Agora application.

This module provides a custom exception handler for Django REST Framework
that ensures consistent error response formatting across the application.
"""

import logging
import traceback
from typing import Any, Optional, Union

from django.conf import settings
from django.core.exceptions import PermissionDenied, ValidationError as DjangoValidationError
from django.db.utils import DatabaseError
from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import (
    AuthenticationFailed,
    NotAuthenticated,
    ParseError,
    MethodNotAllowed,
    NotFound,
    PermissionDenied as DRFPermissionDenied,
    ValidationError as DRFValidationError,
    Throttled
)
from rest_framework.response import Response
from rest_framework.views import exception_handler

from core.common.error_codes import CommonAPIErrorCodes

logger = logging.getLogger("agora")

SERVER_ERROR_CODES = (
    CommonAPIErrorCodes.INTERNAL_SERVER_ERROR,
    CommonAPIErrorCodes.DATABASE_ERROR,
    CommonAPIErrorCodes.PERSISTENCE_FAILED,
)

ACCESS_ERROR_CODES = (
    CommonAPIErrorCodes.AUTHENTICATION_ERROR,
    CommonAPIErrorCodes.AUTHORIZATION_ERROR,
    CommonAPIErrorCodes.PERMISSION_DENIED,
)


def custom_exception_handler(exc: Exception, context: dict[str, Any]) -> Optional[Response]:
    """
    Custom exception handler for REST framework that formats the response consistently.

    1. Get request information for logging
    2. Call REST framework's default exception handler first
    3. If this is a Django exception that wasn't handled by DRF, map it
    4. Unhandled exceptions are logged with full traceback

    Args:
        exc: The exception that was raised
        context: The context of the exception

    Returns:
        A formatted Response object
    """
    request = context.get('request')
    request_info = ""
    if request:
        request_info = f"{request.method} {request.path}"

    response = exception_handler(exc, context)

    if response is not None:
        error_code = _get_error_code(exc)
        _log_exception(exc, error_code, request_info)

        formatted_data = {
            "error": error_code,
            "message": _get_error_message(exc, response.data),
            "details": _get_error_details(response.data),
        }
        if formatted_data["details"] is None:
            del formatted_data["details"]

        response.data = formatted_data
        return response

    if isinstance(exc, Http404):
        logger.info(f"Resource not found: {request_info}")
        data = {
            "error": CommonAPIErrorCodes.RESOURCE_NOT_FOUND,
            "message": "The requested resource was not found.",
            "details": str(exc),
        }
        return Response(data, status=status.HTTP_404_NOT_FOUND)

    if isinstance(exc, PermissionDenied):
        logger.warning(f"Permission denied: {request_info}")
        data = {
            "error": CommonAPIErrorCodes.PERMISSION_DENIED,
            "message": "You do not have permission to perform this action.",
            "details": str(exc),
        }
        return Response(data, status=status.HTTP_403_FORBIDDEN)

    if isinstance(exc, DjangoValidationError):
        logger.info(f"Validation error: {request_info}")
        data = {
            "error": CommonAPIErrorCodes.VALIDATION_ERROR,
            "message": "Validation failed.",
            "details": exc.message_dict if hasattr(exc, "message_dict") else str(exc),
        }
        return Response(data, status=status.HTTP_400_BAD_REQUEST)

    if isinstance(exc, DatabaseError):
        logger.error(f"Database error: {request_info}", exc_info=exc)
        data = {
            "error": CommonAPIErrorCodes.DATABASE_ERROR,
            "message": "A database error occurred.",
            "details": str(exc) if settings.DEBUG else "Please contact support.",
        }
        return Response(data, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    logger.error(
        f"Unhandled exception in {request_info}: {exc.__class__.__name__}",
        exc_info=exc
    )

    # In production, don't expose internal error details
    error_details = "Please contact support."
    if settings.DEBUG:
        error_details = {
            "exception": str(exc),
            "traceback": traceback.format_exc().split('\n'),
        }

    data = {
        "error": CommonAPIErrorCodes.INTERNAL_SERVER_ERROR,
        "message": "An unexpected error occurred.",
        "details": error_details,
    }
    return Response(data, status=status.HTTP_500_INTERNAL_SERVER_ERROR)


def _get_error_code(exc: Exception) -> str:
    if isinstance(exc, (AuthenticationFailed, NotAuthenticated)):
        return CommonAPIErrorCodes.AUTHENTICATION_ERROR
    elif isinstance(exc, (DRFPermissionDenied, PermissionDenied)):
        return CommonAPIErrorCodes.AUTHORIZATION_ERROR
    elif isinstance(exc, (NotFound, Http404)):
        return CommonAPIErrorCodes.RESOURCE_NOT_FOUND
    elif isinstance(exc, (ParseError, DRFValidationError)):
        return CommonAPIErrorCodes.VALIDATION_ERROR
    elif isinstance(exc, MethodNotAllowed):
        return CommonAPIErrorCodes.OPERATION_NOT_ALLOWED
    elif isinstance(exc, Throttled):
        return CommonAPIErrorCodes.RATE_LIMIT_EXCEEDED
    elif getattr(exc, "default_code", None):
        return exc.default_code
    return CommonAPIErrorCodes.INTERNAL_SERVER_ERROR


def _get_error_message(exc: Exception, data: Any) -> str:
    if hasattr(exc, "detail") and isinstance(exc.detail, str):
        return exc.detail
    elif isinstance(data, dict) and isinstance(data.get("detail"), str):
        return data["detail"]
    elif isinstance(exc, DRFValidationError):
        return "Validation failed."
    return str(exc)


def _get_error_details(data: Any) -> Union[dict[str, Any], None]:
    if isinstance(data, dict):
        if isinstance(data.get("detail"), str):
            data_copy = data.copy()
            del data_copy["detail"]
            return data_copy or None
        return data
    elif isinstance(data, list):
        return {"errors": data}
    return None


def _log_exception(exc: Exception, error_code: str, request_info: str) -> None:
    """
    Log an exception with a severity matching its error code.
    """
    if error_code in SERVER_ERROR_CODES:
        logger.error(f"{error_code} in {request_info}: {exc.__class__.__name__}", exc_info=exc)
    elif error_code in ACCESS_ERROR_CODES:
        logger.warning(f"{error_code} in {request_info}: {exc}")
    else:
        logger.info(f"{error_code} in {request_info}: {exc}")
