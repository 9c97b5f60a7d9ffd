"""
Standard response helpers for Agora application.

This module provides helper functions for creating consistent API responses
throughout the application, particularly for error cases.
"""

from typing import Any, List, Optional, Union

from rest_framework import status
from rest_framework.response import Response

from core.common.error_codes import CommonAPIErrorCodes


def error_response(
    error_code: str,
    message: str,
    details: Optional[Union[dict[str, Any], List[Any], str]] = None,
    status_code: int = status.HTTP_400_BAD_REQUEST
) -> Response:
    """
    Create a standardized error response.

    Args:
        error_code: The error code
        message: A human-readable error message
        details: Optional additional error details
        status_code: The HTTP status code

    Returns:
        A Response object with standardized error format
    """
    response_data = {
        "error": error_code,
        "message": message,
    }

    if details is not None:
        response_data["details"] = details

    return Response(response_data, status=status_code)


def validation_error_response(
    message: str = "Validation failed.",
    details: Optional[dict[str, Any]] = None
) -> Response:
    """
    Create a validation error response.

    Args:
        message: A human-readable error message
        details: Validation error details

    Returns:
        A Response object with validation error format
    """
    return error_response(
        CommonAPIErrorCodes.VALIDATION_ERROR,
        message,
        details,
        status.HTTP_400_BAD_REQUEST
    )
