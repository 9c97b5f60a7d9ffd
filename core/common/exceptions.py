"""
Custom exceptions for Agora application.

This module defines all custom exceptions used throughout the Agora application.
Each exception has a specific error code, status code, and default message.
"""

from rest_framework import status
from rest_framework.exceptions import APIException

from core.common.error_codes import CommonAPIErrorCodes


class AgoraBaseException(APIException):
    """
    Base exception for all Agora exceptions.

    All custom exceptions should inherit from this class to ensure consistent
    error handling and response formatting.
    """
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "An unexpected error occurred."
    default_code = CommonAPIErrorCodes.INTERNAL_SERVER_ERROR


class ResourceNotFoundException(AgoraBaseException):
    """
    Exception raised when a resource is not found.

    This exception should be used when a requested resource does not exist.
    """
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "The requested resource was not found."
    default_code = CommonAPIErrorCodes.RESOURCE_NOT_FOUND


class DatabaseException(AgoraBaseException):
    """
    Exception raised when a database operation fails.

    This exception should be used for database-related errors.
    """
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Database operation failed."
    default_code = CommonAPIErrorCodes.DATABASE_ERROR


class PersistenceFailedException(DatabaseException):
    """
    Exception raised when a write inside a command transaction fails.

    Every write of the command has been rolled back when this is raised.
    It is not retried.
    """
    default_detail = "The resource could not be saved."
    default_code = CommonAPIErrorCodes.PERSISTENCE_FAILED
