"""
Request middleware for Agora application.

This middleware handles request processing, including:
- Generating a unique request ID for each request
- Storing the current request in thread local storage
- Logging request information
- Measuring request processing time
"""

import logging
import threading
import time
import uuid
from typing import Optional

from django.http import HttpRequest, HttpResponse
from django.utils.deprecation import MiddlewareMixin

# Thread local storage for the current request
_thread_local = threading.local()

logger = logging.getLogger('agora')

SKIP_LOGGING_PREFIXES = (
    '/static/',
    '/media/',
    '/api/health/',
    '/favicon.ico',
)


def get_current_request() -> Optional[HttpRequest]:
    """
    Get the current request from thread local storage.

    Returns:
        The current request or None if no request is available
    """
    return getattr(_thread_local, 'request', None)


def get_current_user_id() -> Optional[str]:
    """
    Get the current user ID from the request.

    Returns:
        The current user ID or None if no user is authenticated
    """
    request = get_current_request()
    if request and hasattr(request, 'user') and request.user.is_authenticated:
        return str(request.user.id)
    return None


def get_current_organization_id() -> Optional[str]:
    """
    Get the ID of the organization the current request acts on.

    Returns:
        The organization ID or None if the request has not resolved one
    """
    request = get_current_request()
    organization = getattr(request, 'organization_context', None)
    if organization:
        return str(organization.id)
    return None


class RequestMiddleware(MiddlewareMixin):
    """
    Middleware to handle request processing.

    This middleware:
    - Generates a unique request ID for each request
    - Stores the current request in thread local storage
    - Logs request information
    - Measures request processing time
    """

    def process_request(self, request: HttpRequest) -> None:
        request.id = str(uuid.uuid4())
        request.organization_context = None
        _thread_local.request = request
        request.start_time = time.time()

        if not self._should_skip_logging(request.path):
            logger.info(
                f"Request: {request.method} {request.path}",
                extra={
                    'request_id': request.id,
                    'method': request.method,
                    'path': request.path,
                    'ip_address': request.META.get('REMOTE_ADDR'),
                },
            )
        return None

    def process_response(self, request: HttpRequest, response: HttpResponse) -> HttpResponse:
        if hasattr(request, 'id'):
            response['X-Request-ID'] = request.id

        if not self._should_skip_logging(request.path):
            self._log_response(request, response)

        if hasattr(_thread_local, 'request'):
            del _thread_local.request

        return response

    def _log_response(self, request: HttpRequest, response: HttpResponse) -> None:
        duration = None
        if hasattr(request, 'start_time'):
            duration = time.time() - request.start_time

        user_id = None
        if hasattr(request, 'user') and request.user.is_authenticated:
            user_id = str(request.user.id)

        logger.info(
            f"Response: {request.method} {request.path} {response.status_code}",
            extra={
                'request_id': getattr(request, 'id', None),
                'user_id': user_id,
                'status_code': response.status_code,
                'duration': duration,
            }
        )

        # Log requests that take more than 1 second
        if duration and duration > 1.0:
            logger.warning(
                f"Slow request: {request.method} {request.path} took {duration:.3f}s",
                extra={
                    'request_id': getattr(request, 'id', None),
                    'user_id': user_id,
                    'duration': duration,
                }
            )

    def _should_skip_logging(self, path: str) -> bool:
        return path.startswith(SKIP_LOGGING_PREFIXES)
