"""
Error handling utilities for Agora application.

This module provides utility functions for error handling, including:
- Exception wrapping
- Error logging
- Audit logging of decorated calls
"""

import functools
import logging
import traceback
from typing import Any, Callable, Optional, Type, TypeVar, cast

from django.http import HttpRequest

from core.common.exceptions import AgoraBaseException
from core.common.logging import get_request_logger, log_audit
from core.common.middleware.request_middleware import (
    get_current_request,
    get_current_user_id,
    get_current_organization_id,
)

logger = logging.getLogger("agora")

# Type variable for function return type
T = TypeVar("T")


def _find_mapped_exception(
    exc: Exception,
    exception_mapping: dict[Type[Exception], Type[AgoraBaseException]],
) -> Optional[Type[AgoraBaseException]]:
    # Most specific mapping wins, so IntegrityError can be mapped apart from DatabaseError
    for klass in type(exc).__mro__:
        if klass in exception_mapping:
            return exception_mapping[klass]
    return None


def log_exceptions(
    exception_mapping: Optional[
        dict[Type[Exception], Type[AgoraBaseException]]
    ] = None,
    log_level: int = logging.ERROR,
    reraise: bool = True,
) -> Callable:
    """
    Decorator to handle exceptions in a consistent way.

    Exceptions matching a key of the mapping (subclasses included) are logged
    with context and re-raised as the mapped Agora exception, chained to the
    original one.

    Args:
        exception_mapping: Mapping of exception types to Agora exception types
        log_level: The log level to use for exceptions
        reraise: Whether to reraise the exception after handling

    Returns:
        A decorator function
    """
    if exception_mapping is None:
        exception_mapping = {}

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> T:
            try:
                return func(*args, **kwargs)
            except tuple(exception_mapping.keys()) as exc:
                log_exception_with_context(
                    exc, log_level=log_level, context={"function": func.__qualname__}
                )

                agora_exception_class = _find_mapped_exception(exc, exception_mapping)
                if agora_exception_class:
                    raise agora_exception_class(str(exc)) from exc

                if reraise:
                    raise

                return cast(T, None)

        return wrapper

    return decorator


def log_exception_with_context(
    exc: Exception,
    log_level: int = logging.ERROR,
    request: Optional[HttpRequest] = None,
    context: Optional[dict[str, Any]] = None,
) -> None:
    """
    Log an exception with context.

    Args:
        exc: The exception to log
        log_level: The log level to use
        request: The request object
        context: Additional context information
    """
    if request is None:
        request = get_current_request()

    if request:
        log = get_request_logger(request)
    else:
        log = logger

    message = f"Exception: {exc.__class__.__name__}: {str(exc)}"

    extra = {
        "exception_type": exc.__class__.__name__,
        "exception_message": str(exc),
        "traceback": traceback.format_exc(),
    }

    user_id = get_current_user_id()
    if user_id:
        extra["user_id"] = user_id

    organization_id = get_current_organization_id()
    if organization_id:
        extra["organization_id"] = organization_id

    if context:
        extra.update(context)

    log.log(log_level, message, extra=extra)


def audit_log(
    event_type: str,
    resource_type: Optional[str] = None,
    get_resource_id: Optional[Callable[..., Optional[str]]] = None,
) -> Callable:
    """
    Decorator to log audit events.

    Args:
        event_type: The type of event (e.g., 'meeting.create')
        resource_type: The type of resource affected (e.g., 'meeting')
        get_resource_id: Function to extract the resource ID from function arguments

    Returns:
        A decorator function
    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> T:
            resource_id = None
            if get_resource_id:
                resource_id = get_resource_id(*args, **kwargs)

            try:
                result = func(*args, **kwargs)
            except Exception as exc:
                log_audit(
                    event_type=event_type,
                    user_id=get_current_user_id(),
                    organization_id=get_current_organization_id(),
                    resource_type=resource_type,
                    resource_id=resource_id,
                    details={
                        "status": "failure",
                        "error": str(exc),
                        "error_type": exc.__class__.__name__,
                    },
                )
                raise

            log_audit(
                event_type=event_type,
                user_id=get_current_user_id(),
                organization_id=get_current_organization_id(),
                resource_type=resource_type,
                resource_id=resource_id,
                details={"status": "success"},
            )
            return result

        return wrapper

    return decorator
