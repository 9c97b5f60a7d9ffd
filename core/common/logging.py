"""
Minimal logging for Agora.
"""

import logging
from typing import Optional, Dict, Any
from django.conf import settings


def get_logger(name='agora'):
    """Get a logger instance."""
    return logging.getLogger(name)


logger = get_logger()


class RequestLoggerAdapter(logging.LoggerAdapter):
    """Adds request id, user id and organization id to every record."""

    def process(self, msg, kwargs):
        extra = dict(self.extra)
        extra.update(kwargs.get('extra') or {})
        kwargs['extra'] = extra
        return msg, kwargs


def get_request_logger(request, name='agora'):
    """Get a logger carrying the request context."""
    user = getattr(request, 'user', None)
    organization = getattr(request, 'organization_context', None)
    return RequestLoggerAdapter(
        get_logger(name),
        {
            'request_id': getattr(request, 'id', None),
            'user_id': str(user.id) if user is not None and user.is_authenticated else None,
            'organization_id': str(organization.id) if organization else None,
        },
    )


def log_audit(
    event_type: str,
    user_id: Optional[str] = None,
    organization_id: Optional[str] = None,
    resource_type: Optional[str] = None,
    resource_id: Optional[str] = None,
    details: Optional[Dict[str, Any]] = None
):
    """Log audit event (only in DEBUG mode for performance)."""
    if not settings.DEBUG:
        return

    logger.debug(
        f"AUDIT: {event_type} user={user_id} organization={organization_id} "
        f"resource={resource_type}:{resource_id} details={details}"
    )
