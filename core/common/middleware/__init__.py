"""
Middleware package for core.common.
"""

from core.common.middleware.request_middleware import RequestMiddleware

__all__ = [
    'RequestMiddleware',
]
