"""
Domain functions for Agora application.
Pure functions and commands with module-scoped imports.
"""

from core.common.includes import field_visibility
from core.common.includes import geocoding
from core.common.includes import meetings
from core.common.includes import traceability

__all__ = [
    "field_visibility",
    "geocoding",
    "meetings",
    "traceability",
]
