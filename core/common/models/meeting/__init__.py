"""
Meeting models for Agora participatory meetings.
"""

from .meeting import Meeting, TypeOfMeeting, RegistrationType
from .service import MeetingService

__all__ = [
    "Meeting",
    "TypeOfMeeting",
    "RegistrationType",
    "MeetingService",
]
