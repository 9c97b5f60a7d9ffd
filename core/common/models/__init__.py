"""
Models for core.common.
"""

from core.common.models.base import (
    UUIDPrimaryKey,
    ObjectHistoryTracker,
    AbstractOrganizationModel,
)
from core.common.models.organization import Organization
from core.common.models.participatory_space import (
    ParticipatorySpace,
    Component,
    Scope,
    Category,
)
from core.common.models.meeting import (
    Meeting,
    MeetingService,
    TypeOfMeeting,
    RegistrationType,
)
from core.common.models.forms import Questionnaire
from core.common.models.action_log import ActionLog, ResourceVersion

__all__ = [
    "UUIDPrimaryKey",
    "ObjectHistoryTracker",
    "AbstractOrganizationModel",
    "Organization",
    "ParticipatorySpace",
    "Component",
    "Scope",
    "Category",
    "Meeting",
    "MeetingService",
    "TypeOfMeeting",
    "RegistrationType",
    "Questionnaire",
    "ActionLog",
    "ResourceVersion",
]
