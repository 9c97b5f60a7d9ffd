"""
Meetings utilities for Agora application.

CreateMeeting turns a validated meeting form into a persisted, unpublished
meeting with its services, its registration questionnaire and an audit entry.
Persistence and audit are reached through the store and audit log
interfaces below so callers can swap the Django-backed defaults.
"""

import enum
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional

from django.db import DatabaseError, transaction

from core.common.error_utils import log_exceptions
from core.common.exceptions import PersistenceFailedException
from core.common.includes import traceability
from core.common.models import ActionLog, Meeting, MeetingService, Questionnaire

logger = logging.getLogger("agora")

MEETING_ATTRIBUTES = (
    "title",
    "description",
    "location",
    "location_hints",
    "start_time",
    "end_time",
    "address",
    "latitude",
    "longitude",
    "scope",
    "category",
    "private_meeting",
    "transparent",
    "transparent_type",
    "type_of_meeting",
    "online_meeting_url",
    "show_iframe",
    "registration_type",
    "available_slots",
    "registration_url",
    "registration_terms",
    "customize_registration_email",
    "registration_email_custom_content",
)


class CommandOutcome(str, enum.Enum):
    OK = "ok"
    INVALID = "invalid"


@dataclass
class CommandResult:
    outcome: CommandOutcome
    meeting: Optional[Meeting] = None
    errors: dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.outcome == CommandOutcome.OK


class MeetingStoreInterface(ABC):
    """Abstract persistence for meetings and their dependents."""

    @abstractmethod
    def atomic(self):
        """Context manager wrapping every write of a command in one transaction."""
        pass

    @abstractmethod
    def create_meeting(self, attributes: dict[str, Any]) -> Meeting:
        pass

    @abstractmethod
    def create_services(self, meeting: Meeting, services: list[dict[str, Any]]) -> list[MeetingService]:
        pass

    @abstractmethod
    def create_questionnaire(self, meeting: Meeting) -> Questionnaire:
        pass


class AuditLogInterface(ABC):
    """Abstract audit trail."""

    @abstractmethod
    def record(self, actor, resource, attributes: dict[str, Any], visibility: str) -> Any:
        """Record the creation of a resource by an actor."""
        pass


class DjangoMeetingStore(MeetingStoreInterface):
    """Meeting persistence over the Django ORM."""

    def atomic(self):
        return transaction.atomic()

    def create_meeting(self, attributes):
        return Meeting.objects.create(**attributes)

    def create_services(self, meeting, services):
        return MeetingService.objects.bulk_create(
            [
                MeetingService(
                    meeting=meeting,
                    title=service["title"],
                    description=service.get("description", {}),
                    position=position,
                    created_by=meeting.created_by,
                )
                for position, service in enumerate(services)
            ]
        )

    def create_questionnaire(self, meeting):
        return Questionnaire.objects.create(meeting=meeting, created_by=meeting.created_by)


class TraceabilityAuditLog(AuditLogInterface):
    """Audit trail stored as action logs with versions."""

    def record(self, actor, resource, attributes, visibility):
        return traceability.record(
            "create", actor, resource, attributes=attributes, visibility=visibility
        )


class CreateMeeting:
    """
    Command creating a meeting from the admin form.

    Usage:
        result = CreateMeeting(form).call()
        if result.outcome == CommandOutcome.INVALID:
            ...  # render form.errors

    The form must expose is_valid(), errors, validated_data, services_to_persist
    and the current_user, current_component and current_organization it was
    bound with.
    """

    def __init__(
        self,
        form,
        store: Optional[MeetingStoreInterface] = None,
        audit_log: Optional[AuditLogInterface] = None,
    ):
        self.form = form
        self.store = store or DjangoMeetingStore()
        self.audit_log = audit_log or TraceabilityAuditLog()

    def call(self) -> CommandResult:
        if not self.form.is_valid():
            logger.info(
                "Meeting form rejected",
                extra={"errors": dict(self.form.errors)},
            )
            return CommandResult(CommandOutcome.INVALID, errors=dict(self.form.errors))

        meeting = self._create_meeting()
        logger.info(
            f"Meeting created: {meeting.id} in component {meeting.component_id}",
            extra={"meeting_id": str(meeting.id), "services": meeting.services.count()},
        )
        return CommandResult(CommandOutcome.OK, meeting=meeting)

    @log_exceptions(exception_mapping={DatabaseError: PersistenceFailedException})
    def _create_meeting(self) -> Meeting:
        attributes = self._meeting_attributes()
        with self.store.atomic():
            meeting = self.store.create_meeting(attributes)
            self.store.create_services(meeting, list(self.form.services_to_persist))
            self.store.create_questionnaire(meeting)
            self.audit_log.record(
                self.form.current_user,
                meeting,
                traceability.snapshot(meeting),
                ActionLog.Visibility.ALL,
            )
        return meeting

    def _meeting_attributes(self) -> dict[str, Any]:
        data = self.form.validated_data
        attributes = {name: data[name] for name in MEETING_ATTRIBUTES if name in data}
        attributes.update(
            author=self.form.current_organization,
            component=self.form.current_component,
            created_by=str(self.form.current_user.pk),
            published_at=None,
        )
        return attributes
