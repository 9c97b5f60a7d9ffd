"""
Meeting service model for Agora participatory meetings.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _

from core.common.models.base import UUIDPrimaryKey, ObjectHistoryTracker


class MeetingService(UUIDPrimaryKey, ObjectHistoryTracker):
    """
    A named sub-offering attached to a meeting, such as childcare or
    translation. Services keep the order they were submitted in.
    """

    meeting = models.ForeignKey(
        "common.Meeting",
        on_delete=models.CASCADE,
        related_name="services",
        verbose_name=_("Meeting"),
    )

    title = models.JSONField(
        default=dict,
        verbose_name=_("Title"),
    )

    description = models.JSONField(
        default=dict,
        blank=True,
        verbose_name=_("Description"),
    )

    position = models.PositiveIntegerField(
        default=0,
        verbose_name=_("Position"),
        help_text=_("Display order of the service inside its meeting"),
    )

    class Meta:
        verbose_name = _("Meeting Service")
        verbose_name_plural = _("Meeting Services")
        ordering = ["position"]
        indexes = [
            models.Index(fields=["meeting", "position"], name="service_meeting_position_idx"),
        ]

    def __str__(self):
        return f"{self.title} ({self.meeting_id})"
