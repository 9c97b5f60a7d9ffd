"""
Questionnaire models for Agora application.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _

from core.common.models.base import UUIDPrimaryKey, ObjectHistoryTracker


class Questionnaire(UUIDPrimaryKey, ObjectHistoryTracker):
    """
    Registration form attached to a meeting. Every meeting owns exactly one.
    """

    meeting = models.OneToOneField(
        verbose_name=_("meeting"),
        to="common.Meeting",
        on_delete=models.CASCADE,
        related_name="questionnaire",
        help_text=_("The meeting attendees register to with this questionnaire"),
    )
    title = models.JSONField(
        verbose_name=_("title"),
        default=dict,
        blank=True,
    )
    description = models.JSONField(
        verbose_name=_("description"),
        default=dict,
        blank=True,
    )
    tos = models.JSONField(
        verbose_name=_("terms of service"),
        default=dict,
        blank=True,
    )
    published_at = models.DateTimeField(
        verbose_name=_("published at"),
        blank=True,
        null=True,
    )

    class Meta:
        default_permissions = []
        verbose_name = _("questionnaire")
        verbose_name_plural = _("questionnaires")

    def __str__(self):
        return f"Registration questionnaire for {self.meeting_id}"
