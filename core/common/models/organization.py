"""
Organization models for Agora application.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _

from core.common.models.base import UUIDPrimaryKey, ObjectHistoryTracker


def default_available_locales():
    return ["en"]


class Organization(UUIDPrimaryKey, ObjectHistoryTracker):
    """
    Organization model representing a participatory platform tenant.
    This is the primary entity for multi-tenant architecture and the author
    of every meeting created from the admin side.
    """

    name = models.CharField(
        verbose_name=_("organization name"),
        max_length=255,
        help_text=_("Name of the organization"),
    )
    host = models.CharField(
        verbose_name=_("host"),
        max_length=255,
        unique=True,
        help_text=_("Host name the organization is served from"),
    )
    available_locales = models.JSONField(
        verbose_name=_("available locales"),
        default=default_available_locales,
        help_text=_("Language codes content can be written in"),
    )
    default_locale = models.CharField(
        verbose_name=_("default locale"),
        max_length=10,
        default="en",
        help_text=_("Language code required on every translatable field"),
    )
    is_active = models.BooleanField(
        verbose_name=_("is active"),
        default=True,
        help_text=_("Whether this organization is active in the system"),
    )

    class Meta:
        default_permissions = []
        verbose_name = _("organization")
        verbose_name_plural = _("organizations")
        ordering = ["name"]
        indexes = [
            models.Index(fields=["name"], name="organization_name_idx"),
        ]

    def __str__(self):
        return f"{self.name} ({self.host})"
