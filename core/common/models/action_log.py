"""
Traceability models for Agora application.

Every admin action on a resource leaves an ActionLog row pointing to a
ResourceVersion with the attribute snapshot taken at that moment.
"""

from django.conf import settings
from django.core.serializers.json import DjangoJSONEncoder
from django.db import models
from django.utils.translation import gettext_lazy as _

from core.common.models.base import AbstractOrganizationModel, UUIDPrimaryKey


class ResourceVersion(UUIDPrimaryKey):
    """
    Snapshot of a resource's attributes after a change.
    """

    item_type = models.CharField(
        max_length=100,
        verbose_name=_("item type"),
        help_text=_("App label and model name of the versioned resource"),
    )
    item_id = models.CharField(
        max_length=64,
        verbose_name=_("item id"),
    )
    event = models.CharField(
        max_length=20,
        verbose_name=_("event"),
        help_text=_("What happened to the resource (create, update, destroy)"),
    )
    whodunnit = models.CharField(
        max_length=64,
        blank=True,
        verbose_name=_("whodunnit"),
        help_text=_("Id of the user responsible for the change"),
    )
    object_changes = models.JSONField(
        default=dict,
        encoder=DjangoJSONEncoder,
        verbose_name=_("object changes"),
    )
    created_at = models.DateTimeField(
        auto_now_add=True,
        verbose_name=_("created at"),
    )

    class Meta:
        verbose_name = _("Resource Version")
        verbose_name_plural = _("Resource Versions")
        ordering = ["created_at"]
        indexes = [
            models.Index(fields=["item_type", "item_id"], name="version_item_idx"),
        ]

    def __str__(self):
        return f"{self.event} {self.item_type}:{self.item_id}"


class ActionLog(AbstractOrganizationModel):
    """
    Audit log for admin actions.

    Append-only: rows are created by the traceability service and never
    updated afterwards.
    """

    class Visibility(models.TextChoices):
        ALL = "all", _("All")
        ADMIN_ONLY = "admin-only", _("Admin only")
        PUBLIC_ONLY = "public-only", _("Public only")
        PRIVATE_ONLY = "private-only", _("Private only")

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="action_logs",
        verbose_name=_("user"),
        help_text=_("User who performed the action"),
    )
    action = models.CharField(
        max_length=50,
        verbose_name=_("action"),
    )
    resource_type = models.CharField(
        max_length=100,
        verbose_name=_("resource type"),
    )
    resource_id = models.CharField(
        max_length=64,
        verbose_name=_("resource id"),
    )
    component = models.ForeignKey(
        "common.Component",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="action_logs",
        verbose_name=_("component"),
    )
    participatory_space = models.ForeignKey(
        "common.ParticipatorySpace",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="action_logs",
        verbose_name=_("participatory space"),
    )
    visibility = models.CharField(
        max_length=20,
        choices=Visibility.choices,
        default=Visibility.ADMIN_ONLY,
        verbose_name=_("visibility"),
    )
    extra = models.JSONField(
        default=dict,
        encoder=DjangoJSONEncoder,
        verbose_name=_("extra"),
        help_text=_("Additional context about the action"),
    )
    version = models.OneToOneField(
        "common.ResourceVersion",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="action_log",
        verbose_name=_("version"),
    )

    class Meta:
        verbose_name = _("Action Log")
        verbose_name_plural = _("Action Logs")
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["organization", "created_at"], name="action_log_org_created_idx"),
            models.Index(fields=["resource_type", "resource_id"], name="action_log_resource_idx"),
            models.Index(fields=["visibility"], name="action_log_visibility_idx"),
        ]

    def __str__(self):
        return f"{self.action} {self.resource_type}:{self.resource_id} by {self.user_id}"
