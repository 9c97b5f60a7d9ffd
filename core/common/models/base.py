"""
Base models for Agora application.
"""

import uuid

from django.db import models
from django.utils.translation import gettext_lazy as _

from core.common.managers import OrganizationFilteredManager


class ObjectHistoryTracker(models.Model):
    """Abstract class for keeping track of creation and changes made to a model object"""

    created_at = models.DateTimeField(
        verbose_name=_("creation date"),
        auto_now_add=True,
    )
    created_by = models.CharField(
        max_length=64,
        verbose_name=_("created by"),
        null=True,
        blank=True,
        help_text=_("the Id of the account user who added this object."),
    )
    last_modified_at = models.DateTimeField(
        verbose_name=_("last modified date"),
        auto_now=True,
    )
    last_modified_by = models.CharField(
        max_length=64,
        verbose_name=_("last modified by"),
        null=True,
        blank=True,
        help_text=_("the Id of the account user who last modified this object."),
    )

    class Meta:
        abstract = True


class UUIDPrimaryKey(models.Model):
    id = models.UUIDField(
        verbose_name="id",
        primary_key=True,
        default=uuid.uuid4,
        help_text=_("UUID primary key"),
    )

    class Meta:
        abstract = True


class AbstractOrganizationModel(UUIDPrimaryKey, ObjectHistoryTracker):
    """
    Base model for everything owned directly by an organization.
    Provides organization-based filtering for multi-tenant data isolation.
    """

    organization = models.ForeignKey(
        verbose_name=_("organization"),
        to="common.Organization",
        on_delete=models.CASCADE,
        related_name="%(class)ss",
        related_query_name="%(class)s",
        help_text=_("The organization this object belongs to"),
    )

    objects = OrganizationFilteredManager()

    class Meta:
        abstract = True
