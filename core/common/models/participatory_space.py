"""
Participatory space models for Agora application.

Components, scopes and categories are the containers a meeting is
attached to.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _

from core.common.models.base import AbstractOrganizationModel, UUIDPrimaryKey, ObjectHistoryTracker


class ParticipatorySpace(AbstractOrganizationModel):
    """
    A participatory process or assembly grouping components and categories.
    """

    slug = models.SlugField(
        verbose_name=_("slug"),
        max_length=255,
        help_text=_("Slug used in public URLs"),
    )
    title = models.JSONField(
        verbose_name=_("title"),
        default=dict,
        help_text=_("Translated title, keyed by language code"),
    )

    class Meta:
        default_permissions = []
        verbose_name = _("participatory space")
        verbose_name_plural = _("participatory spaces")
        ordering = ["slug"]
        constraints = [
            models.UniqueConstraint(
                fields=["organization", "slug"], name="unique_space_slug_per_organization"
            ),
        ]

    def __str__(self):
        return self.slug


class Component(UUIDPrimaryKey, ObjectHistoryTracker):
    """
    A feature instance (meetings, proposals...) living in a participatory space.
    """

    participatory_space = models.ForeignKey(
        verbose_name=_("participatory space"),
        to="common.ParticipatorySpace",
        on_delete=models.CASCADE,
        related_name="components",
    )
    manifest_name = models.CharField(
        verbose_name=_("manifest name"),
        max_length=50,
        help_text=_("Kind of component, e.g. meetings"),
    )
    name = models.JSONField(
        verbose_name=_("name"),
        default=dict,
        help_text=_("Translated name, keyed by language code"),
    )
    published = models.BooleanField(
        verbose_name=_("published"),
        default=False,
    )

    class Meta:
        default_permissions = []
        verbose_name = _("component")
        verbose_name_plural = _("components")
        indexes = [
            models.Index(fields=["manifest_name"], name="component_manifest_idx"),
        ]

    def __str__(self):
        return f"{self.manifest_name} ({self.participatory_space})"

    @property
    def organization(self):
        return self.participatory_space.organization


class Scope(AbstractOrganizationModel):
    """
    A territorial or thematic scope meetings can be filtered by.
    """

    name = models.JSONField(
        verbose_name=_("name"),
        default=dict,
        help_text=_("Translated name, keyed by language code"),
    )

    class Meta:
        default_permissions = []
        verbose_name = _("scope")
        verbose_name_plural = _("scopes")

    def __str__(self):
        return str(self.name)


class Category(UUIDPrimaryKey, ObjectHistoryTracker):
    """
    A category defined inside a participatory space.
    """

    participatory_space = models.ForeignKey(
        verbose_name=_("participatory space"),
        to="common.ParticipatorySpace",
        on_delete=models.CASCADE,
        related_name="categories",
    )
    name = models.JSONField(
        verbose_name=_("name"),
        default=dict,
        help_text=_("Translated name, keyed by language code"),
    )

    class Meta:
        default_permissions = []
        verbose_name = _("category")
        verbose_name_plural = _("categories")

    def __str__(self):
        return str(self.name)
