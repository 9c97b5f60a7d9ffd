"""
Custom model managers for Agora application.
"""

from typing import Any

from django.db import models
from django.db.models.query import QuerySet


class OrganizationFilteredManager(models.Manager):
    """
    A manager that scopes querysets by organization for multi-tenant data isolation.
    """

    def for_organization(self, organization_id: Any) -> QuerySet:
        """
        Return a queryset filtered by the specified organization.

        Args:
            organization_id: The ID of the organization to filter by

        Returns:
            A queryset filtered by the specified organization
        """
        return super().get_queryset().filter(organization_id=organization_id)
