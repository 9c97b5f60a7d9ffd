"""
Traceability utilities for Agora application.

Records who did what to which resource: a ResourceVersion with the attribute
snapshot plus an ActionLog row pointing to it.
"""

import logging
from typing import Any, Optional

from django.db import transaction
from django.forms.models import model_to_dict

from core.common.logging import log_audit
from core.common.models import ActionLog, ResourceVersion

logger = logging.getLogger("agora")


def resource_type_for(resource) -> str:
    return resource._meta.label_lower


def snapshot(resource) -> dict[str, Any]:
    """Attribute snapshot of a model instance, foreign keys as ids."""
    data = model_to_dict(resource)
    data["id"] = resource.pk
    return data


def _resolve_scope(resource):
    component = getattr(resource, "component", None)
    participatory_space = getattr(component or resource, "participatory_space", None)
    organization = getattr(participatory_space, "organization", None)
    if organization is None:
        organization = getattr(resource, "organization", None)
    return organization, component, participatory_space


def record(
    action: str,
    user,
    resource,
    attributes: Optional[dict[str, Any]] = None,
    visibility: str = ActionLog.Visibility.ADMIN_ONLY,
    extra: Optional[dict[str, Any]] = None,
) -> ActionLog:
    """
    Record an action performed by a user on a resource.

    Args:
        action: What was done (create, update, delete...)
        user: The user performing the action
        resource: The model instance acted upon
        attributes: Attribute snapshot to version, defaults to the resource's
        visibility: Who may see the log entry
        extra: Additional context stored with the log entry

    Returns:
        The created ActionLog
    """
    organization, component, participatory_space = _resolve_scope(resource)
    if organization is None:
        raise ValueError(f"Cannot trace {resource!r}: no organization to attach the log to")

    with transaction.atomic():
        version = ResourceVersion.objects.create(
            item_type=resource_type_for(resource),
            item_id=str(resource.pk),
            event=action,
            whodunnit=str(user.pk) if user is not None else "",
            object_changes=attributes if attributes is not None else snapshot(resource),
        )
        action_log = ActionLog.objects.create(
            organization=organization,
            user=user,
            action=action,
            resource_type=resource_type_for(resource),
            resource_id=str(resource.pk),
            component=component,
            participatory_space=participatory_space,
            visibility=visibility,
            extra=extra or {},
            version=version,
            created_by=str(user.pk) if user is not None else None,
        )

    log_audit(
        event_type=f"{resource._meta.model_name}.{action}",
        user_id=str(user.pk) if user is not None else None,
        organization_id=str(organization.pk),
        resource_type=resource_type_for(resource),
        resource_id=str(resource.pk),
        details={"visibility": visibility},
    )
    return action_log
