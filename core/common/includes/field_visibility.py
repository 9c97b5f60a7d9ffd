"""
Field visibility rules for the meeting admin form.

Which field groups of the form are shown depends only on the current value
of two selectors: the type of meeting and the registration type. The state is
recomputed from those values every time, never transitioned.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Optional

from core.common.models import RegistrationType, TypeOfMeeting

logger = logging.getLogger("agora")

HYBRID = TypeOfMeeting.HYBRID.value

TYPE_OF_MEETING_SELECTOR = "meeting_type_of_meeting"
REGISTRATION_TYPE_SELECTOR = "meeting_registration_type"


def compute_visibility(
    selector_value: Optional[str], group_type: str, dual_value: Optional[str] = HYBRID
) -> bool:
    """
    A group is visible when the selector holds its type, or holds the dual
    value under which every group of the selector applies at once.
    """
    if selector_value is None:
        return False
    if dual_value is not None and selector_value == dual_value:
        return True
    return selector_value == group_type


@dataclass(frozen=True)
class FieldGroupBinding:
    """Ties a field group of the form to the selector controlling it."""

    selector: str
    group: str
    group_type: str
    dual_value: Optional[str] = None

    def is_visible(self, selector_value: Optional[str]) -> bool:
        return compute_visibility(selector_value, self.group_type, self.dual_value)


MEETING_FORM_BINDINGS = (
    FieldGroupBinding(TYPE_OF_MEETING_SELECTOR, "online", TypeOfMeeting.ONLINE.value, HYBRID),
    FieldGroupBinding(TYPE_OF_MEETING_SELECTOR, "in_person", TypeOfMeeting.IN_PERSON.value, HYBRID),
    FieldGroupBinding(
        REGISTRATION_TYPE_SELECTOR, "available_slots", RegistrationType.ON_THIS_PLATFORM.value
    ),
    FieldGroupBinding(
        REGISTRATION_TYPE_SELECTOR, "registration_terms", RegistrationType.ON_THIS_PLATFORM.value
    ),
    FieldGroupBinding(
        REGISTRATION_TYPE_SELECTOR, "registration_url", RegistrationType.ON_DIFFERENT_PLATFORM.value
    ),
)


def derive_visibility(values: dict[str, Optional[str]], bindings=MEETING_FORM_BINDINGS) -> dict[str, bool]:
    """
    Map every field group to its visibility for the given selector values.

    Args:
        values: Current value of each selector, keyed by selector id

    Returns:
        Dictionary of group name to visibility
    """
    return {binding.group: binding.is_visible(values.get(binding.selector)) for binding in bindings}


def is_group_visible(group: str, values: dict[str, Optional[str]], bindings=MEETING_FORM_BINDINGS) -> bool:
    for binding in bindings:
        if binding.group == group:
            return binding.is_visible(values.get(binding.selector))
    raise KeyError(f"Unknown field group: {group}")


class FormSurface(ABC):
    """Abstract rendering surface the controller reads selectors from and toggles groups on."""

    @abstractmethod
    def get_value(self, selector: str) -> Optional[str]:
        """Current value of a selector control."""
        pass

    @abstractmethod
    def find_group(self, group: str) -> Optional[Any]:
        """Handle of a field group, or None when the form does not render it."""
        pass

    @abstractmethod
    def set_visible(self, handle: Any, visible: bool) -> None:
        """Show or hide a field group without touching the values it holds."""
        pass

    @abstractmethod
    def on_change(self, selector: str, callback: Callable[[str], None]) -> None:
        """Call back with the selector id every time the selector changes."""
        pass


class FieldVisibilityController:
    """
    Keeps the field groups of a form consistent with its selectors.

    Groups are evaluated once on initialize(), which supports forms rendered
    with preselected values, and again synchronously on every change event.
    """

    def __init__(self, surface: FormSurface, bindings=MEETING_FORM_BINDINGS):
        self.surface = surface
        self.bindings = tuple(bindings)

    @property
    def selectors(self) -> list[str]:
        seen = []
        for binding in self.bindings:
            if binding.selector not in seen:
                seen.append(binding.selector)
        return seen

    def initialize(self) -> None:
        for selector in self.selectors:
            self.surface.on_change(selector, self.refresh)
            self.refresh(selector)

    def refresh(self, selector: str) -> None:
        value = self.surface.get_value(selector)
        for binding in self.bindings:
            if binding.selector != selector:
                continue
            handle = self.surface.find_group(binding.group)
            if handle is None:
                logger.debug(f"Field group {binding.group} not rendered, skipping")
                continue
            self.surface.set_visible(handle, binding.is_visible(value))

    def state(self) -> dict[str, bool]:
        values = {selector: self.surface.get_value(selector) for selector in self.selectors}
        return derive_visibility(values, self.bindings)


class InMemoryFormSurface(FormSurface):
    """
    Form surface kept in memory: selector values, rendered groups with their
    visibility, and the values typed into each group's fields.
    """

    def __init__(self, values: Optional[dict[str, Optional[str]]] = None, groups=None):
        self.values = dict(values or {})
        self.visibility = {group: True for group in (groups or [])}
        self.field_values: dict[str, dict[str, Any]] = {group: {} for group in self.visibility}
        self._listeners: dict[str, list[Callable[[str], None]]] = {}

    def get_value(self, selector):
        return self.values.get(selector)

    def find_group(self, group):
        return group if group in self.visibility else None

    def set_visible(self, handle, visible):
        self.visibility[handle] = visible

    def on_change(self, selector, callback):
        self._listeners.setdefault(selector, []).append(callback)

    def change(self, selector: str, value: Optional[str]) -> None:
        """Set a selector value and dispatch its change event."""
        self.values[selector] = value
        for callback in self._listeners.get(selector, []):
            callback(selector)

    def fill(self, group: str, field: str, value: Any) -> None:
        self.field_values[group][field] = value

    def visible_groups(self) -> set[str]:
        return {group for group, visible in self.visibility.items() if visible}
