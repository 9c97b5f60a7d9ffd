from datetime import timedelta

from django.contrib.auth import get_user_model
from django.utils import timezone

from core.common.models import Category, Component, Organization, ParticipatorySpace, Scope

User = get_user_model()


def create_user(username="admin", is_staff=True, is_superuser=False):
    """
    Create and return a new user.
    """
    return User.objects.create_user(
        username=username,
        email=f"{username}@example.com",
        password="testpassword",
        is_staff=is_staff,
        is_superuser=is_superuser,
    )


def create_organization(host="agora.test", available_locales=None):
    """
    Create and return a new organization.
    """
    return Organization.objects.create(
        name="Test Organization",
        host=host,
        available_locales=available_locales or ["en"],
        default_locale="en",
    )


def create_participatory_space(organization, slug="test-process"):
    return ParticipatorySpace.objects.create(
        organization=organization,
        slug=slug,
        title={"en": "Test process"},
    )


def create_component(participatory_space, manifest_name="meetings"):
    return Component.objects.create(
        participatory_space=participatory_space,
        manifest_name=manifest_name,
        name={"en": "Meetings"},
    )


def create_scope(organization):
    return Scope.objects.create(organization=organization, name={"en": "District"})


def create_category(participatory_space):
    return Category.objects.create(participatory_space=participatory_space, name={"en": "Mobility"})


def meeting_form_data(**overrides):
    """
    Valid payload for the meeting form of an online meeting registered on this platform.
    """
    start_time = timezone.now() + timedelta(days=1)
    data = {
        "title": {"en": "title"},
        "description": {"en": "description"},
        "location": {"en": "location"},
        "location_hints": {"en": "location_hints"},
        "start_time": start_time.isoformat(),
        "end_time": (start_time + timedelta(hours=1)).isoformat(),
        "address": "address",
        "latitude": 40.1234,
        "longitude": 2.1234,
        "private_meeting": False,
        "transparent": True,
        "type_of_meeting": "online",
        "online_meeting_url": "http://example.org",
        "registration_type": "on_this_platform",
        "available_slots": 0,
        "registration_url": "http://example.org",
        "registration_terms": {"en": "registration terms"},
        "customize_registration_email": True,
        "registration_email_custom_content": {"en": "The registration email custom content."},
        "show_iframe": True,
        "services": [
            {"title": {"en": "First service"}, "description": {"en": "First description"}},
            {"title": {"en": "Second service"}, "description": {"en": "Second description"}},
        ],
    }
    data.update(overrides)
    return data
