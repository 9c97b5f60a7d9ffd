"""
Serializers for meeting management.
"""

from rest_framework import serializers

from core.common.includes.field_visibility import (
    REGISTRATION_TYPE_SELECTOR,
    TYPE_OF_MEETING_SELECTOR,
    is_group_visible,
)
from core.common.models import (
    Category,
    Meeting,
    MeetingService,
    RegistrationType,
    Scope,
    TypeOfMeeting,
)
from core.common.serializers.base import BaseModelSerializer


def translated_field(**kwargs):
    """Mapping of language code to text."""
    kwargs.setdefault("required", False)
    kwargs.setdefault("default", dict)
    return serializers.DictField(child=serializers.CharField(allow_blank=True), **kwargs)


class MeetingServiceFormSerializer(serializers.Serializer):
    """
    Serializer for one service submitted with the meeting form.
    """
    title = translated_field(required=True, default=serializers.empty)
    description = translated_field()
    deleted = serializers.BooleanField(required=False, default=False)


class MeetingFormSerializer(serializers.Serializer):
    """
    Admin form for creating a meeting.

    Must be bound with current_user, current_component and
    current_organization in its context. Unknown keys, such as a published
    flag, are ignored.
    """

    TRANSLATED_FIELDS = (
        "title",
        "description",
        "location",
        "location_hints",
        "registration_terms",
        "registration_email_custom_content",
    )

    title = translated_field(required=True, default=serializers.empty)
    description = translated_field(required=True, default=serializers.empty)
    location = translated_field()
    location_hints = translated_field()
    start_time = serializers.DateTimeField()
    end_time = serializers.DateTimeField()
    address = serializers.CharField(required=False, allow_blank=True, default="")
    latitude = serializers.FloatField(required=False, allow_null=True, default=None)
    longitude = serializers.FloatField(required=False, allow_null=True, default=None)
    scope = serializers.PrimaryKeyRelatedField(
        queryset=Scope.objects.all(), required=False, allow_null=True, default=None
    )
    category = serializers.PrimaryKeyRelatedField(
        queryset=Category.objects.all(), required=False, allow_null=True, default=None
    )
    private_meeting = serializers.BooleanField(required=False, default=False)
    transparent = serializers.BooleanField(required=False, default=True)
    transparent_type = serializers.CharField(required=False, allow_blank=True, max_length=20, default="")
    type_of_meeting = serializers.ChoiceField(choices=TypeOfMeeting.choices)
    online_meeting_url = serializers.URLField(required=False, allow_blank=True, default="")
    show_iframe = serializers.BooleanField(required=False, default=False)
    registration_type = serializers.ChoiceField(
        choices=RegistrationType.choices, required=False, default=RegistrationType.REGISTRATION_DISABLED
    )
    available_slots = serializers.IntegerField(required=False, min_value=0, default=0)
    registration_url = serializers.URLField(required=False, allow_blank=True, default="")
    registration_terms = translated_field()
    customize_registration_email = serializers.BooleanField(required=False, default=False)
    registration_email_custom_content = translated_field()
    services = MeetingServiceFormSerializer(many=True, required=False, default=list)

    @property
    def current_user(self):
        return self.context["current_user"]

    @property
    def current_component(self):
        return self.context["current_component"]

    @property
    def current_organization(self):
        return self.context["current_organization"]

    @property
    def services_to_persist(self):
        """Submitted services not flagged as deleted, in submission order."""
        return [
            {"title": service["title"], "description": service.get("description", {})}
            for service in self.validated_data.get("services", [])
            if not service.get("deleted")
        ]

    def validate(self, data):
        """
        Validate cross-field consistency of the meeting data.
        """
        errors = {}
        organization = self.current_organization
        default_locale = organization.default_locale
        selector_values = {
            TYPE_OF_MEETING_SELECTOR: data.get("type_of_meeting"),
            REGISTRATION_TYPE_SELECTOR: data.get("registration_type"),
        }

        for name in self.TRANSLATED_FIELDS:
            unknown = set(data.get(name, {})) - set(organization.available_locales)
            if unknown:
                errors[name] = f"Unsupported locales: {', '.join(sorted(unknown))}."

        required_translations = ["title", "description"]
        if is_group_visible("in_person", selector_values):
            required_translations.append("location")
            if not data.get("address", "").strip():
                errors["address"] = "Address is required for in person meetings."
        if is_group_visible("registration_terms", selector_values):
            required_translations.append("registration_terms")
        if data.get("customize_registration_email"):
            required_translations.append("registration_email_custom_content")
        for name in required_translations:
            if name not in errors and not data.get(name, {}).get(default_locale, "").strip():
                errors[name] = f"A value in {default_locale} is required."

        if is_group_visible("online", selector_values) and not data.get("online_meeting_url"):
            errors["online_meeting_url"] = "Online meeting URL is required for online meetings."
        if is_group_visible("registration_url", selector_values) and not data.get("registration_url"):
            errors["registration_url"] = "Registration URL is required when registering on a different platform."

        if data["end_time"] < data["start_time"]:
            errors["end_time"] = "End time must not be before start time."

        if (data.get("latitude") is None) != (data.get("longitude") is None):
            errors["latitude"] = "Latitude and longitude must be provided together."

        scope = data.get("scope")
        if scope is not None and not Scope.objects.for_organization(organization.id).filter(pk=scope.pk).exists():
            errors["scope"] = "Scope does not belong to this organization."
        category = data.get("category")
        if category is not None and category.participatory_space_id != self.current_component.participatory_space_id:
            errors["category"] = "Category does not belong to this participatory space."

        for index, service in enumerate(data.get("services", [])):
            if not service.get("deleted") and not service["title"].get(default_locale, "").strip():
                errors[f"services[{index}].title"] = f"A value in {default_locale} is required."

        if errors:
            raise serializers.ValidationError(errors)
        return data


class MeetingServiceSerializer(serializers.ModelSerializer):
    """
    Serializer for the MeetingService model.
    """

    class Meta:
        model = MeetingService
        fields = ["id", "title", "description", "position"]
        read_only_fields = fields


class MeetingSerializer(BaseModelSerializer):
    """
    Serializer for the Meeting model.
    """
    services = MeetingServiceSerializer(many=True, read_only=True)
    questionnaire = serializers.PrimaryKeyRelatedField(read_only=True)
    published = serializers.BooleanField(read_only=True)

    class Meta:
        model = Meeting
        fields = [
            "id", "component", "author", "title", "description", "location", "location_hints",
            "start_time", "end_time", "address", "latitude", "longitude", "scope", "category",
            "private_meeting", "transparent", "transparent_type", "type_of_meeting",
            "online_meeting_url", "show_iframe", "registration_type", "available_slots",
            "registration_url", "registration_terms", "customize_registration_email",
            "registration_email_custom_content", "published", "published_at", "services",
            "questionnaire", "created_at", "created_by", "last_modified_at",
        ]
        read_only_fields = fields


class FieldVisibilityQuerySerializer(serializers.Serializer):
    """
    Current selector values of the meeting form.
    """
    type_of_meeting = serializers.ChoiceField(choices=TypeOfMeeting.choices, required=False, allow_null=True, default=None)
    registration_type = serializers.ChoiceField(choices=RegistrationType.choices, required=False, allow_null=True, default=None)
