"""
Meeting model for Agora participatory meetings.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _

from core.common.models.base import UUIDPrimaryKey, ObjectHistoryTracker


class TypeOfMeeting(models.TextChoices):
    """How attendees take part in a meeting"""

    IN_PERSON = "in_person", _("In person")
    ONLINE = "online", _("Online")
    HYBRID = "hybrid", _("Hybrid")


class RegistrationType(models.TextChoices):
    """Where attendees register for a meeting"""

    REGISTRATION_DISABLED = "registration_disabled", _("Registration disabled")
    ON_THIS_PLATFORM = "on_this_platform", _("On this platform")
    ON_DIFFERENT_PLATFORM = "on_different_platform", _("On a different platform")


class Meeting(UUIDPrimaryKey, ObjectHistoryTracker):
    """
    Represents a scheduled participatory meeting.
    Holds location, time window and registration settings. Free text fields
    are translated and stored as a mapping of language code to text.
    """

    component = models.ForeignKey(
        "common.Component",
        on_delete=models.CASCADE,
        related_name="meetings",
        verbose_name=_("Component"),
        help_text=_("The meetings component this meeting belongs to"),
    )

    author = models.ForeignKey(
        "common.Organization",
        on_delete=models.CASCADE,
        related_name="authored_meetings",
        verbose_name=_("Author"),
        help_text=_("The organization that created this meeting"),
    )

    title = models.JSONField(
        default=dict,
        verbose_name=_("Meeting Title"),
        help_text=_("The title of the meeting"),
    )

    description = models.JSONField(
        default=dict,
        verbose_name=_("Description"),
        help_text=_("Detailed description of the meeting"),
    )

    location = models.JSONField(
        default=dict,
        blank=True,
        verbose_name=_("Location"),
        help_text=_("Name of the place the meeting happens in"),
    )

    location_hints = models.JSONField(
        default=dict,
        blank=True,
        verbose_name=_("Location Hints"),
        help_text=_("Directions to find the meeting place"),
    )

    start_time = models.DateTimeField(
        verbose_name=_("Start Time"),
        help_text=_("When the meeting starts"),
    )

    end_time = models.DateTimeField(
        verbose_name=_("End Time"),
        help_text=_("When the meeting ends"),
    )

    address = models.CharField(
        max_length=255,
        blank=True,
        verbose_name=_("Address"),
        help_text=_("Street address used for geocoding"),
    )

    latitude = models.FloatField(
        blank=True,
        null=True,
        verbose_name=_("Latitude"),
    )

    longitude = models.FloatField(
        blank=True,
        null=True,
        verbose_name=_("Longitude"),
    )

    scope = models.ForeignKey(
        "common.Scope",
        on_delete=models.SET_NULL,
        blank=True,
        null=True,
        related_name="meetings",
        verbose_name=_("Scope"),
    )

    category = models.ForeignKey(
        "common.Category",
        on_delete=models.SET_NULL,
        blank=True,
        null=True,
        related_name="meetings",
        verbose_name=_("Category"),
    )

    private_meeting = models.BooleanField(
        default=False,
        verbose_name=_("Private Meeting"),
        help_text=_("Whether only invited participants can see this meeting"),
    )

    transparent = models.BooleanField(
        default=True,
        verbose_name=_("Transparent"),
        help_text=_("Whether a private meeting is still listed publicly"),
    )

    transparent_type = models.CharField(
        max_length=20,
        blank=True,
        verbose_name=_("Transparency Type"),
    )

    type_of_meeting = models.CharField(
        max_length=20,
        choices=TypeOfMeeting.choices,
        default=TypeOfMeeting.IN_PERSON,
        verbose_name=_("Type of Meeting"),
    )

    online_meeting_url = models.URLField(
        blank=True,
        verbose_name=_("Online Meeting URL"),
        help_text=_("URL to join the meeting (external platform)"),
    )

    show_iframe = models.BooleanField(
        default=False,
        verbose_name=_("Show Iframe"),
        help_text=_("Whether the online meeting is embedded in the meeting page"),
    )

    registration_type = models.CharField(
        max_length=30,
        choices=RegistrationType.choices,
        default=RegistrationType.REGISTRATION_DISABLED,
        verbose_name=_("Registration Type"),
    )

    available_slots = models.PositiveIntegerField(
        default=0,
        verbose_name=_("Available Slots"),
        help_text=_("Number of registrations accepted (0 for unlimited)"),
    )

    registration_url = models.URLField(
        blank=True,
        verbose_name=_("Registration URL"),
        help_text=_("URL of the external registration platform"),
    )

    registration_terms = models.JSONField(
        default=dict,
        blank=True,
        verbose_name=_("Registration Terms"),
    )

    customize_registration_email = models.BooleanField(
        default=False,
        verbose_name=_("Customize Registration Email"),
    )

    registration_email_custom_content = models.JSONField(
        default=dict,
        blank=True,
        verbose_name=_("Registration Email Custom Content"),
    )

    published_at = models.DateTimeField(
        blank=True,
        null=True,
        verbose_name=_("Published At"),
        help_text=_("When the meeting was published, empty while unpublished"),
    )

    class Meta:
        verbose_name = _("Meeting")
        verbose_name_plural = _("Meetings")
        ordering = ["-start_time"]
        indexes = [
            models.Index(fields=["component", "start_time"], name="meeting_component_start_idx"),
            models.Index(fields=["type_of_meeting"], name="meeting_type_idx"),
            models.Index(fields=["registration_type"], name="meeting_registration_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=(
                    models.Q(latitude__isnull=True, longitude__isnull=True)
                    | models.Q(latitude__isnull=False, longitude__isnull=False)
                ),
                name="meeting_coordinates_pair",
            ),
        ]

    def __str__(self):
        return f"{self.title} - {self.start_time.strftime('%Y-%m-%d %H:%M')}"

    @property
    def published(self):
        return self.published_at is not None

    @property
    def organization(self):
        return self.component.organization
