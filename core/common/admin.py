"""
Admin configuration for core.common models.
"""

from django.contrib import admin
from core.common.models import (
    ActionLog,
    Category,
    Component,
    Meeting,
    MeetingService,
    Organization,
    ParticipatorySpace,
    Questionnaire,
    Scope,
)

AUDIT_FIELDS = (
    "created_at",
    "created_by",
    "last_modified_at",
    "last_modified_by",
)


@admin.register(Organization)
class OrganizationAdmin(admin.ModelAdmin):
    """Admin configuration for Organization model."""

    list_display = ("name", "host", "default_locale", "is_active")
    list_filter = ("is_active",)
    search_fields = ("name", "host")
    readonly_fields = AUDIT_FIELDS


@admin.register(ParticipatorySpace)
class ParticipatorySpaceAdmin(admin.ModelAdmin):
    list_display = ("slug", "organization")
    search_fields = ("slug",)
    readonly_fields = AUDIT_FIELDS


@admin.register(Component)
class ComponentAdmin(admin.ModelAdmin):
    list_display = ("id", "manifest_name", "participatory_space", "published")
    list_filter = ("manifest_name", "published")
    readonly_fields = AUDIT_FIELDS


admin.site.register(Scope)
admin.site.register(Category)


class MeetingServiceInline(admin.TabularInline):
    model = MeetingService
    extra = 0
    fields = ("position", "title", "description")


class QuestionnaireInline(admin.StackedInline):
    model = Questionnaire
    extra = 0
    can_delete = False
    fields = ("title", "description", "tos", "published_at")

    def has_add_permission(self, request, obj=None):
        # Every meeting is created with its questionnaire
        return False


@admin.register(Meeting)
class MeetingAdmin(admin.ModelAdmin):
    """Admin configuration for Meeting model."""

    list_display = ("id", "component", "type_of_meeting", "registration_type", "start_time", "published_at")
    list_filter = ("type_of_meeting", "registration_type", "private_meeting", "transparent")
    date_hierarchy = "start_time"
    inlines = (MeetingServiceInline, QuestionnaireInline)
    readonly_fields = AUDIT_FIELDS + ("published_at",)
    fieldsets = (
        (
            "Basic Information",
            {"fields": ("component", "author", "title", "description", "start_time", "end_time")},
        ),
        (
            "Location",
            {
                "fields": (
                    "type_of_meeting",
                    "location",
                    "location_hints",
                    "address",
                    "latitude",
                    "longitude",
                    "online_meeting_url",
                    "show_iframe",
                )
            },
        ),
        (
            "Registration",
            {
                "fields": (
                    "registration_type",
                    "available_slots",
                    "registration_url",
                    "registration_terms",
                    "customize_registration_email",
                    "registration_email_custom_content",
                )
            },
        ),
        (
            "Visibility",
            {"fields": ("scope", "category", "private_meeting", "transparent", "transparent_type", "published_at")},
        ),
        ("Audit", {"fields": AUDIT_FIELDS}),
    )

    def has_add_permission(self, request):
        # Meetings are only created through CreateMeeting
        return False


@admin.register(ActionLog)
class ActionLogAdmin(admin.ModelAdmin):
    """Read-only view of the audit trail."""

    list_display = ("created_at", "action", "resource_type", "resource_id", "user", "visibility")
    list_filter = ("action", "resource_type", "visibility")
    search_fields = ("resource_id",)

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False
