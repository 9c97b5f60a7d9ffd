"""
Views for meeting management in the management app.
"""

from django.utils.decorators import method_decorator
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import mixins, permissions, status
from rest_framework.decorators import action
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from core.common.error_utils import audit_log
from core.common.exceptions import ResourceNotFoundException
from core.common.includes import geocoding
from core.common.includes.field_visibility import (
    REGISTRATION_TYPE_SELECTOR,
    TYPE_OF_MEETING_SELECTOR,
    derive_visibility,
)
from core.common.includes.meetings import CommandOutcome, CreateMeeting
from core.common.models import Component, Meeting
from core.common.responses import validation_error_response
from core.common.serializers.meeting_serializers import (
    FieldVisibilityQuerySerializer,
    MeetingFormSerializer,
    MeetingSerializer,
)
from management.filters import MeetingFilter

MEETINGS_MANIFEST = "meetings"


class ManagementMeetingViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    GenericViewSet,
):
    """
    ViewSet for managing the meetings of a meetings component.
    Allows administrators to list, inspect and create meetings.
    """
    permission_classes = [permissions.IsAuthenticated, permissions.IsAdminUser]
    serializer_class = MeetingSerializer
    filter_backends = [DjangoFilterBackend]
    filterset_class = MeetingFilter

    def initial(self, request, *args, **kwargs):
        super().initial(request, *args, **kwargs)
        # Expose the organization to request-scoped logging
        request._request.organization_context = self.current_component.organization

    @property
    def current_component(self):
        if not hasattr(self, "_current_component"):
            try:
                self._current_component = Component.objects.select_related(
                    "participatory_space__organization"
                ).get(pk=self.kwargs.get("component_pk"), manifest_name=MEETINGS_MANIFEST)
            except Component.DoesNotExist:
                raise ResourceNotFoundException("Meetings component not found.")
        return self._current_component

    def get_queryset(self):
        """
        Return the meetings of the current component.
        """
        if getattr(self, "swagger_fake_view", False):
            return Meeting.objects.none()

        return (
            Meeting.objects.filter(component=self.current_component)
            .select_related("questionnaire")
            .prefetch_related("services")
        )

    @method_decorator(audit_log(event_type="meeting.create", resource_type="meeting"))
    def create(self, request, *args, **kwargs):
        """
        Create a meeting with its services and registration questionnaire.
        """
        data = geocoding.attach_coordinates(request.data)
        form = MeetingFormSerializer(
            data=data,
            context={
                "request": request,
                "current_user": request.user,
                "current_component": self.current_component,
                "current_organization": self.current_component.organization,
            },
        )

        result = CreateMeeting(form).call()
        if result.outcome == CommandOutcome.INVALID:
            return validation_error_response(details=result.errors)

        return Response(MeetingSerializer(result.meeting).data, status=status.HTTP_201_CREATED)

    @action(detail=False, methods=["get"], url_path="form-visibility")
    def form_visibility(self, request, component_pk=None):
        """
        Report which meeting form field groups are visible for the given selector values.
        """
        query = FieldVisibilityQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        return Response(
            derive_visibility(
                {
                    TYPE_OF_MEETING_SELECTOR: query.validated_data["type_of_meeting"],
                    REGISTRATION_TYPE_SELECTOR: query.validated_data["registration_type"],
                }
            )
        )
