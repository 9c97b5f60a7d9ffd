from unittest.mock import patch

from django.db import DatabaseError
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from core.common.error_codes import CommonAPIErrorCodes
from core.common.models import ActionLog, Meeting
from core.common.tests.utils import (
    create_component,
    create_organization,
    create_participatory_space,
    create_user,
    meeting_form_data,
)


class ManagementMeetingViewSetTests(APITestCase):
    def setUp(self):
        self.organization = create_organization()
        self.participatory_space = create_participatory_space(self.organization)
        self.component = create_component(self.participatory_space)
        self.admin_user = create_user()
        self.user = create_user(username="participant", is_staff=False)
        self.list_url = reverse(
            "management:meeting-list", kwargs={"component_pk": self.component.pk}
        )

    def test_create_meeting_authenticated_admin(self):
        """
        Ensure admins can create a meeting with its services and questionnaire.
        """
        self.client.force_authenticate(user=self.admin_user)
        response = self.client.post(self.list_url, meeting_form_data(), format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        meeting = Meeting.objects.get(pk=response.data["id"])
        self.assertEqual(meeting.component, self.component)
        self.assertEqual(len(response.data["services"]), 2)
        self.assertEqual(response.data["questionnaire"], meeting.questionnaire.pk)
        self.assertFalse(response.data["published"])
        self.assertEqual(
            ActionLog.objects.get(resource_id=str(meeting.pk)).visibility,
            ActionLog.Visibility.ALL,
        )

    def test_create_meeting_invalid_data(self):
        """
        Ensure an invalid form is answered with its field errors and nothing is saved.
        """
        self.client.force_authenticate(user=self.admin_user)
        data = meeting_form_data(type_of_meeting="in_person", address="")
        response = self.client.post(self.list_url, data, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"], CommonAPIErrorCodes.VALIDATION_ERROR)
        self.assertIn("address", response.data["details"])
        self.assertEqual(Meeting.objects.count(), 0)

    @patch("core.common.includes.meetings.DjangoMeetingStore.create_questionnaire")
    def test_create_meeting_persistence_failure(self, mock_create_questionnaire):
        """
        Ensure a failed write is reported as a persistence failure and rolled back.
        """
        mock_create_questionnaire.side_effect = DatabaseError("insert failed")
        self.client.force_authenticate(user=self.admin_user)
        response = self.client.post(self.list_url, meeting_form_data(), format="json")

        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(response.data["error"], CommonAPIErrorCodes.PERSISTENCE_FAILED)
        self.assertEqual(Meeting.objects.count(), 0)

    @patch("core.common.includes.geocoding.get_geocoder")
    def test_create_meeting_geocodes_address(self, mock_get_geocoder):
        """
        Ensure coordinates are filled from the address when none are submitted.
        """
        mock_get_geocoder.return_value.geocode.return_value = (41.3851, 2.1734)
        self.client.force_authenticate(user=self.admin_user)
        data = meeting_form_data(latitude=None, longitude=None)
        response = self.client.post(self.list_url, data, format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["latitude"], 41.3851)
        self.assertEqual(response.data["longitude"], 2.1734)

    def test_create_meeting_form_encoded(self):
        """
        Ensure a multipart form post with dotted locale keys creates the meeting.
        """
        self.client.force_authenticate(user=self.admin_user)
        data = {
            "title.en": "Neighbourhood assembly",
            "description.en": "Monthly assembly",
            "start_time": "2030-01-01T10:00:00Z",
            "end_time": "2030-01-01T12:00:00Z",
            "type_of_meeting": "online",
            "online_meeting_url": "https://meet.example.org/assembly",
        }
        response = self.client.post(self.list_url, data, format="multipart")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["title"], {"en": "Neighbourhood assembly"})
        self.assertEqual(response.data["description"], {"en": "Monthly assembly"})
        self.assertIsNone(response.data["latitude"])

    @patch("core.common.includes.geocoding.get_geocoder")
    def test_create_meeting_form_encoded_geocodes_address(self, mock_get_geocoder):
        mock_get_geocoder.return_value.geocode.return_value = (41.3851, 2.1734)
        self.client.force_authenticate(user=self.admin_user)
        data = {
            "title.en": "Neighbourhood assembly",
            "description.en": "Monthly assembly",
            "location.en": "Civic centre",
            "start_time": "2030-01-01T10:00:00Z",
            "end_time": "2030-01-01T12:00:00Z",
            "type_of_meeting": "in_person",
            "address": "Plaça de Catalunya, Barcelona",
            "latitude": "",
            "longitude": "",
        }
        response = self.client.post(self.list_url, data, format="multipart")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["latitude"], 41.3851)
        self.assertEqual(response.data["longitude"], 2.1734)
        self.assertEqual(response.data["location"], {"en": "Civic centre"})

    def test_list_meetings(self):
        self.client.force_authenticate(user=self.admin_user)
        self.client.post(self.list_url, meeting_form_data(), format="json")

        response = self.client.get(self.list_url)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data["results"]), 1)

    def test_list_meetings_filtered_by_published(self):
        self.client.force_authenticate(user=self.admin_user)
        self.client.post(self.list_url, meeting_form_data(), format="json")

        response = self.client.get(self.list_url, {"published": "true"})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data["results"]), 0)

    def test_retrieve_meeting(self):
        self.client.force_authenticate(user=self.admin_user)
        created = self.client.post(self.list_url, meeting_form_data(), format="json")

        url = reverse(
            "management:meeting-detail",
            kwargs={"component_pk": self.component.pk, "pk": created.data["id"]},
        )
        response = self.client.get(url)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["title"], {"en": "title"})

    def test_form_visibility(self):
        self.client.force_authenticate(user=self.admin_user)
        url = reverse(
            "management:meeting-form-visibility", kwargs={"component_pk": self.component.pk}
        )

        response = self.client.get(
            url, {"type_of_meeting": "hybrid", "registration_type": "on_different_platform"}
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(
            response.data,
            {
                "online": True,
                "in_person": True,
                "available_slots": False,
                "registration_terms": False,
                "registration_url": True,
            },
        )

    def test_form_visibility_rejects_unknown_value(self):
        self.client.force_authenticate(user=self.admin_user)
        url = reverse(
            "management:meeting-form-visibility", kwargs={"component_pk": self.component.pk}
        )

        response = self.client.get(url, {"type_of_meeting": "carrier_pigeon"})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_create_meeting_requires_admin(self):
        """
        Ensure non admin users cannot create meetings.
        """
        self.client.force_authenticate(user=self.user)
        response = self.client.post(self.list_url, meeting_form_data(), format="json")

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(Meeting.objects.count(), 0)

    def test_create_meeting_unauthenticated(self):
        response = self.client.post(self.list_url, meeting_form_data(), format="json")

        self.assertIn(
            response.status_code, (status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN)
        )

    def test_component_of_another_manifest_not_found(self):
        self.client.force_authenticate(user=self.admin_user)
        proposals = create_component(self.participatory_space, manifest_name="proposals")
        url = reverse("management:meeting-list", kwargs={"component_pk": proposals.pk})

        response = self.client.get(url)

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["error"], CommonAPIErrorCodes.RESOURCE_NOT_FOUND)
        self.assertEqual(response.data["message"], "Meetings component not found.")

    def test_unknown_component_not_found(self):
        self.client.force_authenticate(user=self.admin_user)
        url = reverse(
            "management:meeting-list",
            kwargs={"component_pk": "00000000-0000-0000-0000-000000000000"},
        )

        response = self.client.post(url, meeting_form_data(), format="json")

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["error"], CommonAPIErrorCodes.RESOURCE_NOT_FOUND)
        self.assertEqual(Meeting.objects.count(), 0)
