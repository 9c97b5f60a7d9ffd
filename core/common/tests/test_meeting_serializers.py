"""
Tests for the meeting form serializer.
"""

from django.test import TestCase

from core.common.serializers.meeting_serializers import MeetingFormSerializer
from core.common.tests.utils import (
    create_category,
    create_component,
    create_organization,
    create_participatory_space,
    create_scope,
    create_user,
    meeting_form_data,
)


class MeetingFormSerializerTestCase(TestCase):
    def setUp(self):
        self.user = create_user()
        self.organization = create_organization(available_locales=["en", "ca"])
        self.participatory_space = create_participatory_space(self.organization)
        self.component = create_component(self.participatory_space)

    def build_form(self, **overrides):
        return MeetingFormSerializer(
            data=meeting_form_data(**overrides),
            context={
                "current_user": self.user,
                "current_component": self.component,
                "current_organization": self.organization,
            },
        )

    def assertInvalid(self, form, field):
        self.assertFalse(form.is_valid())
        self.assertIn(field, form.errors)

    def test_valid_form(self):
        form = self.build_form()

        self.assertTrue(form.is_valid(), form.errors)
        self.assertEqual(len(form.services_to_persist), 2)

    def test_title_required_in_default_locale(self):
        self.assertInvalid(self.build_form(title={"ca": "títol"}), "title")

    def test_description_required(self):
        form = self.build_form()
        form.initial_data.pop("description")

        self.assertInvalid(form, "description")

    def test_unsupported_locale_rejected(self):
        self.assertInvalid(self.build_form(title={"en": "title", "fr": "titre"}), "title")

    def test_other_available_locales_are_accepted(self):
        form = self.build_form(title={"en": "title", "ca": "títol"})

        self.assertTrue(form.is_valid(), form.errors)

    def test_in_person_requires_address_and_location(self):
        form = self.build_form(type_of_meeting="in_person", address="", location={})

        self.assertInvalid(form, "address")
        self.assertIn("location", form.errors)

    def test_online_does_not_require_address(self):
        form = self.build_form(type_of_meeting="online", address="", location={})

        self.assertTrue(form.is_valid(), form.errors)

    def test_hybrid_requires_online_url_and_address(self):
        form = self.build_form(type_of_meeting="hybrid", address="", online_meeting_url="")

        self.assertInvalid(form, "address")
        self.assertIn("online_meeting_url", form.errors)

    def test_online_requires_url(self):
        self.assertInvalid(self.build_form(online_meeting_url=""), "online_meeting_url")

    def test_registration_on_this_platform_requires_terms(self):
        self.assertInvalid(self.build_form(registration_terms={}), "registration_terms")

    def test_registration_on_different_platform_requires_url(self):
        form = self.build_form(registration_type="on_different_platform", registration_url="")

        self.assertInvalid(form, "registration_url")

    def test_disabled_registration_needs_neither(self):
        form = self.build_form(
            registration_type="registration_disabled", registration_url="", registration_terms={}
        )

        self.assertTrue(form.is_valid(), form.errors)

    def test_custom_registration_email_requires_content(self):
        form = self.build_form(registration_email_custom_content={})

        self.assertInvalid(form, "registration_email_custom_content")

    def test_end_time_before_start_time_rejected(self):
        form = self.build_form(
            start_time="2030-01-01T10:00:00Z", end_time="2030-01-01T09:00:00Z"
        )

        self.assertInvalid(form, "end_time")

    def test_end_time_equal_to_start_time_accepted(self):
        form = self.build_form(
            start_time="2030-01-01T10:00:00Z", end_time="2030-01-01T10:00:00Z"
        )

        self.assertTrue(form.is_valid(), form.errors)

    def test_coordinates_must_come_in_pairs(self):
        self.assertInvalid(self.build_form(latitude=40.1, longitude=None), "latitude")

    def test_coordinates_may_both_be_empty(self):
        form = self.build_form(latitude=None, longitude=None)

        self.assertTrue(form.is_valid(), form.errors)

    def test_scope_from_another_organization_rejected(self):
        other_scope = create_scope(create_organization(host="other.test"))

        self.assertInvalid(self.build_form(scope=str(other_scope.pk)), "scope")

    def test_category_from_another_space_rejected(self):
        other_space = create_participatory_space(self.organization, slug="other-process")
        category = create_category(other_space)

        self.assertInvalid(self.build_form(category=str(category.pk)), "category")

    def test_service_title_required(self):
        form = self.build_form(services=[{"title": {"en": ""}}])

        self.assertInvalid(form, "services[0].title")

    def test_deleted_service_is_not_validated_or_persisted(self):
        form = self.build_form(
            services=[{"title": {"en": ""}, "deleted": True}, {"title": {"en": "Kept"}}]
        )

        self.assertTrue(form.is_valid(), form.errors)
        self.assertEqual(form.services_to_persist, [{"title": {"en": "Kept"}, "description": {}}])

    def test_published_flag_is_ignored(self):
        form = self.build_form(published=True)

        self.assertTrue(form.is_valid(), form.errors)
        self.assertNotIn("published", form.validated_data)
