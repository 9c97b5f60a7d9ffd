"""
Tests for the meeting form field visibility rules.
"""

from django.test import SimpleTestCase

from core.common.includes.field_visibility import (
    HYBRID,
    MEETING_FORM_BINDINGS,
    REGISTRATION_TYPE_SELECTOR,
    TYPE_OF_MEETING_SELECTOR,
    FieldGroupBinding,
    FieldVisibilityController,
    InMemoryFormSurface,
    compute_visibility,
    derive_visibility,
    is_group_visible,
)

ALL_GROUPS = ["online", "in_person", "available_slots", "registration_terms", "registration_url"]


class TestComputeVisibility(SimpleTestCase):
    def test_matching_value_is_visible(self):
        self.assertTrue(compute_visibility("online", "online"))
        self.assertTrue(compute_visibility("in_person", "in_person"))

    def test_other_value_is_hidden(self):
        self.assertFalse(compute_visibility("online", "in_person"))
        self.assertFalse(compute_visibility("in_person", "online"))

    def test_dual_value_shows_every_group(self):
        for group_type in ("online", "in_person"):
            self.assertTrue(compute_visibility(HYBRID, group_type))

    def test_without_dual_value_only_exact_match_counts(self):
        self.assertTrue(compute_visibility("on_this_platform", "on_this_platform", None))
        self.assertFalse(compute_visibility(HYBRID, "on_this_platform", None))

    def test_empty_selector_hides_group(self):
        """A selector without a value shows nothing."""
        self.assertFalse(compute_visibility(None, "online"))
        self.assertFalse(compute_visibility("", "online"))

    def test_unknown_value_hides_group(self):
        self.assertFalse(compute_visibility("carrier_pigeon", "online"))


class TestDeriveVisibility(SimpleTestCase):
    def test_online_meeting(self):
        state = derive_visibility({TYPE_OF_MEETING_SELECTOR: "online"})

        self.assertTrue(state["online"])
        self.assertFalse(state["in_person"])

    def test_hybrid_meeting_shows_both_groups(self):
        state = derive_visibility({TYPE_OF_MEETING_SELECTOR: "hybrid"})

        self.assertTrue(state["online"])
        self.assertTrue(state["in_person"])

    def test_registration_groups_are_exclusive(self):
        on_platform = derive_visibility({REGISTRATION_TYPE_SELECTOR: "on_this_platform"})
        elsewhere = derive_visibility({REGISTRATION_TYPE_SELECTOR: "on_different_platform"})
        disabled = derive_visibility({REGISTRATION_TYPE_SELECTOR: "registration_disabled"})

        self.assertTrue(on_platform["available_slots"])
        self.assertTrue(on_platform["registration_terms"])
        self.assertFalse(on_platform["registration_url"])
        self.assertFalse(elsewhere["available_slots"])
        self.assertFalse(elsewhere["registration_terms"])
        self.assertTrue(elsewhere["registration_url"])
        self.assertFalse(any(disabled[group] for group in ALL_GROUPS[2:]))

    def test_missing_selectors_hide_everything(self):
        state = derive_visibility({})

        self.assertEqual(set(state), set(ALL_GROUPS))
        self.assertFalse(any(state.values()))

    def test_is_group_visible(self):
        values = {TYPE_OF_MEETING_SELECTOR: "in_person"}

        self.assertTrue(is_group_visible("in_person", values))
        self.assertFalse(is_group_visible("online", values))

    def test_is_group_visible_rejects_unknown_group(self):
        with self.assertRaises(KeyError):
            is_group_visible("catering", {})


class TestFieldVisibilityController(SimpleTestCase):
    def build(self, values=None, groups=ALL_GROUPS, bindings=MEETING_FORM_BINDINGS):
        surface = InMemoryFormSurface(values=values, groups=groups)
        controller = FieldVisibilityController(surface, bindings)
        return surface, controller

    def test_initialize_applies_preselected_values(self):
        """Groups match the values the form was rendered with before any change."""
        surface, controller = self.build(
            {TYPE_OF_MEETING_SELECTOR: "in_person", REGISTRATION_TYPE_SELECTOR: "on_different_platform"}
        )

        controller.initialize()

        self.assertEqual(surface.visible_groups(), {"in_person", "registration_url"})

    def test_initialize_without_values_hides_all_groups(self):
        surface, controller = self.build()

        controller.initialize()

        self.assertEqual(surface.visible_groups(), set())

    def test_change_event_updates_groups(self):
        surface, controller = self.build({TYPE_OF_MEETING_SELECTOR: "online"})
        controller.initialize()

        surface.change(TYPE_OF_MEETING_SELECTOR, "in_person")

        self.assertFalse(surface.visibility["online"])
        self.assertTrue(surface.visibility["in_person"])

    def test_changing_to_hybrid_shows_both_groups(self):
        surface, controller = self.build({TYPE_OF_MEETING_SELECTOR: "online"})
        controller.initialize()

        surface.change(TYPE_OF_MEETING_SELECTOR, HYBRID)

        self.assertTrue(surface.visibility["online"])
        self.assertTrue(surface.visibility["in_person"])

    def test_change_only_touches_groups_of_that_selector(self):
        surface, controller = self.build(
            {TYPE_OF_MEETING_SELECTOR: "online", REGISTRATION_TYPE_SELECTOR: "on_this_platform"}
        )
        controller.initialize()

        surface.change(TYPE_OF_MEETING_SELECTOR, "in_person")

        self.assertTrue(surface.visibility["available_slots"])
        self.assertTrue(surface.visibility["registration_terms"])

    def test_refresh_is_idempotent(self):
        surface, controller = self.build({TYPE_OF_MEETING_SELECTOR: "online"})
        controller.initialize()
        before = dict(surface.visibility)

        controller.refresh(TYPE_OF_MEETING_SELECTOR)
        controller.refresh(TYPE_OF_MEETING_SELECTOR)

        self.assertEqual(surface.visibility, before)

    def test_state_depends_only_on_current_values(self):
        surface, controller = self.build()
        controller.initialize()

        for value in ("online", "hybrid", "in_person", "online"):
            surface.change(TYPE_OF_MEETING_SELECTOR, value)

        fresh_surface, fresh_controller = self.build({TYPE_OF_MEETING_SELECTOR: "online"})
        fresh_controller.initialize()
        self.assertEqual(surface.visibility, fresh_surface.visibility)
        self.assertEqual(controller.state(), fresh_controller.state())

    def test_missing_group_is_skipped(self):
        """Groups the form does not render are ignored without error."""
        surface, controller = self.build(
            {TYPE_OF_MEETING_SELECTOR: "hybrid"}, groups=["online"]
        )

        controller.initialize()
        surface.change(TYPE_OF_MEETING_SELECTOR, "in_person")

        self.assertEqual(surface.visibility, {"online": False})

    def test_hiding_a_group_keeps_its_values(self):
        surface, controller = self.build({TYPE_OF_MEETING_SELECTOR: "online"})
        controller.initialize()
        surface.fill("online", "online_meeting_url", "https://meet.example.org/room")

        surface.change(TYPE_OF_MEETING_SELECTOR, "in_person")
        surface.change(TYPE_OF_MEETING_SELECTOR, "online")

        self.assertTrue(surface.visibility["online"])
        self.assertEqual(
            surface.field_values["online"]["online_meeting_url"], "https://meet.example.org/room"
        )

    def test_custom_bindings(self):
        bindings = [FieldGroupBinding("delivery", "courier_details", "courier")]
        surface, controller = self.build(
            {"delivery": "courier"}, groups=["courier_details"], bindings=bindings
        )

        controller.initialize()
        self.assertTrue(surface.visibility["courier_details"])

        surface.change("delivery", "pickup")
        self.assertFalse(surface.visibility["courier_details"])

    def test_selectors_are_listed_once(self):
        _, controller = self.build()

        self.assertEqual(
            controller.selectors, [TYPE_OF_MEETING_SELECTOR, REGISTRATION_TYPE_SELECTOR]
        )
