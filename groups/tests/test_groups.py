"""
Tests for the group tree, the layer permissions and the group pages.
"""

from django.contrib.auth.models import AnonymousUser
from django.core.exceptions import PermissionDenied
from django.test import TestCase
from django.urls import reverse
from django.utils import timezone

from events.models import Approval, Participation
from groups.models import Group, Role
from groups.permissions import can_write_layer, require_layer_write
from groups.tests.fixtures import PASSWORD, build_fixtures, create_role, create_user


class GroupTreeTests(TestCase):
    def setUp(self):
        self.f = build_fixtures()

    def test_layer_group(self):
        self.assertEqual(self.f.schekka_pfadi.layer_group, self.f.schekka)
        self.assertEqual(self.f.schekka.layer_group, self.f.schekka)

    def test_layer_groups_stop_at_nested_layers(self):
        self.assertEqual(
            set(self.f.schekka.layer_groups()),
            {self.f.schekka, self.f.schekka_pfadi, self.f.schekka_woelfe},
        )
        self.assertEqual(self.f.be.layer_groups(), [self.f.be])

    def test_nearest(self):
        self.assertEqual(self.f.schekka_pfadi.kantonalverband, self.f.be)
        self.assertEqual(self.f.schekka.region, self.f.bern)
        self.assertIsNone(self.f.be.region)
        self.assertEqual(self.f.schekka.nearest(Group.Type.BUND), self.f.bund)

    def test_descendants(self):
        self.assertEqual(len(self.f.be.descendants()), 5)

    def test_role_flags(self):
        leader = Role.objects.get(person=self.f.al_schekka)
        member = Role.objects.get(person=self.f.pfadi)

        self.assertTrue(leader.is_leader)
        self.assertEqual(leader.permission, "layer_and_below_full")
        self.assertFalse(member.is_leader)
        self.assertEqual(member.permission, "group_read")


class PermissionTests(TestCase):
    def setUp(self):
        self.f = build_fixtures()

    def test_layer_and_below_full_covers_layers_below(self):
        self.assertTrue(can_write_layer(self.f.bulei, self.f.schekka_pfadi))
        self.assertTrue(can_write_layer(self.f.al_be, self.f.schekka))
        self.assertTrue(can_write_layer(self.f.al_schekka, self.f.schekka_woelfe))

    def test_no_write_above_or_beside(self):
        self.assertFalse(can_write_layer(self.f.al_schekka, self.f.be))
        self.assertFalse(can_write_layer(self.f.al_schekka, self.f.berchtold))
        self.assertFalse(can_write_layer(self.f.pfadi, self.f.schekka_pfadi))

    def test_layer_full_covers_own_layer_only(self):
        admin = create_user("adressen")
        create_role(admin, self.f.be, Role.Type.ADRESSVERWALTUNG)

        self.assertTrue(can_write_layer(admin, self.f.be))
        self.assertFalse(can_write_layer(admin, self.f.schekka))

    def test_ended_role_grants_nothing(self):
        Role.objects.filter(person=self.f.al_schekka).update(deleted_at=timezone.now())
        self.assertFalse(can_write_layer(self.f.al_schekka, self.f.schekka))

    def test_anonymous_and_superuser(self):
        self.assertFalse(can_write_layer(AnonymousUser(), self.f.schekka))

        admin = create_user("root", is_superuser=True)
        self.assertTrue(can_write_layer(admin, self.f.schekka))

    def test_require_layer_write(self):
        require_layer_write(self.f.al_schekka, self.f.schekka)
        with self.assertRaises(PermissionDenied):
            require_layer_write(self.f.pfadi, self.f.schekka)


class GroupViewTests(TestCase):
    def setUp(self):
        self.f = build_fixtures()

    def login(self, username):
        self.client.login(username=username, password=PASSWORD)

    def test_detail(self):
        self.login("pfadi")
        response = self.client.get(reverse("groups:detail", kwargs={"group_id": self.f.schekka.pk}))

        self.assertEqual(response.status_code, 200)
        self.assertFalse(response.context["can_write"])
        self.assertEqual(
            set(response.context["children"]), {self.f.schekka_pfadi, self.f.schekka_woelfe}
        )

    def test_detail_requires_login(self):
        response = self.client.get(reverse("groups:detail", kwargs={"group_id": self.f.schekka.pk}))
        self.assertEqual(response.status_code, 302)

    def test_pending_approvals(self):
        pending = Participation.objects.create(event=self.f.top_course, person=self.f.pfadi)
        done = Participation.objects.create(event=self.f.top_course, person=self.f.wolf)
        Approval.objects.filter(participation=done).update(approved=True)

        self.login("al_schekka")
        response = self.client.get(
            reverse("groups:pending_approvals", kwargs={"group_id": self.f.schekka_pfadi.pk})
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            [a.participation for a in response.context["approvals"]], [pending]
        )

    def test_pending_approvals_denied_to_members(self):
        self.login("pfadi")
        response = self.client.get(
            reverse("groups:pending_approvals", kwargs={"group_id": self.f.schekka.pk})
        )
        self.assertEqual(response.status_code, 403)

    def test_population_flags_incomplete_people(self):
        unknown = create_user("unknown", "Ursula", "Unbekannt")
        create_role(unknown, self.f.schekka_pfadi, Role.Type.MITGLIED)

        self.login("al_schekka")
        response = self.client.get(
            reverse("groups:population", kwargs={"group_id": self.f.schekka.pk})
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.context["total"], 4)
        self.assertEqual(response.context["incomplete_count"], 1)
        self.assertContains(response, "1 Person(en) ohne Geburtstag oder Geschlecht")

    def test_population_of_section_group_is_not_found(self):
        self.login("al_schekka")
        response = self.client.get(
            reverse("groups:population", kwargs={"group_id": self.f.schekka_pfadi.pk})
        )
        self.assertEqual(response.status_code, 404)
