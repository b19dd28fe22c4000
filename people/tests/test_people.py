"""
Tests for the people application.
"""

from django.contrib.auth import get_user_model
from django.test import TestCase, override_settings
from django.urls import reverse

from groups.tests.fixtures import PASSWORD, build_fixtures
from people.models import Person, person_label

User = get_user_model()


class PersonTests(TestCase):
    def test_person_created_with_user(self):
        user = User.objects.create_user("neu", password=PASSWORD)
        self.assertTrue(Person.objects.filter(user=user).exists())

    def test_display_name(self):
        user = User.objects.create_user("pia", first_name="Pia", last_name="Pfister")
        self.assertEqual(str(user.person), "Pia Pfister")

        user.person.nickname = "Pünktli"
        self.assertEqual(user.person.full_name, "Pia Pfister / Pünktli")

    def test_display_name_falls_back_to_username(self):
        user = User.objects.create_user("anonym")
        self.assertEqual(person_label(user), "anonym")

    def test_contact_value(self):
        user = User.objects.create_user("pia", first_name="Pia", email="pia@example.ch")
        user.person.town = "Bern"

        self.assertEqual(user.person.contact_value("first_name"), "Pia")
        self.assertEqual(user.person.contact_value("email"), "pia@example.ch")
        self.assertEqual(user.person.contact_value("town"), "Bern")
        with self.assertRaises(ValueError):
            user.person.contact_value("password")


@override_settings(PBS_TENTATIVE_QUERY_MIN_LENGTH=3)
class QueryTentativeTests(TestCase):
    def setUp(self):
        self.f = build_fixtures()
        self.url = reverse("people:query_tentative")

    def query(self, q, event=None):
        event = event or self.f.schekka_camp
        return self.client.get(self.url, {"q": q, "event_id": event.pk})

    def test_finds_people_by_nickname(self):
        self.client.login(username="al_schekka", password=PASSWORD)
        response = self.query("Akela")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            response.json(), [{"id": self.f.wolf.pk, "label": "Walter Wolf / Akela"}]
        )

    def test_short_query_returns_nothing(self):
        self.client.login(username="al_schekka", password=PASSWORD)
        self.assertEqual(self.query("Ak").json(), [])

    def test_people_outside_the_layer_are_not_found(self):
        self.client.login(username="al_schekka", password=PASSWORD)
        self.assertEqual(self.query("Berchtold").json(), [])

    def test_requires_permission_on_event(self):
        self.client.login(username="pfadi", password=PASSWORD)
        self.assertEqual(self.query("Akela").status_code, 403)

    def test_unknown_event(self):
        self.client.login(username="al_schekka", password=PASSWORD)
        response = self.client.get(self.url, {"q": "Akela"})
        self.assertEqual(response.status_code, 404)

    def test_non_numeric_event(self):
        self.client.login(username="al_schekka", password=PASSWORD)
        response = self.client.get(self.url, {"q": "Akela", "event_id": "lager"})
        self.assertEqual(response.status_code, 404)
