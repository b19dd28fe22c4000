"""
Tests for editing the invoice settings of a group.
"""

from django.test import TestCase
from django.urls import reverse

from core.tests.helpers import form_data, formset_data
from groups.tests.fixtures import PASSWORD, build_fixtures
from invoices.forms import InvoiceConfigForm, PaymentReminderConfigFormSet


class InvoiceConfigEditTests(TestCase):
    def setUp(self):
        self.f = build_fixtures()
        self.config = self.f.schekka.invoice_config
        self.url = reverse("invoices:edit", kwargs={"group_id": self.f.schekka.pk})

    def post_data(self, **overrides):
        data = form_data(InvoiceConfigForm(instance=self.config))
        data.update(
            formset_data(PaymentReminderConfigFormSet(instance=self.config, prefix="reminders"))
        )
        data.update(overrides)
        return data

    def test_layer_leader_sees_form(self):
        self.client.login(username="al_schekka", password=PASSWORD)
        response = self.client.get(self.url)

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.context["config"], self.config)
        self.assertEqual(len(response.context["formset"].forms), 3)

    def test_leader_of_layer_above_may_edit(self):
        self.client.login(username="al_be", password=PASSWORD)
        self.assertEqual(self.client.get(self.url).status_code, 200)

    def test_member_is_denied(self):
        self.client.login(username="pfadi", password=PASSWORD)
        self.assertEqual(self.client.get(self.url).status_code, 403)

    def test_leader_of_other_abteilung_is_denied(self):
        self.client.login(username="al_berchtold", password=PASSWORD)
        self.assertEqual(self.client.get(self.url).status_code, 403)

    def test_section_group_has_no_settings(self):
        self.client.login(username="al_schekka", password=PASSWORD)
        url = reverse("invoices:edit", kwargs={"group_id": self.f.schekka_pfadi.pk})
        self.assertEqual(self.client.get(url).status_code, 404)

    def test_update(self):
        self.client.login(username="al_schekka", password=PASSWORD)
        data = self.post_data(
            address="Schekka\nPostfach\n3000 Bern",
            payee="Pfadi Schekka\n3000 Bern",
            iban="CH93 0076 2011 6238 5295 7",
            account_number="01-000162-8",
            **{"reminders-0-title": "Erinnerung"},
        )
        response = self.client.post(self.url, data, follow=True)

        self.assertRedirects(response, self.url)
        self.assertContains(response, "Rechnungseinstellungen wurden erfolgreich aktualisiert.")
        self.config.refresh_from_db()
        self.assertEqual(self.config.account_number, "01-000162-8")
        self.assertEqual(
            self.config.payment_reminder_configs.get(level=1).title, "Erinnerung"
        )

    def test_invalid_update_shows_errors(self):
        self.client.login(username="al_schekka", password=PASSWORD)
        data = self.post_data(
            address="Schekka",
            payee="Pfadi Schekka",
            iban="CH93 0076 2011 6238 5295 7",
            account_number="01-000162-7",
        )
        response = self.client.post(self.url, data)

        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            response.context["form"].errors["account_number"], ["hat eine ungültige Prüfziffer"]
        )
        self.assertContains(response, "Die Rechnungseinstellungen konnten nicht gespeichert werden.")
        self.config.refresh_from_db()
        self.assertEqual(self.config.account_number, "")
