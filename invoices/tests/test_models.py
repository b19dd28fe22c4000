"""
Tests for the invoice settings, their banking rules and the payment
slip numbers.
"""

from decimal import Decimal

from django.core.exceptions import ValidationError
from django.test import SimpleTestCase, TestCase

from groups.models import Group
from invoices.exceptions import PaymentSlipError
from invoices.models import InvoiceConfig, PaymentReminderConfig
from invoices.payment_slip import PaymentSlip

VALID_IBAN = "CH93 0076 2011 6238 5295 7"
VALID_ACCOUNT = "01-000162-8"


def complete_config(group, **fields):
    config = group.invoice_config
    values = {
        "payment_slip": InvoiceConfig.PaymentSlipKind.CH_ES,
        "address": "Speichergasse 31\n3011 Bern",
        "payee": "Pfadibewegung Schweiz\n3000 Bern",
        "iban": VALID_IBAN,
        "account_number": VALID_ACCOUNT,
    }
    values.update(fields)
    for name, value in values.items():
        setattr(config, name, value)
    return config


def errors_of(config) -> dict:
    try:
        config.clean()
    except ValidationError as ex:
        return ex.message_dict
    return {}


class InvoiceConfigSignalTests(TestCase):
    def test_layer_group_gets_settings_with_reminders(self):
        bund = Group.objects.create(
            name="Bund", group_type=Group.Type.BUND, email="info@pbs.example.ch"
        )

        config = InvoiceConfig.objects.get(group=bund)
        self.assertEqual(config.email, "info@pbs.example.ch")
        self.assertEqual(
            list(config.payment_reminder_configs.values_list("level", flat=True)), [1, 2, 3]
        )

    def test_section_group_gets_no_settings(self):
        bund = Group.objects.create(name="Bund", group_type=Group.Type.BUND)
        Group.objects.create(name="Abteilung", group_type=Group.Type.ABTEILUNG, parent=bund)
        Group.objects.create(name="Pfadi", group_type=Group.Type.PFADI, parent=bund)

        self.assertEqual(InvoiceConfig.objects.count(), 2)
        self.assertEqual(PaymentReminderConfig.objects.count(), 6)


class InvoiceConfigValidationTests(TestCase):
    def setUp(self):
        self.group = Group.objects.create(name="Bund", group_type=Group.Type.BUND)

    def test_complete_settings_are_valid(self):
        self.assertEqual(errors_of(complete_config(self.group)), {})

    def test_new_settings_skip_required_fields(self):
        config = InvoiceConfig(group=Group(name="Neu", group_type=Group.Type.REGION))
        self.assertEqual(errors_of(config), {})

    def test_persisted_settings_require_fields_of_slip_kind(self):
        errors = errors_of(self.group.invoice_config)

        for field in ("address", "payee", "account_number", "iban"):
            self.assertEqual(errors[field], ["muss ausgefüllt werden"])
        self.assertNotIn("beneficiary", errors)
        self.assertNotIn("participant_number", errors)

    def test_bank_slip_with_reference_requires_beneficiary_and_participant(self):
        config = complete_config(
            self.group, payment_slip=InvoiceConfig.PaymentSlipKind.CH_BESR, iban=""
        )
        errors = errors_of(config)

        self.assertEqual(set(errors), {"beneficiary", "participant_number"})

    def test_iban_format(self):
        for iban in ("CH9300762011623852957", "DE89 3704 0044 0532 0130 00"):
            self.assertEqual(errors_of(complete_config(self.group, iban=iban)), {}, iban)

        for iban in ("CH93-0076-2011", "ch9300762011623852957", "CH93 0076"):
            errors = errors_of(complete_config(self.group, iban=iban))
            self.assertEqual(errors["iban"], ["ist nicht gültig"], iban)

    def test_account_number_format(self):
        errors = errors_of(complete_config(self.group, account_number="01000162-8"))
        self.assertIn("ist nicht gültig", errors["account_number"])

        errors = errors_of(complete_config(self.group, account_number="Konto 1"))
        self.assertEqual(errors["account_number"], ["ist nicht gültig"])

    def test_account_number_check_digit(self):
        errors = errors_of(complete_config(self.group, account_number="01-000162-7"))
        self.assertEqual(errors["account_number"], ["hat eine ungültige Prüfziffer"])

    def test_non_ascii_digit_is_a_format_error(self):
        errors = errors_of(complete_config(self.group, account_number="01-000162-²"))
        self.assertEqual(errors["account_number"], ["ist nicht gültig"])

    def test_check_digit_is_validated_on_new_settings_too(self):
        config = InvoiceConfig(
            group=Group(name="Neu", group_type=Group.Type.REGION), account_number="01-000162-7"
        )
        self.assertEqual(errors_of(config), {"account_number": ["hat eine ungültige Prüfziffer"]})

    def test_payee_of_bank_slip_has_two_lines_at_most(self):
        config = complete_config(
            self.group,
            payment_slip=InvoiceConfig.PaymentSlipKind.CH_BES,
            beneficiary="Berner Kantonalbank",
            payee="Pfadibewegung Schweiz\nSpeichergasse 31\n3011 Bern",
        )
        self.assertEqual(errors_of(config), {"payee": ["ist zu lang"]})

    def test_payee_of_postal_slip_is_not_limited(self):
        config = complete_config(
            self.group, payee="Pfadibewegung Schweiz\nSpeichergasse 31\n3011 Bern"
        )
        self.assertEqual(errors_of(config), {})

    def test_slip_kind_flags(self):
        config = InvoiceConfig(payment_slip=InvoiceConfig.PaymentSlipKind.CH_BESR)
        self.assertTrue(config.bank)
        self.assertTrue(config.with_reference)
        self.assertFalse(config.without_reference)

        config.payment_slip = InvoiceConfig.PaymentSlipKind.CH_ES
        self.assertFalse(config.bank)
        self.assertTrue(config.without_reference)


class PaymentSlipTests(SimpleTestCase):
    def setUp(self):
        self.slip = PaymentSlip("01-162-8")

    def test_check_digit(self):
        self.assertEqual(PaymentSlip.check_digit("01000162"), 8)
        self.assertEqual(PaymentSlip.check_digit("010000394975"), 3)
        self.assertEqual(PaymentSlip.check_digit(""), 0)

    def test_esr_number(self):
        self.assertEqual(
            self.slip.esr_number("21000000000313947143000901"),
            "21 00000 00003 13947 14300 09017",
        )

    def test_esr_number_pads_short_reference(self):
        self.assertEqual(self.slip.esr_number("1"), "00 00000 00000 00000 00000 00011")

    def test_esr_number_rejects_invalid_references(self):
        with self.assertRaises(PaymentSlipError):
            self.slip.esr_number("12a4")
        with self.assertRaises(PaymentSlipError):
            self.slip.esr_number("1" * 27)

    def test_padded_participant_number(self):
        self.assertEqual(self.slip.padded_participant_number(), "010001628")

    def test_code_line_with_amount(self):
        self.assertEqual(
            self.slip.code_line("21000000000313947143000901", Decimal("3949.75")),
            "0100003949753>210000000003139471430009017+ 010001628>",
        )

    def test_code_line_without_amount(self):
        self.assertEqual(
            self.slip.code_line("21000000000313947143000901"),
            "042>210000000003139471430009017+ 010001628>",
        )

    def test_code_line_needs_participant_number(self):
        with self.assertRaises(PaymentSlipError):
            PaymentSlip().code_line("1")
        with self.assertRaises(PaymentSlipError):
            PaymentSlip("01-162").code_line("1")

    def test_invoice_config_builds_slip(self):
        config = InvoiceConfig(participant_number="01-162-8")
        self.assertEqual(config.payment_slip_numbers().padded_participant_number(), "010001628")
