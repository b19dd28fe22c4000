# invoices/models.py
"""
Database models for the invoices application.

Every layer group owns one :class:`InvoiceConfig` holding the
banking details printed on its invoices, plus up to three
:class:`PaymentReminderConfig` levels.
"""

import re

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import models

from groups.models import Group
from .payment_slip import PaymentSlip

#: Accepted IBAN format, optional single spaces between blocks
IBAN_REGEX = re.compile(r"[A-Z]{2}[0-9]{2}\s?([A-Z]|[0-9]\s?){12,30}")

#: Accepted postal account format ``XX-YYYYYY-Z``
ACCOUNT_NUMBER_REGEX = re.compile(r"[0-9]{2}-[0-9]{2,20}-[0-9]")

#: Maximal number of lines of the payee on a bank slip
PAYEE_MAX_LINES = 2

BLANK_ERROR = "muss ausgefüllt werden"
INVALID_ERROR = "ist nicht gültig"


class InvoiceConfig(models.Model):
    """
    Banking details and defaults for the invoices of a layer group.

    Attributes
    ----------
    group : OneToOneField
        The layer group owning the settings.
    payment_slip : CharField
        One of :class:`InvoiceConfig.PaymentSlipKind`; decides which
        banking fields are required.
    payee : TextField
        Address of the account holder; at most two lines on bank
        slips.
    beneficiary : TextField
        The bank holding the account, for bank slips only.
    iban : CharField
        IBAN for slips without reference number.
    account_number : CharField
        Postal account formatted ``XX-YYYYYY-Z``, last digit being
        a modulo 10 recursive check digit.
    participant_number : CharField
        ESR participant number for slips with reference number.

    Notes
    -----
    The banking rules apply to persisted settings only: the settings
    created automatically with a group start out empty.
    """

    class PaymentSlipKind(models.TextChoices):
        """
        Enumeration of payment slip kinds.
        """

        CH_ES = "ch_es", "Roter Einzahlungsschein (ES)"
        CH_BES = "ch_bes", "Roter Einzahlungsschein Bank (BES)"
        CH_ESR = "ch_esr", "Oranger Einzahlungsschein (ESR)"
        CH_BESR = "ch_besr", "Oranger Einzahlungsschein Bank (BESR)"

    BANK_KINDS = (PaymentSlipKind.CH_BES, PaymentSlipKind.CH_BESR)
    WITH_REFERENCE_KINDS = (PaymentSlipKind.CH_ESR, PaymentSlipKind.CH_BESR)

    group = models.OneToOneField(
        Group,
        on_delete=models.CASCADE,
        related_name="invoice_config",
        verbose_name="Gruppe",
    )
    contact = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="+",
        verbose_name="Kontakt",
    )
    sequence_number = models.PositiveIntegerField("Laufnummer", default=1)
    due_days = models.PositiveIntegerField("Zahlbar innert Tagen", default=30)
    address = models.TextField("Adresse", blank=True)
    payment_information = models.TextField("Zahlungsinformationen", blank=True)
    email = models.EmailField("E-Mail", blank=True)
    payment_slip = models.CharField(
        "Einzahlungsschein",
        max_length=16,
        choices=PaymentSlipKind.choices,
        default=PaymentSlipKind.CH_ES,
    )
    payee = models.TextField("Einzahlung für", blank=True)
    beneficiary = models.TextField("Zugunsten von", blank=True)
    iban = models.CharField("IBAN", max_length=64, blank=True)
    account_number = models.CharField("Konto", max_length=32, blank=True)
    participant_number = models.CharField("Teilnehmernummer", max_length=32, blank=True)

    class Meta:
        verbose_name = "Rechnungseinstellungen"
        verbose_name_plural = "Rechnungseinstellungen"

    def __str__(self) -> str:
        return f"Rechnungseinstellungen {self.group}"

    @property
    def bank(self) -> bool:
        return self.payment_slip in self.BANK_KINDS

    @property
    def with_reference(self) -> bool:
        return self.payment_slip in self.WITH_REFERENCE_KINDS

    @property
    def without_reference(self) -> bool:
        return not self.with_reference

    def required_fields(self) -> list:
        """
        Return the fields required by the chosen payment slip kind.
        """
        fields = ["address", "payee", "account_number"]
        if self.bank:
            fields.append("beneficiary")
        if self.without_reference:
            fields.append("iban")
        if self.with_reference:
            fields.append("participant_number")
        return fields

    def clean(self):
        """
        Validate the banking details.

        All failing rules are collected and raised together, keyed by
        field.

        Raises
        ------
        ValidationError
            If any rule fails.
        """
        errors = {}

        def add(field, message):
            errors.setdefault(field, []).append(message)

        if self.pk is not None:
            for field in self.required_fields():
                if not (getattr(self, field) or "").strip():
                    add(field, BLANK_ERROR)
            if self.iban and not IBAN_REGEX.fullmatch(self.iban):
                add("iban", INVALID_ERROR)
            if self.account_number and not ACCOUNT_NUMBER_REGEX.fullmatch(self.account_number):
                add("account_number", INVALID_ERROR)

        if self.bank and self.payee and len(self.payee.splitlines()) > PAYEE_MAX_LINES:
            add("payee", "ist zu lang")

        if self.account_number and not self.account_number_check_digit_valid():
            add("account_number", "hat eine ungültige Prüfziffer")

        if errors:
            raise ValidationError(errors)

    def account_number_check_digit_valid(self) -> bool:
        """
        Tell whether the last digit of the account number matches.

        Account numbers containing anything but digits and hyphens
        are left to the format rule.
        """
        digits = self.account_number.replace("-", "")
        if not re.fullmatch(r"[0-9]+", digits):
            return True
        return PaymentSlip.check_digit(digits[:-1]) == int(digits[-1])

    def payment_slip_numbers(self) -> PaymentSlip:
        """
        Return a :class:`PaymentSlip` for the configured participant.
        """
        return PaymentSlip(self.participant_number or None)


class PaymentReminderConfig(models.Model):
    """
    Text and delay of one payment reminder level.

    Attributes
    ----------
    invoice_config : ForeignKey
        The settings the reminder belongs to.
    level : PositiveSmallIntegerField
        1, 2 or 3; unique per settings.
    due_days : PositiveIntegerField
        Days granted after the reminder is sent.
    """

    LEVELS = ((1, "1. Mahnung"), (2, "2. Mahnung"), (3, "3. Mahnung"))

    invoice_config = models.ForeignKey(
        InvoiceConfig,
        on_delete=models.CASCADE,
        related_name="payment_reminder_configs",
        verbose_name="Rechnungseinstellungen",
    )
    level = models.PositiveSmallIntegerField("Stufe", choices=LEVELS)
    title = models.CharField("Titel", max_length=200)
    text = models.TextField("Text")
    due_days = models.PositiveIntegerField("Zahlbar innert Tagen")

    class Meta:
        ordering = ["level"]
        unique_together = [("invoice_config", "level")]
        verbose_name = "Mahnungseinstellung"
        verbose_name_plural = "Mahnungseinstellungen"

    def __str__(self) -> str:
        return f"{self.get_level_display()} {self.invoice_config.group}"


#: Reminder levels created with every invoice settings
DEFAULT_REMINDERS = (
    (1, "Zahlungserinnerung", "Im hektischen Alltag vergisst man schnell eine Rechnung. "
     "Wir bitten dich, den offenen Betrag zu begleichen.", 30),
    (2, "Zweite Mahnung", "Leider haben wir deine Zahlung noch nicht erhalten. "
     "Bitte begleiche den offenen Betrag umgehend.", 14),
    (3, "Dritte Mahnung", "Trotz zweier Mahnungen ist der Betrag noch offen. "
     "Bitte melde dich bei uns.", 10),
)
