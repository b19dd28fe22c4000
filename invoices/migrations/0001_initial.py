# invoices/migrations/0001_initial.py
"""
Initial migration for the invoices application.

Creates the invoice settings of a group and its payment reminder
levels.
"""

from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ("groups", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="InvoiceConfig",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("sequence_number", models.PositiveIntegerField(default=1, verbose_name="Laufnummer")),
                ("due_days", models.PositiveIntegerField(default=30, verbose_name="Zahlbar innert Tagen")),
                ("address", models.TextField(blank=True, verbose_name="Adresse")),
                ("payment_information", models.TextField(blank=True, verbose_name="Zahlungsinformationen")),
                ("email", models.EmailField(blank=True, max_length=254, verbose_name="E-Mail")),
                (
                    "payment_slip",
                    models.CharField(
                        choices=[
                            ("ch_es", "Roter Einzahlungsschein (ES)"),
                            ("ch_bes", "Roter Einzahlungsschein Bank (BES)"),
                            ("ch_esr", "Oranger Einzahlungsschein (ESR)"),
                            ("ch_besr", "Oranger Einzahlungsschein Bank (BESR)"),
                        ],
                        default="ch_es",
                        max_length=16,
                        verbose_name="Einzahlungsschein",
                    ),
                ),
                ("payee", models.TextField(blank=True, verbose_name="Einzahlung für")),
                ("beneficiary", models.TextField(blank=True, verbose_name="Zugunsten von")),
                ("iban", models.CharField(blank=True, max_length=64, verbose_name="IBAN")),
                ("account_number", models.CharField(blank=True, max_length=32, verbose_name="Konto")),
                ("participant_number", models.CharField(blank=True, max_length=32, verbose_name="Teilnehmernummer")),
                (
                    "contact",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="+",
                        to=settings.AUTH_USER_MODEL,
                        verbose_name="Kontakt",
                    ),
                ),
                (
                    "group",
                    models.OneToOneField(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="invoice_config",
                        to="groups.group",
                        verbose_name="Gruppe",
                    ),
                ),
            ],
            options={
                "verbose_name": "Rechnungseinstellungen",
                "verbose_name_plural": "Rechnungseinstellungen",
            },
        ),
        migrations.CreateModel(
            name="PaymentReminderConfig",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("level", models.PositiveSmallIntegerField(choices=[(1, "1. Mahnung"), (2, "2. Mahnung"), (3, "3. Mahnung")], verbose_name="Stufe")),
                ("title", models.CharField(max_length=200, verbose_name="Titel")),
                ("text", models.TextField(verbose_name="Text")),
                ("due_days", models.PositiveIntegerField(verbose_name="Zahlbar innert Tagen")),
                (
                    "invoice_config",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="payment_reminder_configs",
                        to="invoices.invoiceconfig",
                        verbose_name="Rechnungseinstellungen",
                    ),
                ),
            ],
            options={
                "verbose_name": "Mahnungseinstellung",
                "verbose_name_plural": "Mahnungseinstellungen",
                "ordering": ["level"],
                "unique_together": {("invoice_config", "level")},
            },
        ),
    ]
