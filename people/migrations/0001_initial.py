# people/migrations/0001_initial.py
"""
Initial migration for the people application.

Creates the Person model linked one-to-one with the user model.
"""

from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Person",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("nickname", models.CharField(blank=True, max_length=100, verbose_name="Pfadiname")),
                ("company_name", models.CharField(blank=True, max_length=200, verbose_name="Firmenname")),
                ("gender", models.CharField(blank=True, choices=[("w", "weiblich"), ("m", "männlich")], max_length=1, verbose_name="Geschlecht")),
                ("birthday", models.DateField(blank=True, null=True, verbose_name="Geburtstag")),
                ("address", models.TextField(blank=True, verbose_name="Adresse")),
                ("zip_code", models.CharField(blank=True, max_length=10, verbose_name="PLZ")),
                ("town", models.CharField(blank=True, max_length=100, verbose_name="Ort")),
                ("country", models.CharField(blank=True, default="CH", max_length=2, verbose_name="Land")),
                ("phone_numbers", models.TextField(blank=True, verbose_name="Telefonnummern")),
                ("social_accounts", models.TextField(blank=True, verbose_name="Social Media")),
                ("additional_emails", models.TextField(blank=True, verbose_name="Weitere E-Mails")),
                ("user", models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name="person", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "verbose_name": "Person",
                "verbose_name_plural": "Personen",
                "ordering": ["user__last_name", "user__first_name"],
            },
        ),
    ]
