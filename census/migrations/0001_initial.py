# census/migrations/0001_initial.py
"""
Initial migration for the census application.

Creates the yearly censuses and the member counts per Abteilung
and year of birth.
"""

from django.db import migrations, models
import django.db.models.deletion


def _count(verbose_name):
    return models.PositiveIntegerField(blank=True, null=True, verbose_name=verbose_name)


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("groups", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Census",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("year", models.PositiveIntegerField(unique=True, verbose_name="Jahr")),
                ("start_at", models.DateField(verbose_name="Beginn")),
                ("finish_at", models.DateField(blank=True, null=True, verbose_name="Ende")),
            ],
            options={
                "verbose_name": "Zählung",
                "verbose_name_plural": "Zählungen",
                "ordering": ["-start_at"],
            },
        ),
        migrations.CreateModel(
            name="MemberCount",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("year", models.PositiveIntegerField(db_index=True, verbose_name="Jahr")),
                ("born_in", models.PositiveIntegerField(blank=True, null=True, verbose_name="Jahrgang")),
                ("leiter_f", _count("Leitende weiblich")),
                ("leiter_m", _count("Leitende männlich")),
                ("biber_f", _count("Biber weiblich")),
                ("biber_m", _count("Biber männlich")),
                ("woelfe_f", _count("Wölfe weiblich")),
                ("woelfe_m", _count("Wölfe männlich")),
                ("pfadis_f", _count("Pfadis weiblich")),
                ("pfadis_m", _count("Pfadis männlich")),
                ("pios_f", _count("Pios weiblich")),
                ("pios_m", _count("Pios männlich")),
                ("rover_f", _count("Rover weiblich")),
                ("rover_m", _count("Rover männlich")),
                (
                    "abteilung",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="member_counts",
                        to="groups.group",
                        verbose_name="Abteilung",
                    ),
                ),
                (
                    "kantonalverband",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="+",
                        to="groups.group",
                        verbose_name="Kantonalverband",
                    ),
                ),
                (
                    "region",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="+",
                        to="groups.group",
                        verbose_name="Region",
                    ),
                ),
            ],
            options={
                "verbose_name": "Mitgliederzahl",
                "verbose_name_plural": "Mitgliederzahlen",
                "ordering": ["year", "born_in"],
                "unique_together": {("abteilung", "year", "born_in")},
            },
        ),
    ]
