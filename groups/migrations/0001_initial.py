# groups/migrations/0001_initial.py
"""
Initial migration for the groups application.

Creates the Group tree and the Role model linking users to groups.
"""

from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Group",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=200, verbose_name="Name")),
                ("short_name", models.CharField(blank=True, max_length=20, verbose_name="Kurzname")),
                (
                    "group_type",
                    models.CharField(
                        choices=[
                            ("bund", "Bund"),
                            ("kantonalverband", "Kantonalverband"),
                            ("region", "Region"),
                            ("abteilung", "Abteilung"),
                            ("biber", "Biber"),
                            ("woelfe", "Wölfe"),
                            ("pfadi", "Pfadi"),
                            ("pio", "Pio"),
                            ("rover", "Rover"),
                            ("gremium", "Gremium"),
                        ],
                        max_length=32,
                        verbose_name="Gruppentyp",
                    ),
                ),
                ("email", models.EmailField(blank=True, max_length=254, verbose_name="Haupt-E-Mail")),
                (
                    "parent",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="children",
                        to="groups.group",
                        verbose_name="Übergeordnete Gruppe",
                    ),
                ),
            ],
            options={
                "verbose_name": "Gruppe",
                "verbose_name_plural": "Gruppen",
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="Role",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "role_type",
                    models.CharField(
                        choices=[
                            ("bundesleitung", "Bundesleitung"),
                            ("mitarbeiter_gs", "Mitarbeiter*in Geschäftsstelle"),
                            ("kantonsleitung", "Kantonsleitung"),
                            ("regionalleitung", "Regionalleitung"),
                            ("abteilungsleitung", "Abteilungsleitung"),
                            ("adressverwaltung", "Adressverwaltung"),
                            ("einheitsleitung", "Einheitsleitung"),
                            ("mitleitung", "Mitleitung"),
                            ("mitglied", "Mitglied"),
                        ],
                        max_length=32,
                        verbose_name="Rolle",
                    ),
                ),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now, verbose_name="Seit")),
                ("deleted_at", models.DateTimeField(blank=True, null=True, verbose_name="Bis")),
                (
                    "group",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="roles",
                        to="groups.group",
                        verbose_name="Gruppe",
                    ),
                ),
                (
                    "person",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="roles",
                        to=settings.AUTH_USER_MODEL,
                        verbose_name="Person",
                    ),
                ),
            ],
            options={
                "verbose_name": "Rolle",
                "verbose_name_plural": "Rollen",
                "ordering": ["group__name", "role_type"],
            },
        ),
    ]
