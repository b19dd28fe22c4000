# events/migrations/0001_initial.py
"""
Initial migration for the events application.

Creates course kinds, events (events, courses and camps in one
table) with their dates and questions, participations and their
approvals.
"""

from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone

CANTONS = [
    ("ag", "Aargau"),
    ("ai", "Appenzell Innerrhoden"),
    ("ar", "Appenzell Ausserrhoden"),
    ("be", "Bern"),
    ("bl", "Basel-Landschaft"),
    ("bs", "Basel-Stadt"),
    ("fr", "Freiburg"),
    ("ge", "Genf"),
    ("gl", "Glarus"),
    ("gr", "Graubünden"),
    ("ju", "Jura"),
    ("lu", "Luzern"),
    ("ne", "Neuenburg"),
    ("nw", "Nidwalden"),
    ("ow", "Obwalden"),
    ("sg", "St. Gallen"),
    ("sh", "Schaffhausen"),
    ("so", "Solothurn"),
    ("sz", "Schwyz"),
    ("tg", "Thurgau"),
    ("ti", "Tessin"),
    ("ur", "Uri"),
    ("vd", "Waadt"),
    ("vs", "Wallis"),
    ("zg", "Zug"),
    ("zh", "Zürich"),
    ("zz", "Ausland"),
]


def _person(related_name, verbose_name):
    return models.ForeignKey(
        blank=True,
        null=True,
        on_delete=django.db.models.deletion.SET_NULL,
        related_name=related_name,
        to=settings.AUTH_USER_MODEL,
        verbose_name=verbose_name,
    )


def _expected(verbose_name):
    return models.PositiveIntegerField(blank=True, null=True, verbose_name=verbose_name)


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ("groups", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="EventKind",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("label", models.CharField(max_length=200, verbose_name="Bezeichnung")),
                ("short_name", models.CharField(max_length=20, unique=True, verbose_name="Kurzname")),
                ("campy", models.BooleanField(default=False, verbose_name="Lagerähnlich")),
            ],
            options={
                "verbose_name": "Kursart",
                "verbose_name_plural": "Kursarten",
                "ordering": ["label"],
            },
        ),
        migrations.CreateModel(
            name="Event",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "type",
                    models.CharField(
                        choices=[("event", "Anlass"), ("course", "Kurs"), ("camp", "Lager")],
                        default="event",
                        max_length=16,
                        verbose_name="Typ",
                    ),
                ),
                ("name", models.CharField(max_length=200, verbose_name="Name")),
                ("number", models.CharField(blank=True, max_length=50, verbose_name="Nummer")),
                ("description", models.TextField(blank=True, verbose_name="Beschreibung")),
                ("requires_approval", models.BooleanField(default=False, verbose_name="Freigabe erforderlich")),
                (
                    "state",
                    models.CharField(
                        choices=[
                            ("created", "Erstellt"),
                            ("confirmed", "Bestätigt"),
                            ("assignment_closed", "Zuteilung abgeschlossen"),
                            ("canceled", "Abgesagt"),
                            ("closed", "Abgeschlossen"),
                        ],
                        default="created",
                        max_length=32,
                        verbose_name="Status",
                    ),
                ),
                ("allow_sub_camps", models.BooleanField(default=False, verbose_name="Unterlager erlaubt")),
                ("canton", models.CharField(blank=True, choices=CANTONS, max_length=2, verbose_name="Kanton")),
                ("location", models.TextField(blank=True, verbose_name="Lagerort")),
                ("coordinates", models.CharField(blank=True, max_length=100, verbose_name="Koordinaten")),
                ("altitude", models.CharField(blank=True, max_length=100, verbose_name="Höhe über Meer")),
                ("emergency_phone", models.CharField(blank=True, max_length=100, verbose_name="Notfalltelefon")),
                ("landlord", models.TextField(blank=True, verbose_name="Vermieter*in")),
                ("landlord_permission_obtained", models.BooleanField(default=False, verbose_name="Bewilligung Vermieter*in eingeholt")),
                ("expected_participants_wolf_f", _expected("Wölfe weiblich")),
                ("expected_participants_wolf_m", _expected("Wölfe männlich")),
                ("expected_participants_pfadi_f", _expected("Pfadi weiblich")),
                ("expected_participants_pfadi_m", _expected("Pfadi männlich")),
                ("expected_participants_pio_f", _expected("Pios weiblich")),
                ("expected_participants_pio_m", _expected("Pios männlich")),
                ("expected_participants_rover_f", _expected("Rover weiblich")),
                ("expected_participants_rover_m", _expected("Rover männlich")),
                ("expected_participants_leitung_f", _expected("Leitung weiblich")),
                ("expected_participants_leitung_m", _expected("Leitung männlich")),
                ("coach_visiting", models.BooleanField(default=False, verbose_name="Coach besucht das Lager")),
                ("coach_confirmed", models.BooleanField(default=False, verbose_name="Coach hat das Lager bestätigt")),
                ("lagerreglement_applied", models.BooleanField(default=False, verbose_name="Lagerreglement angewendet")),
                ("kantonalverband_rules_applied", models.BooleanField(default=False, verbose_name="Richtlinien Kantonalverband angewendet")),
                ("j_s_rules_applied", models.BooleanField(default=False, verbose_name="J+S-Richtlinien angewendet")),
                ("camp_submitted_at", models.DateField(blank=True, null=True, verbose_name="Eingereicht am")),
                (
                    "contact_attrs_passed_on_to_supercamp",
                    models.JSONField(blank=True, default=list, verbose_name="An Hauptlager weitergegebene Kontaktangaben"),
                ),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now, verbose_name="Erstellt am")),
                ("advisor", _person("advised_events", "Betreuung")),
                ("coach", _person("coached_events", "Coach")),
                ("contact", _person("contact_events", "Kontaktperson")),
                ("leader", _person("led_events", "Lagerleitung")),
                ("groups", models.ManyToManyField(related_name="events", to="groups.group", verbose_name="Gruppen")),
                (
                    "kind",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="events",
                        to="events.eventkind",
                        verbose_name="Kursart",
                    ),
                ),
                (
                    "parent",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="sub_camps",
                        to="events.event",
                        verbose_name="Übergeordnetes Lager",
                    ),
                ),
            ],
            options={
                "verbose_name": "Anlass",
                "verbose_name_plural": "Anlässe",
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="EventDate",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("label", models.CharField(blank=True, max_length=200, verbose_name="Bezeichnung")),
                ("location", models.CharField(blank=True, max_length=200, verbose_name="Ort")),
                ("start_at", models.DateField(verbose_name="Von")),
                ("finish_at", models.DateField(blank=True, null=True, verbose_name="Bis")),
                (
                    "event",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="dates",
                        to="events.event",
                        verbose_name="Anlass",
                    ),
                ),
            ],
            options={
                "verbose_name": "Datum",
                "verbose_name_plural": "Daten",
                "ordering": ["start_at"],
            },
        ),
        migrations.CreateModel(
            name="Question",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("question", models.TextField(verbose_name="Frage")),
                ("choices", models.CharField(blank=True, max_length=500, verbose_name="Antwortmöglichkeiten")),
                ("required", models.BooleanField(default=False, verbose_name="Pflichtfeld")),
                ("admin", models.BooleanField(default=False, verbose_name="Admin-Frage")),
                ("pass_on_to_supercamp", models.BooleanField(default=False, verbose_name="An Hauptlager weitergeben")),
                (
                    "event",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="questions",
                        to="events.event",
                        verbose_name="Anlass",
                    ),
                ),
            ],
            options={
                "verbose_name": "Frage",
                "verbose_name_plural": "Fragen",
                "ordering": ["pk"],
            },
        ),
        migrations.CreateModel(
            name="Participation",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "state",
                    models.CharField(
                        choices=[("applied", "Angemeldet"), ("assigned", "Zugeteilt"), ("tentative", "Provisorisch")],
                        default="applied",
                        max_length=16,
                        verbose_name="Status",
                    ),
                ),
                ("active", models.BooleanField(default=False, verbose_name="Aktiv")),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now, verbose_name="Erstellt am")),
                (
                    "event",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="participations",
                        to="events.event",
                        verbose_name="Anlass",
                    ),
                ),
                (
                    "person",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="event_participations",
                        to=settings.AUTH_USER_MODEL,
                        verbose_name="Person",
                    ),
                ),
            ],
            options={
                "verbose_name": "Teilnahme",
                "verbose_name_plural": "Teilnahmen",
                "ordering": ["-created_at"],
                "unique_together": {("event", "person")},
            },
        ),
        migrations.CreateModel(
            name="Approval",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("approved", models.BooleanField(default=False, verbose_name="Freigegeben")),
                ("rejected", models.BooleanField(default=False, verbose_name="Abgelehnt")),
                ("comment", models.TextField(blank=True, verbose_name="Bemerkung")),
                ("approved_at", models.DateTimeField(blank=True, null=True, verbose_name="Freigegeben am")),
                (
                    "approver",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="+",
                        to=settings.AUTH_USER_MODEL,
                        verbose_name="Freigegeben durch",
                    ),
                ),
                (
                    "layer",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="approvals",
                        to="groups.group",
                        verbose_name="Ebene",
                    ),
                ),
                (
                    "participation",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="approvals",
                        to="events.participation",
                        verbose_name="Teilnahme",
                    ),
                ),
            ],
            options={
                "verbose_name": "Freigabe",
                "verbose_name_plural": "Freigaben",
                "ordering": ["participation__created_at"],
            },
        ),
    ]
