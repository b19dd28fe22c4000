# events/management/commands/bootstrap_demo.py
"""
Management command to initialize demo data.

This command creates a small federation with an Abteilung, its
leader, an open census and a summer camp below a supercamp, so that
the camp and census workflows can be tried out right away. It can be
executed using::

    python manage.py bootstrap_demo
"""

from datetime import date

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand
from django.utils import timezone

from census.models import Census
from events.models import Event, EventDate
from groups.models import Group, Role

User = get_user_model()


class Command(BaseCommand):
    """
    Django management command for demo initialization.

    Creates:
    - An administrator account.
    - The groups Bund, Kantonalverband, Region and Abteilung.
    - An Abteilungsleitung account with its role.
    - An open census for the current year.
    - A supercamp accepting sub camps and a camp of the Abteilung.

    Running the command twice does not duplicate anything.

    Attributes
    ----------
    help : str
        Short description displayed in ``python manage.py help``.
    """

    help = "Create a demo federation with a census and camps."

    def _group(self, name, group_type, parent=None, **defaults):
        group, _ = Group.objects.get_or_create(
            name=name, group_type=group_type, parent=parent, defaults=defaults
        )
        return group

    def _camp(self, name, group, start_at, finish_at, location, **defaults):
        camp, created = Event.objects.get_or_create(
            name=name, type=Event.Type.CAMP, defaults=defaults
        )
        if created:
            camp.groups.add(group)
            EventDate.objects.create(
                event=camp, start_at=start_at, finish_at=finish_at, location=location
            )
        return camp

    def handle(self, *args, **options):
        """
        Execute the command.

        Notes
        -----
        - Admin credentials: ``admin/admin123``.
        - Abteilungsleitung credentials: ``leiter/leiter123``.
        - The camps take place next summer once this summer is over.
        """
        # --- Create administrator account ---
        admin, created = User.objects.get_or_create(
            username="admin",
            defaults={"is_staff": True, "is_superuser": True, "email": "admin@example.org"},
        )
        if created:
            admin.set_password("admin123")
            admin.save()
            self.stdout.write(self.style.SUCCESS("Admin : admin/admin123"))

        # --- Create group tree ---
        bund = self._group(
            "Pfadibewegung Schweiz", Group.Type.BUND,
            short_name="PBS", email="info@pbs.example.org",
        )
        kv = self._group(
            "Pfadi Kanton Bern", Group.Type.KANTONALVERBAND, bund,
            short_name="BE", email="be@pbs.example.org",
        )
        region = self._group("Region Bern", Group.Type.REGION, kv)
        abteilung = self._group(
            "Schekka", Group.Type.ABTEILUNG, region, email="schekka@pbs.example.org"
        )
        self._group("Pfadi Schekka", Group.Type.PFADI, abteilung)
        self._group("Wölfe Schekka", Group.Type.WOELFE, abteilung)

        # --- Create Abteilungsleitung ---
        leader, created = User.objects.get_or_create(
            username="leiter",
            defaults={
                "first_name": "Lea",
                "last_name": "Leiterin",
                "email": "leiter@example.org",
            },
        )
        if created:
            leader.set_password("leiter123")
            leader.save()
            person = leader.person
            person.nickname = "Kolibri"
            person.gender = person.Gender.FEMALE
            person.birthday = date(1995, 4, 12)
            person.save()
            self.stdout.write(self.style.SUCCESS("Abteilungsleitung : leiter/leiter123"))
        Role.objects.get_or_create(
            person=leader, group=abteilung, role_type=Role.Type.ABTEILUNGSLEITUNG
        )

        today = timezone.localdate()

        # --- Open census for the current year ---
        Census.objects.get_or_create(
            year=today.year,
            defaults={"start_at": date(today.year, 1, 1), "finish_at": date(today.year, 12, 31)},
        )

        # --- Create supercamp and camp (adjust year if necessary) ---
        camp_year = today.year if today <= date(today.year, 7, 20) else today.year + 1
        self._camp(
            "Bundeslager", bund,
            date(camp_year, 7, 24), date(camp_year, 8, 2), "Goms",
            allow_sub_camps=True,
        )
        self._camp(
            "Sommerlager Schekka", abteilung,
            date(camp_year, 7, 6), date(camp_year, 7, 18), "Zeltplatz Gurnigel",
            leader=leader, canton=Event.Canton.BE,
        )

        self.stdout.write(self.style.SUCCESS("Demo data initialized."))
