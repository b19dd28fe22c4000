from datetime import date

from django.core.management import call_command
from django.test import TestCase
from django.utils import timezone

from census.models import Census
from events.models import Event
from groups.models import Group, Role
from invoices.models import InvoiceConfig


class BootstrapDemoTests(TestCase):
    def test_demo_data_creation(self):
        call_command("bootstrap_demo")

        today = timezone.localdate()

        abteilung = Group.objects.get(name="Schekka")
        assert abteilung.kantonalverband.short_name == "BE"
        assert Role.objects.get(group=abteilung).person.username == "leiter"
        assert InvoiceConfig.objects.filter(group=abteilung).exists()

        census = Census.current()
        assert census.year == today.year
        assert census.is_open

        # Camps: this summer, or next summer once it is over
        camp_year = today.year if today <= date(today.year, 7, 20) else today.year + 1
        camp = Event.objects.get(name="Sommerlager Schekka")
        assert camp.leader.username == "leiter"
        assert camp.dates.get().start_at == date(camp_year, 7, 6)
        assert Event.objects.get(name="Bundeslager").accepts_sub_camps

    def test_running_twice_creates_nothing_new(self):
        call_command("bootstrap_demo")
        call_command("bootstrap_demo")

        assert Group.objects.filter(name="Schekka").count() == 1
        assert Event.objects.filter(type=Event.Type.CAMP).count() == 2
        assert Census.objects.count() == 1
        assert Role.objects.count() == 1
