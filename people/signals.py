# people/signals.py
"""
Signals for the people application.

Ensures that each user has an associated :class:`Person` record:
one is created together with the user, and missing ones are
back-filled after database migrations.
"""

from django.apps import apps
from django.contrib.auth import get_user_model
from django.db.models.signals import post_migrate, post_save
from django.db.utils import OperationalError, ProgrammingError
from django.dispatch import receiver

from .models import Person

User = get_user_model()


@receiver(post_save, sender=User)
def create_person_on_user_create(sender, instance, created, **kwargs):
    """
    Create a Person when a new user is created.

    Parameters
    ----------
    sender : Model
        The model class sending the signal (User).
    instance : User
        The user instance that was created or updated.
    created : bool
        True if a new user instance was created, False otherwise.
    **kwargs : dict
        Additional keyword arguments provided by the signal.
    """
    if not created:
        return
    try:
        Person.objects.get_or_create(user=instance)
    except (OperationalError, ProgrammingError):
        # The people table does not exist yet while migrating
        pass


@receiver(post_migrate)
def backfill_people(sender, **kwargs):
    """
    Ensure all existing users have an associated Person record.

    Executed after migrations are applied; creates the missing
    records in one bulk insert.
    """
    try:
        if not apps.is_installed("people"):
            return

        users = User.objects.all().only("id")
        existing = set(Person.objects.values_list("user_id", flat=True))
        to_create = [Person(user=u) for u in users if u.id not in existing]

        if to_create:
            Person.objects.bulk_create(to_create, ignore_conflicts=True)
    except (OperationalError, ProgrammingError):
        pass
