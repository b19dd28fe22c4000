# people/apps.py
"""
Application configuration for the people module.

Ensures that the signals keeping one :class:`~people.models.Person`
per Django user are connected when the app is loaded.
"""

from django.apps import AppConfig


class PeopleConfig(AppConfig):
    """
    Configuration class for the people application.

    Attributes
    ----------
    default_auto_field : str
        The default type for auto-created primary key fields.
    name : str
        The full Python path to the application.
    """

    default_auto_field = "django.db.models.BigAutoField"
    name = "people"
    verbose_name = "Personen"

    def ready(self) -> None:
        """
        Initialize the people application.

        Imports the signal handlers so they are registered.
        """
        from . import signals  # noqa: F401
