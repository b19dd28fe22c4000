# events/apps.py
"""
Application configuration for the events module.

Registers the signal handlers creating participation approvals.
"""

from django.apps import AppConfig


class EventsConfig(AppConfig):
    """
    Configuration class for the events application.

    Attributes
    ----------
    default_auto_field : str
        Default primary key field type for models that do not
        explicitly define one.
    name : str
        Full Python path to the application.
    """

    default_auto_field = "django.db.models.BigAutoField"
    name = "events"
    verbose_name = "Anlässe"

    def ready(self):
        """
        Initialize the events application.

        Ensures that signals are imported and connected.
        """
        from . import signals  # noqa: F401
