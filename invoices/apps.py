# invoices/apps.py
"""
Application configuration for the invoices module.

Ensures that the signal creating the invoice settings of new
layer groups is registered when the application is ready.
"""

from django.apps import AppConfig


class InvoicesConfig(AppConfig):
    """
    Configuration class for the invoices application.

    Attributes
    ----------
    default_auto_field : str
        Default primary key field type for models that do not
        explicitly define one.
    name : str
        Full Python path to the application.
    """

    default_auto_field = "django.db.models.BigAutoField"
    name = "invoices"
    verbose_name = "Rechnungen"

    def ready(self):
        """
        Initialize the invoices application.

        Ensures that signals are imported and connected when
        the application is loaded by Django.
        """
        from . import signals  # noqa: F401
