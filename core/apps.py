# core/apps.py
"""
Application configuration for the core module.

The core app holds helpers shared by every other app: template
filters used across the portal and the deferred mail delivery.
"""

from django.apps import AppConfig


class CoreConfig(AppConfig):
    """
    Configuration class for the core application.

    Attributes
    ----------
    default_auto_field : str
        Default primary key field type for models that do not
        explicitly define one.
    name : str
        Full Python path to the application.
    """

    default_auto_field = "django.db.models.BigAutoField"
    name = "core"
