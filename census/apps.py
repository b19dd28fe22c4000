# census/apps.py
"""
Application configuration for the census module.
"""

from django.apps import AppConfig


class CensusConfig(AppConfig):
    """
    Configuration class for the census application.

    Attributes
    ----------
    default_auto_field : str
        Default primary key field type for models that do not
        explicitly define one.
    name : str
        Full Python path to the application.
    """

    default_auto_field = "django.db.models.BigAutoField"
    name = "census"
    verbose_name = "Mitgliederzählung"
