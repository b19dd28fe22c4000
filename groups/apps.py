# groups/apps.py
"""
Application configuration for the groups module.
"""

from django.apps import AppConfig


class GroupsConfig(AppConfig):
    """
    Configuration class for the groups application.

    Attributes
    ----------
    default_auto_field : str
        Default primary key field type for models that do not
        explicitly define one.
    name : str
        Full Python path to the application.
    """

    default_auto_field = "django.db.models.BigAutoField"
    name = "groups"
    verbose_name = "Gruppen"
