# monitoring/apps.py
"""
Application configuration for the monitoring module.

Monitoring has no models: it owns the HTML journal in which
the workflows record their outcomes, and the staff view on it.
"""

from django.apps import AppConfig


class MonitoringConfig(AppConfig):
    """
    Configuration class for the monitoring application.

    Attributes
    ----------
    default_auto_field : str
        Default primary key field type for models that do not
        explicitly define one.
    name : str
        Full Python path to the monitoring application.
    """

    default_auto_field = "django.db.models.BigAutoField"
    name = "monitoring"
    verbose_name = "Journal"
