# monitoring/urls.py
"""
URL configuration for the monitoring application.

Included below ``monitoring/`` inside the language prefix, e.g.
``/de/monitoring/logs/``.
"""

from django.urls import path

from . import views

app_name = "monitoring"

urlpatterns = [
    # Journal of the camp and census workflows (staff only)
    path("logs/", views.logs_view, name="logs"),
]
