# invoices/urls.py
"""
URL configuration for the invoices application.

Included below ``groups/<group_id>/invoice_config/``.
"""

from django.urls import path

from . import views

app_name = "invoices"

urlpatterns = [
    path("edit/", views.invoice_config_edit, name="edit"),
]
