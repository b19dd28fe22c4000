# groups/urls.py
"""
URL configuration for the groups application.

Included below ``groups/``.
"""

from django.urls import path

from . import views

app_name = "groups"

urlpatterns = [
    path("<int:group_id>/", views.group_detail, name="detail"),
    path("<int:group_id>/pending_approvals/", views.pending_approvals, name="pending_approvals"),
    path("<int:group_id>/population/", views.population, name="population"),
]
