# events/urls.py
"""
URL configuration for the events application.

All routes are nested below a group (``groups/<group_id>/events/``);
the group id is passed on to every view.
"""

from django.urls import path
from . import views

# Application namespace used for reverse lookups
app_name = "events"

#: URL patterns for the events application
urlpatterns = [
    path("", views.EventListView.as_view(), name="list"),
    path("new/", views.event_new, name="new"),
    path("<int:pk>/", views.EventDetailView.as_view(), name="detail"),
    path("<int:pk>/edit/", views.event_edit, name="edit"),

    # Camp application: PDF and submission to the canton
    path(
        "<int:pk>/camp_application.pdf",
        views.show_camp_application,
        name="show_camp_application",
    ),
    path(
        "<int:pk>/camp_application/",
        views.create_camp_application,
        name="create_camp_application",
    ),

    # Hierarchical camps
    path(
        "<int:pk>/supercamp/available/",
        views.available_supercamps,
        name="available_supercamps",
    ),
    path(
        "<int:pk>/supercamp/connect/<int:supercamp_id>/",
        views.connect_supercamp,
        name="connect_supercamp",
    ),

    # Tentative participations (collection routes)
    path(
        "<int:pk>/participations/new_tentative/",
        views.new_tentative,
        name="new_tentative",
    ),
    path(
        "<int:pk>/participations/create_tentative/",
        views.create_tentative,
        name="create_tentative",
    ),
]
