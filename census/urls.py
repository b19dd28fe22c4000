# census/urls.py
"""
URL configuration for the census application.

Included at the root: the censuses are global, evaluations and
member counts are nested below ``groups/<group_id>/``.
"""

from django.urls import path

from . import views

app_name = "census"

urlpatterns = [
    path("censuses/", views.census_new, name="censuses"),
    path("censuses/new/", views.census_new, name="census_new"),
    path("groups/<int:group_id>/census/bund/", views.census_bund, name="bund"),
    path(
        "groups/<int:group_id>/census/kantonalverband/",
        views.census_kantonalverband,
        name="kantonalverband",
    ),
    path("groups/<int:group_id>/census/abteilung/", views.census_abteilung, name="abteilung"),
    path(
        "groups/<int:group_id>/census/kantonalverband/remind/",
        views.census_remind,
        name="remind",
    ),
    path("groups/<int:group_id>/member_counts/", views.member_counts, name="member_counts"),
    path(
        "groups/<int:group_id>/member_counts/edit/",
        views.member_counts_edit,
        name="member_counts_edit",
    ),
    path(
        "groups/<int:group_id>/member_counts/destroy/",
        views.member_counts_destroy,
        name="member_counts_destroy",
    ),
]
