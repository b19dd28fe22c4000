# people/urls.py
"""
URL configuration for the people application.
"""

from django.urls import path

from . import views

app_name = "people"

urlpatterns = [
    path("people/query_tentative/", views.query_tentative, name="query_tentative"),
]
