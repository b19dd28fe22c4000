# pbs_portal/urls.py
"""
Root URL configuration for the PBS portal.

Every page lives below a language prefix (``/de/``, ``/fr/``,
``/it/``). Group-specific pages are nested below
``groups/<group_id>/``; application modules are delegated to
their own ``urls.py``.

For more details, see:
https://docs.djangoproject.com/en/stable/topics/i18n/translation/#language-prefix-in-url-patterns
"""

from django.conf.urls.i18n import i18n_patterns
from django.contrib import admin
from django.urls import include, path
from django.views.generic import TemplateView

#: Routes outside the language prefix
urlpatterns = [
    # Language switch (POST to set the language cookie)
    path("i18n/", include("django.conf.urls.i18n")),
]

urlpatterns += i18n_patterns(
    # Django admin interface
    path("admin/", admin.site.urls),

    # Login, logout and password views of django.contrib.auth
    path("accounts/", include("django.contrib.auth.urls")),

    # People search (query_tentative)
    path("", include("people.urls")),

    # Group pages, pending approvals and population
    path("groups/", include("groups.urls")),

    # Events of a group, camp application and tentative participations
    path("groups/<int:group_id>/events/", include("events.urls")),

    # Invoice settings of a layer group
    path("groups/<int:group_id>/invoice_config/", include("invoices.urls")),

    # Censuses, census evaluations and member counts
    path("", include("census.urls")),

    # Monitoring application (application journal)
    path("monitoring/", include("monitoring.urls")),

    # Homepage
    path("", TemplateView.as_view(template_name="home.html"), name="home"),
)
