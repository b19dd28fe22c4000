# pbs_portal/context_processors.py
"""
Custom context processors for the PBS portal.

These processors inject project-specific variables into all
template contexts, making them available globally in templates.
"""

from django.conf import settings


def branding(request):
    """
    Inject branding configuration into the template context.

    Parameters
    ----------
    request : HttpRequest
        The current HTTP request.

    Returns
    -------
    dict
        A dictionary containing:
        - ``ORGANISATION_NAME`` : display name of the federation.
        - ``ORGANISATION_LOGO_URL`` : URL of the logo, or None if unset.
    """
    return {
        "ORGANISATION_NAME": getattr(settings, "ORGANISATION_NAME", ""),
        "ORGANISATION_LOGO_URL": getattr(settings, "ORGANISATION_LOGO_URL", None),
    }
