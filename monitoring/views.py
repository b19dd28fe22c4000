# monitoring/views.py
"""
Views for the monitoring application.

This module provides administrative views for inspecting
the application journal directly through the Django interface.
"""

from django.contrib.admin.views.decorators import staff_member_required
from django.shortcuts import render

from .html_logger import log_file


@staff_member_required
def logs_view(request):
    """
    Display the application journal as HTML content.

    Restricted to staff members only. Reads the journal written by
    :mod:`monitoring.html_logger` and renders its content in the
    monitoring template.

    Parameters
    ----------
    request : HttpRequest
        The current HTTP request.

    Returns
    -------
    HttpResponse
        A rendered template containing the journal HTML or a
        placeholder message if nothing was logged yet.
    """
    path = log_file()

    # Read the journal if available, otherwise fall back to a placeholder
    if path.exists():
        html = path.read_text(encoding="utf-8")
    else:
        html = "<p>Noch keine Einträge.</p>"

    return render(request, "monitoring/logs.html", {"log_html": html})
