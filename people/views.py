# people/views.py
"""
Views for the people application.
"""

from django.conf import settings
from django.contrib.auth.decorators import login_required
from django.http import Http404, JsonResponse
from django.shortcuts import get_object_or_404

from events.models import Event
from events.permissions import can_update_event, require
from events.queries import search_tentative_candidates
from .models import person_label


@login_required
def query_tentative(request):
    """
    Search people who may be recorded as tentative participants.

    Parameters
    ----------
    request : HttpRequest
        GET parameters ``q`` (search terms) and ``event_id``.

    Returns
    -------
    JsonResponse
        A list of ``{"id", "label"}`` objects, empty when the query
        is shorter than ``PBS_TENTATIVE_QUERY_MIN_LENGTH``.
    """
    event_id = request.GET.get("event_id", "")
    if not (event_id.isascii() and event_id.isdigit()):
        raise Http404("Invalid event.")
    event = get_object_or_404(Event, pk=event_id)
    require(can_update_event(request.user, event))

    query = request.GET.get("q", "").strip()
    if len(query) < settings.PBS_TENTATIVE_QUERY_MIN_LENGTH:
        return JsonResponse([], safe=False)

    people = [
        {"id": user.pk, "label": person_label(user)}
        for user in search_tentative_candidates(event, query)
    ]
    return JsonResponse(people, safe=False)
