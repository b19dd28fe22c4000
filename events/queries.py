# events/queries.py
"""
People lookups for event participations.

Tentative participants are looked up among the people holding an
active role in the layers of the event's groups (and below).
"""

from django.contrib.auth import get_user_model
from django.db.models import Q

from groups.models import Role

User = get_user_model()


def _candidate_group_ids(event) -> set:
    ids = set()
    for group in event.groups.all():
        layer = group.layer_group
        ids.add(layer.pk)
        ids.update(g.pk for g in layer.descendants())
    return ids


def tentative_candidates(event):
    """
    Return the people who may be recorded as tentative participants.

    Parameters
    ----------
    event : Event
        The event the participation is recorded for.

    Returns
    -------
    QuerySet
        Users with an active role below the event's layers.
    """
    roles = Role.objects.active().filter(group_id__in=_candidate_group_ids(event))
    return (
        User.objects.filter(pk__in=roles.values("person_id"))
        .select_related("person")
        .order_by("last_name", "first_name")
    )


def search_tentative_candidates(event, query: str, limit: int = 10):
    """
    Return the candidates whose name or nickname contains ``query``.
    """
    terms = query.split()
    qs = tentative_candidates(event)
    for term in terms:
        qs = qs.filter(
            Q(first_name__icontains=term)
            | Q(last_name__icontains=term)
            | Q(person__nickname__icontains=term)
        )
    return qs[:limit]
