# events/permissions.py
"""
Permission checks for events.

Layer writers (see :mod:`groups.permissions`) may manage the events
of their groups. The people holding a function in an event get
additional, narrower rights: leader and coach may edit it and
submit the camp application, the advisor may read the application.
"""

from django.core.exceptions import PermissionDenied

from groups.permissions import can_write_layer


def is_leader(user, event) -> bool:
    return user.is_authenticated and event.leader_id == user.pk


def is_coach(user, event) -> bool:
    return user.is_authenticated and event.coach_id == user.pk


def is_advisor(user, event) -> bool:
    return user.is_authenticated and event.advisor_id == user.pk


def can_write_event_groups(user, event) -> bool:
    """
    Tell whether ``user`` may write one of the event's groups.
    """
    return any(can_write_layer(user, group) for group in event.groups.all())


def can_update_event(user, event) -> bool:
    """
    Tell whether ``user`` may edit ``event``.
    """
    return (
        can_write_event_groups(user, event)
        or is_leader(user, event)
        or is_coach(user, event)
    )


def can_show_camp_application(user, event) -> bool:
    """
    Tell whether ``user`` may read the camp application of ``event``.
    """
    return can_update_event(user, event) or is_advisor(user, event)


def can_create_camp_application(user, event) -> bool:
    """
    Tell whether ``user`` may submit the camp application of ``event``.

    Only the people responsible for the camp submit it.
    """
    if user.is_authenticated and user.is_superuser:
        return True
    return is_coach(user, event) or is_leader(user, event)


def require(allowed: bool) -> None:
    """
    Raise :class:`PermissionDenied` unless ``allowed``.
    """
    if not allowed:
        raise PermissionDenied
