# events/signals.py
"""
Signals for the events application.

Participations in courses requiring approval are submitted to the
layer of the participant for approval.
"""

from django.db.models.signals import post_save
from django.dispatch import receiver

from groups.models import Role
from .models import Approval, Participation


def primary_layer(person):
    """
    Return the layer of the person's oldest active role, if any.
    """
    role = (
        Role.objects.active()
        .filter(person=person)
        .select_related("group")
        .order_by("created_at")
        .first()
    )
    return role.group.layer_group if role else None


@receiver(post_save, sender=Participation)
def request_approval_on_create(sender, instance: Participation, created, **kwargs):
    """
    Create the pending approval of a new course participation.

    Parameters
    ----------
    sender : Model
        The model class sending the signal (Participation).
    instance : Participation
        The participation that was saved.
    created : bool
        True if the participation was just created.

    Notes
    -----
    - Only applies to events with ``requires_approval`` set.
    - Tentative participations are not submitted for approval.
    - People without an active role have no layer to approve them.
    """
    if not created or not instance.event.requires_approval:
        return
    if instance.state == Participation.State.TENTATIVE:
        return
    layer = primary_layer(instance.person)
    if layer is not None:
        Approval.objects.get_or_create(participation=instance, layer=layer)
