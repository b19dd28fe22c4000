# groups/permissions.py
"""
Role based permission checks on groups.

A user may write a group's data when one of their active roles
grants ``layer_and_below_full`` in the group's layer or any layer
above it, or ``layer_full`` in the group's own layer. Superusers
may always write.
"""

from django.core.exceptions import PermissionDenied

from .models import Role


def _is_admin(user) -> bool:
    return user.is_authenticated and user.is_superuser


def active_roles(user):
    """
    Return the active roles of ``user`` with their groups loaded.
    """
    if not user.is_authenticated:
        return Role.objects.none()
    return Role.objects.active().filter(person=user).select_related("group")


def can_write_layer(user, group) -> bool:
    """
    Tell whether ``user`` may write the data of ``group``.

    Parameters
    ----------
    user : User
        The user to check.
    group : Group
        The group whose data is written.

    Returns
    -------
    bool
        True if a role grants the permission.
    """
    if _is_admin(user):
        return True
    if not user.is_authenticated:
        return False

    layer = group.layer_group
    layers_above = {layer.pk, *(g.pk for g in layer.ancestors() if g.is_layer)}
    for role in active_roles(user):
        role_layer = role.group.layer_group
        if role.permission == "layer_and_below_full" and role_layer.pk in layers_above:
            return True
        if role.permission == "layer_full" and role_layer.pk == layer.pk:
            return True
    return False


def require_layer_write(user, group) -> None:
    """
    Raise :class:`PermissionDenied` unless ``user`` may write ``group``.
    """
    if not can_write_layer(user, group):
        raise PermissionDenied
