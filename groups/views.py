# groups/views.py
"""
Views for the groups application.

Besides the group page, layer administrators find here the course
participations waiting for their approval and the population of
their Abteilung as the census will count it.
"""

from django.contrib.auth.decorators import login_required
from django.shortcuts import get_object_or_404, render

from events.models import Approval
from .models import Group, Role
from .permissions import can_write_layer, require_layer_write


@login_required
def group_detail(request, group_id):
    """
    Display a group with its subgroups and active roles.
    """
    group = get_object_or_404(Group, pk=group_id)
    roles = (
        Role.objects.active()
        .filter(group=group)
        .select_related("person", "person__person")
    )
    return render(
        request,
        "groups/group_detail.html",
        {
            "group": group,
            "children": group.children.all(),
            "roles": roles,
            "can_write": can_write_layer(request.user, group),
        },
    )


@login_required
def pending_approvals(request, group_id):
    """
    List the participation approvals pending at the group's layer.

    Parameters
    ----------
    request : HttpRequest
        The current HTTP request.
    group_id : int
        Primary key of the group; its layer is used.

    Returns
    -------
    HttpResponse
        The list of approvals neither approved nor rejected yet.
    """
    group = get_object_or_404(Group, pk=group_id)
    require_layer_write(request.user, group)
    approvals = (
        Approval.objects.filter(layer=group.layer_group, approved=False, rejected=False)
        .select_related("participation__event", "participation__person__person")
    )
    return render(
        request,
        "groups/pending_approvals.html",
        {"group": group, "approvals": approvals},
    )


def _population_entries(groups):
    entries = []
    for group in groups:
        roles = list(
            Role.objects.active()
            .filter(group=group)
            .select_related("person", "person__person")
            .order_by("person__last_name", "person__first_name")
        )
        people = []
        for role in roles:
            person = role.person.person
            people.append({
                "role": role,
                "person": person,
                "incomplete": person.birthday is None or not person.gender,
            })
        entries.append({"group": group, "people": people})
    return entries


@login_required
def population(request, group_id):
    """
    List the people of an Abteilung as the census will count them.

    People without birthday or gender cannot be counted correctly and
    are flagged.

    Parameters
    ----------
    request : HttpRequest
        The current HTTP request.
    group_id : int
        Primary key of an Abteilung.

    Returns
    -------
    HttpResponse
        The population grouped by the groups of the layer.
    """
    group = get_object_or_404(Group, pk=group_id, group_type=Group.Type.ABTEILUNG)
    require_layer_write(request.user, group)
    entries = _population_entries(group.layer_groups())
    people = {e["person"].pk for entry in entries for e in entry["people"]}
    incomplete = {
        e["person"].pk for entry in entries for e in entry["people"] if e["incomplete"]
    }
    return render(
        request,
        "groups/population.html",
        {
            "group": group,
            "entries": entries,
            "total": len(people),
            "incomplete_count": len(incomplete),
        },
    )
