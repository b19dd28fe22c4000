# census/views.py
"""
Views for the census application.

The Bund opens a census, every Abteilung counts its members, and
the layers above follow the progress in evaluation tables. A
Kantonalverband can remind Abteilungen which have not counted yet.
"""

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.db import transaction
from django.http import Http404
from django.shortcuts import get_object_or_404, redirect, render
from django.utils import timezone
from django.views.decorators.http import require_POST

from core.mail import deliver_later
from groups.models import Group
from groups.permissions import can_write_layer, require_layer_write
from monitoring.html_logger import info, warn
from .exceptions import CensusError
from .forms import CensusForm, MemberCountFormSet
from .mailers import CensusMailer, abteilung_leader_emails
from .member_counter import MemberCounter, open_census
from .models import Census, MemberCount


def _bund() -> Group:
    bund = Group.objects.filter(group_type=Group.Type.BUND, parent__isnull=True).first()
    if bund is None:
        raise Http404("No Bund group exists.")
    return bund


def _number(value):
    if value and value.isascii() and value.isdigit():
        return int(value)
    return None


def _evaluated_year(request):
    """
    Return the year requested with ``?year=``, or the current census year.
    """
    year = _number(request.GET.get("year"))
    if year:
        return year
    census = Census.current()
    return census.year if census else None


def _requested_year(request):
    """
    Return the year posted with the form, else the evaluated year.

    Raises
    ------
    Http404
        If the posted year is not a number.
    """
    posted = request.POST.get("year")
    if not posted:
        return _evaluated_year(request)
    year = _number(posted)
    if year is None:
        raise Http404("Invalid year.")
    return year


def _abteilungen(group) -> list:
    return [g for g in group.descendants() if g.group_type == Group.Type.ABTEILUNG]


# --- Censuses ---

@login_required
def census_new(request):
    """
    Show the form opening a census, and create it on POST.

    Only writers of the Bund may open a census.
    """
    bund = _bund()
    require_layer_write(request.user, bund)

    if request.method == "POST":
        form = CensusForm(request.POST)
        if form.is_valid():
            census = form.save()
            info(f"Census {census.year} opened by user={request.user.pk}.")
            messages.success(request, f"Die Zählung {census.year} wurde erfolgreich erstellt.")
            return redirect("census:bund", group_id=bund.pk)
    else:
        today = timezone.localdate()
        form = CensusForm(initial={"year": today.year, "start_at": today})

    return render(request, "census/census_form.html", {"form": form, "bund": bund})


# --- Evaluations ---

@login_required
def census_bund(request, group_id):
    """
    Display the member counts of the year per Kantonalverband.
    """
    group = get_object_or_404(Group, pk=group_id, group_type=Group.Type.BUND)
    require_layer_write(request.user, group)
    year = _evaluated_year(request)

    rows = []
    for kv in group.children.filter(group_type=Group.Type.KANTONALVERBAND):
        counts = MemberCount.objects.filter(kantonalverband=kv, year=year)
        abteilungen = _abteilungen(kv)
        counted = counts.values("abteilung").distinct().count()
        rows.append({
            "group": kv,
            "totals": counts.totals(),
            "abteilungen": len(abteilungen),
            "counted": counted,
        })
    return render(
        request,
        "census/bund.html",
        {
            "group": group,
            "year": year,
            "rows": rows,
            "totals": MemberCount.objects.filter(year=year).totals(),
        },
    )


@login_required
def census_kantonalverband(request, group_id):
    """
    Display the member counts of the year per Abteilung of a Kantonalverband.

    Abteilungen which have not counted yet are listed too, with the
    option to remind them while the census is open.
    """
    group = get_object_or_404(Group, pk=group_id, group_type=Group.Type.KANTONALVERBAND)
    require_layer_write(request.user, group)
    year = _evaluated_year(request)
    census = Census.current()

    rows = []
    for abteilung in _abteilungen(group):
        counts = MemberCount.objects.filter(abteilung=abteilung, year=year)
        rows.append({
            "group": abteilung,
            "totals": counts.totals() if counts.exists() else None,
        })
    return render(
        request,
        "census/kantonalverband.html",
        {
            "group": group,
            "year": year,
            "rows": rows,
            "totals": MemberCount.objects.filter(kantonalverband=group, year=year).totals(),
            "can_remind": census is not None and census.is_open and census.year == year,
        },
    )


@login_required
def census_abteilung(request, group_id):
    """
    Display the member counts of an Abteilung over the years.
    """
    group = get_object_or_404(Group, pk=group_id, group_type=Group.Type.ABTEILUNG)
    require_layer_write(request.user, group)
    census = Census.current()

    years = (
        MemberCount.objects.filter(abteilung=group)
        .values_list("year", flat=True)
        .distinct()
        .order_by("-year")
    )
    history = [
        {"year": year, "totals": MemberCount.objects.filter(abteilung=group, year=year).totals()}
        for year in years
    ]
    can_count = (
        census is not None
        and census.is_open
        and not MemberCounter(census.year, group).exists()
    )
    return render(
        request,
        "census/abteilung.html",
        {
            "group": group,
            "census": census,
            "history": history,
            "can_count": can_count,
            "can_edit": can_write_layer(request.user, group.kantonalverband or group),
        },
    )


@login_required
@require_POST
def census_remind(request, group_id):
    """
    Remind the leaders of an Abteilung to count their members.

    Parameters
    ----------
    request : HttpRequest
        POST parameter ``abteilung_id``.
    group_id : int
        Primary key of the Kantonalverband sending the reminder.

    Returns
    -------
    HttpResponseRedirect
        Back to the Kantonalverband evaluation, with a notice.
    """
    group = get_object_or_404(Group, pk=group_id, group_type=Group.Type.KANTONALVERBAND)
    require_layer_write(request.user, group)
    abteilung = get_object_or_404(
        Group, pk=_number(request.POST.get("abteilung_id")) or 0, group_type=Group.Type.ABTEILUNG
    )
    if abteilung.kantonalverband != group:
        raise Http404("Abteilung does not belong to this Kantonalverband.")

    census = Census.current()
    recipients = abteilung_leader_emails(abteilung)
    if census is None:
        messages.error(request, "Es ist keine Zählung eröffnet.")
    elif not recipients:
        warn(f"Census reminder without recipients abteilung={abteilung.pk}.")
        messages.warning(request, f"Für {abteilung} ist keine E-Mail-Adresse hinterlegt.")
    else:
        deliver_later(CensusMailer.reminder(request.user, census, abteilung, recipients))
        info(f"Census reminder sent abteilung={abteilung.pk} by user={request.user.pk}.")
        messages.success(request, f"Erinnerungsemail an {abteilung} versendet")
    return redirect("census:kantonalverband", group_id=group.pk)


# --- Member counts ---

def _member_counts_create(request, group):
    require_layer_write(request.user, group)
    try:
        census = open_census()
        rows = MemberCounter(census.year, group).count()
    except CensusError as ex:
        warn(f"Member count refused abteilung={group.pk}: {ex}")
        messages.error(request, "Die Mitgliederzahlen konnten nicht erfasst werden.")
        return redirect("census:abteilung", group_id=group.pk)

    total = sum(row.total for row in rows)
    info(f"Members counted abteilung={group.pk} year={census.year} total={total}.")
    messages.success(
        request, f"Die Zählung für {group} wurde erfolgreich erstellt ({total} Personen)."
    )
    return redirect("census:abteilung", group_id=group.pk)


@login_required
def member_counts(request, group_id):
    """
    Count the members of an Abteilung on POST, edit the counts on GET.
    """
    group = get_object_or_404(Group, pk=group_id, group_type=Group.Type.ABTEILUNG)
    if request.method == "POST":
        return _member_counts_create(request, group)
    return member_counts_edit(request, group_id)


@login_required
def member_counts_edit(request, group_id):
    """
    Show and update the member counts of an Abteilung for one year.

    Counts are corrected by writers of the Kantonalverband (or a
    layer above); the year defaults to the current census.
    """
    group = get_object_or_404(Group, pk=group_id, group_type=Group.Type.ABTEILUNG)
    require_layer_write(request.user, group.kantonalverband or group)

    year = _requested_year(request)
    queryset = MemberCount.objects.filter(abteilung=group, year=year or 0)
    if not queryset.exists():
        messages.error(request, f"Für {year or 'dieses Jahr'} sind keine Mitgliederzahlen erfasst.")
        return redirect("census:abteilung", group_id=group.pk)

    if request.method == "POST":
        formset = MemberCountFormSet(request.POST, queryset=queryset)
        if formset.is_valid():
            with transaction.atomic():
                formset.save()
            info(f"Member counts updated abteilung={group.pk} year={year}.")
            messages.success(request, "Die Mitgliederzahlen wurden erfolgreich gespeichert.")
            return redirect("census:abteilung", group_id=group.pk)
    else:
        formset = MemberCountFormSet(queryset=queryset)

    return render(
        request,
        "census/member_counts_form.html",
        {"group": group, "year": year, "formset": formset},
    )


@login_required
@require_POST
def member_counts_destroy(request, group_id):
    """
    Delete the member counts of an Abteilung for one year.

    Only writers of the Bund may delete counts; the Abteilung can
    then count again.
    """
    group = get_object_or_404(Group, pk=group_id, group_type=Group.Type.ABTEILUNG)
    require_layer_write(request.user, group.nearest(Group.Type.BUND) or _bund())

    year = _requested_year(request)
    if year is None:
        messages.error(request, "Für dieses Jahr sind keine Mitgliederzahlen erfasst.")
        return redirect("census:abteilung", group_id=group.pk)

    deleted, _ = MemberCount.objects.filter(abteilung=group, year=year).delete()
    warn(f"Member counts deleted abteilung={group.pk} year={year} rows={deleted}.")
    messages.success(request, f"Die Mitgliederzahlen {year} wurden gelöscht.")
    return redirect("census:abteilung", group_id=group.pk)
