# events/views.py
"""
Views for the events application.

This module defines the event pages nested below a group: listing,
creating and editing events, the camp application (PDF and
submission), connecting a camp to a supercamp and recording
tentative participations.
"""

from io import BytesIO

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.contrib.auth.mixins import LoginRequiredMixin
from django.db import transaction
from django.http import Http404, HttpResponse
from django.shortcuts import get_object_or_404, redirect, render
from django.views.decorators.http import require_POST
from django.views.generic import DetailView, ListView

from core.mail import deliver_later
from groups.models import Group
from groups.permissions import can_write_layer, require_layer_write
from monitoring.html_logger import error, info, warn
from .exceptions import CampApplicationError
from .forms import (
    AdminQuestionFormSet,
    ApplicationQuestionFormSet,
    EventDateFormSet,
    EventForm,
    TentativeParticipationForm,
)
from .mailers import CampMailer
from .models import Event, EventDate, Participation
from .pdf import generate_camp_application_pdf
from .permissions import (
    can_create_camp_application,
    can_show_camp_application,
    can_update_event,
    require,
)
from .queries import tentative_candidates

#: Session key holding the camp form data merged with a chosen supercamp
MERGE_SESSION_KEY = "event_with_merged_supercamp"


def _get_event(group_id, pk) -> Event:
    return get_object_or_404(Event, pk=pk, groups__pk=group_id)


def _build_formsets(event, data=None, merged_dates=None, replace_dates=False):
    """
    Build the date and question formsets of the event form.

    Parameters
    ----------
    event : Event
        The edited event, possibly unsaved.
    data : QueryDict, optional
        Posted data for bound formsets.
    merged_dates : list of dict, optional
        Dates carried over from a supercamp merge; they are offered
        instead of the event's current dates.
    replace_dates : bool
        Whether the posted dates replace the current ones.
    """
    date_kwargs = {"instance": event, "prefix": "dates"}
    if merged_dates is not None or replace_dates:
        date_kwargs["queryset"] = EventDate.objects.none()
    if merged_dates:
        date_kwargs["initial"] = merged_dates
    dates = EventDateFormSet(data, **date_kwargs)
    if merged_dates:
        dates.extra = max(len(merged_dates) - dates.min_num, 0)
    return {
        "dates_formset": dates,
        "application_questions_formset": ApplicationQuestionFormSet(
            data, instance=event, prefix="application_questions"
        ),
        "admin_questions_formset": AdminQuestionFormSet(
            data, instance=event, prefix="admin_questions"
        ),
    }


def _merged_camp_data(request, event):
    """
    Pop the merge data stored for ``event`` by :func:`connect_supercamp`.

    Only camps consume the data; it is dropped when it was stored
    for another camp.
    """
    if not event.is_camp:
        return None
    data = request.session.pop(MERGE_SESSION_KEY, None)
    if not data or data.get("event_id") != event.pk:
        return None
    return data


def _save_event(form, formsets, replace_dates=False):
    with transaction.atomic():
        event = form.save()
        if replace_dates:
            event.dates.all().delete()
        for formset in formsets.values():
            formset.instance = event
            formset.save()
    return event


class EventListView(LoginRequiredMixin, ListView):
    """
    View listing the events of a group.
    """

    template_name = "events/event_list.html"
    context_object_name = "events"

    def get_queryset(self):
        self.group = get_object_or_404(Group, pk=self.kwargs["group_id"])
        return Event.objects.filter(groups=self.group).prefetch_related("dates")

    def get_context_data(self, **kwargs):
        ctx = super().get_context_data(**kwargs)
        ctx["group"] = self.group
        ctx["can_create"] = can_write_layer(self.request.user, self.group)
        return ctx


class EventDetailView(LoginRequiredMixin, DetailView):
    """
    View displaying an event with its camp application status.
    """

    template_name = "events/event_detail.html"
    context_object_name = "event"

    def get_object(self, queryset=None):
        return _get_event(self.kwargs["group_id"], self.kwargs["pk"])

    def get_context_data(self, **kwargs):
        ctx = super().get_context_data(**kwargs)
        event = self.object
        user = self.request.user
        ctx["group"] = get_object_or_404(Group, pk=self.kwargs["group_id"])
        ctx["can_update"] = can_update_event(user, event)
        ctx["can_show_camp_application"] = (
            event.is_campy and can_show_camp_application(user, event)
        )
        ctx["can_submit_camp"] = (
            event.is_campy
            and not event.camp_submitted
            and can_create_camp_application(user, event)
        )
        return ctx


@login_required
def event_new(request, group_id):
    """
    Render and process the form creating an event in a group.

    The event type comes from the ``type`` parameter (query string
    on GET, form field on POST) and defaults to a generic event.

    Parameters
    ----------
    request : HttpRequest
        The current HTTP request.
    group_id : int
        Primary key of the organizing group.

    Returns
    -------
    HttpResponse
        The form, or a redirect to the new event.
    """
    group = get_object_or_404(Group, pk=group_id)
    require_layer_write(request.user, group)

    event_type = request.POST.get("type") or request.GET.get("type") or Event.Type.EVENT
    if event_type not in Event.Type.values:
        raise Http404("Unknown event type")
    event = Event(type=event_type)

    if request.method == "POST":
        form = EventForm(request.POST, instance=event, user=request.user)
        formsets = _build_formsets(event, request.POST)
        if form.is_valid() and all(fs.is_valid() for fs in formsets.values()):
            with transaction.atomic():
                event = form.save()
                event.groups.set([group])
                for formset in formsets.values():
                    formset.instance = event
                    formset.save()
            info(f"Event created event={event.pk} group={group.pk} user={request.user.pk}.")
            messages.success(request, f"Anlass {event.name} wurde erfolgreich erstellt.")
            return redirect("events:detail", group_id=group.pk, pk=event.pk)
    else:
        form = EventForm(instance=event, user=request.user)
        formsets = _build_formsets(event)

    return render(
        request,
        "events/event_form.html",
        {"group": group, "event": event, "form": form, **formsets},
    )


@login_required
def event_edit(request, group_id, pk):
    """
    Render and process the form editing an event.

    On GET a camp consumes pending supercamp merge data and the form
    is prefilled with it. On POST the event, its dates and its
    questions are saved together.

    Parameters
    ----------
    request : HttpRequest
        The current HTTP request.
    group_id : int
        Primary key of a group organizing the event.
    pk : int
        Primary key of the event.

    Returns
    -------
    HttpResponse
        The form, or a redirect to the event.

    Raises
    ------
    PermissionDenied
        If the user may not edit the event.
    """
    event = _get_event(group_id, pk)
    group = get_object_or_404(Group, pk=group_id)
    require(can_update_event(request.user, event))

    merged = None
    if request.method == "POST":
        replace_dates = request.POST.get("replace_dates") == "1"
        form = EventForm(request.POST, instance=event, user=request.user)
        formsets = _build_formsets(event, request.POST, replace_dates=replace_dates)
        if form.is_valid() and all(fs.is_valid() for fs in formsets.values()):
            event = _save_event(form, formsets, replace_dates=replace_dates)
            info(f"Event updated event={event.pk} user={request.user.pk}.")
            messages.success(request, f"Anlass {event.name} wurde erfolgreich aktualisiert.")
            return redirect("events:detail", group_id=group.pk, pk=event.pk)
        warn(f"Event form invalid event={event.pk} user={request.user.pk}.")
    else:
        merged = _merged_camp_data(request, event)
        initial = {}
        merged_dates = None
        if merged:
            initial = {"name": merged.get("name", event.name), "parent": merged.get("parent_id")}
            merged_dates = merged.get("dates_attributes") or None
        form = EventForm(instance=event, user=request.user, initial=initial)
        formsets = _build_formsets(event, merged_dates=merged_dates)

    return render(
        request,
        "events/event_form.html",
        {
            "group": group,
            "event": event,
            "form": form,
            "merged": bool(merged and merged.get("dates_attributes")),
            **formsets,
        },
    )


@login_required
def show_camp_application(request, group_id, pk):
    """
    Return the camp application of an event as PDF.

    Raises
    ------
    Http404
        If the event is neither a camp nor a campy course.
    PermissionDenied
        If the user may not read the application.
    """
    event = _get_event(group_id, pk)
    require(can_show_camp_application(request.user, event))
    if not event.is_campy:
        raise Http404("Event is not a camp")

    buffer = BytesIO()
    try:
        generate_camp_application_pdf(event, buffer)
    except CampApplicationError as ex:
        error(f"Camp application PDF error event={event.pk}: {ex}")
        raise
    response = HttpResponse(buffer.getvalue(), content_type="application/pdf")
    response["Content-Disposition"] = f'inline; filename="lageranmeldung_{event.pk}.pdf"'
    return response


@login_required
@require_POST
def create_camp_application(request, group_id, pk):
    """
    Submit the camp application of an event.

    A complete camp gets its submission date and the application is
    mailed after the request commits. An incomplete camp stays
    unchanged and the missing data is listed in an alert.

    Parameters
    ----------
    request : HttpRequest
        The current HTTP request.
    group_id : int
        Primary key of a group organizing the event.
    pk : int
        Primary key of the event.

    Returns
    -------
    HttpResponseRedirect
        A redirect to the event page, with a success notice or an
        alert listing every missing field.

    Raises
    ------
    PermissionDenied
        If the user is neither coach nor leader of the camp.
    """
    event = _get_event(group_id, pk)
    require(can_create_camp_application(request.user, event))
    if not event.is_campy:
        raise Http404("Event is not a camp")

    if event.camp_submitted:
        messages.info(request, "Das Lager wurde bereits eingereicht.")
        return redirect("events:detail", group_id=group_id, pk=event.pk)

    errors = event.camp_submit_errors()
    if errors:
        messages.error(
            request,
            "Das Lager konnte nicht eingereicht werden: " + ", ".join(errors),
        )
        warn(f"Camp submission refused event={event.pk} missing={len(errors)}.")
        return redirect("events:detail", group_id=group_id, pk=event.pk)

    with transaction.atomic():
        event.submit_camp()
        deliver_later(CampMailer.submit_camp(event))
    info(f"Camp submitted event={event.pk} user={request.user.pk}.")
    messages.success(request, "Das Lager wurde erfolgreich eingereicht.")
    return redirect("events:detail", group_id=group_id, pk=event.pk)


@login_required
def available_supercamps(request, group_id, pk):
    """
    List the camps the event can be connected to as sub camp.
    """
    event = _get_event(group_id, pk)
    require(can_update_event(request.user, event))
    if not event.is_camp:
        raise Http404("Event is not a camp")

    supercamps = (
        Event.objects.filter(
            type=Event.Type.CAMP,
            allow_sub_camps=True,
            state=Event.State.CREATED,
        )
        .exclude(pk=event.pk)
        .prefetch_related("groups", "dates")
    )
    return render(
        request,
        "events/supercamp_list.html",
        {"group": get_object_or_404(Group, pk=group_id), "event": event, "supercamps": supercamps},
    )


@login_required
@require_POST
def connect_supercamp(request, group_id, pk, supercamp_id):
    """
    Remember the camp form data together with the chosen supercamp.

    The posted (possibly unsaved) form data of the camp is kept in the
    session and the user is sent back to the camp's edit form, where
    it is prefilled with this data and the supercamp as parent.
    """
    event = _get_event(group_id, pk)
    require(can_update_event(request.user, event))
    supercamp = get_object_or_404(Event, pk=supercamp_id)
    if not event.is_camp or supercamp.pk == event.pk or not supercamp.accepts_sub_camps:
        messages.error(request, "Das gewählte Lager nimmt keine Unterlager auf.")
        return redirect("events:available_supercamps", group_id=group_id, pk=event.pk)

    request.session[MERGE_SESSION_KEY] = {
        "event_id": event.pk,
        "parent_id": supercamp.pk,
        "name": request.POST.get("name") or event.name,
        "dates_attributes": _posted_dates(request.POST),
    }
    info(f"Supercamp selected event={event.pk} supercamp={supercamp.pk}.")
    return redirect("events:edit", group_id=group_id, pk=event.pk)


def _posted_dates(data) -> list:
    """
    Extract the non-deleted dates from posted event form data.
    """
    try:
        total = int(data.get("dates-TOTAL_FORMS", 0))
    except ValueError:
        return []
    dates = []
    for i in range(total):
        prefix = f"dates-{i}-"
        if data.get(prefix + "DELETE"):
            continue
        values = {
            key: data.get(prefix + key, "")
            for key in ("label", "location", "start_at", "finish_at")
        }
        if any(values.values()):
            dates.append(values)
    return dates


@login_required
def new_tentative(request, group_id, pk):
    """
    Render the form recording a tentative participation.
    """
    event = _get_event(group_id, pk)
    require(can_update_event(request.user, event))
    form = TentativeParticipationForm(candidates=tentative_candidates(event))
    return render(
        request,
        "events/tentative_form.html",
        {"group": get_object_or_404(Group, pk=group_id), "event": event, "form": form},
    )


@login_required
@require_POST
def create_tentative(request, group_id, pk):
    """
    Record a person as tentative participant of the event.

    Recording the same person twice keeps the existing participation.
    """
    event = _get_event(group_id, pk)
    require(can_update_event(request.user, event))
    form = TentativeParticipationForm(request.POST, candidates=tentative_candidates(event))
    if not form.is_valid():
        messages.error(request, "Bitte eine Person auswählen.")
        return render(
            request,
            "events/tentative_form.html",
            {"group": get_object_or_404(Group, pk=group_id), "event": event, "form": form},
        )

    person = form.cleaned_data["person"]
    participation, created = Participation.objects.get_or_create(
        event=event,
        person=person,
        defaults={"state": Participation.State.TENTATIVE, "active": False},
    )
    if created:
        info(f"Tentative participation created participation={participation.pk}.")
        messages.success(request, f"{person} wurde provisorisch hinzugefügt.")
    else:
        messages.info(request, f"{person} ist bereits erfasst.")
    return redirect("events:detail", group_id=group_id, pk=event.pk)
