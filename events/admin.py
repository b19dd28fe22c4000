# events/admin.py
"""
Admin configuration for the events application.

Events are edited with their dates and questions inline;
participations and approvals get their own list views so that
approvals can be decided from the admin interface.
"""

from django.contrib import admin
from .models import Approval, Event, EventDate, EventKind, Participation, Question


class EventDateInline(admin.TabularInline):
    model = EventDate
    extra = 0


class QuestionInline(admin.TabularInline):
    model = Question
    extra = 0


@admin.register(EventKind)
class EventKindAdmin(admin.ModelAdmin):
    list_display = ("short_name", "label", "campy")
    list_filter = ("campy",)


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    """
    Admin configuration for the Event model.

    Attributes
    ----------
    list_display : tuple
        Name, type, kind, leader, coach and submission date.
    list_filter : tuple
        Type, state and canton.
    search_fields : tuple
        Name and number of the event.
    """

    list_display = ("name", "type", "kind", "leader", "coach", "camp_submitted_at")
    list_filter = ("type", "state", "canton")
    search_fields = ("name", "number")
    filter_horizontal = ("groups",)
    inlines = [EventDateInline, QuestionInline]


@admin.register(Participation)
class ParticipationAdmin(admin.ModelAdmin):
    list_display = ("person", "event", "state", "active", "created_at")
    list_filter = ("state", "active")
    search_fields = ("person__first_name", "person__last_name", "event__name")


@admin.register(Approval)
class ApprovalAdmin(admin.ModelAdmin):
    list_display = ("participation", "layer", "approved", "rejected", "approved_at")
    list_filter = ("approved", "rejected", "layer")
