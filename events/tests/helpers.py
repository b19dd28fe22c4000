"""
POST data for the event form.
"""

from core.tests.helpers import form_data, formset_data
from events.forms import (
    AdminQuestionFormSet,
    ApplicationQuestionFormSet,
    EventDateFormSet,
    EventForm,
)


def event_form_data(event, user, **overrides) -> dict:
    """
    Return the data of the event form as ``user`` would submit it.

    Parameters
    ----------
    event : Event
        The event to edit, or an unsaved event of the wanted type.
    user : User
        The editing user; checkpoint fields they may not set are
        left out, exactly as in the rendered form.
    **overrides
        Values replacing the rendered ones.
    """
    data = {"type": event.type}
    data.update(form_data(EventForm(instance=event, user=user)))
    data.update(formset_data(EventDateFormSet(instance=event, prefix="dates")))
    data.update(formset_data(ApplicationQuestionFormSet(instance=event, prefix="application_questions")))
    data.update(formset_data(AdminQuestionFormSet(instance=event, prefix="admin_questions")))
    data.update(overrides)
    return data
