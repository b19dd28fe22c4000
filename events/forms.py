# events/forms.py
"""
Forms for the events application.

The event form adapts to the event type: generic events show the
common fields, courses add kind and course functions, camps and
campy courses add the camp data. Checkpoint fields are only part
of the form for the person allowed to set them, so values posted
by anybody else are ignored.
"""

from django import forms
from django.contrib.auth import get_user_model

from people.models import CONTACT_ATTRS, CONTACT_ATTR_LABELS, person_label
from .models import (
    COACH_CHECKPOINT_ATTRS,
    EXPECTED_PARTICIPANT_ATTRS,
    LEADER_CHECKPOINT_ATTRS,
    Event,
    EventDate,
    Question,
)
from .permissions import is_coach, is_leader

User = get_user_model()

BASE_FIELDS = ["name", "number", "description", "contact", "leader"]
COURSE_FIELDS = ["kind", "advisor", "requires_approval"]
CAMP_FIELDS = [
    "coach",
    "parent",
    "allow_sub_camps",
    "state",
    "canton",
    "location",
    "coordinates",
    "altitude",
    "emergency_phone",
    "landlord",
    "landlord_permission_obtained",
    *EXPECTED_PARTICIPANT_ATTRS,
    *COACH_CHECKPOINT_ATTRS,
    *LEADER_CHECKPOINT_ATTRS,
    "contact_attrs_passed_on_to_supercamp",
]


class PersonChoiceField(forms.ModelChoiceField):
    def label_from_instance(self, obj):
        return person_label(obj)


class EventForm(forms.ModelForm):
    """
    Form for creating or editing an event.

    Parameters
    ----------
    user : User
        The user editing the event; decides which checkpoint
        fields are part of the form.
    """

    contact_attrs_passed_on_to_supercamp = forms.MultipleChoiceField(
        label="An Hauptlager weitergegebene Kontaktangaben",
        choices=[(attr, CONTACT_ATTR_LABELS[attr]) for attr in CONTACT_ATTRS],
        widget=forms.CheckboxSelectMultiple,
        required=False,
    )

    class Meta:
        model = Event
        fields = BASE_FIELDS + COURSE_FIELDS + CAMP_FIELDS
        field_classes = {
            "contact": PersonChoiceField,
            "leader": PersonChoiceField,
            "coach": PersonChoiceField,
            "advisor": PersonChoiceField,
        }
        widgets = {
            "description": forms.Textarea(attrs={"rows": 4}),
            "location": forms.Textarea(attrs={"rows": 2}),
            "landlord": forms.Textarea(attrs={"rows": 2}),
        }

    def __init__(self, *args, user=None, **kwargs):
        super().__init__(*args, **kwargs)
        event = self.instance
        allowed = set(BASE_FIELDS)
        if event.is_course:
            allowed.update(COURSE_FIELDS)
        if event.is_campy:
            allowed.update(CAMP_FIELDS)
        if user is None or not is_leader(user, event):
            allowed.difference_update(LEADER_CHECKPOINT_ATTRS)
        if user is None or not is_coach(user, event):
            allowed.difference_update(COACH_CHECKPOINT_ATTRS)

        for name in list(self.fields):
            if name not in allowed:
                del self.fields[name]

        if "parent" in self.fields:
            parents = Event.objects.filter(
                type=Event.Type.CAMP,
                allow_sub_camps=True,
                state=Event.State.CREATED,
            )
            if event.pk:
                parents = parents.exclude(pk=event.pk)
            if event.parent_id:
                parents = parents | Event.objects.filter(pk=event.parent_id)
            self.fields["parent"].queryset = parents


class EventDateForm(forms.ModelForm):
    class Meta:
        model = EventDate
        fields = ["label", "location", "start_at", "finish_at"]
        widgets = {
            "start_at": forms.DateInput(attrs={"type": "date"}),
            "finish_at": forms.DateInput(attrs={"type": "date"}),
        }


EventDateFormSet = forms.inlineformset_factory(
    Event,
    EventDate,
    form=EventDateForm,
    extra=1,
    min_num=1,
    validate_min=True,
    can_delete=True,
)


class QuestionFormSetBase(forms.BaseInlineFormSet):
    """
    Inline formset restricted to either application or admin questions.

    New questions get the formset's ``admin`` flag.
    """

    admin = False

    def __init__(self, *args, **kwargs):
        kwargs.setdefault("queryset", Question.objects.filter(admin=self.admin))
        super().__init__(*args, **kwargs)

    def save_new(self, form, commit=True):
        form.instance.admin = self.admin
        return super().save_new(form, commit=commit)


class AdminQuestionFormSetBase(QuestionFormSetBase):
    admin = True


QUESTION_FIELDS = ["question", "choices", "required", "pass_on_to_supercamp"]

ApplicationQuestionFormSet = forms.inlineformset_factory(
    Event,
    Question,
    formset=QuestionFormSetBase,
    fields=QUESTION_FIELDS,
    extra=0,
    can_delete=True,
)

AdminQuestionFormSet = forms.inlineformset_factory(
    Event,
    Question,
    formset=AdminQuestionFormSetBase,
    fields=QUESTION_FIELDS,
    extra=0,
    can_delete=True,
)


class TentativeParticipationForm(forms.Form):
    """
    Form selecting the person to record as tentative participant.
    """

    person = PersonChoiceField(queryset=User.objects.none(), label="Person")

    def __init__(self, *args, candidates=None, **kwargs):
        super().__init__(*args, **kwargs)
        if candidates is not None:
            self.fields["person"].queryset = candidates
