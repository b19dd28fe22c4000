# census/forms.py
"""
Forms of the census application.
"""

from django import forms

from .models import COUNT_FIELDS, Census, MemberCount


class CensusForm(forms.ModelForm):
    """
    Form opening a new census.
    """

    class Meta:
        model = Census
        fields = ["year", "start_at", "finish_at"]
        widgets = {
            "start_at": forms.DateInput(attrs={"type": "date"}),
            "finish_at": forms.DateInput(attrs={"type": "date"}),
        }

    def clean(self):
        cleaned = super().clean()
        start_at, finish_at = cleaned.get("start_at"), cleaned.get("finish_at")
        if start_at and finish_at and finish_at < start_at:
            self.add_error("finish_at", "Ende muss nach dem Beginn liegen")
        return cleaned


MemberCountFormSet = forms.modelformset_factory(
    MemberCount,
    fields=["born_in", *COUNT_FIELDS],
    extra=0,
)
