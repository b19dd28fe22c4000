# invoices/forms.py
"""
Forms for editing the invoice settings of a group.
"""

from django import forms

from .models import InvoiceConfig, PaymentReminderConfig


class InvoiceConfigForm(forms.ModelForm):
    """
    Form over the banking details of an :class:`InvoiceConfig`.

    The banking rules live in :meth:`InvoiceConfig.clean`; their
    errors are attached to the fields of this form.
    """

    class Meta:
        model = InvoiceConfig
        fields = [
            "contact",
            "sequence_number",
            "due_days",
            "email",
            "address",
            "payment_information",
            "payment_slip",
            "payee",
            "beneficiary",
            "iban",
            "account_number",
            "participant_number",
        ]
        widgets = {
            "address": forms.Textarea(attrs={"rows": 4}),
            "payment_information": forms.Textarea(attrs={"rows": 4}),
            "payee": forms.Textarea(attrs={"rows": 3}),
            "beneficiary": forms.Textarea(attrs={"rows": 3}),
        }


PaymentReminderConfigFormSet = forms.inlineformset_factory(
    InvoiceConfig,
    PaymentReminderConfig,
    fields=["level", "title", "text", "due_days"],
    extra=0,
    can_delete=False,
)
