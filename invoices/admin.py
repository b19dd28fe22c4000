# invoices/admin.py
"""
Admin configuration for the invoices application.
"""

from django.contrib import admin

from .models import InvoiceConfig, PaymentReminderConfig


class PaymentReminderConfigInline(admin.TabularInline):
    model = PaymentReminderConfig
    extra = 0


@admin.register(InvoiceConfig)
class InvoiceConfigAdmin(admin.ModelAdmin):
    """
    Admin configuration for the InvoiceConfig model.

    Attributes
    ----------
    list_display : tuple
        Group, payment slip kind and the account numbers.
    list_filter : tuple
        Filter by payment slip kind.
    """

    list_display = ("group", "payment_slip", "account_number", "iban", "participant_number")
    list_filter = ("payment_slip",)
    search_fields = ("group__name", "payee")
    inlines = [PaymentReminderConfigInline]
