# invoices/signals.py
"""
Signals for the invoices application.

Every layer group owns its invoice settings from the moment it is
created, together with the default payment reminder levels.
"""

from django.db.models.signals import post_save
from django.dispatch import receiver

from groups.models import Group
from .models import DEFAULT_REMINDERS, InvoiceConfig, PaymentReminderConfig


def ensure_invoice_config(group: Group) -> InvoiceConfig:
    """
    Return the invoice settings of ``group``, creating them if needed.

    Parameters
    ----------
    group : Group
        A layer group.

    Returns
    -------
    InvoiceConfig
        The existing or newly created settings.
    """
    config, created = InvoiceConfig.objects.get_or_create(
        group=group, defaults={"email": group.email}
    )
    if created:
        PaymentReminderConfig.objects.bulk_create(
            PaymentReminderConfig(
                invoice_config=config,
                level=level,
                title=title,
                text=text,
                due_days=due_days,
            )
            for level, title, text, due_days in DEFAULT_REMINDERS
        )
    return config


@receiver(post_save, sender=Group)
def create_invoice_config(sender, instance: Group, created, **kwargs):
    """
    Create the invoice settings of a newly created layer group.

    Parameters
    ----------
    sender : Model
        The model class sending the signal (Group).
    instance : Group
        The group that was saved.
    created : bool
        True if the group was just created.
    **kwargs : dict
        Additional arguments provided by the signal.
    """
    if created and instance.is_layer:
        ensure_invoice_config(instance)
