# invoices/views.py
"""
Views for the invoices application.

Group administrators edit the invoice settings of their layer
together with the payment reminder levels.
"""

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.db import transaction
from django.http import Http404
from django.shortcuts import get_object_or_404, redirect, render

from groups.models import Group
from groups.permissions import require_layer_write
from monitoring.html_logger import info, warn
from .forms import InvoiceConfigForm, PaymentReminderConfigFormSet
from .signals import ensure_invoice_config


@login_required
def invoice_config_edit(request, group_id):
    """
    Show and update the invoice settings of a layer group.

    Parameters
    ----------
    request : HttpRequest
        The current HTTP request.
    group_id : int
        Primary key of the layer group.

    Returns
    -------
    HttpResponse
        The form, or a redirect back to it after a successful update.

    Notes
    -----
    - Raises ``Http404`` for groups that are not layers.
    - Requires write access on the group's layer.
    """
    group = get_object_or_404(Group, pk=group_id)
    if not group.is_layer:
        raise Http404("Only layer groups own invoice settings.")
    require_layer_write(request.user, group)
    config = ensure_invoice_config(group)

    if request.method == "POST":
        form = InvoiceConfigForm(request.POST, instance=config)
        formset = PaymentReminderConfigFormSet(request.POST, instance=config, prefix="reminders")
        if form.is_valid() and formset.is_valid():
            with transaction.atomic():
                form.save()
                formset.save()
            info(f"Invoice settings updated group={group.pk} by user={request.user.pk}.")
            messages.success(request, "Rechnungseinstellungen wurden erfolgreich aktualisiert.")
            return redirect("invoices:edit", group_id=group.pk)
        warn(f"Invalid invoice settings group={group.pk}: {form.errors.as_text()}")
        messages.error(request, "Die Rechnungseinstellungen konnten nicht gespeichert werden.")
    else:
        form = InvoiceConfigForm(instance=config)
        formset = PaymentReminderConfigFormSet(instance=config, prefix="reminders")

    return render(
        request,
        "invoices/invoice_config_form.html",
        {"group": group, "config": config, "form": form, "formset": formset},
    )
