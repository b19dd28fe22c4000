# events/mailers.py
"""
Mails sent by the camp application workflow.

Mailer methods build the message and return it; the caller decides
when it is delivered (see :func:`core.mail.deliver_later`).
"""

import logging

from django.conf import settings
from django.core.mail import EmailMessage
from django.urls import reverse

from core.mail import unique_addresses

logger = logging.getLogger(__name__)


class CampMailer:
    """
    Mails concerning camps.
    """

    @staticmethod
    def submit_camp(event) -> EmailMessage:
        """
        Build the notification for a submitted camp application.

        The application goes to the Kantonalverband of each organizing
        group and to the configured camp address; the coach and the
        leader get a copy.

        Parameters
        ----------
        event : Event
            The submitted camp.

        Returns
        -------
        EmailMessage
            The unsent message.
        """
        kantonalverbaende = [g.kantonalverband for g in event.groups.all()]
        to = unique_addresses(
            *(kv.email for kv in kantonalverbaende if kv is not None),
            getattr(settings, "PBS_CAMP_SUBMIT_EMAIL", ""),
        )
        cc = unique_addresses(
            event.coach.email if event.coach else "",
            event.leader.email if event.leader else "",
        )
        group = event.groups.first()
        url = reverse(
            "events:show_camp_application",
            kwargs={"group_id": group.pk, "pk": event.pk},
        )
        body = "\n".join(
            [
                "Hallo",
                "",
                f"Das Lager \"{event.name}\" wurde eingereicht.",
                f"Kanton: {event.get_canton_display()}",
                f"Lagerort: {event.location}",
                f"Eingereicht am: {event.camp_submitted_at:%d.%m.%Y}"
                if event.camp_submitted_at
                else "",
                "",
                f"Die Lageranmeldung ist unter {url} abrufbar.",
            ]
        )
        logger.info("Camp submission mail for event=%s to %s", event.pk, to)
        return EmailMessage(
            subject=f"Lager eingereicht: {event.name}",
            body=body,
            from_email=settings.DEFAULT_FROM_EMAIL,
            to=to,
            cc=cc,
        )
