# census/mailers.py
"""
Mails sent by the census workflow.
"""

import logging

from django.conf import settings
from django.core.mail import EmailMessage
from django.urls import reverse

from core.mail import unique_addresses
from groups.models import Role

logger = logging.getLogger(__name__)


def abteilung_leader_emails(abteilung) -> list:
    """
    Return the addresses of the Abteilungsleitung, or the group address.
    """
    roles = (
        Role.objects.active()
        .filter(group=abteilung, role_type=Role.Type.ABTEILUNGSLEITUNG)
        .select_related("person")
    )
    emails = unique_addresses(*(role.person.email for role in roles))
    return emails or unique_addresses(abteilung.email)


class CensusMailer:
    """
    Mails concerning the member census.
    """

    @staticmethod
    def reminder(sender, census, abteilung, recipients) -> EmailMessage:
        """
        Build the reminder to count the members of an Abteilung.

        Parameters
        ----------
        sender : User
            The Kantonalverband leader sending the reminder; replies
            go to them.
        census : Census
            The open census.
        abteilung : Group
            The Abteilung which has not counted yet.
        recipients : list of str
            Addresses of the Abteilung's leaders.

        Returns
        -------
        EmailMessage
            The unsent message.
        """
        url = reverse("census:member_counts", kwargs={"group_id": abteilung.pk})
        deadline = f" bis am {census.finish_at:%d.%m.%Y}" if census.finish_at else ""
        body = "\n".join(
            [
                "Hallo",
                "",
                f"Die Mitgliederzählung {census.year} ist eröffnet. Bitte erfasse die "
                f"Mitgliederzahlen der Abteilung {abteilung}{deadline}.",
                "",
                f"Die Zählung kann unter {url} bestätigt werden.",
                "",
                "Vielen Dank",
            ]
        )
        logger.info("Census reminder for abteilung=%s to %s", abteilung.pk, recipients)
        return EmailMessage(
            subject=f"Mitgliederzählung {census.year}",
            body=body,
            from_email=settings.PBS_CENSUS_REMINDER_FROM,
            to=recipients,
            reply_to=unique_addresses(sender.email),
        )
