# core/mail.py
"""
Deferred e-mail delivery.

Mailers build :class:`~django.core.mail.EmailMessage` instances and
hand them to :func:`deliver_later`, so that nothing is sent for a
request whose database changes are rolled back.
"""

import logging

from django.db import transaction

logger = logging.getLogger(__name__)


def deliver_later(message):
    """
    Send ``message`` once the current transaction commits.

    Outside of an atomic block the message is sent immediately.

    Parameters
    ----------
    message : EmailMessage
        The message to send.

    Returns
    -------
    EmailMessage
        The same message, for chaining in mailers.
    """

    def _send():
        sent = message.send()
        logger.info("Mail %r sent to %s (%s)", message.subject, message.to, sent)

    transaction.on_commit(_send)
    return message


def unique_addresses(*candidates) -> list:
    """
    Return the non-empty addresses in order, without duplicates.
    """
    seen = []
    for address in candidates:
        if address and address not in seen:
            seen.append(address)
    return seen
