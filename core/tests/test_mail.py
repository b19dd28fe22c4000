"""
Tests for the deferred mail delivery.
"""

from django.core import mail
from django.core.mail import EmailMessage
from django.test import SimpleTestCase, TestCase

from core.mail import deliver_later, unique_addresses


class DeliverLaterTest(TestCase):
    def test_sent_on_commit(self):
        message = EmailMessage("Betreff", "Text", to=["a@example.ch"])

        with self.captureOnCommitCallbacks() as callbacks:
            self.assertIs(deliver_later(message), message)
            self.assertEqual(mail.outbox, [])

        for callback in callbacks:
            callback()
        self.assertEqual(len(mail.outbox), 1)
        self.assertEqual(mail.outbox[0].subject, "Betreff")


class UniqueAddressesTest(SimpleTestCase):
    def test_drops_blanks_and_duplicates(self):
        self.assertEqual(
            unique_addresses("a@example.ch", "", None, "b@example.ch", "a@example.ch"),
            ["a@example.ch", "b@example.ch"],
        )

    def test_empty(self):
        self.assertEqual(unique_addresses(), [])
