# monitoring/tests.py
"""
Test suite for the monitoring application.

Covers the HTML journal written by :mod:`monitoring.html_logger`
and the staff-only view displaying it.
"""

import tempfile
from pathlib import Path

from django.contrib.auth import get_user_model
from django.test import TestCase, override_settings
from django.urls import reverse

from monitoring import html_logger

User = get_user_model()


class JournalTestCase(TestCase):
    """
    Write the journal to a temporary directory.
    """

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)
        override = override_settings(PBS_LOG_DIR=Path(self.tmp.name) / "logs")
        override.enable()
        self.addCleanup(override.disable)


class HtmlLoggerTest(JournalTestCase):
    def test_creates_file_with_header(self):
        html_logger.info("Lager eingereicht")

        content = html_logger.log_file().read_text(encoding="utf-8")
        self.assertTrue(content.startswith("<!doctype html>"))
        self.assertIn('<div class="log-info">', content)
        self.assertIn("Lager eingereicht", content)

    def test_levels_are_appended_in_order(self):
        html_logger.info("eins")
        html_logger.warn("zwei")
        html_logger.error("drei")

        content = html_logger.log_file().read_text(encoding="utf-8")
        self.assertLess(content.index("log-info"), content.index("log-warn"))
        self.assertLess(content.index("log-warn"), content.index("log-error"))
        self.assertEqual(content.count("<h3>"), 1)

    def test_messages_are_escaped(self):
        html_logger.warn("<script>alert(1)</script>")

        content = html_logger.log_file().read_text(encoding="utf-8")
        self.assertNotIn("<script>", content)
        self.assertIn("&lt;script&gt;", content)


class LogsViewTest(JournalTestCase):
    def setUp(self):
        super().setUp()
        self.url = reverse("monitoring:logs")

    def test_staff_sees_journal(self):
        User.objects.create_user("staff", password="pw", is_staff=True)
        html_logger.info("Zählung eröffnet")
        self.client.login(username="staff", password="pw")

        response = self.client.get(self.url)

        self.assertEqual(response.status_code, 200)
        self.assertContains(response, "Zählung eröffnet")

    def test_placeholder_without_entries(self):
        User.objects.create_user("staff", password="pw", is_staff=True)
        self.client.login(username="staff", password="pw")

        response = self.client.get(self.url)

        self.assertContains(response, "Noch keine Einträge.")

    def test_non_staff_is_redirected_to_login(self):
        User.objects.create_user("user", password="pw")
        self.client.login(username="user", password="pw")

        response = self.client.get(self.url)

        self.assertEqual(response.status_code, 302)
