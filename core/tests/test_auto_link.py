"""
Tests for the ``auto_link`` template filter.
"""

from django.template import Context, Template
from django.test import SimpleTestCase

from core.templatetags.auto_link import auto_link


class AutoLinkTest(SimpleTestCase):
    def test_links_www_addresses(self):
        self.assertEqual(
            auto_link("www.puzzle.ch"),
            '<a href="http://www.puzzle.ch" target="_blank">www.puzzle.ch</a>',
        )

    def test_links_http_addresses(self):
        self.assertEqual(
            auto_link("http://puzzle.ch"),
            '<a href="http://puzzle.ch" target="_blank">http://puzzle.ch</a>',
        )

    def test_links_ftps_addresses(self):
        self.assertEqual(
            auto_link("ftps://puzzle.ch"),
            '<a href="ftps://puzzle.ch" target="_blank">ftps://puzzle.ch</a>',
        )

    def test_links_email_addresses(self):
        self.assertEqual(
            auto_link("admin@puzzle.ch"),
            '<a href="mailto:admin@puzzle.ch">admin@puzzle.ch</a>',
        )

    def test_does_not_link_addresses_without_www(self):
        self.assertEqual(auto_link("abc.puzzle.ch"), "abc.puzzle.ch")

    def test_does_not_link_bare_www(self):
        self.assertEqual(auto_link("www."), "www.")

    def test_does_not_link_anything_with_at(self):
        self.assertEqual(auto_link("@puzzle.ch"), "@puzzle.ch")
        self.assertEqual(auto_link("a$#!@puzzle.ch"), "a$#!@puzzle.ch")

    def test_escapes_surrounding_text_and_keeps_punctuation(self):
        self.assertEqual(
            auto_link("<b>Infos: www.pbs.ch.</b>"),
            '&lt;b&gt;Infos: <a href="http://www.pbs.ch" target="_blank">'
            "www.pbs.ch</a>.&lt;/b&gt;",
        )

    def test_filter_in_template(self):
        rendered = Template("{% load auto_link %}{{ text|auto_link }}").render(
            Context({"text": "Mail an info@pbs.ch"})
        )
        self.assertEqual(
            rendered, 'Mail an <a href="mailto:info@pbs.ch">info@pbs.ch</a>'
        )
