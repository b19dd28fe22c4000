# events/pdf.py
"""
PDF rendering of camp applications.

The camp application lists what the canton needs to know about a
camp: organizers, location, safety information, expected
participants and the confirmations of leader and coach.
"""

import logging

from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.pdfgen import canvas
from django.utils.timezone import now

from people.models import person_label
from .exceptions import CampApplicationError, CampApplicationPdfError
from .models import (
    COACH_CHECKPOINT_ATTRS,
    EXPECTED_PARTICIPANT_ATTRS,
    LEADER_CHECKPOINT_ATTRS,
)

logger = logging.getLogger(__name__)


class _Writer:
    """
    Writes lines top-down and starts a new page when one is full.
    """

    def __init__(self, c, height, margin):
        self.c = c
        self.height = height
        self.margin = margin
        self.y = height - margin

    def line(self, text, font="Helvetica", size=11, gap=7):
        if self.y < self.margin + 10 * mm:
            self.c.showPage()
            self.y = self.height - self.margin
        self.c.setFont(font, size)
        self.c.drawString(self.margin, self.y, text)
        self.y -= gap * mm

    def title(self, text):
        self.y -= 3 * mm
        self.line(text, font="Helvetica-Bold", size=12, gap=8)


def _label(event, attr):
    return event._meta.get_field(attr).verbose_name


def _yes_no(value):
    return "ja" if value else "nein"


def _person(user):
    return person_label(user) if user is not None else "-"


def generate_camp_application_pdf(event, target):
    """
    Render the camp application of ``event`` as PDF.

    Parameters
    ----------
    event : Event
        A camp or a campy course.
    target : str or file-like
        Path of the PDF, or a binary buffer to write it to.

    Raises
    ------
    CampApplicationError
        If the event is neither a camp nor a campy course.
    CampApplicationPdfError
        If ReportLab fails to write the document.
    """
    if not event.is_campy:
        raise CampApplicationError(f"Event {event.pk} is not a camp")

    try:
        c = canvas.Canvas(target, pagesize=A4)
        width, height = A4
        w = _Writer(c, height, 20 * mm)

        # --- Header ---
        w.line(f"LAGERANMELDUNG: {event.name}", font="Helvetica-Bold", size=16, gap=12)
        w.line(f"Erstellt: {now().strftime('%d.%m.%Y %H:%M')}")
        groups = ", ".join(str(g) for g in event.groups.all())
        w.line(f"Organisiert von: {groups}")
        if event.parent_id:
            w.line(f"Hauptlager: {event.parent}")
        for date in event.dates.all():
            suffix = f" ({date.location})" if date.location else ""
            w.line(f"Datum: {date}{suffix}")

        # --- People ---
        w.title("Verantwortliche")
        w.line(f"Lagerleitung: {_person(event.leader)}")
        w.line(f"Coach: {_person(event.coach)}")
        w.line(f"Betreuung: {_person(event.advisor)}")

        # --- Location and safety ---
        w.title("Lagerort")
        w.line(f"Kanton: {event.get_canton_display() or '-'}")
        w.line(f"Lagerort: {event.location or '-'}")
        w.line(f"Koordinaten: {event.coordinates or '-'}")
        w.line(f"Höhe über Meer: {event.altitude or '-'}")
        w.line(f"Notfalltelefon: {event.emergency_phone or '-'}")
        w.line(f"Vermieter*in: {event.landlord or '-'}")
        w.line(
            f"Bewilligung Vermieter*in eingeholt: {_yes_no(event.landlord_permission_obtained)}"
        )

        # --- Participants ---
        w.title("Erwartete Teilnehmende")
        for attr in EXPECTED_PARTICIPANT_ATTRS:
            w.line(f"{_label(event, attr)}: {getattr(event, attr) or 0}")
        w.line(f"Total: {event.expected_participants_total}", font="Helvetica-Bold")

        # --- Checkpoints ---
        w.title("Bestätigungen")
        for attr in COACH_CHECKPOINT_ATTRS + LEADER_CHECKPOINT_ATTRS:
            w.line(f"{_label(event, attr)}: {_yes_no(getattr(event, attr))}")

        # --- Footer ---
        c.setFont("Helvetica-Oblique", 10)
        if event.camp_submitted_at:
            footer = f"Eingereicht am {event.camp_submitted_at:%d.%m.%Y}"
        else:
            footer = "Noch nicht eingereicht"
        c.drawString(20 * mm, 15 * mm, footer)
        c.showPage()
        c.save()
    except (OSError, ValueError) as exc:
        logger.exception("Camp application PDF failed for event=%s", event.pk)
        raise CampApplicationPdfError(
            f"Camp application of event {event.pk} could not be rendered"
        ) from exc
