# events/models.py
"""
Database models for the events application.

Events, courses and camps share one table; the ``type`` column
tells them apart. Camps (and courses of a "campy" kind) carry the
data a camp application needs: location, safety information,
expected participants and the checkpoints leader and coach have to
confirm before the camp can be submitted to the canton.
"""

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import models
from django.utils import timezone

from groups.models import Group
from people.models import CONTACT_ATTRS

#: Checkpoints only the event's leader may set
LEADER_CHECKPOINT_ATTRS = (
    "lagerreglement_applied",
    "kantonalverband_rules_applied",
    "j_s_rules_applied",
)

#: Checkpoints only the event's coach may set
COACH_CHECKPOINT_ATTRS = (
    "coach_visiting",
    "coach_confirmed",
)

#: Expected participant counts, per section and gender
EXPECTED_PARTICIPANT_ATTRS = tuple(
    f"expected_participants_{section}_{gender}"
    for section in ("wolf", "pfadi", "pio", "rover", "leitung")
    for gender in ("f", "m")
)

#: Fields which must be filled in before a camp can be submitted
CAMP_SUBMIT_REQUIRED_ATTRS = (
    "canton",
    "location",
    "coordinates",
    "altitude",
    "emergency_phone",
    "landlord",
    "coach",
    "leader",
)

#: Confirmations which must be given before a camp can be submitted
CAMP_SUBMIT_REQUIRED_CHECKPOINTS = ("coach_confirmed",) + LEADER_CHECKPOINT_ATTRS


class EventKind(models.Model):
    """
    Kind of a course, e.g. ``LPK`` (Leitpfadikurs).

    Attributes
    ----------
    label : CharField
        Display name.
    short_name : CharField
        Abbreviation used in course numbers.
    campy : BooleanField
        Courses of a campy kind are run like camps and need a camp
        application.
    """

    label = models.CharField("Bezeichnung", max_length=200)
    short_name = models.CharField("Kurzname", max_length=20, unique=True)
    campy = models.BooleanField("Lagerähnlich", default=False)

    class Meta:
        ordering = ["label"]
        verbose_name = "Kursart"
        verbose_name_plural = "Kursarten"

    def __str__(self) -> str:
        return f"{self.short_name} ({self.label})"


class Event(models.Model):
    """
    Model representing an event, a course or a camp.

    Attributes
    ----------
    type : CharField
        One of :class:`Event.Type`; fixed at creation.
    groups : ManyToManyField
        Groups organizing the event.
    kind : ForeignKey
        Course kind, courses only.
    leader, coach, advisor, contact : ForeignKey
        People with a special function for the event. Only the
        leader may set :data:`LEADER_CHECKPOINT_ATTRS` and only the
        coach may set :data:`COACH_CHECKPOINT_ATTRS`.
    parent : ForeignKey
        The supercamp this camp is part of.
    allow_sub_camps : BooleanField
        Whether other camps may be connected to this one.
    camp_submitted_at : DateField
        Day the camp application was submitted, empty while draft.
    contact_attrs_passed_on_to_supercamp : JSONField
        Names of the contact attributes of the participants which
        are passed on to the supercamp.
    """

    class Type(models.TextChoices):
        """
        Enumeration of event types.
        """

        EVENT = "event", "Anlass"
        COURSE = "course", "Kurs"
        CAMP = "camp", "Lager"

    class State(models.TextChoices):
        """
        Enumeration of camp states.
        """

        CREATED = "created", "Erstellt"
        CONFIRMED = "confirmed", "Bestätigt"
        ASSIGNMENT_CLOSED = "assignment_closed", "Zuteilung abgeschlossen"
        CANCELED = "canceled", "Abgesagt"
        CLOSED = "closed", "Abgeschlossen"

    class Canton(models.TextChoices):
        """
        Swiss cantons, plus ``zz`` for camps abroad.
        """

        AG = "ag", "Aargau"
        AI = "ai", "Appenzell Innerrhoden"
        AR = "ar", "Appenzell Ausserrhoden"
        BE = "be", "Bern"
        BL = "bl", "Basel-Landschaft"
        BS = "bs", "Basel-Stadt"
        FR = "fr", "Freiburg"
        GE = "ge", "Genf"
        GL = "gl", "Glarus"
        GR = "gr", "Graubünden"
        JU = "ju", "Jura"
        LU = "lu", "Luzern"
        NE = "ne", "Neuenburg"
        NW = "nw", "Nidwalden"
        OW = "ow", "Obwalden"
        SG = "sg", "St. Gallen"
        SH = "sh", "Schaffhausen"
        SO = "so", "Solothurn"
        SZ = "sz", "Schwyz"
        TG = "tg", "Thurgau"
        TI = "ti", "Tessin"
        UR = "ur", "Uri"
        VD = "vd", "Waadt"
        VS = "vs", "Wallis"
        ZG = "zg", "Zug"
        ZH = "zh", "Zürich"
        ZZ = "zz", "Ausland"

    type = models.CharField(
        "Typ", max_length=16, choices=Type.choices, default=Type.EVENT
    )
    name = models.CharField("Name", max_length=200)
    number = models.CharField("Nummer", max_length=50, blank=True)
    description = models.TextField("Beschreibung", blank=True)
    groups = models.ManyToManyField(Group, related_name="events", verbose_name="Gruppen")
    kind = models.ForeignKey(
        EventKind,
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name="events",
        verbose_name="Kursart",
    )
    contact = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="contact_events",
        verbose_name="Kontaktperson",
    )
    leader = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="led_events",
        verbose_name="Lagerleitung",
    )
    coach = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="coached_events",
        verbose_name="Coach",
    )
    advisor = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="advised_events",
        verbose_name="Betreuung",
    )
    requires_approval = models.BooleanField("Freigabe erforderlich", default=False)
    state = models.CharField(
        "Status", max_length=32, choices=State.choices, default=State.CREATED
    )

    parent = models.ForeignKey(
        "self",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="sub_camps",
        verbose_name="Übergeordnetes Lager",
    )
    allow_sub_camps = models.BooleanField("Unterlager erlaubt", default=False)

    # Camp data
    canton = models.CharField("Kanton", max_length=2, choices=Canton.choices, blank=True)
    location = models.TextField("Lagerort", blank=True)
    coordinates = models.CharField("Koordinaten", max_length=100, blank=True)
    altitude = models.CharField("Höhe über Meer", max_length=100, blank=True)
    emergency_phone = models.CharField("Notfalltelefon", max_length=100, blank=True)
    landlord = models.TextField("Vermieter*in", blank=True)
    landlord_permission_obtained = models.BooleanField(
        "Bewilligung Vermieter*in eingeholt", default=False
    )

    expected_participants_wolf_f = models.PositiveIntegerField("Wölfe weiblich", null=True, blank=True)
    expected_participants_wolf_m = models.PositiveIntegerField("Wölfe männlich", null=True, blank=True)
    expected_participants_pfadi_f = models.PositiveIntegerField("Pfadi weiblich", null=True, blank=True)
    expected_participants_pfadi_m = models.PositiveIntegerField("Pfadi männlich", null=True, blank=True)
    expected_participants_pio_f = models.PositiveIntegerField("Pios weiblich", null=True, blank=True)
    expected_participants_pio_m = models.PositiveIntegerField("Pios männlich", null=True, blank=True)
    expected_participants_rover_f = models.PositiveIntegerField("Rover weiblich", null=True, blank=True)
    expected_participants_rover_m = models.PositiveIntegerField("Rover männlich", null=True, blank=True)
    expected_participants_leitung_f = models.PositiveIntegerField("Leitung weiblich", null=True, blank=True)
    expected_participants_leitung_m = models.PositiveIntegerField("Leitung männlich", null=True, blank=True)

    coach_visiting = models.BooleanField("Coach besucht das Lager", default=False)
    coach_confirmed = models.BooleanField("Coach hat das Lager bestätigt", default=False)
    lagerreglement_applied = models.BooleanField("Lagerreglement angewendet", default=False)
    kantonalverband_rules_applied = models.BooleanField(
        "Richtlinien Kantonalverband angewendet", default=False
    )
    j_s_rules_applied = models.BooleanField("J+S-Richtlinien angewendet", default=False)
    camp_submitted_at = models.DateField("Eingereicht am", null=True, blank=True)

    contact_attrs_passed_on_to_supercamp = models.JSONField(
        "An Hauptlager weitergegebene Kontaktangaben", default=list, blank=True
    )

    created_at = models.DateTimeField("Erstellt am", default=timezone.now)

    class Meta:
        ordering = ["name"]
        verbose_name = "Anlass"
        verbose_name_plural = "Anlässe"

    def __str__(self) -> str:
        return self.name

    @property
    def is_camp(self) -> bool:
        return self.type == self.Type.CAMP

    @property
    def is_course(self) -> bool:
        return self.type == self.Type.COURSE

    @property
    def is_campy(self) -> bool:
        """
        Tell whether camp rules apply: camps and courses of a campy kind.
        """
        if self.is_camp:
            return True
        return self.is_course and self.kind is not None and self.kind.campy

    @property
    def camp_submitted(self) -> bool:
        return self.camp_submitted_at is not None

    @property
    def application_questions(self):
        return self.questions.filter(admin=False)

    @property
    def admin_questions(self):
        return self.questions.filter(admin=True)

    @property
    def expected_participants_total(self) -> int:
        return sum(getattr(self, attr) or 0 for attr in EXPECTED_PARTICIPANT_ATTRS)

    @property
    def accepts_sub_camps(self) -> bool:
        return self.is_camp and self.allow_sub_camps and self.state == self.State.CREATED

    def camp_submit_errors(self) -> list:
        """
        Return the reasons why this camp cannot be submitted yet.

        Returns
        -------
        list of str
            One message per missing field or confirmation, empty
            when the camp is complete.
        """
        errors = []
        for attr in CAMP_SUBMIT_REQUIRED_ATTRS:
            if not getattr(self, attr):
                label = self._meta.get_field(attr).verbose_name
                errors.append(f"{label} muss ausgefüllt werden")
        for attr in CAMP_SUBMIT_REQUIRED_CHECKPOINTS:
            if not getattr(self, attr):
                label = self._meta.get_field(attr).verbose_name
                errors.append(f"{label} muss bestätigt werden")
        if self.expected_participants_total <= 0:
            errors.append("Erwartete Teilnehmende müssen angegeben werden")
        return errors

    def submit_camp(self, today=None) -> None:
        """
        Mark the camp as submitted.

        Only the submission date is written, so the submission does
        not depend on the state of the camp's other data (e.g. a
        supercamp connected in the meantime).
        """
        self.camp_submitted_at = today or timezone.localdate()
        self.save(update_fields=["camp_submitted_at"])

    def passed_on_contact_attrs(self) -> list:
        """
        Return the passed-on contact attributes in display order.
        """
        chosen = set(self.contact_attrs_passed_on_to_supercamp or [])
        return [attr for attr in CONTACT_ATTRS if attr in chosen]

    def clean(self):
        """
        Validate the event before it is saved from a form.

        Raises
        ------
        ValidationError
            Collecting one message per invalid field.
        """
        errors = {}
        if self.is_course and self.kind_id is None:
            errors["kind"] = "Kursart muss ausgefüllt werden"
        if self.parent_id is not None:
            if self.pk is not None and self.parent_id == self.pk:
                errors["parent"] = "Ein Lager kann nicht sein eigenes Hauptlager sein"
            elif self.parent_id != self._stored_parent_id() and (
                not self.is_camp or not self.parent.accepts_sub_camps
            ):
                errors["parent"] = "Das gewählte Lager nimmt keine Unterlager auf"
        unknown = set(self.contact_attrs_passed_on_to_supercamp or []) - set(CONTACT_ATTRS)
        if unknown:
            errors["contact_attrs_passed_on_to_supercamp"] = (
                f"Unbekannte Kontaktangaben: {', '.join(sorted(unknown))}"
            )
        if errors:
            raise ValidationError(errors)

    def _stored_parent_id(self):
        # A connected supercamp stays valid after it stops accepting sub camps
        if self.pk is None:
            return None
        return (
            Event.objects.filter(pk=self.pk).values_list("parent_id", flat=True).first()
        )


class EventDate(models.Model):
    """
    A date range of an event, optionally at its own location.
    """

    event = models.ForeignKey(
        Event, on_delete=models.CASCADE, related_name="dates", verbose_name="Anlass"
    )
    label = models.CharField("Bezeichnung", max_length=200, blank=True)
    location = models.CharField("Ort", max_length=200, blank=True)
    start_at = models.DateField("Von")
    finish_at = models.DateField("Bis", null=True, blank=True)

    class Meta:
        ordering = ["start_at"]
        verbose_name = "Datum"
        verbose_name_plural = "Daten"

    def __str__(self) -> str:
        if self.finish_at and self.finish_at != self.start_at:
            return f"{self.start_at:%d.%m.%Y} - {self.finish_at:%d.%m.%Y}"
        return f"{self.start_at:%d.%m.%Y}"

    def clean(self):
        if self.start_at and self.finish_at and self.finish_at < self.start_at:
            raise ValidationError({"finish_at": "Bis muss nach Von liegen"})


class Question(models.Model):
    """
    A question asked on application (or answered by the organizers
    when ``admin`` is set).
    """

    event = models.ForeignKey(
        Event, on_delete=models.CASCADE, related_name="questions", verbose_name="Anlass"
    )
    question = models.TextField("Frage")
    choices = models.CharField("Antwortmöglichkeiten", max_length=500, blank=True)
    required = models.BooleanField("Pflichtfeld", default=False)
    admin = models.BooleanField("Admin-Frage", default=False)
    pass_on_to_supercamp = models.BooleanField("An Hauptlager weitergeben", default=False)

    class Meta:
        ordering = ["pk"]
        verbose_name = "Frage"
        verbose_name_plural = "Fragen"

    def __str__(self) -> str:
        return self.question


class Participation(models.Model):
    """
    Participation of a person in an event.

    Tentative participations are inactive placeholders which camp
    leaders record before the actual application.
    """

    class State(models.TextChoices):
        """
        Enumeration of participation states.
        """

        APPLIED = "applied", "Angemeldet"
        ASSIGNED = "assigned", "Zugeteilt"
        TENTATIVE = "tentative", "Provisorisch"

    event = models.ForeignKey(
        Event,
        on_delete=models.CASCADE,
        related_name="participations",
        verbose_name="Anlass",
    )
    person = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="event_participations",
        verbose_name="Person",
    )
    state = models.CharField(
        "Status", max_length=16, choices=State.choices, default=State.APPLIED
    )
    active = models.BooleanField("Aktiv", default=False)
    created_at = models.DateTimeField("Erstellt am", default=timezone.now)

    class Meta:
        unique_together = ("event", "person")
        ordering = ["-created_at"]
        verbose_name = "Teilnahme"
        verbose_name_plural = "Teilnahmen"

    def __str__(self) -> str:
        return f"{self.person} -> {self.event} ({self.state})"


class Approval(models.Model):
    """
    Approval of a course participation by a layer of the participant.
    """

    participation = models.ForeignKey(
        Participation,
        on_delete=models.CASCADE,
        related_name="approvals",
        verbose_name="Teilnahme",
    )
    layer = models.ForeignKey(
        Group,
        on_delete=models.CASCADE,
        related_name="approvals",
        verbose_name="Ebene",
    )
    approved = models.BooleanField("Freigegeben", default=False)
    rejected = models.BooleanField("Abgelehnt", default=False)
    comment = models.TextField("Bemerkung", blank=True)
    approver = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="+",
        verbose_name="Freigegeben durch",
    )
    approved_at = models.DateTimeField("Freigegeben am", null=True, blank=True)

    class Meta:
        ordering = ["participation__created_at"]
        verbose_name = "Freigabe"
        verbose_name_plural = "Freigaben"

    def __str__(self) -> str:
        return f"{self.participation} @ {self.layer}"

    @property
    def pending(self) -> bool:
        return not self.approved and not self.rejected
