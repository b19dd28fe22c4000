# people/models.py
"""
Database models for the people application.

A :class:`Person` extends the built-in Django user with the
personal data the federation keeps about its members: nickname,
gender and birthday (needed by the census), address and contact
data (which camp leaders may pass on to a supercamp).
"""

from django.conf import settings
from django.db import models

#: Contact attributes which can be passed on to a supercamp, in display order
CONTACT_ATTRS = (
    "first_name",
    "last_name",
    "nickname",
    "company_name",
    "email",
    "address",
    "zip_code",
    "town",
    "country",
    "gender",
    "birthday",
    "phone_numbers",
    "social_accounts",
    "additional_emails",
)

CONTACT_ATTR_LABELS = {
    "first_name": "Vorname",
    "last_name": "Nachname",
    "nickname": "Pfadiname",
    "company_name": "Firmenname",
    "email": "Haupt-E-Mail",
    "address": "Adresse",
    "zip_code": "PLZ",
    "town": "Ort",
    "country": "Land",
    "gender": "Geschlecht",
    "birthday": "Geburtstag",
    "phone_numbers": "Telefonnummern",
    "social_accounts": "Social Media",
    "additional_emails": "Weitere E-Mails",
}


class Person(models.Model):
    """
    Personal data linked one-to-one with a Django user.

    Attributes
    ----------
    user : OneToOneField
        The account this person logs in with.
    nickname : CharField
        Scout name ("Pfadiname").
    gender : CharField
        ``w``, ``m`` or empty when unknown.
    birthday : DateField
        Optional date of birth; people without one cannot be counted
        in the census.
    """

    class Gender(models.TextChoices):
        """
        Enumeration of genders as recorded by the census.
        """

        FEMALE = "w", "weiblich"
        MALE = "m", "männlich"

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="person",
    )
    nickname = models.CharField("Pfadiname", max_length=100, blank=True)
    company_name = models.CharField("Firmenname", max_length=200, blank=True)
    gender = models.CharField(
        "Geschlecht", max_length=1, choices=Gender.choices, blank=True
    )
    birthday = models.DateField("Geburtstag", null=True, blank=True)
    address = models.TextField("Adresse", blank=True)
    zip_code = models.CharField("PLZ", max_length=10, blank=True)
    town = models.CharField("Ort", max_length=100, blank=True)
    country = models.CharField("Land", max_length=2, blank=True, default="CH")
    phone_numbers = models.TextField("Telefonnummern", blank=True)
    social_accounts = models.TextField("Social Media", blank=True)
    additional_emails = models.TextField("Weitere E-Mails", blank=True)

    class Meta:
        """
        Metadata for the Person model.
        """

        ordering = ["user__last_name", "user__first_name"]
        verbose_name = "Person"
        verbose_name_plural = "Personen"

    def __str__(self) -> str:
        """
        Return the display name of the person.

        Returns
        -------
        str
            ``"First Last / Nickname"``, falling back to the
            username when no name is recorded.
        """
        name = self.user.get_full_name() or self.user.username
        if self.nickname:
            return f"{name} / {self.nickname}"
        return name

    @property
    def full_name(self) -> str:
        return str(self)

    @property
    def first_name(self) -> str:
        return self.user.first_name

    @property
    def last_name(self) -> str:
        return self.user.last_name

    @property
    def email(self) -> str:
        return self.user.email

    def contact_value(self, attr: str):
        """
        Return the value of one of the :data:`CONTACT_ATTRS`.

        Parameters
        ----------
        attr : str
            Name of the contact attribute.

        Returns
        -------
        object
            The attribute value, read from the person or its user.

        Raises
        ------
        ValueError
            If ``attr`` is not a contact attribute.
        """
        if attr not in CONTACT_ATTRS:
            raise ValueError(f"Unknown contact attribute {attr!r}")
        return getattr(self, attr)


def person_label(user) -> str:
    """
    Label a user through its person record when it exists.
    """
    person = getattr(user, "person", None)
    if person is not None:
        return str(person)
    return user.get_full_name() or user.username
