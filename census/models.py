# census/models.py
"""
Database models for the census application.

Once a year the Bund opens a :class:`Census`. Every Abteilung then
counts its members: the active role holders are grouped by year of
birth, and one :class:`MemberCount` row per year of birth holds the
numbers per section and gender.
"""

from django.db import models
from django.db.models import Sum
from django.utils import timezone

from groups.models import Group

#: Census sections, leaders first, in display order
SECTIONS = ("leiter", "biber", "woelfe", "pfadis", "pios", "rover")

#: Count columns of a member count row
COUNT_FIELDS = tuple(f"{section}_{gender}" for section in SECTIONS for gender in ("f", "m"))


class Census(models.Model):
    """
    A yearly member census.

    Attributes
    ----------
    year : PositiveIntegerField
        Year the member counts are recorded for.
    start_at : DateField
        First day member counts may be created.
    finish_at : DateField
        Last day of the census; empty if open-ended.
    """

    year = models.PositiveIntegerField("Jahr", unique=True)
    start_at = models.DateField("Beginn")
    finish_at = models.DateField("Ende", null=True, blank=True)

    class Meta:
        ordering = ["-start_at"]
        verbose_name = "Zählung"
        verbose_name_plural = "Zählungen"

    def __str__(self) -> str:
        return f"Zählung {self.year}"

    @classmethod
    def current(cls):
        """
        Return the latest census which has started, or None.
        """
        return cls.objects.filter(start_at__lte=timezone.localdate()).order_by("-start_at").first()

    @property
    def is_open(self) -> bool:
        today = timezone.localdate()
        return self.start_at <= today and (self.finish_at is None or self.finish_at >= today)


class MemberCountQuerySet(models.QuerySet):
    def totals(self) -> dict:
        """
        Sum every count column over the rows of the queryset.

        Returns
        -------
        dict
            Column name to sum, plus ``total``, ``f`` and ``m``;
            columns of an empty queryset sum to 0.
        """
        sums = self.aggregate(**{field: Sum(field) for field in COUNT_FIELDS})
        sums = {field: value or 0 for field, value in sums.items()}
        sums["f"] = sum(sums[f"{s}_f"] for s in SECTIONS)
        sums["m"] = sum(sums[f"{s}_m"] for s in SECTIONS)
        sums["total"] = sums["f"] + sums["m"]
        return sums


class MemberCount(models.Model):
    """
    Number of members of an Abteilung born in one year.

    Attributes
    ----------
    abteilung : ForeignKey
        The counted Abteilung.
    kantonalverband, region : ForeignKey
        The layers above the Abteilung at the time of counting, so
        evaluations stay stable when the group tree changes.
    year : PositiveIntegerField
        Census year.
    born_in : PositiveIntegerField
        Year of birth; empty for people without birthday.
    """

    abteilung = models.ForeignKey(
        Group,
        on_delete=models.CASCADE,
        related_name="member_counts",
        verbose_name="Abteilung",
    )
    kantonalverband = models.ForeignKey(
        Group,
        on_delete=models.CASCADE,
        related_name="+",
        verbose_name="Kantonalverband",
    )
    region = models.ForeignKey(
        Group,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="+",
        verbose_name="Region",
    )
    year = models.PositiveIntegerField("Jahr", db_index=True)
    born_in = models.PositiveIntegerField("Jahrgang", null=True, blank=True)

    leiter_f = models.PositiveIntegerField("Leitende weiblich", null=True, blank=True)
    leiter_m = models.PositiveIntegerField("Leitende männlich", null=True, blank=True)
    biber_f = models.PositiveIntegerField("Biber weiblich", null=True, blank=True)
    biber_m = models.PositiveIntegerField("Biber männlich", null=True, blank=True)
    woelfe_f = models.PositiveIntegerField("Wölfe weiblich", null=True, blank=True)
    woelfe_m = models.PositiveIntegerField("Wölfe männlich", null=True, blank=True)
    pfadis_f = models.PositiveIntegerField("Pfadis weiblich", null=True, blank=True)
    pfadis_m = models.PositiveIntegerField("Pfadis männlich", null=True, blank=True)
    pios_f = models.PositiveIntegerField("Pios weiblich", null=True, blank=True)
    pios_m = models.PositiveIntegerField("Pios männlich", null=True, blank=True)
    rover_f = models.PositiveIntegerField("Rover weiblich", null=True, blank=True)
    rover_m = models.PositiveIntegerField("Rover männlich", null=True, blank=True)

    objects = MemberCountQuerySet.as_manager()

    class Meta:
        ordering = ["year", "born_in"]
        unique_together = [("abteilung", "year", "born_in")]
        verbose_name = "Mitgliederzahl"
        verbose_name_plural = "Mitgliederzahlen"

    def __str__(self) -> str:
        return f"{self.abteilung} {self.year} ({self.born_in or '-'})"

    @property
    def f(self) -> int:
        return sum(getattr(self, f"{s}_f") or 0 for s in SECTIONS)

    @property
    def m(self) -> int:
        return sum(getattr(self, f"{s}_m") or 0 for s in SECTIONS)

    @property
    def total(self) -> int:
        return self.f + self.m
