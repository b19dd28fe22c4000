# census/member_counter.py
"""
Counting the members of an Abteilung.

Every person with an active role in the groups of the Abteilung's
layer is counted once. People holding a leader role count as
``leiter``; the others count in the section of the group their
role belongs to. Roles in groups without a section (e.g. a
Gremium) are not counted.
"""

import logging
from collections import defaultdict

from django.db import transaction

from groups.models import Group, Role
from .exceptions import CensusError, CensusNotOpenError, MemberCountsExistError
from .models import SECTIONS, Census, MemberCount

logger = logging.getLogger(__name__)


class MemberCounter:
    """
    Count the members of one Abteilung for a census year.

    Parameters
    ----------
    year : int
        The census year.
    abteilung : Group
        The Abteilung to count.
    """

    def __init__(self, year: int, abteilung: Group):
        self.year = year
        self.abteilung = abteilung

    def exists(self) -> bool:
        """
        Tell whether the Abteilung has been counted for the year.
        """
        return MemberCount.objects.filter(abteilung=self.abteilung, year=self.year).exists()

    def count(self) -> list:
        """
        Count the members and store one row per year of birth.

        Returns
        -------
        list of MemberCount
            The created rows, ordered by year of birth.

        Raises
        ------
        MemberCountsExistError
            If the Abteilung has already been counted for the year.
        CensusError
            If the Abteilung does not belong to a Kantonalverband.
        """
        if self.abteilung.kantonalverband is None:
            raise CensusError(f"{self.abteilung} does not belong to a Kantonalverband")
        with transaction.atomic():
            if self.exists():
                raise MemberCountsExistError(
                    f"{self.abteilung} has already been counted for {self.year}"
                )
            rows = [
                MemberCount(
                    abteilung=self.abteilung,
                    kantonalverband=self.abteilung.kantonalverband,
                    region=self.abteilung.region,
                    year=self.year,
                    born_in=born_in,
                    **counts,
                )
                for born_in, counts in sorted(
                    self.counts_by_birth_year().items(),
                    key=lambda item: (item[0] is None, item[0] or 0),
                )
            ]
            MemberCount.objects.bulk_create(rows)
        logger.info(
            "Counted %s people of abteilung=%s for %s",
            sum(row.total for row in rows), self.abteilung.pk, self.year,
        )
        return rows

    def counts_by_birth_year(self) -> dict:
        """
        Return the counts per year of birth without storing them.

        Returns
        -------
        dict
            Year of birth (None when unknown) to a dict of count
            columns, e.g. ``{"pfadis_f": 3}``.
        """
        counts = defaultdict(lambda: defaultdict(int))
        for person, section in self.sections_by_person().items():
            profile = person.person
            born_in = profile.birthday.year if profile.birthday else None
            gender = "f" if profile.gender == profile.Gender.FEMALE else "m"
            counts[born_in][f"{section}_{gender}"] += 1
        return {born_in: dict(columns) for born_in, columns in counts.items()}

    def sections_by_person(self) -> dict:
        """
        Return the census section every counted person belongs to.

        A leader role wins over member roles; among member roles the
        section listed first in :data:`~census.models.SECTIONS` wins.
        """
        roles = (
            Role.objects.active()
            .filter(group__in=self.abteilung.layer_groups())
            .select_related("person", "person__person", "group")
        )
        sections = {}
        for role in roles:
            section = "leiter" if role.is_leader else Group.SECTION_TYPES.get(role.group.group_type)
            if section is None:
                continue
            current = sections.get(role.person)
            if current is None or SECTIONS.index(section) < SECTIONS.index(current):
                sections[role.person] = section
        return sections


def open_census():
    """
    Return the census member counts may currently be created for.

    Raises
    ------
    CensusNotOpenError
        If no census has started or the current one is finished.
    """
    census = Census.current()
    if census is None or not census.is_open:
        raise CensusNotOpenError("No census is open")
    return census
