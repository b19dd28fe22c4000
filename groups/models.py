# groups/models.py
"""
Database models for the groups application.

The federation is a tree of groups. Layer groups (Bund,
Kantonalverband, Region, Abteilung) own their data; the section
groups below an Abteilung (Biber, Wölfe, Pfadi, Pio, Rover) hold
the members. People belong to groups through roles, and each role
type carries a permission and a census category.
"""

from django.conf import settings
from django.db import models
from django.utils import timezone


class Group(models.Model):
    """
    Model representing a group of the federation.

    Attributes
    ----------
    name : CharField
        Display name of the group.
    short_name : CharField
        Optional abbreviation (e.g. ``BE`` for a Kantonalverband).
    group_type : CharField
        One of :class:`Group.Type`.
    parent : ForeignKey
        The enclosing group, empty for the Bund only.
    email : EmailField
        Main contact address of the group.
    """

    class Type(models.TextChoices):
        """
        Enumeration of group types.
        """

        BUND = "bund", "Bund"
        KANTONALVERBAND = "kantonalverband", "Kantonalverband"
        REGION = "region", "Region"
        ABTEILUNG = "abteilung", "Abteilung"
        BIBER = "biber", "Biber"
        WOELFE = "woelfe", "Wölfe"
        PFADI = "pfadi", "Pfadi"
        PIO = "pio", "Pio"
        ROVER = "rover", "Rover"
        GREMIUM = "gremium", "Gremium"

    #: Types whose groups form a layer
    LAYER_TYPES = (
        Type.BUND,
        Type.KANTONALVERBAND,
        Type.REGION,
        Type.ABTEILUNG,
    )

    #: Census section counted for the members of a section group
    SECTION_TYPES = {
        Type.BIBER: "biber",
        Type.WOELFE: "woelfe",
        Type.PFADI: "pfadis",
        Type.PIO: "pios",
        Type.ROVER: "rover",
    }

    name = models.CharField("Name", max_length=200)
    short_name = models.CharField("Kurzname", max_length=20, blank=True)
    group_type = models.CharField("Gruppentyp", max_length=32, choices=Type.choices)
    parent = models.ForeignKey(
        "self",
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name="children",
        verbose_name="Übergeordnete Gruppe",
    )
    email = models.EmailField("Haupt-E-Mail", blank=True)

    class Meta:
        ordering = ["name"]
        verbose_name = "Gruppe"
        verbose_name_plural = "Gruppen"

    def __str__(self) -> str:
        return self.name

    @property
    def is_layer(self) -> bool:
        return self.group_type in self.LAYER_TYPES

    @property
    def layer_group(self) -> "Group":
        """
        Return the nearest layer group, the group itself included.
        """
        group = self
        while not group.is_layer and group.parent_id is not None:
            group = group.parent
        return group

    def ancestors(self) -> list:
        """
        Return the enclosing groups, nearest first.
        """
        result = []
        group = self.parent
        while group is not None:
            result.append(group)
            group = group.parent
        return result

    def descendants(self) -> list:
        """
        Return all groups below this one, breadth first.
        """
        result = []
        level = list(self.children.all())
        while level:
            result.extend(level)
            level = list(Group.objects.filter(parent__in=level))
        return result

    def layer_groups(self) -> list:
        """
        Return this group and its descendants belonging to the same layer.

        Stops descending at nested layer groups.
        """
        result = [self]
        level = [g for g in self.children.all() if not g.is_layer]
        while level:
            result.extend(level)
            level = [
                g for g in Group.objects.filter(parent__in=level)
                if not g.is_layer
            ]
        return result

    def nearest(self, group_type: str):
        """
        Return this group or the nearest ancestor of ``group_type``.

        Parameters
        ----------
        group_type : str
            A value of :class:`Group.Type`.

        Returns
        -------
        Group or None
            The matching group, or None when there is none.
        """
        for group in [self, *self.ancestors()]:
            if group.group_type == group_type:
                return group
        return None

    @property
    def kantonalverband(self):
        return self.nearest(self.Type.KANTONALVERBAND)

    @property
    def region(self):
        return self.nearest(self.Type.REGION)


class RoleQuerySet(models.QuerySet):
    def active(self):
        """
        Return roles which have not been ended.
        """
        now = timezone.now()
        return self.filter(models.Q(deleted_at__isnull=True) | models.Q(deleted_at__gt=now))


class Role(models.Model):
    """
    Model representing the membership of a person in a group.

    Attributes
    ----------
    person : ForeignKey
        The user holding the role.
    group : ForeignKey
        The group the role belongs to.
    role_type : CharField
        One of :class:`Role.Type`; determines permission and census
        category through :data:`ROLE_PERMISSIONS` and
        :data:`LEADER_ROLE_TYPES`.
    created_at : DateTimeField
        When the role started.
    deleted_at : DateTimeField
        When the role ended, empty for active roles.
    """

    class Type(models.TextChoices):
        """
        Enumeration of role types.
        """

        BUNDESLEITUNG = "bundesleitung", "Bundesleitung"
        MITARBEITER_GS = "mitarbeiter_gs", "Mitarbeiter*in Geschäftsstelle"
        KANTONSLEITUNG = "kantonsleitung", "Kantonsleitung"
        REGIONALLEITUNG = "regionalleitung", "Regionalleitung"
        ABTEILUNGSLEITUNG = "abteilungsleitung", "Abteilungsleitung"
        ADRESSVERWALTUNG = "adressverwaltung", "Adressverwaltung"
        EINHEITSLEITUNG = "einheitsleitung", "Einheitsleitung"
        MITLEITUNG = "mitleitung", "Mitleitung"
        MITGLIED = "mitglied", "Mitglied"

    person = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="roles",
        verbose_name="Person",
    )
    group = models.ForeignKey(
        Group,
        on_delete=models.CASCADE,
        related_name="roles",
        verbose_name="Gruppe",
    )
    role_type = models.CharField("Rolle", max_length=32, choices=Type.choices)
    created_at = models.DateTimeField("Seit", default=timezone.now)
    deleted_at = models.DateTimeField("Bis", null=True, blank=True)

    objects = RoleQuerySet.as_manager()

    class Meta:
        ordering = ["group__name", "role_type"]
        verbose_name = "Rolle"
        verbose_name_plural = "Rollen"

    def __str__(self) -> str:
        return f"{self.get_role_type_display()} {self.group}"

    @property
    def permission(self) -> str:
        return ROLE_PERMISSIONS[self.role_type]

    @property
    def is_leader(self) -> bool:
        return self.role_type in LEADER_ROLE_TYPES


#: Permission granted by each role type
ROLE_PERMISSIONS = {
    Role.Type.BUNDESLEITUNG: "layer_and_below_full",
    Role.Type.MITARBEITER_GS: "layer_and_below_full",
    Role.Type.KANTONSLEITUNG: "layer_and_below_full",
    Role.Type.REGIONALLEITUNG: "layer_and_below_full",
    Role.Type.ABTEILUNGSLEITUNG: "layer_and_below_full",
    Role.Type.ADRESSVERWALTUNG: "layer_full",
    Role.Type.EINHEITSLEITUNG: "group_full",
    Role.Type.MITLEITUNG: "group_read",
    Role.Type.MITGLIED: "group_read",
}

#: Role types counted as leaders by the census
LEADER_ROLE_TYPES = frozenset({
    Role.Type.ABTEILUNGSLEITUNG,
    Role.Type.ADRESSVERWALTUNG,
    Role.Type.EINHEITSLEITUNG,
    Role.Type.MITLEITUNG,
})
