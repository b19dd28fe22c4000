"""
Shared test data: a small federation with people, events and courses.

``build_fixtures()`` returns a namespace holding every object so
that test cases can pick what they need in ``setUp``. All users have
the password :data:`PASSWORD`.
"""

from datetime import date
from types import SimpleNamespace

from django.contrib.auth import get_user_model

from events.models import Event, EventDate, EventKind
from groups.models import Group, Role

User = get_user_model()

PASSWORD = "secret-pw"


def create_user(username, first_name="", last_name="", nickname="", gender="", birthday=None, **extra):
    """
    Create a user together with its person data.
    """
    user = User.objects.create_user(
        username,
        email=extra.pop("email", f"{username}@example.ch"),
        password=PASSWORD,
        first_name=first_name,
        last_name=last_name,
        **extra,
    )
    person = user.person
    person.nickname = nickname
    person.gender = gender
    person.birthday = birthday
    person.save()
    return user


def create_role(user, group, role_type):
    return Role.objects.create(person=user, group=group, role_type=role_type)


def create_event(group, name, type=Event.Type.EVENT, start_at=None, location="", **fields):
    event = Event.objects.create(type=type, name=name, **fields)
    event.groups.add(group)
    EventDate.objects.create(
        event=event, start_at=start_at or date(2030, 7, 1), location=location
    )
    return event


def build_fixtures():
    """
    Build the federation used throughout the tests.

    Returns
    -------
    SimpleNamespace
        Groups ``bund``, ``be``, ``bern`` (region), ``schekka``,
        ``berchtold``, ``schekka_pfadi``, ``schekka_woelfe``; people
        ``bulei``, ``al_be``, ``al_schekka``, ``al_berchtold``,
        ``pfadi``, ``wolf``; kinds ``fut`` and ``lpk`` (campy); events
        ``schekka_camp``, ``bund_supercamp``, ``top_course`` and
        ``top_event``.
    """
    f = SimpleNamespace()

    # --- Groups ---
    f.bund = Group.objects.create(
        name="Pfadibewegung Schweiz", short_name="PBS",
        group_type=Group.Type.BUND, email="info@pbs.example.ch",
    )
    f.be = Group.objects.create(
        name="Pfadi Kanton Bern", short_name="BE",
        group_type=Group.Type.KANTONALVERBAND, parent=f.bund, email="be@example.ch",
    )
    f.bern = Group.objects.create(
        name="Region Bern", group_type=Group.Type.REGION, parent=f.be,
    )
    f.schekka = Group.objects.create(
        name="Schekka", group_type=Group.Type.ABTEILUNG, parent=f.bern,
        email="schekka@example.ch",
    )
    f.berchtold = Group.objects.create(
        name="Berchtold", group_type=Group.Type.ABTEILUNG, parent=f.bern,
    )
    f.schekka_pfadi = Group.objects.create(
        name="Pfadi Schekka", group_type=Group.Type.PFADI, parent=f.schekka,
    )
    f.schekka_woelfe = Group.objects.create(
        name="Wölfe Schekka", group_type=Group.Type.WOELFE, parent=f.schekka,
    )

    # --- People ---
    f.bulei = create_user("bulei", "Bruno", "Bundesleiter", nickname="Bulei")
    create_role(f.bulei, f.bund, Role.Type.BUNDESLEITUNG)
    f.al_be = create_user("al_be", "Berta", "Kantonsleiterin", gender="w")
    create_role(f.al_be, f.be, Role.Type.KANTONSLEITUNG)
    f.al_schekka = create_user(
        "al_schekka", "Sandra", "Schekka", nickname="Torres", gender="w",
        birthday=date(1990, 3, 4),
    )
    create_role(f.al_schekka, f.schekka, Role.Type.ABTEILUNGSLEITUNG)
    f.al_berchtold = create_user("al_berchtold", "Ben", "Berchtold", gender="m")
    create_role(f.al_berchtold, f.berchtold, Role.Type.ABTEILUNGSLEITUNG)
    f.pfadi = create_user(
        "pfadi", "Pia", "Pfister", nickname="Pünktli", gender="w",
        birthday=date(2011, 5, 6),
    )
    create_role(f.pfadi, f.schekka_pfadi, Role.Type.MITGLIED)
    f.wolf = create_user(
        "wolf", "Walter", "Wolf", nickname="Akela", gender="m",
        birthday=date(2015, 9, 1),
    )
    create_role(f.wolf, f.schekka_woelfe, Role.Type.MITGLIED)

    # --- Event kinds ---
    f.fut = EventKind.objects.create(label="Futurakurs", short_name="FUT")
    f.lpk = EventKind.objects.create(label="Leitpfadikurs", short_name="LPK", campy=True)

    # --- Events ---
    f.schekka_camp = create_event(
        f.schekka, "Sommerlager Schekka", type=Event.Type.CAMP, location="Zeltplatz Gurnigel",
    )
    f.bund_supercamp = create_event(
        f.bund, "Bundeslager", type=Event.Type.CAMP, allow_sub_camps=True,
        start_at=date(2030, 7, 24), location="Goms",
    )
    f.top_course = create_event(
        f.be, "Top Course", type=Event.Type.COURSE, kind=f.fut, requires_approval=True,
    )
    f.top_event = create_event(f.be, "Top Event", description="Infos auf www.pbs.ch")
    return f
