from __future__ import annotations

from datetime import date

import pytest

from squad_capacity.capacity.capacity_models import (
    Person,
    Squad,
    SquadMembership,
    WorkProfile,
)


class FakeRepository:
    """In-memory read interfaces; records every call for batching checks."""

    def __init__(self, squads=(), members=None, holidays=(), vacations=(), absences=()):
        self.squads = {s.id: s for s in squads}
        self.members = members or {}
        self.holidays = list(holidays)
        self.vacations = list(vacations)
        self.absences = list(absences)
        self.calls = []

    def find_squad(self, squad_id):
        self.calls.append(("find_squad", squad_id))
        return self.squads.get(squad_id)

    def find_squad_members(self, squad_id):
        self.calls.append(("find_squad_members", squad_id))
        return list(self.members.get(squad_id, []))

    def find_holidays_by_year(self, year):
        self.calls.append(("find_holidays_by_year", year))
        return [h for h in self.holidays if h.day.year == year]

    def _member_ids(self, squad_id):
        return {m.person.id for m in self.members.get(squad_id, [])}

    def find_vacations_for_squad_in_range(self, squad_id, start, end):
        self.calls.append(("find_vacations_for_squad_in_range", squad_id, start, end))
        ids = self._member_ids(squad_id)
        return [v for v in self.vacations if v.person_id in ids and v.end >= start and v.start <= end]

    def find_absences_for_squad_in_range(self, squad_id, start, end):
        self.calls.append(("find_absences_for_squad_in_range", squad_id, start, end))
        ids = self._member_ids(squad_id)
        return [a for a in self.absences if a.person_id in ids and a.start <= end and (a.covers(start) or a.start >= start)]

    def call_names(self):
        return [c[0] for c in self.calls]


FULL_TIME = WorkProfile(id=1, name="Full time 40h", weekly_hours=40.0)
PART_TIME = WorkProfile(id=2, name="Part time 30h", weekly_hours=30.0)

SQUAD = Squad(id=1, name="Squad Alpha")

# 2026-03-02 is a Monday
MONDAY = date(2026, 3, 2)
FRIDAY = date(2026, 3, 6)
SATURDAY = date(2026, 3, 7)
SUNDAY = date(2026, 3, 8)


def make_member(person_id=1, name="Juan Perez", city="Zaragoza", profile=FULL_TIME, dedication=100, active=True):
    person = Person(id=person_id, name=name, city=city, profile=profile, active=active)
    return SquadMembership(person=person, dedication_pct=dedication, squad_id=SQUAD.id)


@pytest.fixture
def member():
    return make_member()


@pytest.fixture
def repo(member):
    return FakeRepository(squads=[SQUAD], members={SQUAD.id: [member]})
