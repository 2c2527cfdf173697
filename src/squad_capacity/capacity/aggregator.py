"""
Capacity Aggregator

Expands each member across the date range and rolls day hours up into
person and squad totals. Overlays are indexed once (by person id and by
city) so the day loop never filters the full lists.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from datetime import date
from typing import Dict, FrozenSet, Iterable, List, Sequence, Set, Tuple

from squad_capacity.capacity.capacity_models import (
    Absence,
    DayDetail,
    Holiday,
    PersonCapacity,
    Squad,
    SquadCapacity,
    SquadMembership,
    Vacation,
)
from squad_capacity.capacity.daily_reduction import PersonOverlays, build_day_detail
from squad_capacity.capacity.profile_resolver import daily_base_rate
from squad_capacity.utils.businessdays import daterange

logger = logging.getLogger(__name__)


# ----------------------------
# Indexing
# ----------------------------

def index_holidays_by_city(holidays: Iterable[Holiday]) -> Dict[str, FrozenSet[date]]:
    by_city: Dict[str, Set[date]] = defaultdict(set)
    for h in holidays:
        by_city[h.city].add(h.day)
    return {city: frozenset(days) for city, days in by_city.items()}


def index_by_person(records) -> Dict[int, Tuple]:
    by_person: Dict[int, List] = defaultdict(list)
    for r in records:
        by_person[r.person_id].append(r)
    return {pid: tuple(rs) for pid, rs in by_person.items()}


def overlays_for(
    member: SquadMembership,
    holidays_by_city: Dict[str, FrozenSet[date]],
    vacations_by_person: Dict[int, Tuple[Vacation, ...]],
    absences_by_person: Dict[int, Tuple[Absence, ...]],
) -> PersonOverlays:
    person = member.person
    # A person with no city is never matched by a city-scoped holiday
    holiday_dates = holidays_by_city.get(person.city, frozenset()) if person.city else frozenset()
    return PersonOverlays(
        holiday_dates=holiday_dates,
        vacations=vacations_by_person.get(person.id, ()),
        absences=absences_by_person.get(person.id, ()),
    )


# ----------------------------
# Aggregation
# ----------------------------

def person_capacity(
    member: SquadMembership,
    start: date,
    end: date,
    overlays: PersonOverlays,
) -> PersonCapacity:
    base_rate = daily_base_rate(member.person)

    days: List[DayDetail] = [
        build_day_detail(d, base_rate, member.dedication_pct, overlays)
        for d in daterange(start, end)
    ]

    return PersonCapacity(
        person_id=member.person.id,
        person_name=member.person.name,
        total_hours=sum((d.hours_available for d in days), 0.0),
        days=tuple(days),
    )


def squad_capacity(
    squad: Squad,
    members: Sequence[SquadMembership],
    start: date,
    end: date,
    holidays: Iterable[Holiday] = (),
    vacations: Iterable[Vacation] = (),
    absences: Iterable[Absence] = (),
) -> SquadCapacity:
    holidays_by_city = index_holidays_by_city(holidays)
    vacations_by_person = index_by_person(vacations)
    absences_by_person = index_by_person(absences)

    persons: List[PersonCapacity] = []
    for member in members:
        logger.debug("Computing capacity for person %s", member.person.name)
        overlays = overlays_for(member, holidays_by_city, vacations_by_person, absences_by_person)
        persons.append(person_capacity(member, start, end, overlays))

    return SquadCapacity(
        squad_id=squad.id,
        squad_name=squad.name,
        start=start,
        end=end,
        total_hours=sum((p.total_hours for p in persons), 0.0),
        persons=tuple(persons),
    )
