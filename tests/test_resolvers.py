from datetime import date

import pytest

from squad_capacity.capacity.capacity_models import Person, WorkProfile
from squad_capacity.capacity.errors import (
    InvalidDateRangeError,
    InvalidDedicationError,
    SquadNotFoundError,
)
from squad_capacity.capacity.membership_resolver import resolve_members
from squad_capacity.capacity.profile_resolver import DEFAULT_DAILY_HOURS, daily_base_rate
from squad_capacity.capacity.validation import validate_request

from conftest import SQUAD, FakeRepository, make_member


# ----------------------------
# Profile
# ----------------------------

@pytest.mark.parametrize("weekly, expected", [(40, 8.0), (30, 6.0), (37.5, 7.5), (0, 0.0)])
def test_base_rate_divides_weekly_hours_by_five(weekly, expected):
    person = Person(id=1, name="Ana", profile=WorkProfile(id=1, name="p", weekly_hours=weekly))
    assert daily_base_rate(person) == expected


def test_missing_profile_defaults_to_standard_day():
    assert DEFAULT_DAILY_HOURS == 8.0
    assert daily_base_rate(Person(id=1, name="Ana")) == 8.0


# ----------------------------
# Validation
# ----------------------------

def test_end_before_start_rejected_without_data_access():
    repo = FakeRepository(squads=[SQUAD])
    with pytest.raises(InvalidDateRangeError):
        validate_request(repo, SQUAD.id, date(2026, 3, 10), date(2026, 3, 5))
    assert repo.calls == []


def test_unknown_squad_rejected():
    repo = FakeRepository(squads=[SQUAD])
    with pytest.raises(SquadNotFoundError, match="999"):
        validate_request(repo, 999, date(2026, 3, 1), date(2026, 3, 31))


def test_single_day_range_is_valid():
    repo = FakeRepository(squads=[SQUAD])
    assert validate_request(repo, SQUAD.id, date(2026, 3, 2), date(2026, 3, 2)) == SQUAD


# ----------------------------
# Membership
# ----------------------------

def test_members_keep_fetch_order_and_skip_inactive():
    a = make_member(person_id=3, name="C")
    b = make_member(person_id=1, name="A", active=False)
    c = make_member(person_id=2, name="B", dedication=50)
    repo = FakeRepository(squads=[SQUAD], members={SQUAD.id: [a, b, c]})

    members = resolve_members(repo, SQUAD.id)

    assert [m.person.id for m in members] == [3, 2]
    assert members[1].dedication_pct == 50


@pytest.mark.parametrize("dedication", [-1, 101])
def test_dedication_out_of_bounds_rejected(dedication):
    repo = FakeRepository(squads=[SQUAD], members={SQUAD.id: [make_member(dedication=dedication)]})
    with pytest.raises(InvalidDedicationError):
        resolve_members(repo, SQUAD.id)
