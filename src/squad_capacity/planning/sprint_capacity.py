from __future__ import annotations

from datetime import date, timedelta
from typing import Tuple

from squad_capacity.capacity.capacity_models import SquadCapacity
from squad_capacity.capacity.capacity_usecase import compute_capacity
from squad_capacity.capacity.errors import (
    DayOutsideRangeError,
    InsufficientCapacityError,
    InvalidSprintStartError,
    PersonNotInSquadError,
)
from squad_capacity.utils.logger import get_logger

logger = get_logger(__name__)

# Two calendar weeks, Monday to Sunday
SPRINT_LENGTH_DAYS = 14


def sprint_window(start: date) -> Tuple[date, date]:
    """(start, end) of a sprint beginning on `start`, which must be a Monday."""
    if start.weekday() != 0:
        raise InvalidSprintStartError(start)
    return start, start + timedelta(days=SPRINT_LENGTH_DAYS - 1)


def compute_sprint_capacity(squad_id, start: date, repository=None) -> SquadCapacity:
    """Capacity of a squad across one sprint; total_hours is the sprint capacity."""
    start, end = sprint_window(start)
    return compute_capacity(squad_id, start, end, repository=repository)


def check_assignment_capacity(
    capacity: SquadCapacity,
    person_id,
    day: date,
    estimate_hours: float,
    committed_hours: float = 0.0,
) -> float:
    """
    Validate that `estimate_hours` fit in a person's capacity on `day`.

    `committed_hours` are hours already booked for that person and day;
    when re-assigning, pass the booked hours minus the previous estimate.
    Returns the hours left after the assignment.
    """
    person = capacity.person(person_id)
    if person is None:
        raise PersonNotInSquadError(person_id, capacity.squad_id)

    detail = person.day(day)
    if detail is None:
        raise DayOutsideRangeError(day, capacity.start, capacity.end)

    available = detail.hours_available - committed_hours
    if estimate_hours > available:
        raise InsufficientCapacityError(person_id, day, available, estimate_hours)

    logger.debug(
        "Capacity check ok | person=%s day=%s available=%.2f requested=%.2f",
        person_id,
        day,
        available,
        estimate_hours,
    )
    return available - estimate_hours
