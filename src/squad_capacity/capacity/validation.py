from __future__ import annotations

from datetime import date

from squad_capacity.capacity.capacity_models import Squad
from squad_capacity.capacity.errors import InvalidDateRangeError, SquadNotFoundError


def validate_date_range(start: date, end: date) -> None:
    if end < start:
        raise InvalidDateRangeError(start, end)


def validate_request(repository, squad_id, start: date, end: date) -> Squad:
    """
    Reject a capacity request before any per-day work.

    The range check needs no data access, so it runs first; the squad
    lookup is the only read performed here.
    """
    validate_date_range(start, end)

    squad = repository.find_squad(squad_id)
    if squad is None:
        raise SquadNotFoundError(squad_id)
    return squad
