"""
Squad Capacity Use Case

Purpose:
- Hours available per member and per calendar day for ONE squad and ONE
  inclusive date range
- Combines work profile, dedication, weekends, city holidays, vacations and
  absences into a single figure per day

Important:
- Read-only; nothing is cached between calls
- All validation runs before any per-day computation
- Data is loaded in batched reads (members, holidays per year, vacations,
  absences); data-access errors propagate unchanged
"""

from __future__ import annotations

from datetime import date
from typing import List

from squad_capacity.capacity.aggregator import squad_capacity
from squad_capacity.capacity.capacity_models import Holiday, SquadCapacity
from squad_capacity.capacity.membership_resolver import resolve_members
from squad_capacity.capacity.validation import validate_request
from squad_capacity.utils.businessdays import years_between
from squad_capacity.utils.logger import get_logger

logger = get_logger(__name__)


def _default_repository():
    from squad_capacity.data.capacity_repository import CapacityRepository
    from squad_capacity.data.connection import get_engine

    return CapacityRepository(get_engine())


def load_holidays(repository, start: date, end: date) -> List[Holiday]:
    """One read per calendar year touched by the range."""
    holidays: List[Holiday] = []
    for year in years_between(start, end):
        holidays.extend(repository.find_holidays_by_year(year))
    return holidays


def compute_capacity(squad_id, start: date, end: date, repository=None) -> SquadCapacity:
    """
    Compute the capacity of a squad between start and end (both inclusive).
    """
    logger.info("Computing capacity | squad=%s start=%s end=%s", squad_id, start, end)

    if repository is None:
        repository = _default_repository()

    # ------------------------------------------------------------
    # Validate (raises before any aggregation)
    # ------------------------------------------------------------
    squad = validate_request(repository, squad_id, start, end)

    # ------------------------------------------------------------
    # Members
    # ------------------------------------------------------------
    members = resolve_members(repository, squad_id)
    if not members:
        logger.warning("Squad %s has no active members", squad_id)
        return squad_capacity(squad, [], start, end)

    # ------------------------------------------------------------
    # Calendar overlays (batched)
    # ------------------------------------------------------------
    holidays = load_holidays(repository, start, end)
    vacations = repository.find_vacations_for_squad_in_range(squad_id, start, end)
    absences = repository.find_absences_for_squad_in_range(squad_id, start, end)

    result = squad_capacity(
        squad,
        members,
        start,
        end,
        holidays=holidays,
        vacations=vacations,
        absences=absences,
    )

    logger.info("Squad %s total capacity: %.2f hours", squad_id, result.total_hours)
    return result
