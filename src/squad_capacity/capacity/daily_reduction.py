"""
Daily Reduction Resolver

For one person and one date, decide how many hours are available and which
reduction (if any) applies. Pure functions only: no database access, no
logging, no config.

Reductions are checked in the order of REDUCTION_PRECEDENCE and the first
match wins. Overlapping cases (a holiday inside a vacation, an absence that
starts during a vacation) are resolved purely by that order; it is still to
be confirmed with the planning owners, so keep any change to it in this
table.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Callable, FrozenSet, Optional, Tuple

from squad_capacity.capacity.capacity_models import (
    Absence,
    DayDetail,
    ReductionReason,
    Vacation,
)
from squad_capacity.utils.businessdays import is_business_day


@dataclass(frozen=True)
class PersonOverlays:
    """Calendar data already narrowed to one person (and their city)."""

    holiday_dates: FrozenSet[date] = frozenset()
    vacations: Tuple[Vacation, ...] = ()
    absences: Tuple[Absence, ...] = ()


# ----------------------------
# Reduction predicates
# ----------------------------

def _is_weekend(d: date, overlays: PersonOverlays) -> bool:
    return not is_business_day(d)


def _is_holiday(d: date, overlays: PersonOverlays) -> bool:
    return d in overlays.holiday_dates


def _is_on_vacation(d: date, overlays: PersonOverlays) -> bool:
    return any(v.covers(d) for v in overlays.vacations)


def _is_absent(d: date, overlays: PersonOverlays) -> bool:
    return any(a.covers(d) for a in overlays.absences)


REDUCTION_PRECEDENCE: Tuple[Tuple[ReductionReason, Callable[[date, PersonOverlays], bool]], ...] = (
    (ReductionReason.FIN_SEMANA, _is_weekend),
    (ReductionReason.FESTIVO, _is_holiday),
    (ReductionReason.VACACION, _is_on_vacation),
    (ReductionReason.AUSENCIA, _is_absent),
)


# ----------------------------
# Resolution
# ----------------------------

def nominal_hours(base_rate: float, dedication_pct: int) -> float:
    """Dedication-scaled hours for a working day with no reduction."""
    return base_rate * dedication_pct / 100


def find_reduction(d: date, overlays: PersonOverlays) -> Optional[ReductionReason]:
    for reason, applies in REDUCTION_PRECEDENCE:
        if applies(d, overlays):
            return reason
    return None


def resolve_day(
    d: date,
    base_rate: float,
    dedication_pct: int,
    overlays: PersonOverlays,
) -> Tuple[float, Optional[ReductionReason]]:
    """
    Return (hours_available, reason) for one person on one date.
    """
    reason = find_reduction(d, overlays)
    if reason is not None:
        return 0.0, reason
    return nominal_hours(base_rate, dedication_pct), None


def build_day_detail(
    d: date,
    base_rate: float,
    dedication_pct: int,
    overlays: PersonOverlays,
) -> DayDetail:
    """
    Percentage reports reduction only: a normal day is 100 whatever the
    dedication, a reduced day is 0.
    """
    hours, reason = resolve_day(d, base_rate, dedication_pct, overlays)
    return DayDetail(
        day=d,
        hours_available=hours,
        hours_nominal=nominal_hours(base_rate, dedication_pct),
        percentage=0 if reason is not None else 100,
        reason=reason,
    )
