"""
Capacity Domain Models

Rules:
- No DB
- No formatting
- Immutable data containers; computed results are built fresh per request
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional, Tuple, Union


# ------------------------------------------------------------
# Enumerations
# ------------------------------------------------------------
class ReductionReason(str, Enum):
    """Single dominant cause that zeroed a day's capacity."""

    FIN_SEMANA = "FIN_SEMANA"
    FESTIVO = "FESTIVO"
    VACACION = "VACACION"
    AUSENCIA = "AUSENCIA"


class HolidayType(str, Enum):
    NACIONAL = "NACIONAL"
    REGIONAL = "REGIONAL"
    LOCAL = "LOCAL"


class VacationType(str, Enum):
    VACACIONES = "VACACIONES"
    ASUNTOS_PROPIOS = "ASUNTOS_PROPIOS"
    LIBRE_DISPOSICION = "LIBRE_DISPOSICION"
    PERMISO = "PERMISO"


class VacationStatus(str, Enum):
    REGISTRADA = "REGISTRADA"
    SOLICITADA = "SOLICITADA"


class AbsenceType(str, Enum):
    BAJA_MEDICA = "BAJA_MEDICA"
    EMERGENCIA = "EMERGENCIA"
    OTRO = "OTRO"


# ------------------------------------------------------------
# People & squads
# ------------------------------------------------------------
@dataclass(frozen=True)
class Squad:
    id: int
    name: str


@dataclass(frozen=True)
class WorkProfile:
    id: int
    name: str
    weekly_hours: float


@dataclass(frozen=True)
class Person:
    id: int
    name: str
    city: Optional[str] = None
    profile: Optional[WorkProfile] = None
    active: bool = True


@dataclass(frozen=True)
class SquadMembership:
    person: Person
    dedication_pct: int
    squad_id: Optional[int] = None

    @property
    def city(self) -> Optional[str]:
        return self.person.city


# ------------------------------------------------------------
# Calendar overlays
# ------------------------------------------------------------
@dataclass(frozen=True)
class Holiday:
    day: date
    description: str
    holiday_type: HolidayType
    city: str


@dataclass(frozen=True)
class Vacation:
    person_id: int
    start: date
    end: date
    working_days: Optional[int] = None
    vacation_type: VacationType = VacationType.VACACIONES
    status: VacationStatus = VacationStatus.REGISTRADA

    def covers(self, d: date) -> bool:
        return self.start <= d <= self.end


@dataclass(frozen=True)
class Bounded:
    """Absence end date, inclusive."""

    day: date


class _OpenEnded:
    """No declared end: the absence runs indefinitely from its start."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "OPEN_ENDED"

    def __reduce__(self):
        return (_OpenEnded, ())


OPEN_ENDED = _OpenEnded()

AbsenceEnd = Union[Bounded, _OpenEnded]


def absence_end(day: Optional[date]) -> AbsenceEnd:
    """Map a nullable stored end date onto the tagged variant."""
    return OPEN_ENDED if day is None else Bounded(day)


@dataclass(frozen=True)
class Absence:
    person_id: int
    start: date
    end: AbsenceEnd = OPEN_ENDED
    absence_type: AbsenceType = AbsenceType.OTRO

    @property
    def is_open_ended(self) -> bool:
        return self.end is OPEN_ENDED

    def covers(self, d: date) -> bool:
        if d < self.start:
            return False
        if isinstance(self.end, Bounded):
            return d <= self.end.day
        return True


# ------------------------------------------------------------
# Computed results
# ------------------------------------------------------------
@dataclass(frozen=True)
class DayDetail:
    day: date
    hours_available: float
    hours_nominal: float
    percentage: int
    reason: Optional[ReductionReason] = None


@dataclass(frozen=True)
class PersonCapacity:
    person_id: int
    person_name: str
    total_hours: float
    days: Tuple[DayDetail, ...]

    def day(self, d: date) -> Optional[DayDetail]:
        for detail in self.days:
            if detail.day == d:
                return detail
        return None


@dataclass(frozen=True)
class SquadCapacity:
    squad_id: int
    squad_name: str
    start: date
    end: date
    total_hours: float
    persons: Tuple[PersonCapacity, ...]

    def person(self, person_id: int) -> Optional[PersonCapacity]:
        for p in self.persons:
            if p.person_id == person_id:
                return p
        return None
