from __future__ import annotations

from datetime import date


class CapacityError(Exception):
    """Base for rejected capacity requests."""


class InvalidDateRangeError(CapacityError, ValueError):
    def __init__(self, start: date, end: date):
        super().__init__(
            f"End date must be on or after start date (start={start}, end={end})"
        )
        self.start = start
        self.end = end


class SquadNotFoundError(CapacityError, LookupError):
    def __init__(self, squad_id):
        super().__init__(f"Squad not found: {squad_id}")
        self.squad_id = squad_id


class InvalidDedicationError(CapacityError, ValueError):
    def __init__(self, person_id, dedication_pct):
        super().__init__(
            f"Dedication must be between 0 and 100 "
            f"(person={person_id}, dedication={dedication_pct})"
        )
        self.person_id = person_id
        self.dedication_pct = dedication_pct


# ------------------------------------------------------------
# Planning
# ------------------------------------------------------------
class InvalidSprintStartError(CapacityError, ValueError):
    def __init__(self, start: date):
        super().__init__(f"Sprint must start on a Monday (got {start}, {start:%A})")
        self.start = start


class PersonNotInSquadError(CapacityError, LookupError):
    def __init__(self, person_id, squad_id):
        super().__init__(f"Person {person_id} is not a member of squad {squad_id}")
        self.person_id = person_id
        self.squad_id = squad_id


class DayOutsideRangeError(CapacityError, ValueError):
    def __init__(self, day: date, start: date, end: date):
        super().__init__(f"Day {day} is outside the computed range {start} - {end}")
        self.day = day
        self.start = start
        self.end = end


class InsufficientCapacityError(CapacityError):
    def __init__(self, person_id, day: date, available_hours: float, requested_hours: float):
        super().__init__(
            f"Insufficient capacity to assign {requested_hours} hours to person "
            f"{person_id} on {day}. Available: {available_hours}"
        )
        self.person_id = person_id
        self.day = day
        self.available_hours = available_hours
        self.requested_hours = requested_hours
