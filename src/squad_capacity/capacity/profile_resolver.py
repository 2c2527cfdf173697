from squad_capacity.capacity.capacity_models import Person

# Standard day for persons without a work profile
DEFAULT_DAILY_HOURS = 8.0

# Fixed divisor; weekends are zeroed by the daily resolver, not here
WORK_DAYS_PER_WEEK = 5


def daily_base_rate(person: Person) -> float:
    """Nominal hours per working day, before dedication and reductions."""
    if person.profile is None:
        return DEFAULT_DAILY_HOURS
    return float(person.profile.weekly_hours) / WORK_DAYS_PER_WEEK
