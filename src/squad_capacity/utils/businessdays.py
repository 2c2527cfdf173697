import logging
from datetime import date, timedelta
from typing import Iterable, Iterator, Optional

import numpy as np

logger = logging.getLogger(__name__)


def is_business_day(d: date) -> bool:
    """
    Checks if a date is a business day (weekday).
    """
    return d.weekday() < 5


def daterange(start: date, end: date) -> Iterator[date]:
    """Yield every calendar date from start to end inclusive."""
    cur = start
    while cur <= end:
        yield cur
        cur = cur + timedelta(days=1)


def years_between(start: date, end: date) -> list[int]:
    """Every calendar year touched by [start, end]."""
    return list(range(start.year, end.year + 1))


def count_working_days(start: date, end: date, holidays: Optional[Iterable[date]] = None) -> int:
    """
    Counts Mon-Fri days in [start, end] inclusive, excluding holidays.
    """
    if end < start:
        return 0
    holiday_list = sorted(set(holidays or ()))
    bdc = np.busdaycalendar(holidays=np.array(holiday_list, dtype="datetime64[D]"))
    # busday_count is end-exclusive
    n = int(np.busday_count(start, end + timedelta(days=1), busdaycal=bdc))
    logger.debug("Working days between %s and %s: %d", start, end, n)
    return n
