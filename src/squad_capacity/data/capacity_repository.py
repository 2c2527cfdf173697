"""
Capacity data access layer.

Read-only queries feeding the capacity engine. Each method is one round
trip; the engine calls each of them once per request (holidays once per
year) so there is no per-person or per-day query fan-out.

Expected tables:
  - squad (id, name)
  - work_profile (id, name, weekly_hours)
  - person (id, name, city, work_profile_id, active)
  - squad_member (id, squad_id, person_id, dedication_pct)
  - holiday (id, holiday_date, description, holiday_type, city)
  - vacation (id, person_id, start_date, end_date, working_days, vacation_type, status)
  - absence (id, person_id, start_date, end_date, absence_type)
"""

from __future__ import annotations

from datetime import date, datetime
from typing import List, Optional

import pandas as pd
from sqlalchemy import text
from sqlalchemy.engine import Engine

from squad_capacity.capacity.capacity_models import (
    Absence,
    AbsenceType,
    Holiday,
    HolidayType,
    Person,
    Squad,
    SquadMembership,
    Vacation,
    VacationStatus,
    VacationType,
    WorkProfile,
    absence_end,
)
from squad_capacity.data.connection import get_connection
from squad_capacity.utils.businessdays import count_working_days


# ---------------------------------------------------------
# Row coercion
# ---------------------------------------------------------
def _is_null(value) -> bool:
    if value is None or value is pd.NaT:
        return True
    return not isinstance(value, (date, str)) and bool(pd.isna(value))


def _to_date(value) -> Optional[date]:
    if _is_null(value):
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


def _to_int(value) -> Optional[int]:
    return None if _is_null(value) else int(value)


def _iso(d: date) -> str:
    return d.strftime("%Y-%m-%d")


class CapacityRepository:
    def __init__(self, engine: Engine):
        self.engine = engine

    def _read(self, sql: str, params: dict) -> pd.DataFrame:
        with get_connection(self.engine) as conn:
            return pd.read_sql(text(sql), conn, params=params)

    # -----------------------------------------------------
    # Squads & members
    # -----------------------------------------------------
    def find_squad(self, squad_id) -> Optional[Squad]:
        df = self._read(
            "SELECT id, name FROM squad WHERE id = :squad_id",
            {"squad_id": squad_id},
        )
        if df.empty:
            return None
        row = df.iloc[0]
        return Squad(id=int(row["id"]), name=str(row["name"]))

    def find_squad_members(self, squad_id) -> List[SquadMembership]:
        sql = """
            SELECT
                sm.squad_id,
                sm.dedication_pct,
                p.id   AS person_id,
                p.name AS person_name,
                p.city,
                p.active,
                wp.id  AS profile_id,
                wp.name AS profile_name,
                wp.weekly_hours
            FROM squad_member sm
            JOIN person p
                ON p.id = sm.person_id
            LEFT JOIN work_profile wp
                ON wp.id = p.work_profile_id
            WHERE sm.squad_id = :squad_id
            ORDER BY sm.id
        """
        df = self._read(sql, {"squad_id": squad_id})

        members: List[SquadMembership] = []
        for _, r in df.iterrows():
            profile = None
            if not _is_null(r["profile_id"]):
                profile = WorkProfile(
                    id=int(r["profile_id"]),
                    name=str(r["profile_name"]),
                    weekly_hours=float(r["weekly_hours"]),
                )

            person = Person(
                id=int(r["person_id"]),
                name=str(r["person_name"]),
                city=None if _is_null(r["city"]) else str(r["city"]),
                profile=profile,
                active=True if _is_null(r["active"]) else bool(int(r["active"])),
            )

            members.append(
                SquadMembership(
                    person=person,
                    dedication_pct=int(r["dedication_pct"]),
                    squad_id=int(r["squad_id"]),
                )
            )

        return members

    # -----------------------------------------------------
    # Calendar overlays
    # -----------------------------------------------------
    def find_holidays_by_year(self, year: int) -> List[Holiday]:
        sql = """
            SELECT holiday_date, description, holiday_type, city
            FROM holiday
            WHERE holiday_date >= :year_start
              AND holiday_date <= :year_end
            ORDER BY holiday_date
        """
        df = self._read(
            sql,
            {"year_start": _iso(date(year, 1, 1)), "year_end": _iso(date(year, 12, 31))},
        )

        return [
            Holiday(
                day=_to_date(r["holiday_date"]),
                description=str(r["description"]),
                holiday_type=HolidayType(r["holiday_type"]),
                city=str(r["city"]),
            )
            for _, r in df.iterrows()
        ]

    def find_vacations_for_squad_in_range(self, squad_id, start: date, end: date) -> List[Vacation]:
        sql = """
            SELECT DISTINCT
                v.id, v.person_id, v.start_date, v.end_date,
                v.working_days, v.vacation_type, v.status
            FROM vacation v
            JOIN squad_member sm
                ON sm.person_id = v.person_id
            WHERE sm.squad_id = :squad_id
              AND v.end_date >= :start
              AND v.start_date <= :end
            ORDER BY v.id
        """
        df = self._read(sql, {"squad_id": squad_id, "start": _iso(start), "end": _iso(end)})

        vacations: List[Vacation] = []
        for _, r in df.iterrows():
            v_start = _to_date(r["start_date"])
            v_end = _to_date(r["end_date"])
            working_days = _to_int(r["working_days"])
            if working_days is None:
                working_days = count_working_days(v_start, v_end)

            vacations.append(
                Vacation(
                    person_id=int(r["person_id"]),
                    start=v_start,
                    end=v_end,
                    working_days=working_days,
                    vacation_type=VacationType(r["vacation_type"]),
                    status=VacationStatus(r["status"]),
                )
            )

        return vacations

    def find_absences_for_squad_in_range(self, squad_id, start: date, end: date) -> List[Absence]:
        # NULL end_date = open-ended, overlaps any range starting after it
        sql = """
            SELECT DISTINCT
                a.id, a.person_id, a.start_date, a.end_date, a.absence_type
            FROM absence a
            JOIN squad_member sm
                ON sm.person_id = a.person_id
            WHERE sm.squad_id = :squad_id
              AND (a.end_date IS NULL OR a.end_date >= :start)
              AND a.start_date <= :end
            ORDER BY a.id
        """
        df = self._read(sql, {"squad_id": squad_id, "start": _iso(start), "end": _iso(end)})

        return [
            Absence(
                person_id=int(r["person_id"]),
                start=_to_date(r["start_date"]),
                end=absence_end(_to_date(r["end_date"])),
                absence_type=AbsenceType(r["absence_type"]),
            )
            for _, r in df.iterrows()
        ]
