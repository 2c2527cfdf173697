from __future__ import annotations

import io
from typing import List, Sequence

import pandas as pd

from squad_capacity.capacity.capacity_models import SquadCapacity

# Short codes for the day grid
REASON_CODES = {
    "FIN_SEMANA": "-",
    "FESTIVO": "H",
    "VACACION": "V",
    "AUSENCIA": "A",
}


def _format_table(rows: Sequence[Sequence[object]], headers: List[str], max_rows: int | None = None) -> str:
    output = io.StringIO()
    rows = list(rows)

    if max_rows is not None and len(rows) > max_rows:
        shown = rows[:max_rows]
        omitted = len(rows) - max_rows
    else:
        shown = rows
        omitted = 0

    widths = [len(h) for h in headers]
    for row in shown:
        for i, v in enumerate(row):
            widths[i] = max(widths[i], len(str(v)))

    def fmt(r):
        return " ".join(str(r[i]).ljust(widths[i]) for i in range(len(headers)))

    print(fmt(headers), file=output)
    print(" ".join("-" * w for w in widths), file=output)
    for row in shown:
        print(fmt(row), file=output)

    if omitted:
        print(f"... ({omitted} more rows omitted) ...", file=output)

    return output.getvalue()


def capacity_frame(result: SquadCapacity) -> pd.DataFrame:
    """One row per person and day."""
    records = [
        {
            "person_id": p.person_id,
            "person": p.person_name,
            "day": d.day,
            "hours_available": d.hours_available,
            "hours_nominal": d.hours_nominal,
            "percentage": d.percentage,
            "reason": d.reason.value if d.reason is not None else None,
        }
        for p in result.persons
        for d in p.days
    ]
    return pd.DataFrame(
        records,
        columns=["person_id", "person", "day", "hours_available", "hours_nominal", "percentage", "reason"],
    )


def _day_grid(df: pd.DataFrame) -> pd.DataFrame:
    """person x day grid: hours on working days, a reason code otherwise."""
    hours = df["hours_available"].map(lambda h: f"{h:g}")
    cell = hours.where(df["reason"].isna(), df["reason"].map(REASON_CODES))
    grid = df.assign(cell=cell).pivot(index="person_id", columns="day", values="cell")
    # pivot sorts the index; keep membership order
    order = pd.unique(df["person_id"])
    names = df.drop_duplicates("person_id").set_index("person_id")["person"]
    grid = grid.reindex(order)
    grid.index = [names[pid] for pid in order]
    grid.columns = [d.strftime("%d") for d in grid.columns]
    return grid


def render_squad_capacity(result: SquadCapacity, detail: bool = False) -> str:
    out = io.StringIO()

    print("\n" + "=" * 80, file=out)
    print(f"SQUAD CAPACITY - {result.squad_name} (id={result.squad_id})", file=out)
    print("=" * 80, file=out)
    print(f"Range: {result.start.isoformat()} to {result.end.isoformat()}", file=out)
    print(f"Members: {len(result.persons)}", file=out)
    print(f"Total Capacity: {result.total_hours:.2f} h", file=out)
    print(file=out)

    if not result.persons:
        print("No active members.", file=out)
        print("=" * 80, file=out)
        return out.getvalue()

    df = capacity_frame(result)

    # Person rollup
    print("== Person Rollup ==\n", file=out)
    rows = []
    for p in result.persons:
        person_df = df[df["person_id"] == p.person_id]
        counts = person_df["reason"].value_counts()
        rows.append(
            (
                p.person_id,
                p.person_name,
                f"{p.total_hours:.2f}",
                int((person_df["hours_available"] > 0).sum()),
                int(counts.get("FESTIVO", 0)),
                int(counts.get("VACACION", 0)),
                int(counts.get("AUSENCIA", 0)),
            )
        )
    print(
        _format_table(
            rows,
            ["id", "person", "hours", "days_available", "holidays", "vacation", "absence"],
            max_rows=200,
        ),
        file=out,
    )

    if detail:
        print("== Day Grid ==", file=out)
        print("(- weekend, H holiday, V vacation, A absence)\n", file=out)
        print(_day_grid(df).to_string(), file=out)
        print(file=out)

    print("=" * 80, file=out)
    return out.getvalue()
