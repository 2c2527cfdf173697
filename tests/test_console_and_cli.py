from datetime import date

from squad_capacity.capacity import cli
from squad_capacity.capacity.capacity_models import Absence, Holiday, HolidayType
from squad_capacity.capacity.capacity_usecase import compute_capacity
from squad_capacity.presentation.console import capacity_frame, render_squad_capacity
from squad_capacity.utils.businessdays import count_working_days

from conftest import MONDAY, SQUAD, SUNDAY, FakeRepository, make_member


def _repo():
    return FakeRepository(
        squads=[SQUAD],
        members={SQUAD.id: [make_member(1, "Ana"), make_member(2, "Luis", dedication=50)]},
        holidays=[Holiday(day=MONDAY, description="x", holiday_type=HolidayType.LOCAL, city="Zaragoza")],
        absences=[Absence(person_id=2, start=date(2026, 3, 5))],
    )


def test_capacity_frame_has_one_row_per_person_day():
    result = compute_capacity(SQUAD.id, MONDAY, SUNDAY, repository=_repo())

    df = capacity_frame(result)

    assert len(df) == 14
    assert df["hours_available"].sum() == result.total_hours
    assert df.loc[(df["person_id"] == 1) & (df["day"] == MONDAY), "reason"].item() == "FESTIVO"


def test_render_summary_and_grid():
    result = compute_capacity(SQUAD.id, MONDAY, SUNDAY, repository=_repo())

    text = render_squad_capacity(result, detail=True)

    assert "SQUAD CAPACITY - Squad Alpha (id=1)" in text
    assert f"Total Capacity: {result.total_hours:.2f} h" in text
    assert "Day Grid" in text
    assert "Ana" in text and "Luis" in text


def test_render_empty_squad():
    repo = FakeRepository(squads=[SQUAD])
    result = compute_capacity(SQUAD.id, MONDAY, SUNDAY, repository=repo)

    assert "No active members." in render_squad_capacity(result)


def test_cli_prints_report(capsys):
    code = cli.main(
        ["--squad", "1", "--start", "2026-03-02", "--end", "2026-03-08"],
        repository=_repo(),
    )

    assert code == 0
    assert "Range: 2026-03-02 to 2026-03-08" in capsys.readouterr().out


def test_cli_sprint_mode(capsys):
    code = cli.main(["--squad", "1", "--start", "2026-03-02", "--sprint"], repository=_repo())

    assert code == 0
    assert "Range: 2026-03-02 to 2026-03-15" in capsys.readouterr().out


def test_cli_rejects_inverted_range():
    code = cli.main(
        ["--squad", "1", "--start", "2026-03-08", "--end", "2026-03-02"],
        repository=_repo(),
    )
    assert code == 2


def test_count_working_days_skips_weekends_and_holidays():
    assert count_working_days(MONDAY, SUNDAY) == 5
    assert count_working_days(MONDAY, SUNDAY, holidays=[MONDAY, MONDAY]) == 4
    assert count_working_days(SUNDAY, MONDAY) == 0
