from datetime import date, timedelta

from punchcard.core.aggregator import Aggregator
from punchcard.core.models import DaySummary, MonthlySummary


def day(y, m, d, hours):
    return DaySummary(date=date(y, m, d), total_duration=timedelta(hours=hours))


def test_week_start_is_monday():
    assert Aggregator.week_start(date(2025, 8, 25)) == date(2025, 8, 25)
    assert Aggregator.week_start(date(2025, 8, 27)) == date(2025, 8, 25)
    assert Aggregator.week_start(date(2025, 8, 31)) == date(2025, 8, 25)
    assert Aggregator.week_start(date(2025, 9, 1)) == date(2025, 9, 1)


def test_group_by_week():
    summaries = [day(2025, 8, 25, 8), day(2025, 8, 26, 7), day(2025, 9, 1, 6)]
    weeks = Aggregator.group_by_week(summaries)

    assert len(weeks) == 2
    assert weeks[0].week_start == date(2025, 8, 25)
    assert weeks[0].total_duration == timedelta(hours=15)
    assert len(weeks[0].days) == 2
    assert weeks[1].week_start == date(2025, 9, 1)
    assert weeks[1].total_duration == timedelta(hours=6)
    assert len(weeks[1].days) == 1


def test_group_by_week_sorts_unordered_input():
    summaries = [day(2025, 9, 2, 1), day(2025, 8, 31, 2), day(2025, 8, 25, 3), day(2025, 9, 1, 4)]
    weeks = Aggregator.group_by_week(summaries)

    assert [w.week_start for w in weeks] == [date(2025, 8, 25), date(2025, 9, 1)]
    assert [d.date for d in weeks[0].days] == [date(2025, 8, 25), date(2025, 8, 31)]
    assert [d.date for d in weeks[1].days] == [date(2025, 9, 1), date(2025, 9, 2)]
    assert weeks[0].week_end == date(2025, 8, 31)


def test_week_spanning_year_boundary():
    weeks = Aggregator.group_by_week([day(2025, 12, 31, 4), day(2026, 1, 2, 5)])
    assert len(weeks) == 1
    assert weeks[0].week_start == date(2025, 12, 29)
    assert weeks[0].total_duration == timedelta(hours=9)


def test_group_by_month_ignores_week_boundaries():
    summaries = [day(2025, 9, 1, 6), day(2025, 8, 25, 8), day(2025, 8, 26, 7), day(2024, 12, 2, 1)]
    months = Aggregator.group_by_month(summaries)

    assert months == [
        MonthlySummary(year=2024, month=12, total_duration=timedelta(hours=1)),
        MonthlySummary(year=2025, month=8, total_duration=timedelta(hours=15)),
        MonthlySummary(year=2025, month=9, total_duration=timedelta(hours=6)),
    ]
    assert months[1].month_name == "August"


def test_empty_input():
    assert Aggregator.group_by_week([]) == []
    assert Aggregator.group_by_month([]) == []


def test_shortfall():
    assert Aggregator.shortfall(timedelta(hours=15), 40) == timedelta(hours=25)
    assert Aggregator.shortfall(timedelta(hours=41), 40) is None
