"""
core/aggregator.py

Rolls DaySummary records up into Monday-starting weeks and calendar months.
All functions are pure; empty input gives empty output.
"""

from collections import defaultdict
from datetime import timedelta

from dateutil.relativedelta import MO, relativedelta

from punchcard.core.models import MonthlySummary, WeekSummary
from punchcard.policies.policies import Policies


class Aggregator:
    """Week / month grouping and target shortfall."""

    @staticmethod
    def week_start(day):
        """Monday on or before `day`."""
        return day + relativedelta(weekday=MO(-1))

    @classmethod
    def group_by_week(cls, summaries):
        weeks = defaultdict(list)
        for summary in summaries:
            weeks[cls.week_start(summary.date)].append(summary)

        out = []
        for week_start, days in weeks.items():
            days.sort(key=lambda d: d.date)
            total = sum((d.total_duration for d in days), timedelta(0))
            out.append(WeekSummary(week_start=week_start, total_duration=total, days=tuple(days)))

        out.sort(key=lambda w: w.week_start)
        return out

    @staticmethod
    def group_by_month(summaries):
        months = defaultdict(lambda: timedelta(0))
        for summary in summaries:
            months[(summary.date.year, summary.date.month)] += summary.total_duration

        return [
            MonthlySummary(year=year, month=month, total_duration=total)
            for (year, month), total in sorted(months.items())
        ]

    @staticmethod
    def shortfall(total, target_hours):
        """Time missing from target_hours, or None when the target is met."""
        return Policies.shortfall(total, target_hours)
