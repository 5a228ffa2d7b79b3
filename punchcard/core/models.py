#punchcard\core\models.py
"""
core/models.py

Immutable value records produced by the parser and the aggregator.
"""

from dataclasses import dataclass, field
from datetime import date, time, timedelta

from punchcard.infra.constants import MONTH_NAMES
from punchcard.utils.timeparse import TimeParser


@dataclass(frozen=True, slots=True)
class TimeEntry:
    """A candidate work interval; `tentative` means the end was inferred."""

    start: time | None = None
    end: time | None = None
    tentative: bool = False

    @property
    def is_open(self):
        return self.start is not None and self.end is None

    @property
    def duration(self):
        if self.start is None or self.end is None:
            return None
        return TimeParser.span(self.start, self.end)


@dataclass(frozen=True, slots=True)
class DaySummary:
    date: date
    total_duration: timedelta = timedelta(0)
    has_tentative: bool = False
    has_incomplete: bool = False
    entries: tuple = field(default=(), compare=False)


@dataclass(frozen=True, slots=True)
class WeekSummary:
    """Monday-starting week; `days` holds only days with data, ascending."""

    week_start: date
    total_duration: timedelta
    days: tuple = ()

    @property
    def week_end(self):
        return self.week_start + timedelta(days=6)

    def contains(self, day):
        return self.week_start <= day <= self.week_end


@dataclass(frozen=True, slots=True)
class MonthlySummary:
    year: int
    month: int
    total_duration: timedelta

    @property
    def month_name(self):
        if 1 <= self.month <= len(MONTH_NAMES):
            return MONTH_NAMES[self.month - 1]
        return "Unknown"
