"""
pdio/writer.py
Plain-text report renderer for day / week / month summaries.

Responsibilities:
- Format durations as "8h 30m" with tentative / incomplete markers
- Render the full three-section report
- Render the one-line status bar summary
- Write to stdout (or a given stream)
"""

import sys
from datetime import timedelta

from dateutil.relativedelta import relativedelta

from punchcard.core.aggregator import Aggregator
from punchcard.infra.constants import (DEFAULT_WEEKLY_HOURS, INCOMPLETE_MARKER,
                                       REPORT_WINDOW_DAYS, TENTATIVE_MARKER)


class ReportWriter:
    """Text report renderer with weekly target support."""

    def __init__(self, weekly_hours=DEFAULT_WEEKLY_HOURS):
        self.weekly_hours = float(weekly_hours)

    # ----- Durations -----
    @staticmethod
    def format_duration(duration):
        total_minutes = int(duration.total_seconds() // 60)
        hours, minutes = divmod(total_minutes, 60)
        return f"{hours}h {minutes:02d}m"

    @classmethod
    def format_duration_with_flags(cls, duration, has_tentative, has_incomplete):
        flags = []
        if has_tentative:
            flags.append(TENTATIVE_MARKER)
        if has_incomplete:
            flags.append(INCOMPLETE_MARKER)
        return " ".join([cls.format_duration(duration)] + flags)

    # ----- Full report -----
    def render_report(self, weeks, months, today):
        since = today - relativedelta(days=REPORT_WINDOW_DAYS)
        lines = ["Daily Summary (Last 2 Weeks):", "=============================="]
        for week in weeks:
            for day in week.days:
                if day.date < since:
                    continue
                if day.total_duration <= timedelta(0) and not day.has_incomplete:
                    continue
                lines.append("{} {:3} - {}".format(
                    day.date.isoformat(),
                    day.date.strftime("%a"),
                    self.format_duration_with_flags(day.total_duration, day.has_tentative, day.has_incomplete),
                ))

        lines += ["", "Monthly Summary:", "================"]
        for month in months:
            if month.total_duration > timedelta(0):
                lines.append(f"{month.month_name} {month.year}: {self.format_duration(month.total_duration)}")

        lines += ["", "Weekly Summary:", "==============="]
        for week in weeks:
            if week.total_duration <= timedelta(0):
                continue
            line = f"Week of {week.week_start} - {week.week_end}: {self.format_duration(week.total_duration)}"
            short = Aggregator.shortfall(week.total_duration, self.weekly_hours)
            if short is not None:
                line += f" [{self.format_duration(short)} short]"
            lines.append(line)
        return "\n".join(lines) + "\n"

    # ----- Status bar -----
    def render_status_bar(self, summaries, weeks, today):
        day = next((s for s in summaries if s.date == today), None)
        week = next((w for w in weeks if w.contains(today)), None)

        if day is not None:
            day_str = self.format_duration_with_flags(day.total_duration, day.has_tentative, day.has_incomplete)
        else:
            day_str = "No data"

        if week is not None:
            week_str = self.format_duration(week.total_duration)
            if Aggregator.shortfall(week.total_duration, self.weekly_hours) is not None:
                missing = self.weekly_hours - week.total_duration.total_seconds() // 60 / 60
                week_str += f" ({missing:.1f}h short)"
        else:
            week_str = "No data"

        return f"Today: {day_str} | Week: {week_str}"

    def write(self, text, stream=None):
        out = stream if stream is not None else sys.stdout
        out.write(text if text.endswith("\n") else text + "\n")
        return out
