"""
policies/policies.py

Business rules for the punchcard project.

Encapsulates:
- Holiday / PTO credit (default 8h per line)
- Tentative end inference for the current day (capped at 8h)
- Tentative / incomplete day flags
- Weekly shortfall against a target
"""

from datetime import timedelta

from punchcard.infra.constants import HOLIDAY_CREDIT_HOURS, TENTATIVE_CAP_HOURS
from punchcard.utils.timeparse import TimeParser


class Policies:
    """
    Stateful policy container.

    Parameters (all optional):
      holiday_credit_hours: flat credit for each holiday line (default 8)
      tentative_cap_hours: longest inferred span for an open entry today (default 8)
    """

    def __init__(
        self,
        holiday_credit_hours=HOLIDAY_CREDIT_HOURS,
        tentative_cap_hours=TENTATIVE_CAP_HOURS,
    ):
        self.holiday_credit_hours = float(holiday_credit_hours)
        self.tentative_cap_hours = float(tentative_cap_hours)

    @property
    def holiday_credit(self):
        return timedelta(hours=self.holiday_credit_hours)

    @property
    def tentative_cap(self):
        return timedelta(hours=self.tentative_cap_hours)

    # ----- Tentative inference -----
    def infer_tentative_end(self, start, now):
        """
        End time for an entry still open on the current day.
        The lesser of `now` and start + cap, both measured from `start`
        with midnight wraparound.
        """
        elapsed = TimeParser.span(start, now)
        if elapsed > self.tentative_cap:
            return TimeParser.shift(start, self.tentative_cap)
        return now

    # ----- Day flags -----
    @staticmethod
    def compute_flags(entries, has_orphaned_stop, is_today):
        """
        Returns (has_tentative, has_incomplete).
        On the current day an open entry only counts as incomplete when
        inference left it untouched.
        """
        has_tentative = any(e.tentative for e in entries)
        if is_today:
            dangling = any(e.is_open and not e.tentative for e in entries)
        else:
            dangling = any(e.is_open for e in entries)
        return has_tentative, dangling or bool(has_orphaned_stop)

    # ----- Weekly target -----
    @staticmethod
    def shortfall(total, target_hours):
        """Missing time against target_hours in whole minutes; None when met."""
        actual_hours = total.total_seconds() // 60 / 60
        if actual_hours >= target_hours:
            return None
        return timedelta(minutes=round((target_hours - actual_hours) * 60))
