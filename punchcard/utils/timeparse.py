#punchcard\utils\timeparse.py
"""
Time-of-day arithmetic implemented as a class.
- TimeParser.to_time(hours, minutes)
- TimeParser.span(start, end)
- TimeParser.shift(t, delta)
- TimeParser.parse_clock(text)
"""

from datetime import date, datetime, time, timedelta

from dateutil import parser as dateparser

ONE_DAY = timedelta(days=1)


class TimeParser:
    """Clock token → time conversion and wraparound-aware interval math."""

    @staticmethod
    def to_time(hours, minutes):
        """Return time(hours, minutes), or None when either field is out of range."""
        try:
            hh, mm = int(hours), int(minutes)
        except (TypeError, ValueError):
            return None
        if not (0 <= hh <= 23 and 0 <= mm <= 59):
            return None
        return time(hh, mm)

    @staticmethod
    def _offset(t):
        return timedelta(hours=t.hour, minutes=t.minute, seconds=t.second)

    @classmethod
    def span(cls, start, end):
        """
        Elapsed time from start to end.
        end < start is read as crossing midnight: 24h - (start - end).
        """
        s, e = cls._offset(start), cls._offset(end)
        if e >= s:
            return e - s
        return ONE_DAY - (s - e)

    @classmethod
    def shift(cls, t, delta):
        """Add delta to a time of day, wrapping past midnight."""
        total = (cls._offset(t) + delta) % ONE_DAY
        return (datetime.combine(date.min, time()) + total).time()

    @staticmethod
    def parse_clock(text, default=None):
        """
        Parse a user-supplied timestamp ("2025-08-25 14:30", "14:30", ...).
        Missing date parts are taken from `default` (or now). Raises ValueError.
        """
        base = default if default is not None else datetime.now()
        try:
            return dateparser.parse(text, default=base.replace(second=0, microsecond=0))
        except (OverflowError, ValueError) as e:
            raise ValueError(f"Unrecognised timestamp: {text!r}") from e
