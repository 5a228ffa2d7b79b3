#punchcard\utils\extractors.py

from dataclasses import dataclass
from datetime import time, timedelta

from punchcard.patterns.patterns import HOLIDAY, START_WORK, STOP_WORK, WORK_TIME
from punchcard.policies.policies import Policies
from punchcard.utils.timeparse import TimeParser


# ---------- Line classifications ----------
@dataclass(frozen=True, slots=True)
class StartMarker:
    time: time


@dataclass(frozen=True, slots=True)
class StopMarker:
    time: time


@dataclass(frozen=True, slots=True)
class ExplicitDuration:
    duration: timedelta


@dataclass(frozen=True, slots=True)
class HolidayMarker:
    credit: timedelta


@dataclass(frozen=True, slots=True)
class NoMatch:
    # Set when a marker was recognised but its value was unusable
    detail: str = ""


class LineExtractor:
    """
    Classify one line of a daily log.

    Checks run in a fixed priority (start, stop, work time, holiday) and the
    first pattern that matches decides the result, so every line maps to
    exactly one variant. A recognised marker with a bad value becomes NoMatch.
    """

    def __init__(self, policies=None):
        self.policies = policies if policies else Policies()

    def classify(self, line):
        m = START_WORK.search(line)
        if m:
            return self._clock_marker(StartMarker, "start work", m)

        m = STOP_WORK.search(line)
        if m:
            return self._clock_marker(StopMarker, "stop work", m)

        m = WORK_TIME.search(line)
        if m:
            return self._work_time(m)

        if HOLIDAY.search(line):
            return HolidayMarker(credit=self.policies.holiday_credit)

        return NoMatch()

    @staticmethod
    def _clock_marker(kind, label, m):
        hours, minutes = m.group(1), m.group(2)
        t = TimeParser.to_time(hours, minutes)
        if t is None:
            return NoMatch(detail=f"Invalid time format {hours}:{minutes} in {label} entry")
        return kind(time=t)

    @staticmethod
    def _work_time(m):
        amount, unit = m.group(1), m.group(2).lower()
        try:
            if unit.startswith("hour"):
                duration = timedelta(hours=int(amount))
            else:
                duration = timedelta(minutes=int(amount))
        except (OverflowError, ValueError):
            return NoMatch(detail=f"Work time {amount} {unit} is out of range")
        return ExplicitDuration(duration=duration)
