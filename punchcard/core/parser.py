"""
core/parser.py

TimesheetParser: the central engine that:
- Walks a day's log line by line
- Classifies each line (start / stop / work time / holiday / nothing)
- Pairs starts with stops, dropping superseded starts and flagging orphaned stops
- Infers a tentative end for work still in progress today
- Produces one DaySummary per day
"""

from datetime import datetime, timedelta

from punchcard.core.models import DaySummary, TimeEntry
from punchcard.infra.logger import LoggerFactory
from punchcard.policies.policies import Policies
from punchcard.utils.extractors import (ExplicitDuration, HolidayMarker,
                                        LineExtractor, NoMatch, StartMarker,
                                        StopMarker)
from punchcard.utils.textutils import TextTools

log = LoggerFactory.get_logger(__name__)


class TimesheetParser:
    """Turns the free text of one daily log into a DaySummary."""

    def __init__(self, policies=None, clock=None):
        self.policies = policies if policies else Policies()
        self.extractor = LineExtractor(self.policies)
        # clock() -> datetime; read once per parsed day
        self.clock = clock if clock else datetime.now

    def parse(self, raw_text, day):
        now = self.clock()
        is_today = now.date() == day

        entries = []
        current = None
        extra = timedelta(0)
        has_orphaned_stop = False

        log.debug("Parsing %s (today: %s)", day, is_today)

        for line_num, raw_line in TextTools.iter_lines(raw_text):
            kind = self.extractor.classify(raw_line)

            if isinstance(kind, StartMarker):
                if current is not None:
                    log.debug("Line %d: start at %s supersedes open start at %s",
                              line_num, kind.time, current.start)
                current = TimeEntry(start=kind.time)
                log.debug("Line %d: start work at %s (%r)", line_num, kind.time, TextTools.clean_text(raw_line))

            elif isinstance(kind, StopMarker):
                if current is None:
                    has_orphaned_stop = True
                    log.debug("Line %d: stop work at %s without a matching start (%r)",
                              line_num, kind.time, TextTools.clean_text(raw_line))
                    continue
                current = TimeEntry(start=current.start, end=kind.time)
                entries.append(current)
                log.debug("Line %d: stop work at %s (duration: %s)", line_num, kind.time, current.duration)
                current = None

            elif isinstance(kind, ExplicitDuration):
                extra += kind.duration
                log.debug("Line %d: work time %s (%r)", line_num, kind.duration, TextTools.clean_text(raw_line))

            elif isinstance(kind, HolidayMarker):
                extra += kind.credit
                log.debug("Line %d: holiday credit %s (%r)", line_num, kind.credit, TextTools.clean_text(raw_line))

            elif isinstance(kind, NoMatch) and kind.detail:
                log.debug("Line %d: %s", line_num, kind.detail)

        if current is not None:
            log.debug("End of file: open entry started at %s", current.start)
            entries.append(current)

        if is_today:
            self._apply_tentative(entries, now)

        has_tentative, has_incomplete = self.policies.compute_flags(entries, has_orphaned_stop, is_today)
        worked = sum((e.duration for e in entries if e.duration is not None), timedelta(0))
        total = worked + extra

        log.debug(
            "Parsed %s: %d entries, intervals %s, work time %s, total %s, tentative %s, incomplete %s",
            day, len(entries), worked, extra, total, has_tentative, has_incomplete,
        )

        return DaySummary(
            date=day,
            total_duration=total,
            has_tentative=has_tentative,
            has_incomplete=has_incomplete,
            entries=tuple(entries),
        )

    def _apply_tentative(self, entries, now):
        """Close the last entry, and only the last, if it is still open."""
        if not entries or not entries[-1].is_open:
            return
        last = entries[-1]
        end = self.policies.infer_tentative_end(last.start, now.time().replace(microsecond=0))
        entries[-1] = TimeEntry(start=last.start, end=end, tentative=True)
        log.debug("Tentative end %s for entry started at %s", end, last.start)

    def parse_corpus(self, days):
        """Parse (date, text) pairs; returns summaries sorted by date."""
        summaries = [self.parse(text, day) for day, text in days]
        summaries.sort(key=lambda s: s.date)
        return summaries
