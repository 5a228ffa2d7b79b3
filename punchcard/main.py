#main.py
"""

CLI entrypoint:
- Scans a directory of YYYY-MM-DD.md daily logs
- Parses each day into a DaySummary
- Groups days into weeks and months
- Prints the full report, or a one-line status bar summary

Exit codes:
 0 = success
 1 = no dated log files found
 2 = input error (e.g., directory missing, unreadable file, bad --now)
"""

import argparse
import logging
import sys

from punchcard.core.aggregator import Aggregator
from punchcard.core.parser import TimesheetParser
from punchcard.infra.constants import DEFAULT_WEEKLY_HOURS
from punchcard.infra.logger import LoggerFactory
from punchcard.pdio.reader import CorpusReader
from punchcard.pdio.writer import ReportWriter
from punchcard.utils.timeparse import TimeParser

log = LoggerFactory.get_logger("punchcard.main")


def _weekly_hours(value):
    try:
        hours = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}")
    if hours < 0 or hours != hours:
        raise argparse.ArgumentTypeError(f"must be a non-negative number: {value!r}")
    return hours


def build_arg_parser():
    p = argparse.ArgumentParser(
        prog="punchcard",
        description="Summarize work time recorded in daily markdown logs.",
    )
    p.add_argument("directory", nargs="?", default=".",
                   help="Directory containing YYYY-MM-DD.md files (default: current directory)")
    p.add_argument("--weekly-hours", type=_weekly_hours, default=DEFAULT_WEEKLY_HOURS,
                   help="Expected weekly work hours (default: %(default)s)")
    p.add_argument("--debug", action="store_true",
                   help="Show per-line parsing diagnostics on stderr")
    p.add_argument("--summarize", action="store_true",
                   help="Show compact current day and week summary for a status bar")
    p.add_argument("--now", metavar="TIMESTAMP",
                   help="Treat TIMESTAMP (e.g. '2025-08-25 14:30') as the current time")
    return p


def main(argv=None):
    args = build_arg_parser().parse_args(argv)

    if args.debug:
        LoggerFactory.set_level(logging.DEBUG)

    clock = None
    if args.now:
        try:
            fixed = TimeParser.parse_clock(args.now)
        except ValueError as e:
            log.error(str(e))
            return 2
        clock = lambda: fixed  # noqa: E731

    parser = TimesheetParser(clock=clock)
    try:
        summaries = parser.parse_corpus(CorpusReader(args.directory).iter_days())
    except (OSError, UnicodeDecodeError) as e:
        log.error(str(e))
        return 2

    if not summaries:
        log.error("No daily log files found in %s", args.directory)
        return 1

    today = parser.clock().date()
    weeks = Aggregator.group_by_week(summaries)
    writer = ReportWriter(weekly_hours=args.weekly_hours)

    if args.summarize:
        writer.write(writer.render_status_bar(summaries, weeks, today))
        return 0

    months = Aggregator.group_by_month(summaries)
    writer.write(writer.render_report(weeks, months, today))
    log.info("Summarized %d day(s) across %d week(s)", len(summaries), len(weeks))
    return 0


def run():
    sys.exit(main(sys.argv[1:]))


if __name__ == "__main__":
    run()
