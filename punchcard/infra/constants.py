#punchcard\infra\constants.py

"""
infra/constants.py

Immutable project-wide constants in a frozen dataclass.
Provides a singleton `CONSTANTS` plus module-level re-exports.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Constants:
    """Immutable container for shared constants (no imports, no side effects)."""

    # Flat credit for each holiday / PTO line
    holiday_credit_hours = 8

    # Longest span a forgotten stop on the current day may be stretched to
    tentative_cap_hours = 8

    # Default weekly target used for shortfall reporting
    default_weekly_hours = 40.0

    # Corpus layout: one file per day named YYYY-MM-DD<suffix>
    corpus_suffix = ".md"
    file_date_format = "%Y-%m-%d"

    # Daily section of the report only shows this many trailing days
    report_window_days = 14

    month_names = [
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ]

    # Report flag markers
    tentative_marker = "*"
    incomplete_marker = "E!"


# Singleton instance
CONSTANTS = Constants()

# Convenience re-exports
HOLIDAY_CREDIT_HOURS = CONSTANTS.holiday_credit_hours
TENTATIVE_CAP_HOURS = CONSTANTS.tentative_cap_hours
DEFAULT_WEEKLY_HOURS = CONSTANTS.default_weekly_hours
CORPUS_SUFFIX = CONSTANTS.corpus_suffix
FILE_DATE_FORMAT = CONSTANTS.file_date_format
REPORT_WINDOW_DAYS = CONSTANTS.report_window_days
MONTH_NAMES = CONSTANTS.month_names
TENTATIVE_MARKER = CONSTANTS.tentative_marker
INCOMPLETE_MARKER = CONSTANTS.incomplete_marker
