#punchcard\infra\__init__.py

from .constants import (CONSTANTS, CORPUS_SUFFIX, DEFAULT_WEEKLY_HOURS,
                        FILE_DATE_FORMAT, HOLIDAY_CREDIT_HOURS,
                        INCOMPLETE_MARKER, MONTH_NAMES, REPORT_WINDOW_DAYS,
                        TENTATIVE_CAP_HOURS, TENTATIVE_MARKER)
from .logger import LoggerFactory

__all__ = [
    "LoggerFactory",
    "CONSTANTS",
    "HOLIDAY_CREDIT_HOURS",
    "TENTATIVE_CAP_HOURS",
    "DEFAULT_WEEKLY_HOURS",
    "CORPUS_SUFFIX",
    "FILE_DATE_FORMAT",
    "REPORT_WINDOW_DAYS",
    "MONTH_NAMES",
    "TENTATIVE_MARKER",
    "INCOMPLETE_MARKER",
]
