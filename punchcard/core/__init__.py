#punchcard\core\__init__.py

from .models import DaySummary, MonthlySummary, TimeEntry, WeekSummary
from .parser import TimesheetParser
from .aggregator import Aggregator

__all__ = [
    "TimeEntry",
    "DaySummary",
    "WeekSummary",
    "MonthlySummary",
    "TimesheetParser",
    "Aggregator",
]
