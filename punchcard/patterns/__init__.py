from .patterns import (
    START_WORK,
    STOP_WORK,
    WORK_TIME,
    HOLIDAY,
    HOLIDAY_PHRASES,
)

__all__ = [
    "START_WORK",
    "STOP_WORK",
    "WORK_TIME",
    "HOLIDAY",
    "HOLIDAY_PHRASES",
]
