#punchcard\patterns\patterns.py

import re

# ---------- Clock tokens ----------
# H:MM or HH:MM; range checks happen in TimeParser.to_time
_CLOCK = r"([0-9]{1,2}):([0-9]{2})"

# ---------- Start / stop markers ----------
START_WORK = re.compile(
    r"start(?:ed)?\s+work(?:ing)?(?:\s+at)?\s+" + _CLOCK,
    re.IGNORECASE,
)
STOP_WORK = re.compile(
    r"stop(?:ped)?\s+work(?:ing)?(?:\s+at)?\s+" + _CLOCK,
    re.IGNORECASE,
)

# ---------- Explicit durations ----------
WORK_TIME = re.compile(
    r"work\s+time\s+([0-9]+)\s+(minutes?|hours?)",
    re.IGNORECASE,
)

# ---------- Holidays / paid time off ----------
HOLIDAY_PHRASES = (
    r"stat(?:utory)?\s+holiday",
    r"pto",
    r"holiday\s+day",
)
HOLIDAY = re.compile(
    r"\b(?:" + "|".join(HOLIDAY_PHRASES) + r")\b",
    re.IGNORECASE,
)
