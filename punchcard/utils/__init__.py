#punchcard\utils\__init__.py

from .timeparse import TimeParser
from .textutils import TextTools

__all__ = [
    "TimeParser",
    "TextTools",
]
