#punchcard\pdio\__init__.py

from .reader import CorpusReader
from .writer import ReportWriter

__all__ = [
    "CorpusReader",
    "ReportWriter",
]
