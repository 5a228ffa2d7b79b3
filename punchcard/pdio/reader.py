"""
pdio/reader.py
Directory scanner for the daily-log corpus.

Responsibilities:
- Keep only files named YYYY-MM-DD<suffix>
- Skip names that are not real calendar dates
- Read file text (UTF-8); I/O errors propagate to the caller
"""

import re
from datetime import datetime
from pathlib import Path

from punchcard.infra.constants import CORPUS_SUFFIX, FILE_DATE_FORMAT
from punchcard.infra.logger import LoggerFactory

log = LoggerFactory.get_logger(__name__)

_DATE_STEM = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


class CorpusReader:
    """Yields (date, text) for every dated log file in a directory."""

    def __init__(self, directory, suffix=CORPUS_SUFFIX):
        self.directory = Path(directory)
        self.suffix = suffix

    @staticmethod
    def date_from_name(path):
        """Calendar date encoded in the file stem, or None."""
        stem = Path(path).stem
        if not _DATE_STEM.fullmatch(stem):
            return None
        try:
            return datetime.strptime(stem, FILE_DATE_FORMAT).date()
        except ValueError:
            return None

    def iter_days(self):
        if not self.directory.exists():
            raise FileNotFoundError(f"Directory not found: {self.directory}")
        if not self.directory.is_dir():
            raise NotADirectoryError(f"Not a directory: {self.directory}")

        for path in sorted(self.directory.iterdir()):
            if path.suffix != self.suffix or not path.is_file():
                continue
            day = self.date_from_name(path)
            if day is None:
                log.debug("Skipping %s: name is not a date", path.name)
                continue
            yield day, path.read_text(encoding="utf-8")
