#punchcard\utils\textutils.py

import re


class TextTools:
    """Stateless text utilities."""

    @staticmethod
    def clean_text(s):
        """Normalize dashes to '-', drop markdown bullets and collapse whitespace."""
        s = s.replace("–", "-").replace("—", "-")
        s = re.sub(r"^\s*(?:[-*+]|\d+\.)\s+", "", s)
        return re.sub(r"[ \t]+", " ", s.strip())

    @staticmethod
    def iter_lines(raw_text):
        """Yield (line_number, line) pairs, 1-indexed, for any newline style."""
        for idx, line in enumerate(raw_text.splitlines(), start=1):
            yield idx, line
