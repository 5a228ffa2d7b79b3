"""Shared fixtures for the punchcard test suite."""

from datetime import datetime

import pytest

from punchcard.core.parser import TimesheetParser


def fixed_clock(moment):
    return lambda: moment


@pytest.fixture
def parser():
    """Parser whose clock is pinned to 2025-08-25 17:30."""
    return TimesheetParser(clock=fixed_clock(datetime(2025, 8, 25, 17, 30)))


@pytest.fixture
def parser_at():
    """Factory for parsers pinned to an arbitrary moment."""

    def make(moment):
        return TimesheetParser(clock=fixed_clock(moment))

    return make


@pytest.fixture
def corpus(tmp_path):
    """Write {filename: text} into a temporary directory and return its path."""

    def make(files):
        for name, text in files.items():
            (tmp_path / name).write_text(text, encoding="utf-8")
        return tmp_path

    return make
