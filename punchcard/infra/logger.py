#punchcard\infra\logger.py
"""
infra/logger.py

Centralized logger factory for the punchcard project.

Env controls:
- PUNCHCARD_LOGLEVEL: logging level (default: WARNING)
- PUNCHCARD_LOGFILE: optional log file path

Handlers live on the package root logger ("punchcard"); module loggers
propagate to it. Idempotent: the root is configured once per process.
"""

import logging
import os
import sys

ROOT_LOGGER_NAME = "punchcard"


class _LoggerConfig:
    """Internal config derived from environment variables (no dataclass, no type hints)."""

    def __init__(self, level_name="WARNING", logfile=None):
        self.level_name = level_name
        self.logfile = logfile

    @classmethod
    def from_env(cls):
        level = os.getenv("PUNCHCARD_LOGLEVEL", "WARNING").strip().upper()
        logfile = os.getenv("PUNCHCARD_LOGFILE")
        logfile = logfile.strip() if logfile else None
        return cls(level_name=level, logfile=logfile)

    @property
    def level(self):
        # Map string to logging level, fallback to WARNING
        level = getattr(logging, self.level_name, None)
        return level if isinstance(level, int) else logging.WARNING


class LoggerFactory:
    """
    Provides loggers under the configured "punchcard" root.

    Usage:
        from punchcard.infra import LoggerFactory
        log = LoggerFactory.get_logger(__name__)
    """

    _formatter = logging.Formatter("[%(levelname)s] %(message)s")
    _configured = False

    @classmethod
    def _configure_root(cls):
        root = logging.getLogger(ROOT_LOGGER_NAME)
        cfg = _LoggerConfig.from_env()

        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setFormatter(cls._formatter)
        root.addHandler(stderr_handler)

        if cfg.logfile:
            try:
                file_handler = logging.FileHandler(cfg.logfile, encoding="utf-8")
                file_handler.setFormatter(cls._formatter)
                root.addHandler(file_handler)
            except OSError as e:
                root.error("Failed to set up file logging at %s: %s", cfg.logfile, e)

        root.setLevel(cfg.level)
        root.propagate = False
        cls._configured = True

    @classmethod
    def get_logger(cls, name):
        if not cls._configured:
            cls._configure_root()
        if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
            name = ROOT_LOGGER_NAME + "." + name
        return logging.getLogger(name)

    @classmethod
    def set_level(cls, level):
        """Override the root level, e.g. DEBUG for diagnostic runs."""
        if not cls._configured:
            cls._configure_root()
        logging.getLogger(ROOT_LOGGER_NAME).setLevel(level)
