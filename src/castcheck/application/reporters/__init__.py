"""Reporters for analysis results.

PlainTextReporter and JSONReporter use stdlib only.
ConsoleReporter renders with rich.
"""

from castcheck.application.reporters._base import BaseReporter
from castcheck.application.reporters.console import ConsoleConfig, ConsoleReporter
from castcheck.application.reporters.json_reporter import JSONReporter
from castcheck.application.reporters.plain_text import PlainTextReporter

__all__ = [
    "BaseReporter",
    "PlainTextReporter",
    "JSONReporter",
    "ConsoleConfig",
    "ConsoleReporter",
]
