"""Reporters for check results."""

from dichecks.application.reporters._base import BaseReporter
from dichecks.application.reporters.console import ConsoleReporter
from dichecks.application.reporters.json_reporter import JSONReporter
from dichecks.application.reporters.plain_text import PlainTextReporter

__all__ = [
    "BaseReporter",
    "ConsoleReporter",
    "JSONReporter",
    "PlainTextReporter",
]
