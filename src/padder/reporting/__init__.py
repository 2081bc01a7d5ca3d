"""Reporter backends for padder's CLI and record formatting.

``get_reporter()`` returns the active backend (plain text on stderr unless
``set_reporter`` installed another one).
"""

from .base import Job, Reporter, get_reporter, job, set_reporter
from .jsonl import JsonLinesReporter
from .plain import PlainReporter
from .rich_reporter import RichReporter
from .silent import SilentReporter

REPORTERS = {
    "plain": PlainReporter,
    "rich": RichReporter,
    "json": JsonLinesReporter,
    "silent": SilentReporter,
}

__all__ = [
    "Job",
    "Reporter",
    "REPORTERS",
    "get_reporter",
    "set_reporter",
    "job",
    "PlainReporter",
    "RichReporter",
    "JsonLinesReporter",
    "SilentReporter",
]
