from __future__ import annotations

import logging
import sys
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Optional

__all__ = [
    "Job",
    "Reporter",
    "job",
    "level_label",
    "get_reporter",
    "set_reporter",
]

# counters shown on a finished job line, in display order
JOB_COUNTERS = ("records", "bytes", "overflows")

_LABELS = (
    (logging.ERROR, "ERROR"),
    (logging.WARNING, "WARN"),
    (logging.INFO, "INFO"),
)


def level_label(level: int) -> str:
    for threshold, label in _LABELS:
        if level >= threshold:
            return label
    return "DEBUG"


@dataclass(slots=True)
class Job:
    """A batch of work with a known or unknown number of items."""

    name: str
    total: Optional[int] = None
    done: int = 0
    failed: bool = False
    counters: Dict[str, Any] = field(default_factory=dict)
    started: float = field(default_factory=time.monotonic)
    finished: Optional[float] = None
    reporter: Optional["Reporter"] = field(default=None, repr=False)

    @property
    def elapsed(self) -> float:
        end = self.finished if self.finished is not None else time.monotonic()
        return end - self.started

    def advance(self, step: int = 1, **counters: Any) -> None:
        self.done += step
        self.counters.update(counters)
        if self.reporter is not None:
            self.reporter.job_advanced(self)

    def summary(self) -> str:
        outcome = "failed" if self.failed else "done"
        progress = f" {self.done}/{self.total}" if self.total is not None else ""
        shown = [f"{k}={self.counters[k]}" for k in JOB_COUNTERS if k in self.counters]
        tail = f" [{' '.join(shown)}]" if shown else ""
        return f"{self.name}{progress} {outcome} in {self.elapsed:.2f}s{tail}"


class Reporter:
    """Sink for padder's messages and job events.

    ``message`` receives stdlib logging levels; the remaining hooks are
    optional.
    """

    def message(self, level: int, text: str, **fields: Any) -> None:
        raise NotImplementedError

    def status(self, text: str, **fields: Any) -> None:
        self.message(logging.INFO, text, **fields)

    def warning(self, text: str, **fields: Any) -> None:
        self.message(logging.WARNING, text, **fields)

    def error(self, text: str, **fields: Any) -> None:
        self.message(logging.ERROR, text, **fields)

    def section(self, title: str) -> None:
        pass

    def job_started(self, job: Job) -> None:
        pass

    def job_advanced(self, job: Job) -> None:
        pass

    def job_finished(self, job: Job) -> None:
        pass

    def flush(self) -> None:
        pass


_ACTIVE_REPORTER: Reporter | None = None


def set_reporter(rep: Reporter) -> None:
    global _ACTIVE_REPORTER
    _ACTIVE_REPORTER = rep


def get_reporter() -> Reporter:
    global _ACTIVE_REPORTER
    if _ACTIVE_REPORTER is None:
        from .plain import PlainReporter

        _ACTIVE_REPORTER = PlainReporter(stream=sys.stderr)
    return _ACTIVE_REPORTER


@contextmanager
def job(name: str, total: int | None = None) -> Iterator[Job]:
    """Report a batch of work; the job fails if the block raises."""
    rep = get_reporter()
    current = Job(name, total, reporter=rep)
    rep.job_started(current)
    try:
        yield current
    except Exception:
        current.failed = True
        raise
    finally:
        current.finished = time.monotonic()
        rep.job_finished(current)
