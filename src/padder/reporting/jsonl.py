from __future__ import annotations

import json
import logging
import sys
from typing import Any

from .base import Job, Reporter

# "<kind> summary: k=v ..." messages also produce a "summary" event
_SUMMARY_SUFFIX = " summary"


def _summary_fields(text: str) -> dict[str, str] | None:
    head, sep, tail = text.partition(":")
    kind = head.strip().lower()
    if not sep or not kind.endswith(_SUMMARY_SUFFIX):
        return None
    pairs = dict(token.split("=", 1) for token in tail.split() if "=" in token)
    return {"summary_type": kind[: -len(_SUMMARY_SUFFIX)], **pairs}


class JsonLinesReporter(Reporter):
    """One JSON object per line, for tools driving the CLI."""

    def __init__(self, stream=None):
        self.stream = stream or sys.stderr

    def _emit(self, event: str, **payload: Any) -> None:
        obj = {"event": event, **payload}
        self.stream.write(json.dumps(obj, sort_keys=True, default=str) + "\n")

    def message(self, level: int, text: str, **fields: Any) -> None:
        name = logging.getLevelName(level).lower()
        summary = _summary_fields(text) if level == logging.INFO else None
        if summary is not None:
            self._emit("summary", raw=text, **summary)
        self._emit("message", level=name, message=text, **fields)

    def section(self, title: str) -> None:
        self._emit("section", title=title)

    def job_started(self, job: Job) -> None:
        self._emit("job_start", name=job.name, total=job.total)

    def job_advanced(self, job: Job) -> None:
        self._emit("job_progress", name=job.name, done=job.done, **job.counters)

    def job_finished(self, job: Job) -> None:
        self._emit(
            "job_end",
            name=job.name,
            status="failed" if job.failed else "ok",
            done=job.done,
            total=job.total,
            elapsed_seconds=round(job.elapsed, 6),
            **job.counters,
        )
