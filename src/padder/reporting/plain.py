from __future__ import annotations

import sys
from typing import Any

from .base import Job, Reporter, level_label

_COLORS = {"ERROR": "31", "WARN": "33", "INFO": "32", "DEBUG": "36"}


class PlainReporter(Reporter):
    """``LEVEL: text`` lines, colored when the stream is a terminal."""

    def __init__(self, stream=None, use_color: bool | None = None):
        self.stream = stream or sys.stderr
        if use_color is None:
            use_color = getattr(self.stream, "isatty", lambda: False)()
        self.use_color = use_color

    def message(self, level: int, text: str, **fields: Any) -> None:
        label = level_label(level)
        if self.use_color:
            label = f"\x1b[{_COLORS[label]}m{label}\x1b[0m"
        self.stream.write(f"{label}: {text}\n")

    def section(self, title: str) -> None:
        self.stream.write(f"\n[{title}]\n")

    def job_finished(self, job: Job) -> None:
        self.stream.write(f"{job.summary()}\n")
