from __future__ import annotations

import os
from typing import Any, Dict, List

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
)

from .base import Job, Reporter, level_label

_STYLES = {
    "ERROR": "bold red",
    "WARN": "yellow",
    "INFO": "green",
    "DEBUG": "cyan",
}


class RichReporter(Reporter):
    """Progress bars for jobs, styled lines for messages."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console(
            stderr=True, highlight=False, soft_wrap=False
        )
        # PADDER_PROGRESS_TRANSIENT=1 clears bars and prints summaries after
        self._transient = os.getenv(
            "PADDER_PROGRESS_TRANSIENT", "0"
        ).lower() in ("1", "true", "yes")
        self.progress: Progress | None = None
        self._bars: Dict[int, TaskID] = {}
        self._deferred: List[str] = []

    def _ensure_progress(self) -> Progress:
        if self.progress is None:
            self.progress = Progress(
                SpinnerColumn(spinner_name="dots"),
                TextColumn("{task.description}"),
                BarColumn(bar_width=None),
                TextColumn("{task.completed}/{task.total}"),
                TimeElapsedColumn(),
                transient=self._transient,
                console=self.console,
                expand=True,
            )
            self.progress.start()
        return self.progress

    def message(self, level: int, text: str, **fields: Any) -> None:
        label = level_label(level)
        self.console.print(f"[{_STYLES[label]}]{label}[/]: {text}")

    def section(self, title: str) -> None:
        self.console.rule(title)

    def job_started(self, job: Job) -> None:
        if job.total is None:
            self.console.rule(job.name)
            return
        bar = self._ensure_progress().add_task(job.name, total=job.total)
        self._bars[id(job)] = bar

    def job_advanced(self, job: Job) -> None:
        bar = self._bars.get(id(job))
        if bar is not None and self.progress is not None:
            self.progress.update(bar, completed=job.done)

    def job_finished(self, job: Job) -> None:
        self.job_advanced(job)
        self._bars.pop(id(job), None)
        if self._transient:
            self._deferred.append(job.summary())
        else:
            self.console.print(job.summary())
        if not self._bars:
            self.flush()

    def flush(self) -> None:
        if self.progress is None:
            return
        try:
            self.progress.stop()
        finally:
            self.progress = None
            self._bars.clear()
            if self._deferred:
                self.console.print("\n".join(self._deferred))
                self._deferred.clear()
