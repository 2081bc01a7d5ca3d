from __future__ import annotations

from typing import Any

from .base import Reporter


class SilentReporter(Reporter):
    def message(self, level: int, text: str, **fields: Any) -> None:
        pass
