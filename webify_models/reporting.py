"""Status reporting sinks for per-asset progress messages."""

from __future__ import annotations

import logging
from typing import Protocol


class ProgressReporter(Protocol):
    """Receives short textual status updates from each pipeline stage."""

    def set_prefix(self, prefix: str) -> None: ...

    def set_message(self, message: str) -> None: ...


class LoggingProgress:
    """Forward status updates to the ``webify_models.progress`` logger."""

    def __init__(self) -> None:
        self.prefix = ""
        self._logger = logging.getLogger("webify_models.progress")

    def set_prefix(self, prefix: str) -> None:
        self.prefix = prefix

    def set_message(self, message: str) -> None:
        self._logger.info("[%s] %s", self.prefix, message)
