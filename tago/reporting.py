"""Collects diagnostics produced while loading and parsing description files."""

import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Diagnostic:
    """A single warning tied to an optional source file."""

    level: int
    message: str
    source: Path | None = None


class Reporter:
    """Records diagnostics for the caller and forwards them to the logger."""

    def __init__(self) -> None:
        self.diagnostics: list[Diagnostic] = []

    def warning(self, message: str, source: Path | None = None) -> None:
        self._add(logging.WARNING, message, source)

    @property
    def warnings(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.level == logging.WARNING]

    def _add(self, level: int, message: str, source: Path | None) -> None:
        self.diagnostics.append(Diagnostic(level, message, source))
        if source is None:
            logger.log(level, "%s", message)
        else:
            logger.log(level, "%s: %s", source, message)
