"""Data models for description file resolution results."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class ResolutionResult:
    """Represents the description files found for a target, nearest first.

    When a directory listing fails part way through the walk, ``paths`` holds
    everything discovered before the failure and ``error`` holds the failure.
    """

    target: Path
    paths: list[Path] = field(default_factory=list)
    error: OSError | None = None

    @property
    def complete(self) -> bool:
        """Whether the walk reached the filesystem root without errors."""
        return self.error is None
