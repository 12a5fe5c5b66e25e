"""Data model for a single key-value entry read from a description file."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Entry:
    """Represents one key-value pair and the description file it came from."""

    key: str  # always lower-cased
    value: str  # may contain embedded newlines (block values)
    source: Path


Mapping = dict[str, Entry]
