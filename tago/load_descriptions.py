"""Logic for reading and parsing a list of description files."""

from collections.abc import Iterable
from pathlib import Path

from tago.entry import Mapping
from tago.errors import DescriptionEncodingError
from tago.parse_description import parse_description
from tago.reporting import Reporter


def load_descriptions(paths: Iterable[Path], reporter: Reporter) -> list[Mapping]:
    """Read and parse each description file, preserving the order of ``paths``.

    Files that cannot be read or decoded are skipped with a warning.
    """
    mappings: list[Mapping] = []
    for path in paths:
        try:
            data = path.read_bytes()
        except OSError as e:
            reporter.warning(f"could not open: {e.strerror or e}", path)
            continue

        try:
            mappings.append(parse_description(data, path, reporter))
        except DescriptionEncodingError:
            reporter.warning("could not parse: file is not valid UTF-8", path)
    return mappings
