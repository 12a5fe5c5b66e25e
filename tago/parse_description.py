"""Logic for parsing the key-value text of a description file.

The format is line oriented::

    // a comment
    title: Holiday photos
    notes: [
        first line
        second line
    ]

Keys are case-folded, every line is trimmed, and lines that are neither
comments nor ``key: value`` pairs are ignored.
"""

from pathlib import Path

from tago.entry import Entry, Mapping
from tago.errors import DescriptionEncodingError
from tago.reporting import Reporter

COMMENT_PREFIX = "//"
BLOCK_OPEN = "["
BLOCK_CLOSE = "]"


def parse_description(
    data: bytes, source: Path, reporter: Reporter | None = None
) -> Mapping:
    """Parse description file bytes into a mapping of lower-cased key to Entry.

    A key set twice in the same file keeps its last value. A block left open at
    end of input is dropped and reported as a warning.
    """
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as e:
        msg = f"{source} is not valid UTF-8"
        raise DescriptionEncodingError(msg) from e

    mapping: Mapping = {}

    block_key: str | None = None
    block_value = ""

    for raw_line in text.replace("\r\n", "\n").split("\n"):
        line = raw_line.strip()

        if block_key is not None:
            if line == BLOCK_CLOSE:
                mapping[block_key] = Entry(block_key, block_value, source)
                block_key = None
                block_value = ""
            elif block_value:
                block_value += "\n" + line
            else:
                # leading blank lines are dropped, interior ones kept
                block_value = line
            continue

        if not line or line.startswith(COMMENT_PREFIX):
            continue

        key, sep, remainder = line.partition(":")
        if not sep:
            continue
        key = key.strip().lower()
        remainder = remainder.strip()

        if remainder == BLOCK_OPEN:
            block_key = key
            block_value = ""
        else:
            mapping[key] = Entry(key, remainder, source)

    if block_key is not None and reporter is not None:
        reporter.warning(f"unterminated block for key '{block_key}' ignored", source)

    return mapping
