"""Utility for recognizing description files by extension."""

from tago.split_name import split_name


def is_description_file(path: str, extension: str = ".tago") -> bool:
    """Check whether ``path`` has the description file extension (any case)."""
    _, ext = split_name(path)
    return ext.lower() == extension.lower()
