"""Utility for splitting a file name into stem and extension."""

import os


def split_name(path: str) -> tuple[str, str]:
    """Return the base name of ``path`` split into (stem, extension).

    The extension starts at the last dot and keeps it, so dotfiles such as
    ``.tago`` have an empty stem. It is empty when the name has no dot.
    """
    name = os.path.basename(path)
    stem, dot, ext = name.rpartition(".")
    if not dot:
        return name, ""
    return stem, dot + ext
