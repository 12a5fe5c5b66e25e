"""Data models for file digests."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FileHashes:
    """Hex digests of a file's contents."""

    sha256: str
    md5: str
