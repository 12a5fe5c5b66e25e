"""Logic for computing content hashes of a file."""

import hashlib
from pathlib import Path

from tago.file_hashes import FileHashes

CHUNK_SIZE = 1 << 16


def compute_file_hashes(path: str | Path) -> FileHashes:
    """Compute SHA-256 and MD5 digests of the file at ``path``."""
    sha256 = hashlib.sha256()
    md5 = hashlib.md5()
    with open(path, "rb") as f:
        while chunk := f.read(CHUNK_SIZE):
            sha256.update(chunk)
            md5.update(chunk)
    return FileHashes(sha256=sha256.hexdigest(), md5=md5.hexdigest())


def render_file_hashes(hashes: FileHashes) -> str:
    """Render digests in the same indented layout as description output."""
    return "\n".join(
        [
            "hashes:",
            f"    sha256: {hashes.sha256}",
            f"    md5   : {hashes.md5}",
        ]
    )
