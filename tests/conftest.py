"""Shared fixtures for building description file trees."""

from pathlib import Path
from typing import Any

import pytest

from tago.load_config import load_config


@pytest.fixture
def config() -> dict[str, Any]:
    """Provide the default configuration."""
    return load_config(None)


@pytest.fixture
def tree(tmp_path: Path) -> Path:
    """Build a small tree of described files.

    root/
        tago.tago           x: 1, owner: alice
        photo.jpg
        photo.tago          title: Sunset
        sub/
            tago.tago       x: 2
            leaf.txt
            notes.tago      self-describing file
    """
    root = tmp_path / "root"
    sub = root / "sub"
    sub.mkdir(parents=True)
    (root / "tago.tago").write_text("x: 1\nowner: alice\n", encoding="utf-8")
    (root / "photo.jpg").write_bytes(b"\xff\xd8\xff")
    (root / "photo.tago").write_text("title: Sunset\n", encoding="utf-8")
    (sub / "tago.tago").write_text("x: 2\n", encoding="utf-8")
    (sub / "leaf.txt").write_text("leaf", encoding="utf-8")
    (sub / "notes.tago").write_text("kind: notes\n", encoding="utf-8")
    return root
