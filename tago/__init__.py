"""Resolve and merge metadata from .tago description files."""

__version__ = "0.1.0"
