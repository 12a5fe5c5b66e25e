"""Orchestration logic for looking up the metadata of a target path."""

import argparse
import logging
from typing import Any

from tago.compute_file_hashes import compute_file_hashes, render_file_hashes
from tago.errors import TagoError
from tago.load_descriptions import load_descriptions
from tago.merge_mappings import merge_mappings
from tago.path_resolver import PathResolver
from tago.render_mapping import render_mapping, render_mapping_yaml
from tago.reporting import Reporter

logger = logging.getLogger(__name__)

NOTHING_FOUND = "could not find any tago files"


def run_lookup(args: argparse.Namespace, config: dict[str, Any]) -> int:
    """Resolve, merge and print the description entries for ``args.target``."""
    resolver = PathResolver(config)
    try:
        result = resolver.resolve(args.target)
    except (TagoError, OSError) as e:
        logger.error("could not find any tago files: %s", e)
        return 1

    if result.error is not None:
        if not result.paths:
            logger.error("could not find any tago files: %s", result.error)
            return 1
        logger.warning("error while finding tago files: %s", result.error)

    if not result.paths:
        print(NOTHING_FOUND)
        return 0

    reporter = Reporter()
    mappings = load_descriptions(result.paths, reporter)
    merged = merge_mappings(mappings)

    presenter = config["presenter"]
    if presenter["format"] == "yaml":
        text = render_mapping_yaml(merged)
    else:
        text = render_mapping(merged, indent=presenter["indent"])

    print()
    print(text, end="")
    return 0


def run_check_hash(args: argparse.Namespace) -> int:
    """Print the SHA-256 and MD5 digests of ``args.target``."""
    try:
        hashes = compute_file_hashes(args.target)
    except OSError as e:
        logger.error("could not open %s: %s", args.target, e)
        return 1

    print()
    print(render_file_hashes(hashes))
    return 0
