"""Command-line entry point for looking up file and directory metadata.

Metadata lives in ``.tago`` sidecar files next to the target (``photo.tago``
for ``photo.jpg``) and in ``tago.tago`` files that apply to a whole directory
tree. Closer files override farther ones.
"""

import argparse
import logging
import sys

from tago.errors import ConfigError
from tago.load_config import load_config
from tago.run_lookup import run_check_hash, run_lookup

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(levelname)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the ``tago`` command."""
    ap = argparse.ArgumentParser(
        prog="tago",
        description="Show the metadata that .tago description files attach to a path.",
    )
    ap.add_argument(
        "target",
        nargs="?",
        help="File or directory to look up",
    )
    ap.add_argument(
        "-c",
        "--check-hash",
        action="store_true",
        help="Print the SHA-256 and MD5 hashes of the target instead",
    )
    ap.add_argument(
        "--format",
        choices=["text", "yaml"],
        help="Output format (default: text)",
    )
    ap.add_argument(
        "--config",
        help="Path to a YAML configuration file",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log resolution details to stderr",
    )
    return ap


def main(argv: list[str] | None = None) -> int:
    """Run the tago command."""
    ap = build_parser()
    args = ap.parse_args(argv)

    if not args.target:
        ap.print_usage(sys.stderr)
        return 1

    try:
        config = load_config(args.config)
    except ConfigError as e:
        logging.basicConfig(format=LOG_FORMAT, stream=sys.stderr)
        logger.error("could not load config: %s", e)
        return 1
    if args.format:
        config["presenter"]["format"] = args.format

    level = "DEBUG" if args.verbose else config["logging"]["level"]
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)

    if args.check_hash:
        return run_check_hash(args)
    return run_lookup(args, config)


if __name__ == "__main__":
    raise SystemExit(main())
