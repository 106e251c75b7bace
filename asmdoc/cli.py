"""Command line entry point.

Usage::

    asmdoc --list main.lis --labels main.labels --out docs
    asmdoc --config asmdoc.json --format json
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from asmdoc import __version__
from asmdoc.config import DocConfig
from asmdoc.exporters import ExporterRegistry
from asmdoc.listing.base import ListingError
from asmdoc.pipeline import generate_documentation

logger = logging.getLogger("asmdoc")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="asmdoc",
        description="Generate documentation from an assembler list file and its exported labels.",
    )
    parser.add_argument("--list", dest="list_path", type=Path, help="Assembler list file")
    parser.add_argument("--labels", dest="labels_path", type=Path, help="Exported labels file")
    parser.add_argument("--out", dest="output_dir", type=Path, help="Output directory")
    parser.add_argument(
        "--format",
        choices=sorted(ExporterRegistry.available_exporters()),
        help="Output format (default: html)",
    )
    parser.add_argument("--title", help="Documentation title")
    parser.add_argument("--config", type=Path, help="JSON configuration file")
    parser.add_argument("--source-column", type=int, help="Column of the source text in the list file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def config_from_args(args: argparse.Namespace) -> DocConfig:
    """Build the configuration: config file first, then command line flags."""
    config = DocConfig.from_file(args.config) if args.config else DocConfig()
    for name in ("list_path", "labels_path", "output_dir", "format", "title", "source_column"):
        value = getattr(args, name)
        if value is not None:
            setattr(config, name, value)
    return config


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )

    try:
        config = config_from_args(args)
        path = generate_documentation(config)
    except ListingError as e:
        logger.error("%s", e)
        if e.details:
            logger.error("%s", e.details)
        return 1
    except ValueError as e:
        logger.error("%s", e)
        return 1

    print(path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
