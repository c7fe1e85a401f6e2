"""Command line interface for the feature generator."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from .config import DEFAULT_CONFIG_FILE, GeneratorConfig
from .errors import UsageError
from .runner import generate_feature

LOGGER = logging.getLogger("featureforge")

USAGE = "Usage: featureforge feature_name"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="featureforge",
        description="Generate a data/domain/presentation feature skeleton for a Flutter project",
    )
    parser.add_argument("feature", nargs="?", help="Name of the feature, e.g. 'Order History'")
    parser.add_argument(
        "-C",
        "--root",
        type=Path,
        default=None,
        help="Project root containing lib/ and index_generator.yaml (defaults to the current directory)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=Path(DEFAULT_CONFIG_FILE),
        help="Index generator configuration file, relative to the project root",
    )
    parser.add_argument(
        "--no-index",
        dest="run_indexer",
        action="store_false",
        help="Do not run the index generator after scaffolding",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
    )


def _handle_generate(args: argparse.Namespace) -> int:
    if not args.feature:
        raise UsageError("No feature name provided")

    config = GeneratorConfig.for_root(
        args.root,
        config_file=args.config,
        run_indexer=args.run_indexer,
    )
    generate_feature(args.feature, config)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        return _handle_generate(args)
    except UsageError as exc:
        LOGGER.error("%s", exc)
        LOGGER.error(USAGE)
        return 1
    except Exception as exc:
        LOGGER.error("Error generating feature: %s", exc)
        return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
