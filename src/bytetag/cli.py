"""Command-line demo: substitute the bytes of a sample file with letter tags."""

import argparse
from dataclasses import replace
import logging
import os
from pathlib import Path
import sys

from .config import PipelineConfig
from .errors import ByteTagError
from .pipeline import PipelineReport, run_pipeline
from .radix import ConversionMode, PrintMode, list_modes

log = logging.getLogger(__name__)


def _single_char(value: str) -> str:
    """argparse type accepting exactly one character."""
    if len(value) != 1:
        raise argparse.ArgumentTypeError(f"expected a single character, got {value!r}")
    return value


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the ``bytetag`` command."""
    parser = argparse.ArgumentParser(
        prog="bytetag",
        description="Parse a byte sample, then replace each distinct byte with a tag.",
    )
    parser.add_argument(
        "sample",
        nargs="?",
        type=Path,
        default=None,
        help="Sample file to read (default: $BYTETAG_SAMPLE or sample.txt).",
    )
    parser.add_argument(
        "--parse-mode",
        default=None,
        help=f"Radix of the sample tokens, one of {list_modes()} (default: binary).",
    )
    parser.add_argument(
        "--print-mode",
        default=None,
        help=f"Radix used to render bytes, one of {list_modes()} (default: decimal).",
    )
    parser.add_argument(
        "--tags",
        nargs=2,
        type=_single_char,
        metavar=("START", "END"),
        default=None,
        help="Inclusive character range of the tag alphabet (default: a z).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser


def _configure_logging(verbose: bool) -> None:
    level = "DEBUG" if verbose else os.environ.get("BYTETAG_LOG_LEVEL", "WARNING").upper()
    if level not in logging.getLevelNamesMapping():
        level = "WARNING"
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )


def _resolve_config(args: argparse.Namespace) -> PipelineConfig:
    """Apply command-line arguments over the environment config."""
    config = PipelineConfig.from_env()
    if args.sample is not None:
        config = replace(config, sample_path=args.sample)
    if args.parse_mode is not None:
        config = replace(config, conv_mode=ConversionMode.get(args.parse_mode))
    if args.print_mode is not None:
        config = replace(config, print_mode=PrintMode.get(args.print_mode))
    if args.tags is not None:
        config = replace(config, tag_start=args.tags[0], tag_end=args.tags[1])
    return config


def print_report(report: PipelineReport, print_mode: PrintMode) -> None:
    """Print a pipeline report to stdout."""
    print(f"\n[sample: {print_mode.name.capitalize()}] -> {report.rendered}\n")

    for token, occurred in report.byte_occurrences.items():
        print(f"{token:>10} -> {occurred}")

    print(f"\nfull string: '{report.tag_string}'\n")

    for tag, occurred in report.tag_occurrences.items():
        print(f"{tag!s:>10} -> {occurred}")

    print("\n[:: done ::]")


def main(argv: list[str] | None = None) -> int:
    """Run the demo and return the process exit status."""
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    try:
        config = _resolve_config(args)
        report = run_pipeline(config)
    except (ByteTagError, OSError, ValueError) as e:
        log.debug("pipeline failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1

    print_report(report, config.print_mode)
    return 0


if __name__ == "__main__":
    sys.exit(main())
