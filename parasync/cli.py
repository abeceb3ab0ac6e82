"""Command-line entry point: scrape the URLs in a file and write JSON results."""

from __future__ import annotations

import argparse
import re
import sys
from typing import Sequence

from .config import (
    DEFAULT_MAX_RETRIES,
    DEFAULT_MAX_WORKERS,
    DEFAULT_OUTPUT_FILE,
    DEFAULT_TIMEOUT,
    CLIConfig,
)
from .scraper import Scraper
from .utils import read_urls, write_results


class CLIError(Exception):
    """Raised when the command cannot complete its work."""


_UNIT_SECONDS = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,
    "μs": 1e-6,
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}
_NUMBER = r"(?:\d+(?:\.\d*)?|\.\d+)"
_UNIT = r"(?:ns|us|µs|μs|ms|s|m|h)"
_DURATION = re.compile(rf"([-+]?)((?:{_NUMBER}{_UNIT})+)")
_PART = re.compile(rf"({_NUMBER})({_UNIT})")


def _parse_duration(text: str) -> float:
    """Parse a duration such as ``30s``, ``1m30s`` or ``250ms`` into seconds."""
    if text in ("0", "+0", "-0"):
        return 0.0
    match = _DURATION.fullmatch(text)
    if match is None:
        raise argparse.ArgumentTypeError(f"invalid duration {text!r}")
    sign, body = match.groups()
    seconds = sum(float(number) * _UNIT_SECONDS[unit] for number, unit in _PART.findall(body))
    return -seconds if sign == "-" else seconds


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="parasync",
        description="Scrape URLs concurrently and write the results as JSON.",
        allow_abbrev=False,
    )
    parser.add_argument(
        "-input", "--input", dest="input_file", default="",
        help="Path to input file with URLs (one per line)",
    )
    parser.add_argument(
        "-output", "--output", dest="output_file", default=DEFAULT_OUTPUT_FILE,
        help="Path to output file for results",
    )
    parser.add_argument(
        "-workers", "--workers", dest="max_workers", type=int, default=DEFAULT_MAX_WORKERS,
        help="Maximum number of concurrent workers",
    )
    parser.add_argument(
        "-timeout", "--timeout", dest="timeout", type=_parse_duration, default=DEFAULT_TIMEOUT,
        help="HTTP request timeout (e.g. 30s, 1m, 500ms)",
    )
    parser.add_argument(
        "-retries", "--retries", dest="max_retries", type=int, default=DEFAULT_MAX_RETRIES,
        help="Maximum number of retry attempts",
    )
    return parser


def parse_args(argv: Sequence[str] | None = None) -> CLIConfig:
    """Parse and validate command-line arguments.

    Raises ``ValueError`` when a value is out of range; malformed arguments
    make the parser exit as usual.
    """
    namespace = _build_parser().parse_args(argv)
    cfg = CLIConfig(
        input_file=namespace.input_file,
        output_file=namespace.output_file,
        max_workers=namespace.max_workers,
        timeout=namespace.timeout,
        max_retries=namespace.max_retries,
    )

    if not cfg.input_file:
        raise ValueError("input file is required")
    if cfg.max_workers < 1:
        raise ValueError("workers must be at least 1")
    if cfg.timeout < 1.0:
        raise ValueError("timeout must be at least 1 second")
    if cfg.max_retries < 0:
        raise ValueError("retries must be non-negative")
    return cfg


def run(cfg: CLIConfig) -> None:
    """Read the URLs, scrape them and write the results."""
    try:
        urls = read_urls(cfg.input_file)
    except OSError as exc:
        raise CLIError(f"error reading URLs: {exc}") from exc

    results = Scraper(cfg.to_scraper_config()).scrape(urls)

    try:
        write_results(results, cfg.output_file)
    except (OSError, ValueError) as exc:
        raise CLIError(f"error writing results: {exc}") from exc

    print(f"Successfully scraped {len(urls)} URLs. Results written to {cfg.output_file}")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command and return its exit status."""
    try:
        cfg = parse_args(argv)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        _build_parser().print_help(sys.stderr)
        return 1

    try:
        run(cfg)
    except CLIError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())