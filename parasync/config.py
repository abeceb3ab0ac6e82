"""Configuration objects for the scraper and its command-line front end."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_OUTPUT_FILE = "result/output.json"
DEFAULT_MAX_WORKERS = 5
DEFAULT_TIMEOUT = 30.0
DEFAULT_MAX_RETRIES = 3


@dataclass
class ScraperConfig:
    """Settings that control how a scraper fetches pages.

    ``timeout`` is the HTTP request timeout in seconds.
    """

    max_workers: int = DEFAULT_MAX_WORKERS
    timeout: float = DEFAULT_TIMEOUT
    max_retries: int = DEFAULT_MAX_RETRIES


@dataclass
class CLIConfig:
    """Settings gathered from the command line."""

    input_file: str = ""
    output_file: str = DEFAULT_OUTPUT_FILE
    max_workers: int = DEFAULT_MAX_WORKERS
    timeout: float = DEFAULT_TIMEOUT
    max_retries: int = DEFAULT_MAX_RETRIES

    def to_scraper_config(self) -> ScraperConfig:
        """Return the scraper settings held by this configuration."""
        return ScraperConfig(
            max_workers=self.max_workers,
            timeout=self.timeout,
            max_retries=self.max_retries,
        )