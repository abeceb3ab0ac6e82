"""A fixed-size pool of threads that scrape URLs."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Any, Iterable, Protocol


class _URLScraper(Protocol):
    def scrape_url(self, url: str) -> Any: ...


class WorkerPool:
    """Runs ``scraper.scrape_url`` over URLs with at most ``size`` workers."""

    def __init__(self, size: int, scraper: _URLScraper) -> None:
        if size < 1:
            raise ValueError("worker pool size must be at least 1")
        self.size = size
        self.scraper = scraper

    def start(self, urls: Iterable[str]) -> list[Any]:
        """Scrape every URL and return the results in completion order."""
        with ThreadPoolExecutor(max_workers=self.size) as executor:
            futures = [executor.submit(self.scraper.scrape_url, url) for url in urls]
            return [future.result() for future in as_completed(futures)]