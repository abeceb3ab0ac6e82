"""The scraping service: fetches pages concurrently and extracts their data."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

import requests

from .config import ScraperConfig
from .utils import extract_data, fetch_url
from .worker import WorkerPool


@dataclass
class Result:
    """Data scraped from a single URL, or the error that stopped it."""

    url: str
    title: str = ""
    description: str = ""
    headings: list[str] | None = None
    error: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form: no headings become null, an empty error is left out."""
        data: dict[str, Any] = {
            "url": self.url,
            "title": self.title,
            "description": self.description,
            "headings": list(self.headings) if self.headings else None,
        }
        if self.error:
            data["error"] = self.error
        return data


class Scraper:
    """Scrapes lists of URLs with a bounded number of concurrent workers."""

    def __init__(self, config: ScraperConfig, session: requests.Session | None = None) -> None:
        self.session = session if session is not None else requests.Session()
        self.timeout = config.timeout
        self.max_workers = config.max_workers
        self.max_retries = config.max_retries

    def scrape(self, urls: Iterable[str]) -> list[Result]:
        """Scrape every URL concurrently; results come back in completion order."""
        pool = WorkerPool(self.max_workers, self)
        return pool.start(urls)

    def scrape_url(self, url: str) -> Result:
        """Fetch and parse one URL, recording any failure in the result."""
        try:
            doc = fetch_url(url, self.session, self.timeout)
        except (requests.RequestException, ValueError) as exc:
            return Result(url=url, error=str(exc) or type(exc).__name__)

        title, description, headings = extract_data(doc)
        return Result(
            url=url,
            title=title,
            description=description,
            headings=headings or None,
        )