"""Concurrent scraper for page titles, meta descriptions and H1 headings, with JSON output."""

__version__ = "0.1.0"