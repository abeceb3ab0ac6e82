"""Fetching, parsing and file helpers used by the scraper."""

from __future__ import annotations

import json
import os
from typing import Any, Iterable

import requests
from bs4 import BeautifulSoup

RESULT_DIR = "result"

_JSON_ESCAPES = str.maketrans(
    {
        "<": "\\u003c",
        ">": "\\u003e",
        "&": "\\u0026",
        "\u2028": "\\u2028",
        "\u2029": "\\u2029",
    }
)


def fetch_url(url: str, session: requests.Session, timeout: float | None) -> BeautifulSoup:
    """Fetch ``url`` with ``session`` and return the parsed HTML document.

    Raises ``requests.HTTPError`` when the status is not 200 and lets other
    request errors propagate.
    """
    response = session.get(url, timeout=timeout)
    with response:
        if response.status_code != 200:
            raise requests.HTTPError(
                f"HTTP request failed with status: {response.status_code}",
                response=response,
            )
        try:
            return BeautifulSoup(response.content, "html.parser")
        except Exception as exc:  # parser failures of any kind
            raise ValueError(f"failed to parse HTML: {exc}") from exc


def extract_data(doc: BeautifulSoup) -> tuple[str, str, list[str]]:
    """Return the title, meta description and H1 headings of ``doc``.

    Missing elements give an empty string or an empty list.
    """
    title = "".join(tag.get_text() for tag in doc.find_all("title"))
    meta = doc.select_one('meta[name="description"]')
    description = meta.get("content", "") if meta is not None else ""
    if isinstance(description, list):
        description = " ".join(description)
    headings = [tag.get_text() for tag in doc.find_all("h1")]
    return title, description, headings


def read_urls(filename: str | os.PathLike[str]) -> list[str]:
    """Read one URL per line from ``filename``.

    Lines keep their content as written, apart from the line ending.
    """
    try:
        handle = open(filename, encoding="utf-8", errors="replace", newline="")
    except OSError as exc:
        raise OSError(
            exc.errno,
            f"error finding a file, please provide a correct filename: {exc.strerror}",
            exc.filename,
        ) from exc

    with handle:
        try:
            content = handle.read()
        except OSError as exc:
            raise OSError(exc.errno, f"error reading file: {exc.strerror}", exc.filename) from exc

    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def _as_plain(item: Any) -> Any:
    to_dict = getattr(item, "to_dict", None)
    return to_dict() if callable(to_dict) else item


def write_results(results: Iterable[Any], filename: str | os.PathLike[str]) -> None:
    """Write ``results`` to ``filename`` as indented JSON.

    Items may be mappings or objects with a ``to_dict`` method. The ``result``
    directory in the working directory is created if it is missing.
    """
    try:
        os.mkdir(RESULT_DIR, 0o755)
    except FileExistsError:
        pass
    except OSError as exc:
        raise OSError(
            exc.errno, f"error creating a result directory {exc.strerror}", exc.filename
        ) from exc

    try:
        text = json.dumps([_as_plain(item) for item in results], indent=2, ensure_ascii=False)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"error marshaling results to JSON: {exc}") from exc

    try:
        with open(filename, "w", encoding="utf-8") as handle:
            handle.write(text.translate(_JSON_ESCAPES))
    except OSError as exc:
        raise OSError(
            exc.errno, f"error writing results to file: {exc.strerror}", exc.filename
        ) from exc