import json

import pytest
import requests
import responses
from bs4 import BeautifulSoup

from parasync.utils import extract_data, fetch_url, read_urls, write_results

PAGE = (
    "<html><head><title>Home</title>"
    '<meta name="description" content="A page about things">'
    "</head><body><h1>First</h1><p>x</p><h1>Second</h1></body></html>"
)


def _doc(html):
    return BeautifulSoup(html, "html.parser")


def test_fetch_url_parses_ok_response():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, "http://example.com/", body=PAGE, status=200)
        with requests.Session() as session:
            doc = fetch_url("http://example.com/", session, 5)
    assert extract_data(doc) == ("Home", "A page about things", ["First", "Second"])


def test_fetch_url_rejects_non_200():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, "http://example.com/missing", body="nope", status=404)
        with requests.Session() as session:
            with pytest.raises(requests.HTTPError, match="HTTP request failed with status: 404"):
                fetch_url("http://example.com/missing", session, 5)


def test_fetch_url_propagates_connection_errors():
    with responses.RequestsMock() as rsps:
        rsps.add(
            responses.GET,
            "http://example.com/down",
            body=requests.ConnectionError("refused"),
        )
        with requests.Session() as session:
            with pytest.raises(requests.ConnectionError):
                fetch_url("http://example.com/down", session, 5)


def test_extract_data_missing_elements():
    title, description, headings = extract_data(_doc("<html><body><p>hi</p></body></html>"))
    assert title == ""
    assert description == ""
    assert headings == []


def test_extract_data_uses_first_description():
    html = (
        '<head><meta name="description" content="one">'
        '<meta name="description" content="two"></head>'
    )
    assert extract_data(_doc(html))[1] == "one"


def test_extract_data_ignores_other_meta():
    html = '<head><meta name="keywords" content="kw"><meta name="description"></head>'
    assert extract_data(_doc(html))[1] == ""


def test_extract_data_heading_text_includes_nested():
    html = "<h1>Big <em>news</em></h1><h2>not me</h2>"
    assert extract_data(_doc(html))[2] == ["Big news"]


def test_read_urls_lines(tmp_path):
    path = tmp_path / "urls.txt"
    path.write_bytes(b"http://example.com/a\r\n\nhttp://example.com/b\nhttp://example.com/c")
    assert read_urls(path) == [
        "http://example.com/a",
        "",
        "http://example.com/b",
        "http://example.com/c",
    ]


def test_read_urls_trailing_newline_and_empty(tmp_path):
    path = tmp_path / "urls.txt"
    path.write_text("http://example.com/\n", encoding="utf-8")
    assert read_urls(path) == ["http://example.com/"]
    empty = tmp_path / "empty.txt"
    empty.write_text("", encoding="utf-8")
    assert read_urls(empty) == []


def test_read_urls_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError, match="error finding a file"):
        read_urls(tmp_path / "absent.txt")


class _Item:
    def __init__(self, url):
        self.url = url

    def to_dict(self):
        return {"url": self.url, "title": "<b>&"}


def test_write_results_round_trip(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    data = [{"url": "http://example.com/", "headings": ["é"]}, _Item("http://example.com/x")]
    write_results(data, "result/out.json")
    out = tmp_path / "result" / "out.json"
    lines = read_urls(out)
    assert lines[:3] == ["[", "  {", '    "url": "http://example.com/",']
    assert lines[-1] == "]"
    text = out.read_text(encoding="utf-8")
    assert json.loads(text) == [
        {"url": "http://example.com/", "headings": ["é"]},
        {"url": "http://example.com/x", "title": "<b>&"},
    ]
    assert "\\u003cb\\u003e\\u0026" in text
    assert "é" in text


def test_write_results_existing_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "result").mkdir()
    write_results([], tmp_path / "other.json")
    assert json.loads((tmp_path / "other.json").read_text(encoding="utf-8")) == []


def test_write_results_unwritable_target(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(OSError, match="error writing results to file"):
        write_results([], tmp_path / "no" / "such" / "dir.json")