# parasync

`parasync` fetches a list of web pages concurrently. For each page it records
the `<title>`, the meta description and every `<h1>` heading, and then writes
the results to a JSON file.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

Put one URL per line in a text file, then run:

```
parasync -input urls.txt
```

Every option can be written with one dash or with two (`-input` or `--input`).

| Option     | Default              | Meaning                                           |
|------------|----------------------|---------------------------------------------------|
| `-input`   | (required)           | File with URLs, one per line                      |
| `-output`  | `result/output.json` | Where the JSON results are written                |
| `-workers` | `5`                  | Number of concurrent workers (at least 1)         |
| `-timeout` | `30s`                | HTTP request timeout (at least 1 second)          |
| `-retries` | `3`                  | Maximum retry attempts (must not be negative)     |

`-timeout` takes a duration made of numbers with units, such as `30s`, `1m30s`,
`1.5s` or `2500ms`. The units are `ns`, `us`, `ms`, `s`, `m` and `h`. A bare
number other than `0` is rejected.

Each line of the input file is used exactly as written, apart from its line
ending. The command always creates a `result` directory in the current working
directory if there isn't one, whatever `-output` is set to. When it finishes,
it prints how many URLs it scraped and where it wrote the results.

If a required option is missing or a value is out of range, the command prints
the error and the usage text to standard error and exits with status 1. It also
exits with status 1 if the input file cannot be read or the output cannot be
written.

## Output

The output is a JSON array, indented by two spaces, with one object per URL:

```json
{
  "url": "https://example.com",
  "title": "Example Domain",
  "description": "",
  "headings": ["Example Domain"]
}
```

- `title` joins the text of every `<title>` element in the page.
- `description` comes from the first `<meta name="description">` element's
  `content`, or is empty if there is none.
- `headings` is `null` when the page has no `<h1>`.
- An `error` field appears only when the page could not be fetched. This
  happens when the server does not answer with status 200, when the request
  fails or times out, or when the page cannot be parsed. The other fields are
  then empty, and `headings` is `null`.

Entries appear in the order in which the pages finished, which need not be the
order of the input file. The characters `<`, `>` and `&` are written as
`\u003c`, `\u003e` and `\u0026`.

## Library use

```python
from parasync.config import ScraperConfig
from parasync.scraper import Scraper
from parasync.utils import write_results

scraper = Scraper(ScraperConfig(max_workers=4, timeout=10.0, max_retries=3))
results = scraper.scrape(["https://example.com"])
for result in results:
    print(result.to_dict())
write_results(results, "result/output.json")
```

- `parasync.config` provides `ScraperConfig` and `CLIConfig`.
  `CLIConfig.to_scraper_config()` returns the scraper settings that a
  `CLIConfig` holds. Timeouts are given in seconds.
- `parasync.scraper.Scraper(config, session=None)` has two methods.
  `scrape(urls)` returns a list of `Result` objects. `scrape_url(url)` handles
  a single page. You can pass a `requests.Session` of your own as `session`.
- `Result` has the fields `url`, `title`, `description`, `headings` and
  `error`. Its `to_dict()` method returns the JSON form shown above.
- `parasync.worker.WorkerPool(size, scraper)` runs `scraper.scrape_url` over a
  list of URLs with at most `size` threads and returns the results in
  completion order. A size below 1 raises `ValueError`.
- `parasync.utils` provides the separate steps:
  - `read_urls(filename)`
  - `fetch_url(url, session, timeout)`, which returns a BeautifulSoup document
    and raises `requests.HTTPError` for any status other than 200
  - `extract_data(doc)`, which returns `(title, description, headings)`
  - `write_results(results, filename)`
- `parasync.cli` provides the command:
  - `parse_args(argv)` returns a `CLIConfig`, or raises `ValueError` for
    out-of-range values.
  - `run(cfg)` raises `parasync.cli.CLIError` when it cannot read the input or
    write the output.
  - `main(argv)` returns the exit status.

## What it does not do

- The retry count is accepted and checked, but failed requests are never
  retried. Every URL is fetched exactly once.
- URLs are not checked or normalised before they are fetched. Blank lines in
  the input file are fetched too, and show up as entries with an error.
- Nothing is extracted beyond the title, the meta description and the `<h1>`
  headings. Links are not followed.