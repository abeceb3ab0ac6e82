[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "parasync"
version = "0.1.0"
description = "Concurrent web page scraper that collects titles, meta descriptions and H1 headings into JSON"
requires-python = ">=3.10"
keywords = ["scraper", "web", "html", "concurrency", "json"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP",
]
dependencies = [
    "requests>=2.28",
    "beautifulsoup4>=4.11",
]

[project.optional-dependencies]
test = [
    "pytest>=7",
    "responses>=0.23",
]

[project.scripts]
parasync = "parasync.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["parasync"]

[tool.pytest.ini_options]
addopts = "-ra"
