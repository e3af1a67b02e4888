[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wikikit"
version = "0.1.0"
description = "Text, Unicode, string-interning and line-reading utilities for processing MediaWiki markup"
requires-python = ">=3.10"
dependencies = []
keywords = ["mediawiki", "wikitext", "wikipedia", "wiktionary", "unicode", "utf-8", "text"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Markup",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wikikit"]

[tool.pytest.ini_options]
addopts = "-ra"
