import json
import os

# keep test runs from writing log files
os.environ.setdefault("LOG_TO_FILE", "false")

import pytest
from bs4 import BeautifulSoup

from showcase.config import HomeConfig

PAGE = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8">
    <meta name="theme-color" content="#000000">
  </head>
  <body>
    <section id="project-grid"><p>Loading...</p></section>
  </body>
</html>
"""


@pytest.fixture
def page():
    return BeautifulSoup(PAGE, "html.parser")


@pytest.fixture
def write_manifest(tmp_path):
    """Write `data` as <tmp>/<category>/manifest.json and return the base dir."""
    def _write(category, data, raw=None):
        folder = tmp_path / category
        folder.mkdir(parents=True, exist_ok=True)
        text = raw if raw is not None else json.dumps(data)
        (folder / "manifest.json").write_text(text, encoding="utf-8")
        return tmp_path
    return _write


@pytest.fixture
def local_config(tmp_path):
    def _config(*categories, **kwargs):
        return HomeConfig(
            categories=tuple(categories),
            manifest_base=str(tmp_path),
            **kwargs,
        )
    return _config
