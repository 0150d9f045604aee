"""Shared test fixtures for Blogsmith."""

import datetime as dt
from pathlib import Path

import pytest

from blogsmith.config.models import BlogsmithConfig
from blogsmith.models import BuildContext, BuildResult, FileRecord


class RecordingReporter:
    """Collects every result it is handed."""

    def __init__(self):
        self.results: list[BuildResult] = []

    def report(self, result: BuildResult) -> None:
        self.results.append(result)


POST_TEMPLATE = """\
<html><head><title>{{ title }}</title></head>
<body>
<p class="date">{{ longDate }} ({{ shortDate }})</p>
<a href="{{ site.url }}{{ link }}">{{ title }}</a>
{{ contents }}
</body></html>
"""


def write_site(root: Path, files: dict[str, str], templates: dict[str, str] | None = None) -> Path:
    """Create src/ (and templates/) under root from {relative path: text}."""
    src = root / "src"
    src.mkdir(parents=True, exist_ok=True)
    for rel, text in files.items():
        target = src / rel
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(text)
    tpl_dir = root / "templates"
    tpl_dir.mkdir(exist_ok=True)
    for name, text in (templates or {}).items():
        (tpl_dir / name).write_text(text)
    return src


@pytest.fixture
def sample_config():
    return BlogsmithConfig()


@pytest.fixture
def context():
    return BuildContext()


@pytest.fixture
def reporter():
    return RecordingReporter()


@pytest.fixture
def sample_posts():
    """Three posts out of date order plus a page outside posts/."""
    return {
        "posts/first.md": FileRecord(
            path="posts/first.md", title="First Post", date=dt.date(2016, 1, 10), contents=b"# First"
        ),
        "posts/second.md": FileRecord(
            path="posts/second.md", title="Second, Again?", date="2016-08-04", contents=b"# Second"
        ),
        "posts/third.md": FileRecord(
            path="posts/third.md", title="Third", date=dt.date(2015, 12, 31), contents=b"# Third"
        ),
        "about.md": FileRecord(path="about.md", title="About", contents=b"# About"),
    }
