"""Tests for blogsmith.transform.links: slugify and LinkSlugifier."""

import pytest

from blogsmith.models import BuildContext, FileRecord
from blogsmith.transform.links import LinkSlugifier, slugify

TITLES = [
    "Hello, World?",
    "  Why Python , Really?  ",
    "Elm and React: a comparison",
    "Tabs\tand\nnewlines",
    "Already-a-slug",
    "MIXED Case, Commas, Everywhere",
]


class TestSlugify:
    def test_strips_question_marks(self):
        assert slugify("Hello, World?") == "hello-world"

    def test_keeps_question_marks_when_disabled(self):
        assert slugify("Hello, World?", strip_question_marks=False) == "hello-world?"

    def test_no_double_hyphen_around_removed_comma(self):
        assert slugify("  Why Python , Really?  ") == "why-python-really"

    def test_runs_of_spaces_collapse(self):
        assert slugify("a    b") == "a-b"

    @pytest.mark.parametrize("title", TITLES)
    def test_properties(self, title):
        slug = slugify(title)
        assert slug == slug.lower()
        assert not any(c.isspace() for c in slug)
        assert "," not in slug
        assert "?" not in slug

    @pytest.mark.parametrize("title", TITLES)
    @pytest.mark.parametrize("strip", [True, False])
    def test_idempotent(self, title, strip):
        once = slugify(title, strip)
        assert slugify(once, strip) == once


class TestLinkSlugifier:
    def test_sets_link_from_title(self):
        files = {"a.md": FileRecord(path="a.md", title="Hello, World?")}
        LinkSlugifier().apply(files, BuildContext())
        assert files["a.md"].link == "hello-world"

    def test_variant_without_question_mark_stripping(self):
        files = {"a.md": FileRecord(path="a.md", title="Hello, World?")}
        LinkSlugifier(strip_question_marks=False).apply(files, BuildContext())
        assert files["a.md"].link == "hello-world?"

    def test_records_without_title_untouched(self):
        rec = FileRecord(path="style.css", contents=b"body {}")
        before = rec.model_dump()
        LinkSlugifier().apply({"style.css": rec}, BuildContext())
        assert rec.model_dump() == before

    def test_numeric_title_is_coerced(self):
        rec = FileRecord.from_source("a.md", {"title": 2016}, b"")
        LinkSlugifier().apply({"a.md": rec}, BuildContext())
        assert rec.link == "2016"
