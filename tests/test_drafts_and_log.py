"""Tests for DraftFilter and CollectionLogger."""

import logging

from blogsmith.models import BuildContext, FileRecord
from blogsmith.transform import CollectionLogger, DraftFilter


class TestDraftFilter:
    def test_removes_drafts(self):
        files = {
            "posts/a.md": FileRecord(path="posts/a.md", draft=True),
            "posts/b.md": FileRecord(path="posts/b.md"),
        }
        out = DraftFilter().apply(files, BuildContext())
        assert list(out) == ["posts/b.md"]

    def test_draft_from_front_matter_string(self):
        rec = FileRecord.from_source("a.md", {"draft": "true"}, b"")
        assert DraftFilter().apply({"a.md": rec}, BuildContext()) == {}

    def test_logs_skipped(self, caplog):
        files = {"a.md": FileRecord(path="a.md", draft=True)}
        with caplog.at_level(logging.INFO):
            DraftFilter().apply(files, BuildContext())
        assert "Skipping draft: a.md" in caplog.text


class TestCollectionLogger:
    def test_logs_each_collection(self, caplog):
        posts = [FileRecord(path="hello-world/index.html"), FileRecord(path="older/index.html")]
        ctx = BuildContext(collections={"posts": posts})
        files = {"x": FileRecord(path="x")}
        with caplog.at_level(logging.INFO):
            out = CollectionLogger().apply(files, ctx)
        assert out is files
        assert "Collection posts (2): hello-world/index.html, older/index.html" in caplog.text
