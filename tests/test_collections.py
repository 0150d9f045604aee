"""Tests for blogsmith.transform.collections."""

import datetime as dt

from blogsmith.config.models import CollectionConfig
from blogsmith.models import BuildContext, FileRecord
from blogsmith.transform.collections import CollectionBuilder, sort_records

POSTS = {"posts": CollectionConfig(pattern="posts/*.md", sort_by="date", reverse=True)}


class TestCollectionBuilder:
    def test_posts_sorted_by_date_descending(self, sample_posts):
        ctx = BuildContext()
        CollectionBuilder(POSTS).apply(sample_posts, ctx)
        paths = [r.path for r in ctx.collections["posts"]]
        assert paths == ["posts/second.md", "posts/first.md", "posts/third.md"]

    def test_length_matches_pattern_matches(self, sample_posts):
        ctx = BuildContext()
        CollectionBuilder(POSTS).apply(sample_posts, ctx)
        assert len(ctx.collections["posts"]) == 3

    def test_members_are_the_store_records(self, sample_posts):
        ctx = BuildContext()
        CollectionBuilder(POSTS).apply(sample_posts, ctx)
        assert ctx.collections["posts"][0] is sample_posts["posts/second.md"]

    def test_members_tagged_with_collection_name(self, sample_posts):
        CollectionBuilder(POSTS).apply(sample_posts, BuildContext())
        assert sample_posts["posts/first.md"].collection == ["posts"]
        assert sample_posts["about.md"].collection == []

    def test_ascending_when_not_reversed(self, sample_posts):
        ctx = BuildContext()
        cfg = {"posts": CollectionConfig(pattern="posts/*.md", sort_by="date")}
        CollectionBuilder(cfg).apply(sample_posts, ctx)
        assert ctx.collections["posts"][0].path == "posts/third.md"

    def test_empty_store_gives_empty_collection(self):
        ctx = BuildContext()
        files = CollectionBuilder(POSTS).apply({}, ctx)
        assert files == {}
        assert ctx.collections["posts"] == []

    def test_front_matter_collection(self, sample_posts):
        sample_posts["about.md"].collection = ["pages"]
        ctx = BuildContext()
        CollectionBuilder(POSTS).apply(sample_posts, ctx)
        assert [r.path for r in ctx.collections["pages"]] == ["about.md"]

    def test_limit(self, sample_posts):
        ctx = BuildContext()
        cfg = {"posts": CollectionConfig(pattern="posts/*.md", reverse=True, limit=2)}
        CollectionBuilder(cfg).apply(sample_posts, ctx)
        assert [r.path for r in ctx.collections["posts"]] == ["posts/second.md", "posts/first.md"]

    def test_store_returned_unchanged(self, sample_posts):
        keys = list(sample_posts)
        files = CollectionBuilder(POSTS).apply(sample_posts, BuildContext())
        assert list(files) == keys


class TestSortRecords:
    def test_missing_field_goes_last(self):
        records = [
            FileRecord(path="a", date=None),
            FileRecord(path="b", date="2016-01-01"),
            FileRecord(path="c", date="2017-01-01"),
        ]
        ordered = sort_records(records, "date", reverse=True)
        assert [r.path for r in ordered] == ["c", "b", "a"]

    def test_mixed_date_representations(self):
        records = [
            FileRecord(path="a", date="August 4, 2016"),
            FileRecord(path="b", date=dt.date(2016, 8, 5)),
            FileRecord(path="c", date=dt.datetime(2016, 8, 3, 12, 0)),
        ]
        ordered = sort_records(records, "date")
        assert [r.path for r in ordered] == ["c", "a", "b"]

    def test_sort_by_extra_front_matter(self):
        records = [
            FileRecord(path="a", metadata={"series": "b"}),
            FileRecord(path="b", metadata={"series": "a"}),
        ]
        assert [r.path for r in sort_records(records, "series")] == ["b", "a"]

    def test_unparseable_values_stay_after_dates_when_reversed(self):
        records = [
            FileRecord(path="a", date="someday"),
            FileRecord(path="b", date="2016-01-01"),
            FileRecord(path="c", date="2017-01-01"),
            FileRecord(path="d", date=None),
        ]
        assert [r.path for r in sort_records(records, "date", reverse=True)] == ["c", "b", "a", "d"]
        assert [r.path for r in sort_records(records, "date")] == ["b", "c", "a", "d"]
