"""Generates an RSS 2.0 feed from a collection and adds it to the record store."""

from __future__ import annotations

import datetime as dt
import logging
from email.utils import format_datetime

from jinja2 import Environment, select_autoescape

from blogsmith.config.models import FeedConfig
from blogsmith.models import BuildContext, FileRecord, RecordStore

from .dates import parse_date
from .permalinks import PermalinkGenerator
from .pipeline import Step

logger = logging.getLogger(__name__)

RSS_TEMPLATE = """\
<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0" xmlns:atom="http://www.w3.org/2005/Atom">
<channel>
<title>{{ feed.title }}</title>
<link>{{ feed.site_url }}</link>
<description>{{ feed.description }}</description>
<atom:link href="{{ feed.feed_url }}" rel="self" type="application/rss+xml"/>
{% if feed.language %}<language>{{ feed.language }}</language>
{% endif %}{% if feed.managing_editor %}<managingEditor>{{ feed.managing_editor }}</managingEditor>
{% endif %}{% if feed.web_master %}<webMaster>{{ feed.web_master }}</webMaster>
{% endif %}<generator>blogsmith</generator>
<lastBuildDate>{{ build_date }}</lastBuildDate>
{% for item in items %}<item>
<title>{{ item.title }}</title>
<link>{{ item.url }}</link>
<guid isPermaLink="true">{{ item.url }}</guid>
<description>{{ item.description }}</description>
{% if item.pub_date %}<pubDate>{{ item.pub_date }}</pubDate>
{% endif %}</item>
{% endfor %}</channel>
</rss>
"""

_env = Environment(autoescape=select_autoescape(default_for_string=True, default=True))


def _join(base: str, path: str) -> str:
    return base.rstrip("/") + "/" + path.lstrip("/")


def _rfc822(value: object) -> str | None:
    if value in (None, ""):
        return None
    d = parse_date(value)
    if not isinstance(d, dt.datetime):
        d = dt.datetime(d.year, d.month, d.day)
    if d.tzinfo is None:
        d = d.replace(tzinfo=dt.timezone.utc)
    return format_datetime(d)


class FeedGenerator(Step):
    name = "feed"

    def __init__(
        self,
        config: FeedConfig,
        now: dt.datetime | None = None,
        permalinks: PermalinkGenerator | None = None,
    ):
        self.config = config
        self.permalinks = permalinks
        self._now = now
        self._template = _env.from_string(RSS_TEMPLATE)

    def item_url(self, record: FileRecord) -> str:
        """Absolute URL of the page the record ends up written to."""
        if self.permalinks is None or not self.permalinks.moves(record):
            return _join(self.config.site_url, record.path)
        link = self.permalinks.permalink_for(record)
        return _join(self.config.site_url, f"{link}/" if link else "")

    def render(self, records: list[FileRecord]) -> str:
        cfg = self.config
        items = []
        for record in records[: cfg.limit]:
            items.append({
                "title": record.title or "",
                "url": self.item_url(record),
                "description": record.text,
                "pub_date": _rfc822(record.date),
            })
        now = self._now or dt.datetime.now(dt.timezone.utc)
        return self._template.render(
            feed=cfg.model_copy(update={"feed_url": cfg.feed_url or _join(cfg.site_url, cfg.destination)}),
            items=items,
            build_date=format_datetime(now),
        )

    def apply(self, files: RecordStore, context: BuildContext) -> RecordStore:
        if not self.config.site_url:
            raise ValueError("feed.site_url is required to generate a feed")
        records = context.collections.get(self.config.collection, [])
        xml = self.render(records)
        dest = self.config.destination
        files[dest] = FileRecord(path=dest, contents=xml.encode("utf-8"))
        logger.info("Generated feed %s (%d items)", dest, min(len(records), self.config.limit))
        return files
