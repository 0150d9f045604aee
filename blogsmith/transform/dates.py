"""Derives human-readable date strings from each record's `date` field."""

from __future__ import annotations

import datetime as dt
import logging
from typing import Literal

from blogsmith.models import BuildContext, RecordStore

from .pipeline import Step

logger = logging.getLogger(__name__)

_TEXT_FORMATS = (
    "%B %d, %Y",
    "%b %d, %Y",
    "%Y/%m/%d",
    "%m/%d/%Y",
    "%d %B %Y",
    "%d %b %Y",
)


def parse_date(value: object) -> dt.date:
    """Coerce a raw front-matter date into a date or datetime.

    Accepts date/datetime objects (what YAML produces for ISO dates), ISO
    strings, a handful of human formats, and numeric timestamps in
    milliseconds since the epoch. Raises ValueError for anything else.
    """
    if isinstance(value, dt.date):
        return value
    if isinstance(value, bool):
        raise ValueError(f"not a date: {value!r}")
    if isinstance(value, (int, float)):
        return dt.datetime.fromtimestamp(value / 1000, tz=dt.timezone.utc)
    if isinstance(value, str):
        text = value.strip()
        try:
            return dt.date.fromisoformat(text)
        except ValueError:
            pass
        try:
            return dt.datetime.fromisoformat(text.replace("Z", "+00:00"))
        except ValueError:
            pass
        for fmt in _TEXT_FORMATS:
            try:
                return dt.datetime.strptime(text, fmt).date()
            except ValueError:
                continue
    raise ValueError(f"not a date: {value!r}")


def long_date(value: object) -> str:
    """August 4, 2016"""
    d = parse_date(value)
    return f"{d:%B} {d.day}, {d.year}"


def short_date(value: object) -> str:
    """Aug 4, 2016"""
    d = parse_date(value)
    return f"{d:%b} {d.day}, {d.year}"


def _has_date(value: object) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return True


class DateFormatter(Step):
    name = "dates"

    def __init__(self, mode: Literal["derive", "overwrite"] = "derive"):
        self.mode = mode

    def apply(self, files: RecordStore, context: BuildContext) -> RecordStore:
        for path, record in files.items():
            if not _has_date(record.date):
                continue
            try:
                if self.mode == "overwrite":
                    record.date = long_date(record.date)
                else:
                    record.long_date = long_date(record.date)
                    record.short_date = short_date(record.date)
            except ValueError as exc:
                raise ValueError(f"{path}: {exc}") from exc
        return files
