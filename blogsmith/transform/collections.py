"""Builds named, sorted collections of records into the build context."""

from __future__ import annotations

import datetime as dt
import logging
from fnmatch import fnmatchcase

from blogsmith.config.models import CollectionConfig
from blogsmith.models import BuildContext, FileRecord, RecordStore

from .dates import parse_date
from .pipeline import Step

logger = logging.getLogger(__name__)


def _sort_key(value: object) -> tuple:
    """Dates compare as dates, everything else as text."""
    try:
        d = parse_date(value)
    except ValueError:
        return (1, str(value))
    if not isinstance(d, dt.datetime):
        d = dt.datetime(d.year, d.month, d.day)
    if d.tzinfo is None:
        d = d.replace(tzinfo=dt.timezone.utc)
    return (0, d)


def _add(bucket: list[FileRecord], record: FileRecord) -> None:
    # identity, not model equality
    if not any(r is record for r in bucket):
        bucket.append(record)


def sort_records(records: list[FileRecord], sort_by: str, reverse: bool = False) -> list[FileRecord]:
    """Sort by a field.

    Dates come first, then values that are not dates, then records missing
    the field. `reverse` flips the order within each group, never the groups.
    """
    groups: tuple[list, list] = ([], [])
    missing = []
    for r in records:
        value = r.get(sort_by)
        if value in (None, ""):
            missing.append(r)
            continue
        key = _sort_key(value)
        groups[key[0]].append((key, r))
    ordered = []
    for group in groups:
        group.sort(key=lambda pair: pair[0], reverse=reverse)
        ordered.extend(r for _, r in group)
    return ordered + missing


class CollectionBuilder(Step):
    name = "collections"

    def __init__(self, collections: dict[str, CollectionConfig]):
        self.collections = collections

    def apply(self, files: RecordStore, context: BuildContext) -> RecordStore:
        members: dict[str, list[FileRecord]] = {name: [] for name in self.collections}

        for path, record in sorted(files.items()):
            for name, cfg in self.collections.items():
                if cfg.pattern and fnmatchcase(path, cfg.pattern):
                    _add(members[name], record)
            for name in record.collection:
                _add(members.setdefault(name, []), record)

        for name, records in members.items():
            cfg = self.collections.get(name, CollectionConfig())
            ordered = sort_records(records, cfg.sort_by, cfg.reverse)
            if cfg.limit is not None:
                ordered = ordered[: cfg.limit]
            for record in ordered:
                if name not in record.collection:
                    record.collection.append(name)
            context.collections[name] = ordered
            logger.debug("collection %s: %d records", name, len(ordered))

        return files
