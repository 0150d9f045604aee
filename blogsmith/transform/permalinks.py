"""Moves HTML records to pretty `<permalink>/index.html` paths."""

from __future__ import annotations

import logging
import re
from pathlib import PurePosixPath

from blogsmith.models import BuildContext, FileRecord, RecordStore

from .pipeline import Step

logger = logging.getLogger(__name__)

_PLACEHOLDER_RE = re.compile(r":(\w+)")
_NON_URL_RE = re.compile(r"[^a-z0-9]+")


class PermalinkConflictError(ValueError):
    def __init__(self, target: str, first: str, second: str):
        self.target = target
        super().__init__(f"Permalink conflict: {first} and {second} both resolve to {target}")


def permalink_slug(value: object) -> str:
    """Hello, World! -> hello-world"""
    return _NON_URL_RE.sub("-", str(value).lower()).strip("-")


def _resolve(path: str) -> str:
    """posts/foo.html -> posts/foo; posts/index.html -> posts; index.html -> ''"""
    p = PurePosixPath(path)
    if p.stem == "index":
        parent = str(p.parent)
        return "" if parent == "." else parent
    return str(p.with_suffix(""))


class PermalinkGenerator(Step):
    name = "permalinks"

    def __init__(self, pattern: str = ":title"):
        self.pattern = pattern

    def substitute(self, record: FileRecord) -> str | None:
        """Fill the pattern from the record; None if any placeholder is empty."""
        missing = False

        def _fill(m: re.Match) -> str:
            nonlocal missing
            value = record.get(m.group(1))
            slug = permalink_slug(value) if value not in (None, "") else ""
            if not slug:
                missing = True
            return slug

        result = _PLACEHOLDER_RE.sub(_fill, self.pattern)
        return None if missing else result.strip("/")

    def moves(self, record: FileRecord) -> bool:
        return PurePosixPath(record.path).suffix == ".html" and record.permalink is not False

    def permalink_for(self, record: FileRecord) -> str:
        if isinstance(record.permalink, str) and record.permalink.strip("/"):
            return record.permalink.strip("/")
        substituted = self.substitute(record)
        if substituted is None:
            return _resolve(record.path)
        return substituted

    def apply(self, files: RecordStore, context: BuildContext) -> RecordStore:
        moved: RecordStore = {}
        sources: dict[str, str] = {}
        for path, record in files.items():
            if not self.moves(record):
                target = path
            else:
                link = self.permalink_for(record)
                target = f"{link}/index.html" if link else "index.html"
                record.permalink = "/" + link if link else "/"
                record.path = target
            if target in moved:
                raise PermalinkConflictError(target, sources[target], path)
            moved[target] = record
            sources[target] = path
            if target != path:
                logger.debug("permalink %s -> %s", path, target)
        return moved
