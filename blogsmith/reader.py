"""Loads a source tree into a record store, splitting off YAML front matter."""

from __future__ import annotations

import logging
import re
from fnmatch import fnmatchcase
from pathlib import Path

import yaml

from blogsmith.models import FileRecord, RecordStore

logger = logging.getLogger(__name__)

_FRONTMATTER_RE = re.compile(r"\A---[ \t]*\r?\n(.*?)^---[ \t]*(?:\r?\n|\Z)", re.DOTALL | re.MULTILINE)


def parse_frontmatter(content: str) -> tuple[dict, str]:
    """Extract YAML frontmatter and body from markdown content."""
    m = _FRONTMATTER_RE.match(content)
    if not m:
        return {}, content
    metadata = yaml.safe_load(m.group(1)) or {}
    if not isinstance(metadata, dict):
        raise ValueError("front matter must be a mapping")
    return metadata, content[m.end():]


def read_file(path: Path, rel: str) -> FileRecord:
    raw = path.read_bytes()
    try:
        content = raw.decode("utf-8")
    except UnicodeDecodeError:
        # binary asset, passed through untouched
        return FileRecord(path=rel, contents=raw)
    try:
        metadata, body = parse_frontmatter(content)
        # pydantic ValidationError is a ValueError
        return FileRecord.from_source(rel, metadata, body.encode("utf-8"))
    except (yaml.YAMLError, ValueError) as e:
        raise ValueError(f"Invalid front matter in {rel}: {e}") from e


def read_source(source_dir: Path, ignore: list[str] | None = None) -> RecordStore:
    """Read every file under source_dir, keyed by POSIX-style relative path."""
    if not source_dir.is_dir():
        raise FileNotFoundError(f"Source directory not found: {source_dir}")

    files: RecordStore = {}
    for path in sorted(source_dir.rglob("*")):
        if not path.is_file():
            continue
        rel = path.relative_to(source_dir).as_posix()
        if any(fnmatchcase(rel, pat) for pat in ignore or []):
            logger.debug("ignored %s", rel)
            continue
        files[rel] = read_file(path, rel)

    logger.info("Read %d files from %s", len(files), source_dir)
    return files
