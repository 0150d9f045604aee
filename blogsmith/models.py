"""Core models: file records, the shared build context, and build results."""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from blogsmith.config.models import SiteConfig

# Front-matter keys that map onto FileRecord fields; everything else lands in `metadata`.
_RECORD_KEYS = frozenset(
    {"title", "date", "longDate", "shortDate", "link", "draft", "template", "permalink", "collection"}
)


class FileRecord(BaseModel):
    """One source file plus its metadata, as it flows through the pipeline."""

    model_config = ConfigDict(populate_by_name=True)

    path: str
    contents: bytes = b""
    title: str | None = None
    date: dt.datetime | dt.date | int | float | str | None = None
    long_date: str | None = Field(default=None, alias="longDate")
    short_date: str | None = Field(default=None, alias="shortDate")
    link: str | None = None
    draft: bool = False
    template: str | None = None
    permalink: str | bool | None = None
    collection: list[str] = []
    metadata: dict[str, Any] = {}

    @field_validator("title", mode="before")
    @classmethod
    def _title_to_str(cls, v: Any) -> Any:
        if v is None or isinstance(v, str):
            return v
        return str(v)

    @field_validator("collection", mode="before")
    @classmethod
    def _collection_to_list(cls, v: Any) -> Any:
        if v is None:
            return []
        if isinstance(v, str):
            return [v]
        return v

    @classmethod
    def from_source(cls, path: str, front_matter: dict[str, Any], body: bytes) -> FileRecord:
        known = {k: v for k, v in front_matter.items() if k in _RECORD_KEYS}
        extra = {k: v for k, v in front_matter.items() if k not in _RECORD_KEYS}
        return cls(path=path, contents=body, metadata=extra, **known)

    @property
    def text(self) -> str:
        return self.contents.decode("utf-8")

    def get(self, name: str, default: Any = None) -> Any:
        """Look up a field by name or alias, then fall back to extra front matter."""
        if name in type(self).model_fields:
            return getattr(self, name)
        for fname, info in type(self).model_fields.items():
            if info.alias == name:
                return getattr(self, fname)
        return self.metadata.get(name, default)

    def template_context(self) -> dict[str, Any]:
        """Flatten the record into template variables (derived fields camel-cased)."""
        ctx = dict(self.metadata)
        ctx.update(self.model_dump(by_alias=True, exclude={"contents", "metadata"}))
        return ctx


@dataclass
class BuildContext:
    """State shared between steps: site metadata and computed collections."""

    site: SiteConfig = field(default_factory=SiteConfig)
    collections: dict[str, list[FileRecord]] = field(default_factory=dict)

    def template_globals(self) -> dict[str, Any]:
        return {
            "site": self.site.model_dump(),
            "collections": {
                name: [r.template_context() for r in records] for name, records in self.collections.items()
            },
        }


RecordStore = dict[str, FileRecord]


class BuildResult(BaseModel):
    """Terminal outcome of one build."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    destination: str
    written: list[str] = []
    error: Exception | None = None
    duration: float = 0.0

    @property
    def ok(self) -> bool:
        return self.error is None
