"""Wraps records in Jinja2 layouts named by their `template` field."""

from __future__ import annotations

import logging
from pathlib import PurePosixPath

from jinja2 import Environment, FileSystemLoader, StrictUndefined, Undefined, select_autoescape
from markupsafe import Markup

from blogsmith.models import BuildContext, FileRecord, RecordStore

from .pipeline import Step

logger = logging.getLogger(__name__)


class TemplateRenderer(Step):
    name = "templates"

    def __init__(self, directory: str, default_template: str | None = None, strict: bool = False):
        self.directory = directory
        self.default_template = default_template
        self.env = Environment(
            loader=FileSystemLoader(directory),
            autoescape=select_autoescape(["html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined if strict else Undefined,
        )

    def _template_for(self, record: FileRecord) -> str | None:
        if record.template:
            return record.template
        if self.default_template and PurePosixPath(record.path).suffix == ".html":
            return self.default_template
        return None

    def apply(self, files: RecordStore, context: BuildContext) -> RecordStore:
        globals_ = context.template_globals()
        for path, record in files.items():
            name = self._template_for(record)
            if name is None:
                continue
            template = self.env.get_template(name)
            ctx = {**globals_, **record.template_context(), "contents": Markup(record.text)}
            record.contents = template.render(**ctx).encode("utf-8")
            logger.debug("templated %s with %s", path, name)
        return files
