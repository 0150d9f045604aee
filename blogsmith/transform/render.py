"""Renders markdown records to HTML and renames them to .html."""

from __future__ import annotations

import logging
from pathlib import PurePosixPath

import markdown

from blogsmith.models import BuildContext, RecordStore

from .pipeline import Step

logger = logging.getLogger(__name__)

MARKDOWN_SUFFIXES = (".md", ".markdown")


def is_markdown(path: str) -> bool:
    return PurePosixPath(path).suffix.lower() in MARKDOWN_SUFFIXES


class MarkdownRenderer(Step):
    name = "markdown"

    def __init__(self, extensions: list[str] | None = None):
        self.extensions = extensions if extensions is not None else ["fenced_code", "tables"]
        self._md = markdown.Markdown(extensions=self.extensions, output_format="html")

    def apply(self, files: RecordStore, context: BuildContext) -> RecordStore:
        rendered: RecordStore = {}
        for path, record in files.items():
            if not is_markdown(path):
                rendered[path] = record
                continue
            html = self._md.reset().convert(record.text)
            new_path = str(PurePosixPath(path).with_suffix(".html"))
            record.contents = html.encode("utf-8")
            record.path = new_path
            rendered[new_path] = record
            logger.debug("rendered %s -> %s", path, new_path)
        return rendered
