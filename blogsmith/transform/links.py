"""Derives a URL-safe `link` slug from each record's title."""

import re

from blogsmith.models import BuildContext, RecordStore

from .pipeline import Step

_WHITESPACE_RE = re.compile(r"\s+")


def slugify(title: str, strip_question_marks: bool = True) -> str:
    """Hello, World? -> hello-world

    Punctuation is removed before whitespace collapses to hyphens, so a
    comma next to a space never leaves a double hyphen.
    """
    slug = title.strip().lower()
    if strip_question_marks:
        slug = slug.replace("?", "")
    slug = slug.replace(",", "")
    return _WHITESPACE_RE.sub("-", slug)


class LinkSlugifier(Step):
    name = "links"

    def __init__(self, strip_question_marks: bool = True):
        self.strip_question_marks = strip_question_marks

    def apply(self, files: RecordStore, context: BuildContext) -> RecordStore:
        for record in files.values():
            if record.title and record.title.strip():
                record.link = slugify(record.title, self.strip_question_marks)
        return files
