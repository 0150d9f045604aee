"""Transform steps for turning source records into a rendered site."""

from .pipeline import BuildError, Pipeline, Step
from .drafts import DraftFilter
from .highlight import CodeHighlighter
from .dates import DateFormatter, long_date, parse_date, short_date
from .links import LinkSlugifier, slugify
from .collections import CollectionBuilder, sort_records
from .render import MarkdownRenderer
from .feed import FeedGenerator
from .templates import TemplateRenderer
from .permalinks import PermalinkConflictError, PermalinkGenerator
from .log import CollectionLogger

__all__ = [
    "BuildError",
    "Pipeline",
    "Step",
    "DraftFilter",
    "CodeHighlighter",
    "DateFormatter",
    "LinkSlugifier",
    "CollectionBuilder",
    "MarkdownRenderer",
    "FeedGenerator",
    "TemplateRenderer",
    "PermalinkConflictError",
    "PermalinkGenerator",
    "CollectionLogger",
    "long_date",
    "parse_date",
    "short_date",
    "slugify",
    "sort_records",
]
