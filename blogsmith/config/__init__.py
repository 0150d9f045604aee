from .loader import load_config
from .models import (
    BlogsmithConfig,
    CollectionConfig,
    DatesConfig,
    DraftsConfig,
    FeedConfig,
    HighlightConfig,
    LinksConfig,
    MarkdownConfig,
    PermalinksConfig,
    SiteConfig,
    TemplatesConfig,
)

__all__ = [
    "BlogsmithConfig",
    "CollectionConfig",
    "DatesConfig",
    "DraftsConfig",
    "FeedConfig",
    "HighlightConfig",
    "LinksConfig",
    "MarkdownConfig",
    "PermalinksConfig",
    "SiteConfig",
    "TemplatesConfig",
    "load_config",
]
