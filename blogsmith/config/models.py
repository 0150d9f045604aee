from pydantic import BaseModel, Field
from typing import Literal


class SiteConfig(BaseModel):
    title: str = ""
    url: str = ""
    description: str = ""
    author: str = ""


class DraftsConfig(BaseModel):
    enabled: bool = True


class HighlightConfig(BaseModel):
    enabled: bool = True
    css_class: str = "highlight"
    guess_lang: bool = False


class DatesConfig(BaseModel):
    # derive: add longDate/shortDate; overwrite: replace date with the long form
    mode: Literal["derive", "overwrite"] = "derive"


class LinksConfig(BaseModel):
    strip_question_marks: bool = True


class CollectionConfig(BaseModel):
    pattern: str | None = None
    sort_by: str = "date"
    reverse: bool = False
    limit: int | None = None


class MarkdownConfig(BaseModel):
    extensions: list[str] = ["fenced_code", "tables", "smarty"]


class FeedConfig(BaseModel):
    enabled: bool = False
    collection: str = "posts"
    destination: str = "rss.xml"
    limit: int = 20
    title: str = ""
    site_url: str = ""
    feed_url: str = ""
    description: str = ""
    managing_editor: str = ""
    web_master: str = ""
    language: str = ""


class TemplatesConfig(BaseModel):
    enabled: bool = True
    directory: str = "templates"
    default_template: str | None = None


class PermalinksConfig(BaseModel):
    enabled: bool = True
    pattern: str = ":title"


class BlogsmithConfig(BaseModel):
    source: str = "src"
    destination: str = "build"
    clean: bool = True
    ignore: list[str] = []
    site: SiteConfig = Field(default_factory=SiteConfig)
    drafts: DraftsConfig = Field(default_factory=DraftsConfig)
    highlight: HighlightConfig = Field(default_factory=HighlightConfig)
    dates: DatesConfig = Field(default_factory=DatesConfig)
    links: LinksConfig = Field(default_factory=LinksConfig)
    collections: dict[str, CollectionConfig] = Field(
        default_factory=lambda: {
            "posts": CollectionConfig(pattern="posts/*.md", sort_by="date", reverse=True)
        }
    )
    markdown: MarkdownConfig = Field(default_factory=MarkdownConfig)
    feed: FeedConfig = Field(default_factory=FeedConfig)
    templates: TemplatesConfig = Field(default_factory=TemplatesConfig)
    permalinks: PermalinksConfig = Field(default_factory=PermalinksConfig)
    log_collections: bool = True
    log_level: Literal["debug", "info", "warn", "error"] = "info"
