"""YAML config loading with env var expansion."""

import os
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import BlogsmithConfig


def load_config(cli_path: str | None = None) -> BlogsmithConfig:
    """Load config with resolution order: CLI > project-local > defaults."""
    if cli_path and not Path(cli_path).exists():
        raise ValueError(f"Config file not found: {cli_path}")

    config_paths = [
        Path(cli_path) if cli_path else None,
        Path("./blogsmith.yaml"),
    ]

    for path in config_paths:
        if path and path.exists():
            try:
                with open(path) as f:
                    raw = yaml.safe_load(f)
                if raw is None:
                    continue
                raw = _expand_env_vars(raw)
                return BlogsmithConfig(**raw)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {path}: {e}") from e
            except (ValidationError, TypeError) as e:
                raise ValueError(f"Invalid config in {path}: {e}") from e

    return BlogsmithConfig()


def _expand_env_vars(obj: object) -> object:
    """Recursively expand ${VAR} references in strings."""
    if isinstance(obj, str):
        return re.sub(r"\$\{(\w+)\}", lambda m: os.environ.get(m.group(1), ""), obj)
    elif isinstance(obj, dict):
        return {k: _expand_env_vars(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [_expand_env_vars(v) for v in obj]
    return obj


# Default YAML template for `blogsmith config init`
DEFAULT_CONFIG_TEMPLATE = """\
# blogsmith.yaml

source: "src"
destination: "build"
clean: true                    # empty the destination before writing
ignore: []                     # glob patterns relative to source

# Site metadata, available to templates as `site`
site:
  title: "My Blog"
  url: "https://example.com/blog/"
  description: ""
  author: ""

drafts:
  enabled: true                # drop files with `draft: true`

highlight:
  enabled: true
  css_class: "highlight"
  guess_lang: false

dates:
  mode: "derive"               # derive (longDate + shortDate) | overwrite (date <- long form)

links:
  strip_question_marks: true

collections:
  posts:
    pattern: "posts/*.md"
    sort_by: "date"
    reverse: true

markdown:
  extensions: [fenced_code, tables, smarty]

# RSS feed built from a collection
feed:
  enabled: true
  collection: "posts"
  destination: "rss.xml"
  limit: 20
  title: "My Blog"
  site_url: "https://example.com/blog/"
  feed_url: "https://example.com/blog/rss.xml"
  description: ""
  managing_editor: ""
  web_master: ""
  language: "en"

templates:
  enabled: true
  directory: "templates"
  # default_template: "post.html"

permalinks:
  enabled: true
  pattern: ":title"

log_collections: true

# Logging
log_level: "info"              # debug | info | warn | error
"""
