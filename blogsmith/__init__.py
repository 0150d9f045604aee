"""Blogsmith: a markdown blog build pipeline."""

from blogsmith.builder import Blogsmith, build_pipeline
from blogsmith.models import BuildContext, BuildResult, FileRecord

__all__ = ["Blogsmith", "BuildContext", "BuildResult", "FileRecord", "build_pipeline"]
