"""Blogsmith: reads the source tree, runs the pipeline, writes the site."""

from __future__ import annotations

import logging
import time
from pathlib import Path

from blogsmith.config.models import BlogsmithConfig
from blogsmith.models import BuildContext, BuildResult, RecordStore
from blogsmith.output import SiteWriter
from blogsmith.reader import read_source
from blogsmith.reporting import ConsoleReporter, Reporter
from blogsmith.transform import (
    BuildError,
    CodeHighlighter,
    CollectionBuilder,
    CollectionLogger,
    DateFormatter,
    DraftFilter,
    FeedGenerator,
    LinkSlugifier,
    MarkdownRenderer,
    PermalinkGenerator,
    Pipeline,
    Step,
    TemplateRenderer,
)

logger = logging.getLogger(__name__)


def build_pipeline(config: BlogsmithConfig, base_dir: Path | None = None) -> Pipeline:
    """Assemble the step list from config.

    Order matters: dates and links must run before anything that reads
    longDate/shortDate/link (feed, templates), and highlighting must see
    markdown source before it is rendered. The feed shares the permalink
    generator so its item links match the paths that get written.
    """
    base = base_dir or Path(".")
    permalinks = PermalinkGenerator(config.permalinks.pattern) if config.permalinks.enabled else None
    steps: list[Step] = []
    if config.drafts.enabled:
        steps.append(DraftFilter())
    if config.highlight.enabled:
        steps.append(CodeHighlighter(config.highlight.css_class, config.highlight.guess_lang))
    steps.append(DateFormatter(config.dates.mode))
    steps.append(LinkSlugifier(config.links.strip_question_marks))
    steps.append(CollectionBuilder(config.collections))
    steps.append(MarkdownRenderer(config.markdown.extensions))
    if config.feed.enabled:
        steps.append(FeedGenerator(config.feed, permalinks=permalinks))
    if config.templates.enabled:
        steps.append(
            TemplateRenderer(str(base / config.templates.directory), config.templates.default_template)
        )
    if permalinks is not None:
        steps.append(permalinks)
    if config.log_collections:
        steps.append(CollectionLogger())
    return Pipeline(steps)


class Blogsmith:
    def __init__(
        self,
        config: BlogsmithConfig,
        *,
        base_dir: str | Path = ".",
        reporter: Reporter | None = None,
        pipeline: Pipeline | None = None,
    ):
        """
        Args:
            config: BlogsmithConfig with source, destination and step settings
            base_dir: Directory that source, destination and templates resolve against
            reporter: Receives the build outcome; defaults to console output
            pipeline: Step list override (defaults to build_pipeline(config))
        """
        self.config = config
        self.base_dir = Path(base_dir)
        self.reporter = reporter if reporter is not None else ConsoleReporter()
        self.pipeline = pipeline if pipeline is not None else build_pipeline(config, self.base_dir)

    @property
    def source(self) -> Path:
        return self.base_dir / self.config.source

    @property
    def destination(self) -> Path:
        return self.base_dir / self.config.destination

    # -- Public API ----------------------------------------------------------

    def process(self) -> tuple[RecordStore, BuildContext]:
        """Read and transform without writing. Raises BuildError."""
        try:
            files = read_source(self.source, self.config.ignore)
        except (OSError, ValueError) as exc:
            raise BuildError("read", exc) from exc
        context = BuildContext(site=self.config.site)
        files = self.pipeline.run(files, context)
        return files, context

    def build(self, *, dry_run: bool = False) -> BuildResult:
        """Run the full build and report the outcome. Never raises BuildError."""
        start = time.monotonic()
        result = BuildResult(destination=str(self.destination))
        try:
            files, _context = self.process()
            writer = SiteWriter(
                self.destination,
                clean=self.config.clean,
                protected=[self.base_dir, self.source, self.base_dir / self.config.templates.directory],
            )
            try:
                written = writer.write(files, dry_run=dry_run)
            except (OSError, ValueError) as exc:
                raise BuildError("write", exc) from exc
            result.written = [p.relative_to(self.destination).as_posix() for p in written]
        except BuildError as exc:
            logger.error("Build failed in %s: %s", exc.step, exc.__cause__)
            result.error = exc
        result.duration = time.monotonic() - start
        self.reporter.report(result)
        return result
