"""Drops records marked `draft: true`."""

import logging

from blogsmith.models import BuildContext, RecordStore

from .pipeline import Step

logger = logging.getLogger(__name__)


class DraftFilter(Step):
    name = "drafts"

    def apply(self, files: RecordStore, context: BuildContext) -> RecordStore:
        kept: RecordStore = {}
        for path, record in files.items():
            if record.draft:
                logger.info("Skipping draft: %s", path)
                continue
            kept[path] = record
        return kept
