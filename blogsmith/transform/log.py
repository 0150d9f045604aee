"""Logs the computed collections."""

import logging

from blogsmith.models import BuildContext, RecordStore

from .pipeline import Step

logger = logging.getLogger(__name__)


class CollectionLogger(Step):
    name = "log"

    def apply(self, files: RecordStore, context: BuildContext) -> RecordStore:
        for name, records in context.collections.items():
            logger.info("Collection %s (%d): %s", name, len(records), ", ".join(r.path for r in records))
        return files
