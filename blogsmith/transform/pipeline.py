"""Pipeline: folds an ordered list of steps over the record store."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from blogsmith.models import BuildContext, RecordStore

logger = logging.getLogger(__name__)


class BuildError(Exception):
    """A pipeline step (or the surrounding read/write) failed."""

    def __init__(self, step: str, cause: Exception) -> None:
        self.step = step
        super().__init__(f"{step} failed: {cause}")
        self.__cause__ = cause


class Step(ABC):
    name: str = "step"

    @abstractmethod
    def apply(self, files: RecordStore, context: BuildContext) -> RecordStore:
        """Transform the record store. context carries site metadata and collections."""
        ...


class Pipeline:
    def __init__(self, steps: list[Step]):
        self.steps = steps

    @property
    def names(self) -> list[str]:
        return [s.name for s in self.steps]

    def run(self, files: RecordStore, context: BuildContext) -> RecordStore:
        for step in self.steps:
            logger.debug("running step %s on %d files", step.name, len(files))
            try:
                files = step.apply(files, context)
            except Exception as exc:
                logger.debug("step %s raised %r", step.name, exc)
                raise BuildError(step.name, exc) from exc
        return files
