"""SiteWriter: writes a record store to the destination directory."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from blogsmith.models import RecordStore

logger = logging.getLogger(__name__)


class SiteWriter:
    """Writes every record to `destination/<record path>`.

    Handles optional cleaning of the destination, directory creation,
    path traversal checks, and dry-run mode. Cleaning is refused when the
    destination is, or contains, any of the protected paths.
    """

    def __init__(
        self,
        destination: str | Path,
        *,
        clean: bool = True,
        protected: list[Path] | None = None,
    ) -> None:
        self.destination = Path(destination)
        self.clean = clean
        self.protected = [Path(p) for p in protected or []]

    def target_for(self, rel: str) -> Path:
        dest = self.destination / rel
        if not dest.resolve().is_relative_to(self.destination.resolve()):
            raise ValueError(f"Output path escapes destination: {rel}")
        return dest

    def check_clean(self) -> None:
        dest = self.destination.resolve()
        for path in self.protected:
            resolved = path.resolve()
            if resolved == dest or dest in resolved.parents:
                raise ValueError(f"Refusing to clean {self.destination}: it contains {path}")

    def write(self, files: RecordStore, *, dry_run: bool = False) -> list[Path]:
        """Write all records. Returns the written (or would-be) paths in store order."""
        targets = [(self.target_for(rel), record) for rel, record in files.items()]

        if dry_run:
            for dest, _ in targets:
                logger.debug("dry-run: would write %s", dest)
            return [dest for dest, _ in targets]

        if self.clean and self.destination.exists():
            self.check_clean()
            shutil.rmtree(self.destination)
            logger.debug("cleaned %s", self.destination)
        self.destination.mkdir(parents=True, exist_ok=True)

        for dest, record in targets:
            dest.parent.mkdir(parents=True, exist_ok=True)
            dest.write_bytes(record.contents)
            logger.debug("wrote %s (%d bytes)", dest, len(record.contents))

        logger.info("Wrote %d files to %s", len(targets), self.destination)
        return [dest for dest, _ in targets]
