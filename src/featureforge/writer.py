"""Filesystem helpers that apply a :class:`~featureforge.plan.ScaffoldPlan`."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from .plan import PlannedFile

__all__ = ["FileSystemWriter"]

LOGGER = logging.getLogger(__name__)


class FileSystemWriter:
    """Create planned directories and write planned files below ``root``.

    Directory creation is idempotent. Files are always overwritten, which is
    what makes re-running the generator regenerate a feature in place.
    """

    def __init__(self, root: Path | str, *, encoding: str = "utf-8") -> None:
        self._root = Path(root)
        self._encoding = encoding

    @property
    def root(self) -> Path:
        """Directory every planned path is resolved against."""

        return self._root

    def create_directories(self, directories: Iterable[str]) -> list[Path]:
        created: list[Path] = []
        for relative in directories:
            path = self._root / relative
            path.mkdir(parents=True, exist_ok=True)
            LOGGER.info("Created directory: %s", relative)
            created.append(path)
        return created

    def write_files(self, files: Iterable[PlannedFile]) -> list[Path]:
        written: list[Path] = []
        for planned in files:
            path = self._root / planned.path
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(planned.content, encoding=self._encoding)
            LOGGER.info("Created file: %s", planned.path)
            written.append(path)
        return written
