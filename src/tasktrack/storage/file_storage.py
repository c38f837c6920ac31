# src/tasktrack/storage/file_storage.py

from __future__ import annotations

import logging
import os
from pathlib import Path

from ..core.errors import IOFailure

logger = logging.getLogger(__name__)


class FileStorage:
    """
    Plain-text save file, one task per line.

    - a missing file reads as an empty list (first run)
    - writes go to a sibling .tmp file and are moved into place with os.replace,
      so an interrupted save never leaves a half-written file behind
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def read(self) -> list[str]:
        if not self._path.exists():
            logger.info("No save file at %s, starting empty", self._path)
            return []
        try:
            text = self._path.read_text("utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.exception("Failed to read save file %s", self._path)
            raise IOFailure(self._path, str(e)) from e
        return text.splitlines()

    def write(self, text: str) -> None:
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(text, "utf-8")
            os.replace(tmp, self._path)
        except OSError as e:
            logger.exception("Failed to write save file %s", self._path)
            raise IOFailure(self._path, str(e)) from e
        logger.info("Saved %d bytes to %s", len(text), self._path)
