"""Tree source that reads a hierarchy dump from disk.

The file is re-read on every snapshot, so a dump rewritten by another
process (e.g. a periodic uiautomator dump) is picked up between polls.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from finder.models import TreeSourceError
from finder.sources import BaseTreeSource

logger = logging.getLogger("element-finder.sources")


class FileTreeSource(BaseTreeSource):
    """Reads a JSON hierarchy dump from a file."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        super().__init__(source_id=str(self.path), source_type="file")

    def fetch(self) -> dict | list[dict]:
        try:
            text = self.path.read_text()
        except OSError as e:
            raise TreeSourceError(f"Cannot read hierarchy dump {self.path}: {e}") from e
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise TreeSourceError(f"Hierarchy dump {self.path} is not valid JSON: {e}") from e
