"""
View controller - state behind the vocabulary page.

Holds the loaded word list and the search query. The filtered view is
derived from the two and recomputed whenever one of them changes;
export works on whatever is currently visible.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Tuple

from hsk.export import CsvDownload, NO_DATA_MESSAGE, download, to_csv, EXPORT_FILENAME
from hsk.filtering import filter_entries
from hsk.models import VocabularyEntry
from hsk.source import FetchError

logger = logging.getLogger(__name__)


class LoadStatus(str, Enum):
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


@dataclass(frozen=True)
class ExportResult:
    """Either a file to hand to the user or a notice explaining why there is none."""
    download: Optional[CsvDownload] = None
    notice: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.download is not None


class ViewController:
    def __init__(self, source):
        self.source = source
        self.status = LoadStatus.LOADING
        self.error: Optional[str] = None

        self._entries: Tuple[VocabularyEntry, ...] = ()
        self._entries_version = 0
        self._query = ""

        # Bumped on every load() so late results of an older load are dropped
        self._load_generation = 0

        self._view_key = None
        self._view: Sequence[VocabularyEntry] = ()

    @property
    def entries(self) -> Tuple[VocabularyEntry, ...]:
        return self._entries

    @property
    def query(self) -> str:
        return self._query

    def set_query(self, text: str):
        self._query = text

    def _set_entries(self, entries):
        self._entries = tuple(entries)
        self._entries_version += 1

    @property
    def filtered(self) -> Sequence[VocabularyEntry]:
        """Entries matching the current query."""
        key = (self._entries_version, self._query)
        if key != self._view_key:
            self._view = filter_entries(self._entries, self._query)
            self._view_key = key
        return self._view

    async def load(self):
        """Fetch the word list from the source. A newer load() supersedes this one."""
        self._load_generation += 1
        generation = self._load_generation

        self.status = LoadStatus.LOADING
        self.error = None
        self._set_entries(())

        try:
            entries = await self.source.load()
        except FetchError as e:
            if generation != self._load_generation:
                logger.info("Discarding failure of a superseded load")
                return
            logger.error(f"Failed to load vocabulary: {e}")
            self.status = LoadStatus.FAILED
            self.error = str(e)
            return

        if generation != self._load_generation:
            logger.info("Discarding result of a superseded load")
            return

        self._set_entries(entries)
        self.status = LoadStatus.READY
        logger.info(f"Vocabulary loaded: {len(self._entries)} words")

    def export_current_view(self, filename: str = EXPORT_FILENAME) -> ExportResult:
        """Export the visible entries as CSV."""
        entries = self.filtered
        if not entries:
            logger.info("Export requested with nothing to export")
            return ExportResult(notice=NO_DATA_MESSAGE)

        return ExportResult(download=download(to_csv(entries), filename))
