"""
CSV export of vocabulary entries.

The produced file is what spreadsheets open: UTF-8 with a BOM,
comma separated, fields quoted only when they need it.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from hsk.models import VocabularyEntry

logger = logging.getLogger(__name__)

CSV_HEADERS = ["ID", "Character", "Pinyin", "Word Class", "Translation"]
CSV_FIELDS = ["id", "character", "pinyin", "word_class", "translation"]

EXPORT_FILENAME = "HSK1_Vocabulary.csv"
CSV_MIMETYPE = "text/csv; charset=utf-8"
UTF8_BOM = "\ufeff"

NO_DATA_MESSAGE = "No data to export."


@dataclass(frozen=True)
class CsvDownload:
    filename: str
    content: bytes
    mimetype: str = CSV_MIMETYPE

    def save(self, directory) -> Path:
        """Write the file into a directory and return its path."""
        directory = Path(directory)
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / self.filename
        path.write_bytes(self.content)
        logger.info(f"Exported {len(self.content)} bytes to {path}")
        return path


def escape_csv_field(value) -> str:
    text = str(value)
    if '"' in text or "," in text or "\n" in text:
        return '"' + text.replace('"', '""') + '"'
    return text


def to_csv(entries: Sequence[VocabularyEntry]) -> str:
    """Serialize entries to CSV text, header first, rows joined by newlines."""
    rows = [",".join(CSV_HEADERS)]
    for entry in entries:
        rows.append(",".join(escape_csv_field(getattr(entry, field)) for field in CSV_FIELDS))
    return "\n".join(rows)


def download(text: str, filename: str = EXPORT_FILENAME) -> CsvDownload:
    """Package CSV text as a downloadable file, prefixed with a UTF-8 BOM."""
    return CsvDownload(filename=filename, content=(UTF8_BOM + text).encode("utf-8"))
