from typing import Sequence

from hsk.models import VocabularyEntry


def matches(entry: VocabularyEntry, needle: str) -> bool:
    """Check a lowercased needle against character, pinyin and translation."""
    return (
        needle in entry.character.lower()
        or needle in entry.pinyin.lower()
        or needle in entry.translation.lower()
    )


def filter_entries(entries: Sequence[VocabularyEntry], query: str) -> Sequence[VocabularyEntry]:
    """
    Filter the vocabulary by a free-text query.

    Case-insensitive substring match, no accent folding: "ai" does not
    find "ài". An empty query returns the entries untouched.
    """
    if not query:
        return entries

    needle = query.lower()
    return [entry for entry in entries if matches(entry, needle)]
