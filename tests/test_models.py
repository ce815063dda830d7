from __future__ import annotations

from hsk.models import VocabularyEntry


def test_entry_round_trips_through_dict():
    entry = VocabularyEntry(4, "杯子", "bēizi", "n.", "copo, xícara")

    data = entry.to_dict()

    assert data == {
        "id": 4,
        "character": "杯子",
        "pinyin": "bēizi",
        "word_class": "n.",
        "translation": "copo, xícara",
    }
    assert VocabularyEntry.from_dict(data) == entry


def test_from_dict_normalises_missing_word_class():
    entry = VocabularyEntry.from_dict(
        {"id": "7", "character": "不", "pinyin": "bù", "word_class": None, "translation": "não"}
    )

    assert entry.id == 7
    assert entry.word_class == ""
