from __future__ import annotations

from hsk.filtering import filter_entries


def test_empty_query_returns_entries_unchanged(entries):
    assert filter_entries(entries, "") is entries


def test_whitespace_query_is_not_trimmed(entries):
    # only "copo, xícara" contains a space
    assert [e.id for e in filter_entries(entries, " ")] == [2]


def test_matches_character(entries):
    assert [e.id for e in filter_entries(entries, "北")] == [3]


def test_matches_pinyin_case_insensitive(entries):
    assert [e.id for e in filter_entries(entries, "BĚIJĪNG")] == [3]
    assert [e.id for e in filter_entries(entries, "zhōng")] == [5]


def test_matches_translation_case_insensitive(entries):
    assert [e.id for e in filter_entries(entries, "CHINA")] == [5]
    assert [e.id for e in filter_entries(entries, "xícara")] == [2]


def test_word_class_and_id_are_not_searched(entries):
    assert filter_entries(entries, "v.") == []
    assert filter_entries(entries, "3") == []


def test_no_diacritic_normalisation(entries):
    assert filter_entries(entries, "ai") == []
    assert [e.id for e in filter_entries(entries, "ài")] == [1]


def test_result_keeps_original_order(entries):
    result = filter_entries(entries, "i")
    ids = [e.id for e in result]
    assert ids == sorted(ids)
    assert set(ids) <= {e.id for e in entries}


def test_every_entry_is_either_kept_or_does_not_match(entries):
    for query in ["a", "ér", "P", "na", "子", "zzz"]:
        needle = query.lower()
        kept = filter_entries(entries, query)
        for entry in entries:
            fields = (entry.character.lower(), entry.pinyin.lower(), entry.translation.lower())
            assert (entry in kept) == any(needle in field for field in fields)
