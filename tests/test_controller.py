from __future__ import annotations

import asyncio

from hsk.controller import LoadStatus, ViewController
from hsk.export import NO_DATA_MESSAGE
from hsk.models import VocabularyEntry
from hsk.source import FetchError

LOVE = VocabularyEntry(1, "爱", "ài", "v.", "amar")


class DummySource:
    def __init__(self, entries=None, error=None):
        self.entries = entries or []
        self.error = error
        self.calls = 0

    async def load(self):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return list(self.entries)


def loaded(source) -> ViewController:
    controller = ViewController(source)
    asyncio.run(controller.load())
    return controller


def test_initial_state_is_loading_with_empty_view():
    controller = ViewController(DummySource([LOVE]))

    assert controller.status == LoadStatus.LOADING
    assert controller.filtered == ()
    assert not controller.export_current_view().ok


def test_load_success(entries):
    controller = loaded(DummySource(entries))

    assert controller.status == LoadStatus.READY
    assert controller.error is None
    assert list(controller.filtered) == entries


def test_unaccented_query_does_not_match_accented_pinyin():
    controller = loaded(DummySource([LOVE]))
    controller.set_query("ai")

    assert list(controller.filtered) == []


def test_translation_query_matches():
    controller = loaded(DummySource([LOVE]))
    controller.set_query("amar")

    assert list(controller.filtered) == [LOVE]


def test_load_failure_reports_server_message():
    controller = loaded(DummySource(error=FetchError("db down")))

    assert controller.status == LoadStatus.FAILED
    assert controller.error == "Could not load vocabulary: db down"
    assert controller.entries == ()


def test_filtered_view_follows_query_and_entries(entries):
    source = DummySource(entries)
    controller = loaded(source)

    controller.set_query("n")
    first = controller.filtered
    assert controller.filtered is first

    controller.set_query("pequim")
    assert [e.id for e in controller.filtered] == [3]

    source.entries = [LOVE]
    asyncio.run(controller.load())
    assert list(controller.filtered) == []
    assert source.calls == 2


def test_failed_reload_drops_previous_list(entries):
    source = DummySource(entries)
    controller = loaded(source)

    source.error = FetchError("Network error, the server could not be reached.")
    asyncio.run(controller.load())

    assert controller.status == LoadStatus.FAILED
    assert controller.filtered == ()


def test_newer_load_wins_over_slow_older_load():
    class GatedSource:
        def __init__(self):
            self.gates = []

        async def load(self):
            gate = asyncio.get_running_loop().create_future()
            self.gates.append(gate)
            return await gate

    async def scenario():
        source = GatedSource()
        controller = ViewController(source)

        first = asyncio.ensure_future(controller.load())
        await asyncio.sleep(0)
        second = asyncio.ensure_future(controller.load())
        await asyncio.sleep(0)

        source.gates[1].set_result([LOVE])
        await second
        source.gates[0].set_result([VocabularyEntry(9, "旧", "jiù", "adj.", "velho")])
        await first
        return controller

    controller = asyncio.run(scenario())

    assert controller.status == LoadStatus.READY
    assert controller.entries == (LOVE,)


def test_export_current_view(entries):
    controller = loaded(DummySource(entries))
    controller.set_query("china")

    result = controller.export_current_view()

    assert result.ok
    assert result.notice is None
    text = result.download.content.decode("utf-8-sig")
    assert text == "ID,Character,Pinyin,Word Class,Translation\n5,中国,Zhōngguó,n.,China"


def test_export_empty_view_gives_notice(entries):
    controller = loaded(DummySource(entries))
    controller.set_query("nothing matches this")

    result = controller.export_current_view()

    assert not result.ok
    assert result.download is None
    assert result.notice == NO_DATA_MESSAGE
