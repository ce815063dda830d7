from __future__ import annotations

import importlib
import io
import logging

import hsk.main as main_module
from hsk.models import VocabularyEntry
from hsk.source import FetchError


class DummySource:
    def __init__(self, entries=None, error=None):
        self.entries = entries or []
        self.error = error

    async def load(self):
        if self.error is not None:
            raise self.error
        return list(self.entries)


def use_source(monkeypatch, source):
    captured = {}

    def fake_create_source(kind, **kwargs):
        captured["kind"] = kind
        captured.update(kwargs)
        return source

    monkeypatch.setattr(main_module, "create_source", fake_create_source)
    return captured


def test_main_prints_filtered_list(monkeypatch, capsys, entries):
    captured = use_source(monkeypatch, DummySource(entries))

    code = main_module.main(["--source", "static", "-q", "pequim"])

    out = capsys.readouterr().out
    assert code == 0
    assert captured["kind"] == "static"
    assert "北京" in out
    assert "爱" not in out
    assert "-- 1 of 5 words" in out


def test_main_reports_load_error(monkeypatch, capsys):
    use_source(monkeypatch, DummySource(error=FetchError("db down")))

    code = main_module.main(["--source", "remote", "--url", "http://vocab.local/api/vocabulary"])

    assert code == 1
    assert "Error: Could not load vocabulary: db down" in capsys.readouterr().out


def test_main_exports_to_directory(monkeypatch, capsys, tmp_path, entries):
    use_source(monkeypatch, DummySource(entries))

    code = main_module.main(["-q", "china", "--export", str(tmp_path)])

    assert code == 0
    content = (tmp_path / "HSK1_Vocabulary.csv").read_bytes()
    assert content.startswith(b"\xef\xbb\xbf")
    assert content.decode("utf-8-sig").endswith("5,中国,Zhōngguó,n.,China")


def test_main_export_with_no_matches_prints_notice(monkeypatch, capsys, tmp_path, entries):
    use_source(monkeypatch, DummySource(entries))

    code = main_module.main(["-q", "zzz", "--export", str(tmp_path)])

    out = capsys.readouterr().out
    assert code == 0
    assert 'No vocabulary found for "zzz".' in out
    assert "No data to export." in out
    assert not (tmp_path / "HSK1_Vocabulary.csv").exists()


def test_format_entry_flattens_multiline_translation():
    entry = VocabularyEntry(16, "点", "diǎn", "n.", "hora\num pouco")

    assert main_module.format_entry(entry) == "  16  点  diǎn [n.]  hora / um pouco"


def test_interactive_session(monkeypatch, tmp_path, entries):
    source = DummySource(entries)
    controller = main_module.ViewController(source)
    main_module.asyncio.run(controller.load())

    lines = iter(["amar", f"/export {tmp_path}", "/reload", "/quit"])
    out = io.StringIO()

    main_module.interactive(controller, read=lambda prompt: next(lines), out=out)

    text = out.getvalue()
    assert "   1  爱  ài [v.]  amar" in text
    assert f"Saved {tmp_path / 'HSK1_Vocabulary.csv'}" in text
    assert (tmp_path / "HSK1_Vocabulary.csv").exists()
    # reload keeps the query
    assert text.count("   1  爱  ài [v.]  amar") == 2


def test_terminal_client_logs_at_info(monkeypatch):
    captured = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: captured.update(kwargs))

    importlib.reload(main_module)

    assert captured["level"] == logging.INFO
