from pathlib import Path

import pytest
import requests
from wordle_cli.dictionary import get_dictionary
from wordle_cli.maintenance import do_import, read_source
from wordle_cli.maintenance import importer


def _seed(home: Path, lang: str, lines):
    p = home / lang / "words.txt"
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_import_from_file(tmp_path: Path):
    _seed(tmp_path, "de", ["apfel"])
    src = tmp_path / "neu.txt"
    src.write_text("Lüge\nApfel\n\nzu\nMüde\n", encoding="utf-8")

    summary = do_import(str(src), "de", home=tmp_path, progress=False)
    assert summary == {"lang": "de", "source": str(src), "read": 4, "added": 2, "skipped": 2}

    d = get_dictionary("de", home=tmp_path)
    assert d.find_word("luege") and d.find_word("muede")


def test_import_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        do_import(str(tmp_path / "missing.txt"), "en", home=tmp_path, progress=False)


def test_import_unknown_language(tmp_path: Path):
    src = tmp_path / "w.txt"
    src.write_text("crane\n", encoding="utf-8")
    with pytest.raises(ValueError):
        do_import(str(src), "xx", home=tmp_path, progress=False)


class _FakeResponse:
    def __init__(self, text, status=200):
        self.text = text
        self.status_code = status

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


def test_read_source_from_url(monkeypatch):
    calls = []

    def fake_get(url, timeout):
        calls.append((url, timeout))
        return _FakeResponse("crane\n\n  stare  \n")

    monkeypatch.setattr(importer.requests, "get", fake_get)
    assert read_source("https://example.org/words.txt") == ["crane", "stare"]
    assert calls == [("https://example.org/words.txt", 30)]


def test_read_source_http_error(monkeypatch):
    monkeypatch.setattr(importer.requests, "get",
                        lambda url, timeout: _FakeResponse("", status=404))
    with pytest.raises(requests.HTTPError):
        read_source("http://example.org/missing.txt")
