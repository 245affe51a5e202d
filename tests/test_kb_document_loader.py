import json

import pytest

from document.KBDocument import KBDocument
from loader.KBDocumentLoader import KBDocumentLoader


@pytest.fixture()
def kb_dir(tmp_path):
    d = tmp_path / "knowledge-base"
    d.mkdir()
    return d


def _write(path, payload):
    path.write_text(payload if isinstance(payload, str) else json.dumps(payload), encoding="utf-8")


def test_loads_data_field_from_json_files(kb_dir):
    _write(kb_dir / "b.json", {"data": "Bravo", "title": "ignored"})
    _write(kb_dir / "a.json", {"data": "Alpha"})

    docs = KBDocumentLoader(kb_dir).load_documents()

    assert docs == [
        KBDocument(filename="a.json", content="Alpha"),
        KBDocument(filename="b.json", content="Bravo"),
    ]


def test_skips_other_extensions_and_subdirectories(kb_dir):
    _write(kb_dir / "keep.json", {"data": "kept"})
    _write(kb_dir / "notes.txt", "plain text")
    nested = kb_dir / "nested"
    nested.mkdir()
    _write(nested / "deep.json", {"data": "too deep"})

    docs = KBDocumentLoader(kb_dir).load_documents()

    assert [d.filename for d in docs] == ["keep.json"]


@pytest.mark.parametrize("payload", [
    "{not valid json",
    {"other": "field"},
    {"data": None},
    {"data": ""},
    ["data", "in", "a", "list"],
])
def test_unusable_file_becomes_empty_document(kb_dir, payload):
    _write(kb_dir / "bad.json", payload)
    _write(kb_dir / "good.json", {"data": "fine"})

    docs = KBDocumentLoader(kb_dir).load_documents()

    assert docs == [
        KBDocument(filename="bad.json", content=""),
        KBDocument(filename="good.json", content="fine"),
    ]


def test_custom_extensions(kb_dir):
    _write(kb_dir / "a.kb", {"data": "custom"})
    _write(kb_dir / "b.json", {"data": "default"})

    docs = KBDocumentLoader(kb_dir, extensions=(".kb",)).load_documents()

    assert [d.content for d in docs] == ["custom"]


def test_empty_directory_loads_nothing(kb_dir):
    assert KBDocumentLoader(kb_dir).load_documents() == []


def test_missing_directory_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        KBDocumentLoader(tmp_path / "nope").load_documents()
