from __future__ import annotations

import json
from pathlib import Path

import pytest

from extract_spewer.spewer.errors import SpewerError
from extract_spewer.spewer.metadata import flatten_metadata, write_metadata
from extract_spewer.spewer.types import ErrorKind


def test_metadata_is_pretty_printed_with_trailing_newline(tmp_path: Path) -> None:
    destination = tmp_path / "doc.pdf.json"

    write_metadata(destination, {"title": "Report", "author": "J. Doe"})

    assert destination.read_text(encoding="utf-8") == (
        '{\n  "title" : "Report",\n  "author" : "J. Doe"\n}\n'
    )


def test_field_order_follows_metadata_order(tmp_path: Path) -> None:
    destination = tmp_path / "doc.json"
    names = ["zeta", "alpha", "Content-Type", "mid"]

    write_metadata(destination, {name: name.upper() for name in names})

    assert list(json.loads(destination.read_text(encoding="utf-8"))) == names


def test_values_are_escaped_and_round_trip(tmp_path: Path) -> None:
    destination = tmp_path / "doc.json"
    metadata = {
        "title": 'He said "hi"\nthen left',
        "path": "C:\\docs\\report.pdf",
        "tab": "a\tb",
        "author": "Jürgen Ørsted 東京",
        "control": "bell\x07",
    }

    write_metadata(destination, metadata)

    raw = destination.read_bytes()
    assert raw.endswith(b"}\n")
    assert "Jürgen Ørsted 東京".encode("utf-8") in raw
    assert json.loads(raw.decode("utf-8")) == metadata


def test_multi_valued_attribute_keeps_first_value(tmp_path: Path) -> None:
    destination = tmp_path / "doc.json"

    write_metadata(destination, {"author": ["First Author", "Second Author"], "title": "T"})

    assert json.loads(destination.read_text(encoding="utf-8")) == {
        "author": "First Author",
        "title": "T",
    }


def test_empty_metadata_writes_empty_object(tmp_path: Path) -> None:
    destination = tmp_path / "doc.json"

    write_metadata(destination, {})

    assert destination.read_text(encoding="utf-8") == "{ }\n"
    assert json.loads(destination.read_text(encoding="utf-8")) == {}


def test_flatten_metadata() -> None:
    flat = flatten_metadata(
        {
            "single": "one",
            "many": ("first", "second"),
            "none": [],
            "count": 3,
        }
    )

    assert flat == {"single": "one", "many": "first", "count": "3"}


def test_existing_file_is_overwritten(tmp_path: Path) -> None:
    destination = tmp_path / "doc.json"
    destination.write_text("stale content that is much longer than the new one", encoding="utf-8")

    write_metadata(destination, {"a": "b"})

    assert json.loads(destination.read_text(encoding="utf-8")) == {"a": "b"}


def test_unwritable_destination_raises_serialization_error(tmp_path: Path) -> None:
    destination = tmp_path / "doc.json"
    destination.mkdir()

    with pytest.raises(SpewerError) as excinfo:
        write_metadata(destination, {"title": "Report"})

    assert excinfo.value.kind is ErrorKind.SERIALIZATION
    assert excinfo.value.path == destination
    assert isinstance(excinfo.value.cause, OSError)
    assert str(destination) in str(excinfo.value)


def test_undecodable_file_name_is_escaped_and_round_trips(tmp_path: Path) -> None:
    destination = tmp_path / "doc.json"
    name = b"r\xe9sum\xe9.txt".decode("utf-8", "surrogateescape")

    write_metadata(destination, {"resourceName": name, "title": "Résumé"})

    raw = destination.read_bytes()
    assert b'"resourceName" : "r\\udce9sum\\udce9.txt"' in raw
    assert "Résumé".encode("utf-8") in raw
    assert json.loads(raw.decode("utf-8")) == {"resourceName": name, "title": "Résumé"}
