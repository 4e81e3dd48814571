import io
import json
from pathlib import Path

import pytest
import requests

from schema_ts.schema import SchemaError
from schema_ts.utils import (
    SchemaLoadError,
    fetch_schema,
    load_schema,
    parse_schema,
    read_schema_file,
    read_schema_stream,
    write_file,
)


class FakeResponse:
    def __init__(self, text: str, status_code: int = 200) -> None:
        self.text = text
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code}", response=self)


def test_read_schema_file(tmp_path: Path, person_document) -> None:
    path = tmp_path / "schema.json"
    path.write_text(json.dumps(person_document))

    program = read_schema_file(path)
    assert program.source == str(path)
    assert list(program.models) == ["Person"]


def test_missing_schema_file(tmp_path: Path) -> None:
    with pytest.raises(SchemaLoadError, match="not found"):
        read_schema_file(tmp_path / "missing.json")


def test_invalid_json_reports_position() -> None:
    with pytest.raises(SchemaLoadError, match=r"schema\.json: invalid JSON at line 2"):
        parse_schema('{"models":\n ]', "schema.json")


def test_schema_errors_name_their_source(tmp_path: Path) -> None:
    path = tmp_path / "schema.json"
    path.write_text(json.dumps({"models": [{"name": "A", "extends": "B"}]}))

    with pytest.raises(SchemaLoadError, match="extends unknown model B") as excinfo:
        read_schema_file(path)
    assert str(excinfo.value).startswith(str(path))
    assert isinstance(excinfo.value, SchemaError)


def test_read_schema_stream(person_document) -> None:
    program = read_schema_stream(io.StringIO(json.dumps(person_document)))
    assert program.source == "<stdin>"
    assert program.get_model("Person") is not None


def test_fetch_schema(monkeypatch: pytest.MonkeyPatch, person_document) -> None:
    requested = []

    def fake_get(url, timeout):
        requested.append((url, timeout))
        return FakeResponse(json.dumps(person_document))

    monkeypatch.setattr(requests, "get", fake_get)
    program = load_schema(url="https://example.com/schema.json", timeout=5)

    assert requested == [("https://example.com/schema.json", 5)]
    assert program.source == "https://example.com/schema.json"
    assert list(program.models) == ["Person"]


def test_fetch_schema_http_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(requests, "get", lambda url, timeout: FakeResponse("", 404))
    with pytest.raises(SchemaLoadError, match="HTTP error 404"):
        fetch_schema("https://example.com/schema.json")


def test_fetch_schema_connection_error(monkeypatch: pytest.MonkeyPatch) -> None:
    def refuse(url, timeout):
        raise requests.exceptions.ConnectionError("refused")

    monkeypatch.setattr(requests, "get", refuse)
    with pytest.raises(SchemaLoadError, match="Could not fetch schema"):
        fetch_schema("https://example.com/schema.json")


def test_fetch_schema_rejects_non_http_url() -> None:
    with pytest.raises(SchemaLoadError, match="Invalid schema URL"):
        fetch_schema("ftp://example.com/schema.json")


@pytest.mark.parametrize(
    "kwargs", [{}, {"file_path": "a.json", "url": "https://example.com/a.json"}]
)
def test_load_schema_needs_exactly_one_source(kwargs) -> None:
    with pytest.raises(SchemaLoadError, match="Exactly one"):
        load_schema(**kwargs)


def test_write_file_creates_parents(tmp_path: Path) -> None:
    path = write_file(tmp_path / "a" / "b" / "models.ts", "type A = string;\n")
    assert path.read_text(encoding="utf-8") == "type A = string;\n"
