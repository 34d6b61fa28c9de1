from pathlib import Path

import orjson
import pytest

from icon_sync.manifest.models import Manifest, ManifestEntry, create_manifest_entry
from icon_sync.manifest.store import MANIFEST_FILE, load_manifest, read_manifest, save_manifest


def _entry(id: str, file_name: str, width: int = 16, hash: str = "abc") -> ManifestEntry:
    return ManifestEntry(
        id=id,
        name=file_name.rsplit(".", 1)[0],
        file_name=file_name,
        width=width,
        height=width,
        last_modified="2026-01-16T00:00:00Z",
        hash=hash,
    )


def test_create_manifest_entry_defaults():
    e = create_manifest_entry("123", "test-icon", "test-icon.svg", 24, 24)
    assert e.id == "123"
    assert e.file_name == "test-icon.svg"
    assert e.hash == ""
    assert e.last_modified.endswith("Z")


def test_manifest_roundtrip(tmp_path: Path):
    m = Manifest(
        generated_at="2000-01-01T00:00:00Z",
        icons=[_entry("1:2", "bell-16px.svg"), _entry("1:3", "bell-20px.svg", width=20, hash="")],
    )

    save_manifest(tmp_path, m)
    loaded = load_manifest(tmp_path)

    assert loaded.icons == m.icons
    assert loaded.version == "1.0.0"
    # save refreshes generatedAt
    assert loaded.generated_at != "2000-01-01T00:00:00Z"
    assert loaded.generated_at == m.generated_at


def test_manifest_file_uses_camel_case_keys(tmp_path: Path):
    save_manifest(tmp_path, Manifest(icons=[_entry("1", "a-16px.svg")]))
    obj = orjson.loads((tmp_path / MANIFEST_FILE).read_bytes())

    assert set(obj) == {"version", "generatedAt", "icons"}
    assert set(obj["icons"][0]) == {"id", "name", "fileName", "width", "height", "lastModified", "hash"}
    # no temp files left behind
    assert [p.name for p in tmp_path.iterdir()] == [MANIFEST_FILE]


def test_load_manifest_missing_file_is_empty(tmp_path: Path):
    m = load_manifest(tmp_path / "does-not-exist")
    assert m.icons == []
    assert m.version == "1.0.0"


def test_load_manifest_malformed_json_is_empty(tmp_path: Path):
    (tmp_path / MANIFEST_FILE).write_text("{not json", encoding="utf-8")
    assert load_manifest(tmp_path).icons == []


def test_load_manifest_wrong_shape_is_empty(tmp_path: Path):
    (tmp_path / MANIFEST_FILE).write_text('{"icons": {"a": 1}}', encoding="utf-8")
    assert load_manifest(tmp_path).icons == []

    (tmp_path / MANIFEST_FILE).write_text('{"icons": [{"id": "1"}]}', encoding="utf-8")
    assert load_manifest(tmp_path).icons == []


def test_load_manifest_drops_entries_without_id(tmp_path: Path, capsys):
    good = _entry("1:2", "bell-16px.svg").to_dict()
    blank = {**_entry("", "old-16px.svg").to_dict(), "id": ""}
    null_a = {**_entry("x", "a-16px.svg").to_dict(), "id": None}
    null_b = {**_entry("x", "b-16px.svg").to_dict(), "id": None}
    raw = {"version": "1.0.0", "generatedAt": "2026-01-01T00:00:00Z", "icons": [blank, good, null_a, null_b]}
    (tmp_path / MANIFEST_FILE).write_bytes(orjson.dumps(raw))

    m = load_manifest(tmp_path)

    assert [e.id for e in m.icons] == ["1:2"]
    out = capsys.readouterr().out
    assert "[MANIFEST] skip icons[0] without id (fileName='old-16px.svg')" in out
    assert out.count("[MANIFEST] skip") == 3


def test_read_manifest_is_strict(tmp_path: Path):
    (tmp_path / MANIFEST_FILE).write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError):
        read_manifest(tmp_path)

    (tmp_path / MANIFEST_FILE).write_text('{"icons": [{"id": "1", "name": "a", "fileName": "a.svg"}]}', encoding="utf-8")
    with pytest.raises(KeyError):
        read_manifest(tmp_path)

    (tmp_path / MANIFEST_FILE).write_text(
        '{"icons": [{"id": null, "name": "a", "fileName": "a.svg", "width": 16, "height": 16}]}', encoding="utf-8"
    )
    assert read_manifest(tmp_path).icons[0].id == ""
