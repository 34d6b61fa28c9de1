from __future__ import annotations

from pathlib import Path

import orjson
import pytest

import icon_sync.pipeline.sync as syncmod
from icon_sync.cli import main
from icon_sync.figma.client import FigmaApiError
from icon_sync.manifest.store import manifest_path


def _svg(size: int) -> str:
    return f'<svg viewBox="0 0 {size} {size}"><path fill="#000000" d="M0 0h{size}"/></svg>'


class DummyFigma:
    def __init__(self, fail: bool = False):
        self.fail = fail

    def get_root_node(self, file_key, node_id):
        if self.fail:
            raise FigmaApiError("Figma API error 403", 403)
        children = [
            {"id": f"1:{s}", "name": "Bell", "type": "COMPONENT", "absoluteBoundingBox": {"width": s, "height": s}}
            for s in (12, 16)
        ]
        return node_id, {"id": node_id, "type": "FRAME", "children": children}

    def get_image_urls(self, file_key, ids, use_absolute_bounds=True):
        return {i: f"https://cdn.test/{i}" for i in ids}

    def download_svg(self, url):
        return _svg(int(url.rsplit(":", 1)[1]))


def _config(tmp_path: Path, figma: str = "") -> str:
    p = tmp_path / "icons.yaml"
    p.write_text(
        "figma:\n  file_key: KEY\n  node_id: '0:1'\n" + figma + "paths:\n  icons_dir: icons\n  components_dir: out\n",
        encoding="utf-8",
    )
    return str(p)


def test_run_syncs_then_generates(tmp_path: Path, monkeypatch):
    monkeypatch.setenv("FIGMA_TOKEN", "tok")
    monkeypatch.setattr(syncmod, "FigmaClient", lambda *args, **kwargs: DummyFigma())

    assert main(["--config", _config(tmp_path), "run"]) == 0

    assert sorted(p.name for p in (tmp_path / "icons").glob("*.svg")) == ["bell-12px.svg", "bell-16px.svg"]
    assert sorted(p.name for p in (tmp_path / "out").iterdir()) == ["Bell.tsx", "index.ts", "types.tsx"]
    assert main(["--config", _config(tmp_path), "validate"]) == 0


def test_sync_without_token_is_a_config_error(tmp_path: Path, monkeypatch, capsys):
    monkeypatch.delenv("FIGMA_TOKEN", raising=False)
    assert main(["--config", _config(tmp_path), "sync"]) == 2
    assert "FIGMA_TOKEN is not set" in capsys.readouterr().err


def test_figma_failure_exit_code(tmp_path: Path, monkeypatch, capsys):
    monkeypatch.setenv("FIGMA_TOKEN", "tok")
    monkeypatch.setattr(syncmod, "FigmaClient", lambda *args, **kwargs: DummyFigma(fail=True))

    assert main(["--config", _config(tmp_path), "sync"]) == 3
    assert "[FIGMA FAIL]" in capsys.readouterr().err


def test_missing_config_file(tmp_path: Path):
    assert main(["--config", str(tmp_path / "nope.yaml"), "generate"]) == 2


def test_manifest_command_and_dry_run(tmp_path: Path):
    icons = tmp_path / "icons"
    icons.mkdir()
    (icons / "star-20px.svg").write_text(_svg(20), encoding="utf-8")
    cfg = _config(tmp_path)

    assert main(["--config", cfg, "--dry-run", "manifest"]) == 0
    assert not manifest_path(icons).exists()

    assert main(["--config", cfg, "manifest"]) == 0
    raw = orjson.loads(manifest_path(icons).read_bytes())
    assert [(i["id"], i["width"]) for i in raw["icons"]] == [("star-20px.svg", 20)]


def test_validate_reports_problems(tmp_path: Path, capsys):
    cfg = _config(tmp_path)
    assert main(["--config", cfg, "validate"]) == 1

    icons = tmp_path / "icons"
    icons.mkdir()
    bad = {
        "version": "1.0.0",
        "generatedAt": "2026-01-01T00:00:00Z",
        "icons": [
            {"id": "a", "name": "a", "fileName": "a-16px.svg", "width": 16, "height": 16, "lastModified": "", "hash": ""},
            {"id": "a", "name": "a", "fileName": "a-16px.svg", "width": 0, "height": 16, "lastModified": "", "hash": ""},
        ],
    }
    manifest_path(icons).write_bytes(orjson.dumps(bad))

    assert main(["--config", cfg, "validate"]) == 1
    out = capsys.readouterr().out
    assert "[ERROR] Invalid width for a-16px.svg" in out
    assert "[ERROR] Duplicate ids found: a" in out


def test_subcommand_is_required():
    with pytest.raises(SystemExit):
        main([])


def test_validate_rejects_unparseable_manifest(tmp_path: Path, capsys):
    cfg = _config(tmp_path)
    icons = tmp_path / "icons"
    icons.mkdir()

    manifest_path(icons).write_text("{not json", encoding="utf-8")
    assert main(["--config", cfg, "validate"]) == 1
    assert f"[ERROR] {manifest_path(icons)}:" in capsys.readouterr().out

    shape = {"version": "1.0.0", "icons": [{"id": "a", "name": "a", "fileName": "a-16px.svg", "height": 16}]}
    manifest_path(icons).write_bytes(orjson.dumps(shape))
    assert main(["--config", cfg, "validate"]) == 1
    assert "icon entry is missing 'width'" in capsys.readouterr().out

    manifest_path(icons).write_bytes(orjson.dumps({"icons": ["a-16px.svg"]}))
    assert main(["--config", cfg, "validate"]) == 1


def test_validate_reports_null_id(tmp_path: Path, capsys):
    cfg = _config(tmp_path)
    icons = tmp_path / "icons"
    icons.mkdir()
    entry = {"id": None, "name": "a", "fileName": "a-16px.svg", "width": 16, "height": 16}
    manifest_path(icons).write_bytes(orjson.dumps({"version": "1.0.0", "icons": [entry]}))

    assert main(["--config", cfg, "validate"]) == 1
    assert "[ERROR] Icon a-16px.svg is missing id" in capsys.readouterr().out
