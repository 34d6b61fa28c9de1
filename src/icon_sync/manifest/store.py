from __future__ import annotations

from pathlib import Path

import orjson

from icon_sync.common.io import write_bytes_atomic
from icon_sync.manifest.models import Manifest, utc_now_iso

MANIFEST_FILE = "icons-manifest.json"


def manifest_path(out_dir: str | Path) -> Path:
    return Path(out_dir) / MANIFEST_FILE


def read_manifest(out_dir: str | Path) -> Manifest:
    """
    Strict read: raises OSError for an unreadable file, ValueError for bad
    JSON or a non-object root, KeyError / TypeError for malformed entries.
    """
    obj = orjson.loads(manifest_path(out_dir).read_bytes())
    if not isinstance(obj, dict):
        raise ValueError("manifest root must be an object")
    return Manifest.from_dict(obj)


def load_manifest(out_dir: str | Path) -> Manifest:
    """
    Read the ledger from <out_dir>/icons-manifest.json.

    The manifest is a derived cache, so any failure (missing file, bad JSON,
    wrong shape) yields a fresh empty manifest instead of failing the run.
    Entries without an id cannot be diffed and are dropped here.
    """
    try:
        manifest = read_manifest(out_dir)
    except (OSError, ValueError, KeyError, TypeError):
        return Manifest()

    kept = []
    for i, e in enumerate(manifest.icons):
        if not e.id:
            print(f"[MANIFEST] skip icons[{i}] without id (fileName={e.file_name!r})")
            continue
        kept.append(e)
    manifest.icons = kept
    return manifest


def save_manifest(out_dir: str | Path, manifest: Manifest) -> Path:
    manifest.generated_at = utc_now_iso()
    path = manifest_path(out_dir)
    data = orjson.dumps(manifest.to_dict(), option=orjson.OPT_INDENT_2) + b"\n"
    write_bytes_atomic(path, data)
    return path
