# src/icon_sync/pipeline/sync.py
from __future__ import annotations

from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterator, Optional, Protocol, Sequence

from icon_sync.codegen.svg_transform import replace_hex_fills, strip_bom
from icon_sync.common.hashing import hash_content
from icon_sync.common.io import LocalStore
from icon_sync.figma.client import FigmaClient
from icon_sync.figma.naming import icon_file_name
from icon_sync.figma.nodes import IconCandidate, collect_icons, parse_node
from icon_sync.manifest.diff import ManifestDiff, diff_manifests
from icon_sync.manifest.models import ManifestEntry, create_manifest_entry
from icon_sync.manifest.store import load_manifest, save_manifest
from icon_sync.settings import Cfg
from icon_sync.svg.optimize import Optimizer, apply_optimizer, minify_svg


class DesignSource(Protocol):
    def get_root_node(self, file_key: str, node_id: str) -> tuple[str, dict[str, Any]]: ...

    def get_image_urls(self, file_key: str, ids: Sequence[str], use_absolute_bounds: bool = True) -> dict[str, Optional[str]]: ...

    def download_svg(self, url: str) -> str: ...


@dataclass
class SyncResult:
    candidates: int = 0
    saved: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    removed_files: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)
    diff: ManifestDiff = field(default_factory=ManifestDiff)
    manifest_path: Optional[Path] = None


def _batches(items: list[IconCandidate], size: int) -> Iterator[list[IconCandidate]]:
    for i in range(0, len(items), size):
        yield items[i : i + size]


def _default_optimizer(cfg: Cfg) -> Optional[Optimizer]:
    return minify_svg if cfg.optimize else None


def run_sync(
    cfg: Cfg,
    *,
    client: Optional[DesignSource] = None,
    optimizer: Optional[Optimizer] = None,
) -> SyncResult:
    """
    Figma -> SVG files + icons-manifest.json.

    The previous manifest is read once here and written once at the end;
    per-batch and per-icon failures are printed and skipped.
    """
    cfg.require_figma_target()
    if client is None:
        client = FigmaClient(cfg.figma_token(), timeout_sec=cfg.timeout_sec)
    if optimizer is None:
        optimizer = _default_optimizer(cfg)

    store = LocalStore(cfg.icons_dir)
    res = SyncResult()

    print(f"[SYNC] file_key={cfg.file_key} node_id={cfg.node_id} icons_dir={cfg.icons_dir}")
    node_id, document = client.get_root_node(cfg.file_key, cfg.node_id)
    candidates = collect_icons(
        parse_node(document),
        min_size=cfg.min_size,
        max_size=cfg.max_size,
        verbose=cfg.verbose,
    )
    res.candidates = len(candidates)

    if not candidates:
        print(
            f"[SYNC] no icons found under node {node_id} "
            f"(size range {cfg.min_size}..{cfg.max_size}px); manifest left untouched"
        )
        return res

    print(f"[SYNC] found {len(candidates)} icons ({cfg.min_size}..{cfg.max_size}px)")

    manifest = load_manifest(cfg.icons_dir)
    previous = list(manifest.icons)
    # per-run lookup, never shared back
    prev_by_id: dict[str, ManifestEntry] = {}
    for e in previous:
        prev_by_id.setdefault(e.id, e)

    current: list[ManifestEntry] = []
    used_files: dict[str, str] = {}  # file name -> icon id

    def keep_previous(icon: IconCandidate) -> None:
        # a failed icon still exists upstream; carry its old entry so it is not reported as deleted
        res.failed.append(icon.id)
        old = prev_by_id.get(icon.id)
        if old is None:
            return
        owner = used_files.setdefault(old.file_name, old.id)
        if owner != old.id:
            # another icon already took the file this run; carrying the entry would duplicate it
            print(f"[CARRY SKIP] {icon.id}: {old.file_name} now belongs to {owner}")
            return
        current.append(old)

    for batch in _batches(candidates, cfg.batch_size):
        try:
            urls = client.get_image_urls(cfg.file_key, [c.id for c in batch], cfg.use_absolute_bounds)
        except Exception as e:
            print(f"[BATCH FAIL] ids={','.join(c.id for c in batch)} -> {e}")
            for icon in batch:
                keep_previous(icon)
            continue

        downloads: dict[str, Future[str]] = {}
        with ThreadPoolExecutor(max_workers=min(cfg.concurrency, len(batch))) as pool:
            for icon in batch:
                url = urls.get(icon.id)
                if url:
                    downloads[icon.id] = pool.submit(client.download_svg, url)

            # writes stay sequential, in document order
            for icon in batch:
                fut = downloads.get(icon.id)
                if fut is None:
                    print(f"[FETCH FAIL] no image url for {icon.id} ({icon.name})")
                    keep_previous(icon)
                    continue
                try:
                    svg_text = fut.result()
                    entry = _process_icon(
                        cfg, store, icon, svg_text, optimizer, prev_by_id.get(icon.id), used_files, res
                    )
                except Exception as e:
                    print(f"[ICON FAIL] {icon.id} ({icon.name}) -> {e}")
                    keep_previous(icon)
                    continue
                current.append(entry)

    res.diff = diff_manifests(current, previous)
    _report(res.diff)

    for gone in res.diff.deleted:
        if gone.file_name in used_files:
            continue
        if not cfg.dry_run and store.remove(gone.file_name):
            print(f"[REMOVED] {gone.file_name}")
        res.removed_files.append(gone.file_name)

    manifest.icons = current
    if cfg.dry_run:
        print("[SYNC] dry-run: manifest not written")
    else:
        res.manifest_path = save_manifest(cfg.icons_dir, manifest)
        print(f"[SYNC] manifest updated: {res.manifest_path}")

    print(
        f"[SYNC DONE] icons={len(current)} saved={len(res.saved)} skipped={len(res.skipped)} "
        f"failed={len(res.failed)} new={len(res.diff.new)} updated={len(res.diff.updated)} "
        f"deleted={len(res.diff.deleted)}"
    )
    return res


def _process_icon(
    cfg: Cfg,
    store: LocalStore,
    icon: IconCandidate,
    svg_text: str,
    optimizer: Optional[Optimizer],
    existing: Optional[ManifestEntry],
    used_files: dict[str, str],
    res: SyncResult,
) -> ManifestEntry:
    text = strip_bom(svg_text)
    text = apply_optimizer(text, optimizer, label=icon.name)
    text = replace_hex_fills(text)

    file_name = icon_file_name(icon.name, icon.width, cfg.keep_original_name_spaces)
    owner = used_files.get(file_name)
    if owner is not None and owner != icon.id:
        raise ValueError(f"file name {file_name} already taken by {owner}")
    used_files[file_name] = icon.id

    # hash the exact text that lands on disk
    digest = hash_content(text)

    if (
        existing is not None
        and existing.hash == digest
        and existing.file_name == file_name
        and store.exists(file_name)
    ):
        res.skipped.append(file_name)
        if cfg.verbose:
            print(f"[SKIP] unchanged: {file_name} ({icon.width}x{icon.height}px)")
        return existing

    if existing is not None and existing.file_name != file_name and existing.file_name not in used_files:
        if not cfg.dry_run and store.remove(existing.file_name):
            print(f"[REMOVED] old file {existing.file_name}")
        res.removed_files.append(existing.file_name)

    if not cfg.dry_run:
        store.write_text(file_name, text)
    res.saved.append(file_name)
    print(f"[SAVED] {file_name} ({icon.width}x{icon.height}px){' (optimized)' if optimizer else ''}")

    return create_manifest_entry(icon.id, icon.name, file_name, icon.width, icon.height, digest)


def _report(diff: ManifestDiff) -> None:
    if diff.new:
        print(f"[NEW] {len(diff.new)}")
        for e in diff.new:
            print(f"  + {e.name} ({e.file_name})")
    if diff.deleted:
        print(f"[DELETED] {len(diff.deleted)}")
        for e in diff.deleted:
            print(f"  - {e.name} ({e.file_name})")
    if diff.updated:
        print(f"[UPDATED] {len(diff.updated)}")
        for e in diff.updated:
            print(f"  ~ {e.name} ({e.file_name})")
    if not diff.has_changes:
        print("[SYNC] no icon changes")
