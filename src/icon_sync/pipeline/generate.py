# src/icon_sync/pipeline/generate.py
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from icon_sync.codegen.component import ComponentOptions, build_component_code, component_file_stem, component_identifier
from icon_sync.codegen.index_file import TYPES_FILE_STEM, render_index_file, render_types_file
from icon_sync.codegen.svg_transform import EMPTY_VARIANT, SvgVariant, prepare_variant
from icon_sync.codegen.variants import VariantSet
from icon_sync.common.hashing import hash_content, hash_file
from icon_sync.grouping.classifier import SIZE_ORDER
from icon_sync.grouping.groups import GroupedIcon, group_by_base_name
from icon_sync.manifest.models import ManifestEntry
from icon_sync.manifest.store import load_manifest
from icon_sync.settings import Cfg
from icon_sync.svg.optimize import Optimizer, apply_optimizer, minify_svg
from icon_sync.svg.scan import scan_icons_dir

# stems the generator itself writes into the output directory
RESERVED_STEMS = frozenset({TYPES_FILE_STEM, "index"})


@dataclass
class GenerateResult:
    # identifier -> file stem
    components: dict[str, str] = field(default_factory=dict)
    written: list[Path] = field(default_factory=list)
    unchanged: list[Path] = field(default_factory=list)
    empty_slots: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)


def load_entries(icons_dir: Path) -> list[ManifestEntry]:
    """Entries from the icons manifest; a directory scan when the manifest is empty or missing."""
    manifest = load_manifest(icons_dir)
    if manifest.icons:
        return manifest.icons
    print(f"[GENERATE] no manifest entries in {icons_dir}, scanning *.svg")
    return scan_icons_dir(icons_dir)


def read_variant(icons_dir: Path, entry: Optional[ManifestEntry], optimizer: Optional[Optimizer]) -> SvgVariant:
    if entry is None:
        return EMPTY_VARIANT
    path = icons_dir / entry.file_name
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        print(f"[READ FAIL] {path} -> {e}")
        return EMPTY_VARIANT
    return prepare_variant(apply_optimizer(raw, optimizer, label=entry.file_name))


def build_variant_set(group: GroupedIcon, icons_dir: Path, optimizer: Optional[Optimizer] = None) -> VariantSet:
    return VariantSet.from_mapping(
        {size: read_variant(icons_dir, group.get(size), optimizer) for size in SIZE_ORDER}
    )


def write_if_changed(path: Path, text: str) -> bool:
    if hash_file(path) == hash_content(text):
        return False
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return True


def run_generate(
    cfg: Cfg,
    *,
    entries: Optional[list[ManifestEntry]] = None,
    optimizer: Optional[Optimizer] = None,
) -> GenerateResult:
    opts: ComponentOptions = cfg.component_options()
    if optimizer is None and cfg.optimize:
        optimizer = minify_svg
    if entries is None:
        entries = load_entries(cfg.icons_dir)

    out_dir = cfg.components_dir
    res = GenerateResult()
    groups = group_by_base_name(entries)

    print(
        f"[GENERATE] icons_dir={cfg.icons_dir} out_dir={out_dir} groups={len(groups)} "
        f"lang={'typescript' if opts.typescript else 'javascript'}"
    )

    for group in groups:
        ident = component_identifier(group.base_name)
        stem = component_file_stem(group.base_name, opts.filename_case)

        if ident in res.components or stem.lower() in RESERVED_STEMS:
            print(f"[NAME CLASH] '{group.base_name}' -> {ident} ({stem}) collides with another output, skipping")
            res.skipped.append(group.base_name)
            continue

        variants = build_variant_set(group, cfg.icons_dir, optimizer)
        available = variants.available()
        if not available:
            print(f"[GENERATE] '{group.base_name}' has no readable SVG content, skipping")
            res.skipped.append(group.base_name)
            continue

        missing = [s.value for s in SIZE_ORDER if s not in available]
        if missing:
            res.empty_slots.append(group.base_name)
            if cfg.verbose:
                print(f"[DEBUG] {ident}: empty slots {', '.join(missing)}")

        code = build_component_code(ident, variants, opts)
        res.components[ident] = stem
        path = out_dir / f"{stem}.{opts.extension}"

        if cfg.dry_run:
            print(f"[DRY RUN] would write {path}")
            continue
        if write_if_changed(path, code):
            res.written.append(path)
            if cfg.verbose:
                print(f"[DEBUG] wrote {path}")
        else:
            res.unchanged.append(path)

    if res.components and not cfg.dry_run:
        if opts.typescript:
            _write_support(out_dir / f"{TYPES_FILE_STEM}.tsx", render_types_file(), res)
        index_name = "index.ts" if opts.typescript else "index.js"
        _write_support(out_dir / index_name, render_index_file(res.components, opts.typescript), res)

    print(
        f"[GENERATE DONE] components={len(res.components)} written={len(res.written)} "
        f"unchanged={len(res.unchanged)} partial={len(res.empty_slots)} skipped={len(res.skipped)}"
    )
    return res


def _write_support(path: Path, text: str, res: GenerateResult) -> None:
    if write_if_changed(path, text):
        res.written.append(path)
    else:
        res.unchanged.append(path)
